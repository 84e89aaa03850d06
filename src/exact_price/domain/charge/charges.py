from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from exact_price.domain.charge.charge import Charge
from exact_price.utils.collections.readonly_mapping import ReadOnlyMapping

logger = logging.getLogger(__name__)


class Charges:
    """Represents all charges of a total, at most one Charge per type.

    Charges is copy-on-write: `add_charge`, `add` and `mul` return a new Charges and never
    change the receiver. A Charges instance can therefore be shared freely; mappings handed
    in or out are copies.

    Merging two charges of the same type rounds the merged result to payable precision right
    away, so repeated merges do not keep sub-cent precision. A charge of a new type is stored
    as given (unrounded).
    """

    __slots__ = ("_charges_by_type",)

    def __init__(self, charges_by_type: Mapping[str, Charge] | None = None):
        """Initialize Charges from an optional mapping of type tag to Charge.

        Args:
            charges_by_type: Initial charges by type tag. Copied; None means no charges.
        """
        self._charges_by_type: dict[str, Charge] = dict(charges_by_type or {})

    # region Query

    def has_type(self, charge_type: str) -> bool:
        return charge_type in self._charges_by_type

    def get_by_type(self, charge_type: str) -> tuple[Charge, bool]:
        """Return the Charge of $charge_type and whether it exists.

        If no such charge exists, the empty `Charge()` is returned together with False.
        """
        charge = self._charges_by_type.get(charge_type)
        if charge is None:
            return Charge(), False
        return charge, True

    def get_by_type_forced(self, charge_type: str) -> Charge:
        """Return the Charge of $charge_type, or the empty `Charge()` if it does not exist.

        Use `get_by_type` when you need to know whether the charge is present.
        """
        charge, _ = self.get_by_type(charge_type)
        return charge

    def get_all_charges(self) -> ReadOnlyMapping[str, Charge]:
        """Return a read-only snapshot of all charges by type tag."""
        return ReadOnlyMapping(self._charges_by_type)

    # endregion

    # region Combine

    def add_charge(self, charge: Charge) -> Charges:
        """Return new Charges with $charge added.

        An existing charge of the same type is merged with $charge and the result is rounded
        to payable precision.

        Raises:
            CurrencyMismatchError: If the existing charge cannot be added to $charge.
        """
        charges_by_type = dict(self._charges_by_type)
        self._merge_into(charges_by_type, charge)
        return Charges._from_owned(charges_by_type)

    def add(self, other: Charges) -> Charges:
        """Return new Charges with every charge of $other added (see `add_charge`)."""
        charges_by_type = dict(self._charges_by_type)
        for charge in other._charges_by_type.values():
            self._merge_into(charges_by_type, charge)
        return Charges._from_owned(charges_by_type)

    def mul(self, qty: int) -> Charges:
        """Return new Charges with every charge multiplied by $qty."""
        return Charges._from_owned({charge_type: charge.mul(qty) for charge_type, charge in self._charges_by_type.items()})

    @staticmethod
    def _merge_into(charges_by_type: dict[str, Charge], charge: Charge) -> None:
        existing = charges_by_type.get(charge.type)
        if existing is None:
            charges_by_type[charge.type] = charge
            return

        merged = existing.add(charge).get_payable()
        logger.debug(f"Merged charge of $type '{charge.type}': {existing.price} + {charge.price} = {merged.price}")
        charges_by_type[charge.type] = merged

    @classmethod
    def _from_owned(cls, charges_by_type: dict[str, Charge]) -> Charges:
        # Takes ownership of $charges_by_type without copying it again
        result = cls.__new__(cls)
        result._charges_by_type = charges_by_type
        return result

    # endregion

    # region Container protocol

    def __len__(self) -> int:
        return len(self._charges_by_type)

    def __contains__(self, charge_type: object) -> bool:
        return charge_type in self._charges_by_type

    def __iter__(self) -> Iterator[Charge]:
        return iter(list(self._charges_by_type.values()))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Charges):
            return False
        return self._charges_by_type == other._charges_by_type

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._charges_by_type!r})"

    # endregion
