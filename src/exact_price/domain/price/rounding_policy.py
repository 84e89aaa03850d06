from __future__ import annotations

from typing import Dict

from exact_price.domain.price.rounding_mode import RoundingMode


class RoundingPolicy:
    """Represents how amounts of one currency are made payable.

    Attributes:
        mode (RoundingMode): Rounding mode applied at the payable precision.
        precision (int): Minor units per unit (e.g. 100 for cents, 1 for whole points).
    """

    __slots__ = ("_mode", "_precision")

    # Class-level registry of policies by lower-cased currency code
    _registry: Dict[str, "RoundingPolicy"] = {}

    def __init__(self, mode: RoundingMode, precision: int):
        """Initialize a RoundingPolicy instance.

        Args:
            mode (RoundingMode): Rounding mode applied at the payable precision.
            precision (int): Minor units per unit; must be positive.

        Raises:
            ValueError: If $precision is not a positive integer.
            TypeError: If $mode is not a RoundingMode instance.
        """
        if not isinstance(mode, RoundingMode):
            raise TypeError(f"$mode must be a RoundingMode instance, but provided value is: {mode}")

        if not isinstance(precision, int) or isinstance(precision, bool) or precision <= 0:
            raise ValueError(f"$precision must be a positive integer, but provided value is: {precision}")

        self._mode = mode
        self._precision = precision

    @property
    def mode(self) -> RoundingMode:
        """Get the rounding mode."""
        return self._mode

    @property
    def precision(self) -> int:
        """Get the minor units per unit."""
        return self._precision

    @classmethod
    def register(cls, currency: str, policy: RoundingPolicy, overwrite: bool = False) -> None:
        """Register a policy for $currency in the global registry.

        Args:
            currency (str): Currency code; matched case-insensitively.
            policy (RoundingPolicy): The policy to use for $currency.
            overwrite (bool): Whether to overwrite an existing policy.

        Raises:
            ValueError: If a policy already exists and overwrite is False.
            TypeError: If $policy is not a RoundingPolicy instance.
        """
        if not isinstance(policy, RoundingPolicy):
            raise TypeError(f"$policy must be a RoundingPolicy instance, but provided value is: {policy}")

        key = currency.lower()
        if key in cls._registry and not overwrite:
            raise ValueError(f"Rounding policy for currency '{currency}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[key] = policy

    @classmethod
    def unregister(cls, currency: str) -> None:
        """Remove the policy for $currency; unknown codes are ignored."""
        cls._registry.pop(currency.lower(), None)

    @classmethod
    def for_currency(cls, currency: str) -> RoundingPolicy:
        """Get the policy for $currency, falling back to `DEFAULT_POLICY`.

        Args:
            currency (str): Currency code; matched case-insensitively.

        Returns:
            RoundingPolicy: Registered policy, or `DEFAULT_POLICY` for unregistered codes.
        """
        return cls._registry.get(currency.lower(), DEFAULT_POLICY)

    def __iter__(self):
        # Allows `mode, precision = policy`
        return iter((self._mode, self._precision))

    def __eq__(self, other) -> bool:
        if not isinstance(other, RoundingPolicy):
            return False
        return self._mode == other._mode and self._precision == other._precision

    def __hash__(self) -> int:
        return hash((self._mode, self._precision))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._mode}, {self._precision})"


def payable_rounding_policy(currency: str) -> RoundingPolicy:
    """Return the rounding policy that makes amounts in $currency payable."""
    return RoundingPolicy.for_currency(currency)


# Fiat-like currencies: cents, half up
DEFAULT_POLICY = RoundingPolicy(RoundingMode.HALF_UP, 100)

# Loyalty currencies: whole units, never round up
LOYALTY_POLICY = RoundingPolicy(RoundingMode.FLOOR, 1)

RoundingPolicy.register("miles", LOYALTY_POLICY, overwrite=True)
RoundingPolicy.register("points", LOYALTY_POLICY, overwrite=True)
