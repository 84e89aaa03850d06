from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")
E = TypeVar("E")


# region Interface


class Codec(Protocol[T, E]):
    """Interface for turning domain values into an encoded form and back.

    Implementations must satisfy the round-trip law `decode(encode(value)) == value` exactly,
    not merely approximately.
    """

    def encode(self, value: T) -> E:
        """Encodes $value.

        Args:
            value: Domain value to encode.

        Returns:
            The encoded form of $value.
        """
        ...

    def decode(self, data: E) -> T:
        """Decodes $data produced by `encode`.

        Args:
            data: Encoded form.

        Returns:
            The decoded domain value.

        Raises:
            ValueError: If $data is malformed.
        """
        ...


# endregion
