from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ReadOnlyMapping(Generic[K, V], Mapping[K, V]):
    """Read-only snapshot of a dict.

    The source dict is copied once on construction, so later changes to it are not visible
    through the snapshot and the snapshot itself offers no way to change it.

    Examples:
        >>> snapshot = ReadOnlyMapping({"main": charge})
        >>> snapshot["main"]    # charge
        >>> "tax" in snapshot   # False
        >>> snapshot["tax"] = x # TypeError
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[K, V] | None = None):
        """Initialize the snapshot.

        Args:
            data: Source mapping; copied shallowly. If None, the snapshot is empty.
        """
        self._data: dict[K, V] = dict(data or {})

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"

    def to_dict(self) -> dict[K, V]:
        """Create a copy of the data as a regular dict.

        This method explicitly creates a copy when needed, making the copying operation
        intentional and visible.

        Returns:
            A new dict containing the items from this snapshot.
        """
        return dict(self._data)
