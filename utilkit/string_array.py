"""A fixed-size array of optional strings with ordered comparison."""

from __future__ import annotations

from typing import List, Optional


class StringArrayError(Exception):
    """Raised when a string array cannot be used as asked."""


class StringArray:
    """A fixed number of string slots, each empty (None) until set."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._data: Optional[List[Optional[str]]] = [None] * size

    def _slots(self) -> List[Optional[str]]:
        if self._data is None:
            raise StringArrayError("string array data is null")
        return self._data

    def __len__(self) -> int:
        return 0 if self._data is None else len(self._data)

    def __getitem__(self, index: int) -> Optional[str]:
        return self._slots()[index]

    def __setitem__(self, index: int, value: Optional[str]) -> None:
        if value is not None and not isinstance(value, str):
            raise TypeError("string array elements must be strings or None")
        self._slots()[index] = value

    def __repr__(self) -> str:
        return f"StringArray({self._data!r})"

    def fini(self) -> None:
        """Release the contents; the array can no longer be used. Repeating is harmless."""
        self._data = None

    def compare(self, other: "StringArray") -> int:
        """Compare element by element, then by size; return -1, 0 or 1."""
        if not isinstance(other, StringArray):
            raise TypeError("rhs string array is null")
        if self._data is None:
            raise StringArrayError("lhs->data is null")
        if other._data is None:
            raise StringArrayError("rhs->data is null")

        for left, right in zip(self._data, other._data):
            if left is None:
                raise StringArrayError("lhs array element is null")
            if right is None:
                raise StringArrayError("rhs array element is null")
            if left != right:
                return -1 if left < right else 1

        return (len(self._data) > len(other._data)) - (len(self._data) < len(other._data))


def string_array_cmp(lhs: StringArray, rhs: StringArray) -> int:
    """Compare two string arrays; see :meth:`StringArray.compare`."""
    if not isinstance(lhs, StringArray):
        raise TypeError("lhs string array is null")
    return lhs.compare(rhs)