"""A string-to-string map with explicit capacity management."""

from __future__ import annotations

from typing import Iterator, List, Optional


class StringMapError(Exception):
    """Raised when a string map cannot be used as asked."""


class NotEnoughSpaceError(StringMapError):
    """Raised when a new key does not fit in the map's current capacity."""


class KeyNotFoundError(StringMapError, KeyError):
    """Raised when a key that must exist is not in the map."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


def _check_string(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")


class StringMap:
    """Maps string keys to string values in a fixed number of slots.

    The capacity only grows when :meth:`set` needs room (doubling it, or
    making it 1 when it was 0) or when :meth:`reserve` is called.
    Iteration visits keys in slot order.
    """

    def __init__(self, initial_capacity: int = 0) -> None:
        self._keys: Optional[List[Optional[str]]] = []
        self._values: List[Optional[str]] = []
        self._size = 0
        self.reserve(initial_capacity)

    def _slots(self) -> List[Optional[str]]:
        if self._keys is None:
            raise StringMapError("invalid string map")
        return self._keys

    def _index_of(self, key: str) -> Optional[int]:
        for index, stored in enumerate(self._slots()):
            if stored is not None and stored == key:
                return index
        return None

    def _remove_at(self, index: int) -> None:
        keys = self._slots()
        keys[index] = None
        self._values[index] = None
        self._size -= 1

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return len(self._slots())

    def __len__(self) -> int:
        self._slots()
        return self._size

    def __iter__(self) -> Iterator[str]:
        for key in list(self._slots()):
            if key is not None:
                yield key

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.key_exists(key)

    def __repr__(self) -> str:
        if self._keys is None:
            return "StringMap(<finalized>)"
        items = {key: self._values[index] for index, key in enumerate(self._keys) if key is not None}
        return f"StringMap({items!r})"

    def reserve(self, capacity: int) -> None:
        """Set the capacity; a request below the current size is raised to the size."""
        keys = self._slots()
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if capacity < self._size:
            capacity = self._size
        current = len(keys)
        if capacity == current:
            return
        if capacity > current:
            extra = capacity - current
            keys.extend([None] * extra)
            self._values.extend([None] * extra)
            return
        # Shrinking: keep the stored entries, in slot order, at the front.
        entries = [(key, self._values[index]) for index, key in enumerate(keys) if key is not None]
        new_keys: List[Optional[str]] = [key for key, _ in entries]
        new_values: List[Optional[str]] = [value for _, value in entries]
        padding = capacity - len(entries)
        new_keys.extend([None] * padding)
        new_values.extend([None] * padding)
        self._keys = new_keys
        self._values = new_values

    def clear(self) -> None:
        """Remove every entry; the capacity is kept."""
        for index, key in enumerate(self._slots()):
            if key is not None:
                self._remove_at(index)

    def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``, growing the capacity when needed."""
        try:
            self.set_no_resize(key, value)
        except NotEnoughSpaceError:
            current = self.capacity()
            self.reserve(2 * current if current else 1)
            self.set_no_resize(key, value)

    def set_no_resize(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``; raise NotEnoughSpaceError if a new key does not fit."""
        keys = self._slots()
        _check_string("key", key)
        _check_string("value", value)
        index = self._index_of(key)
        if index is None:
            if self._size >= len(keys):
                raise NotEnoughSpaceError("not enough space in string map")
            index = keys.index(None)
            keys[index] = key
            self._size += 1
        self._values[index] = value

    def unset(self, key: str) -> None:
        """Remove ``key``; raise KeyNotFoundError if it is absent."""
        self._slots()
        _check_string("key", key)
        index = self._index_of(key)
        if index is None:
            raise KeyNotFoundError(f"key '{key}' not found")
        self._remove_at(index)

    def key_exists(self, key: Optional[str]) -> bool:
        """Return whether ``key`` is in the map; False for None or a finalized map."""
        if key is None or self._keys is None:
            return False
        return self._index_of(key) is not None

    def get(self, key: Optional[str]) -> Optional[str]:
        """Return the value for ``key``, or None when it is absent."""
        if key is None or self._keys is None:
            return None
        index = self._index_of(key)
        return None if index is None else self._values[index]

    def get_next_key(self, key: Optional[str] = None) -> Optional[str]:
        """Return the key after ``key`` in slot order, or the first key when ``key`` is None.

        None is returned when there is no next key or ``key`` is not in the map.
        """
        if self._keys is None or self._size == 0:
            return None
        start = 0
        if key is not None:
            index = self._index_of(key)
            if index is None:
                return None
            start = index + 1
        for stored in self._keys[start:]:
            if stored is not None:
                return stored
        return None

    def copy_into(self, other: "StringMap") -> None:
        """Set every entry of this map in ``other``, growing it as needed."""
        if not isinstance(other, StringMap):
            raise TypeError("destination must be a StringMap")
        if self._keys is None:
            raise StringMapError("source string map is invalid")
        if other._keys is None:
            raise StringMapError("destination string map is invalid")
        key = self.get_next_key(None)
        while key is not None:
            value = self.get(key)
            if value is None:
                raise StringMapError("unable to get value for known key, should not happen")
            other.set(key, value)
            key = self.get_next_key(key)

    def fini(self) -> None:
        """Release all entries; the map can no longer be used. Repeating is harmless."""
        if self._keys is None:
            return
        self.clear()
        self.reserve(0)
        self._keys = None
        self._values = []