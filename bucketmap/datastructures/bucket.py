from __future__ import annotations
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Entry(Generic[K, V]):
    """A lightweight key/value slot owned by exactly one :class:`Bucket`."""

    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Entry({self.key!r}, {self.value!r})"


class Bucket(Generic[K, V]):
    """One collision chain of a :class:`HashMap`.

    Entries are kept in a dynamic array in insertion order. Removal swaps
    the last entry into the freed slot, so order is not preserved across
    removals.
    """

    __slots__ = ("entries",)

    def __init__(self) -> None:
        self.entries: List[Entry[K, V]] = []

    def find(self, key: K) -> Optional[Entry[K, V]]:
        """Return the entry holding *key*, or None if not present."""
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def push(self, entry: Entry[K, V]) -> None:
        """Append *entry* without checking for an existing key."""
        self.entries.append(entry)

    def swap_remove(self, key: K) -> Optional[Entry[K, V]]:
        """Remove and return the entry holding *key*, or None if not present.

        The last entry is moved into the removed slot (O(1) after the scan).
        """
        entries = self.entries
        for i, entry in enumerate(entries):
            if entry.key == key:
                last = entries.pop()
                if i < len(entries):
                    entries[i] = last
                return entry
        return None

    def items(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, value) pairs in bucket order."""
        for entry in self.entries:
            yield (entry.key, entry.value)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, idx: int) -> Entry[K, V]:
        return self.entries[idx]
