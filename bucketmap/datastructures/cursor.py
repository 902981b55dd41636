from __future__ import annotations
from typing import TYPE_CHECKING, Generic, Iterator, Tuple, TypeVar

from ..errors import ConcurrentModificationError

if TYPE_CHECKING:
    from .hash_map import HashMap

K = TypeVar("K")
V = TypeVar("V")


class HashMapCursor(Generic[K, V]):
    """Forward-only traversal over the live entries of a :class:`HashMap`.

    The cursor walks the bucket array in index order and, inside each
    bucket, the chained entries in bucket order, yielding ``(key, value)``
    tuples. It never mutates the table. Ordering is an artifact of the
    current bucket layout and changes across resizes.

    A cursor remembers the table version it was created against; if the
    table is mutated before the cursor is exhausted, the next advance
    raises :class:`ConcurrentModificationError`. Once exhausted, a cursor
    stays exhausted; ask the table for a fresh one to restart.
    """

    __slots__ = ("_table", "_bucket_idx", "_entry_idx", "_version", "_done")

    def __init__(self, table: "HashMap[K, V]") -> None:
        self._table = table
        self._bucket_idx = 0
        self._entry_idx = 0
        self._version = table._version
        self._done = False

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return self

    def __next__(self) -> Tuple[K, V]:
        if self._done:
            raise StopIteration
        table = self._table
        if table._version != self._version:
            raise ConcurrentModificationError("HashMap mutated during iteration")

        buckets = table._buckets
        while self._bucket_idx < len(buckets):
            bucket = buckets[self._bucket_idx]
            if self._entry_idx < len(bucket):
                entry = bucket[self._entry_idx]
                self._entry_idx += 1
                return (entry.key, entry.value)
            self._bucket_idx += 1
            self._entry_idx = 0

        # Terminal state: drop the table reference as well.
        self._done = True
        self._table = None  # type: ignore[assignment]
        raise StopIteration

    def __repr__(self) -> str:  # pragma: no cover - trivial
        state = "exhausted" if self._done else f"bucket={self._bucket_idx}, entry={self._entry_idx}"
        return f"HashMapCursor({state})"
