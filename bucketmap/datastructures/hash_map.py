from __future__ import annotations
import logging
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from .. import config
from .bucket import Bucket, Entry
from .cursor import HashMapCursor

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

# Distinguishes "absent" from a stored None value on internal lookups.
_MISSING: Any = object()


class HashMap(Generic[K, V]):
    """A separate-chaining hash table grown by doubling.

    Properties:
    - Starts with zero buckets; the first insert allocates the array.
    - Holds at most floor(bucket_count * 3 / 4) entries; an insert of a new
      key grows the array first if the pending entry would exceed that.
    - Resizes stage a complete new bucket array before swapping it in.
    - Never shrinks; removal is a swap-remove inside the bucket.
    - Not thread-safe. Mutating while a cursor is active invalidates it.
    """

    __slots__ = ("_buckets", "_size", "_version")

    def __init__(self, items: Optional[Union[Iterable[Tuple[K, V]], Any]] = None, **kwargs: V) -> None:
        self._buckets: List[Bucket[K, V]] = []
        self._size: int = 0
        # Bumped by every mutating call; cursors compare against it.
        self._version: int = 0
        if items is not None:
            # Accept dict-like or iterable of pairs
            if hasattr(items, "items"):
                items = items.items()
            for k, v in items:
                self.insert(k, v)
        for k, v in kwargs.items():
            self.insert(k, v)  # type: ignore[arg-type]

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _hash_index(key: K, table_size: int) -> int:
        """Bucket index of *key* in a table of *table_size* buckets."""
        return hash(key) % table_size

    @staticmethod
    def _max_entries(table_size: int) -> int:
        return table_size * config.MAX_LOAD_NUMERATOR // config.MAX_LOAD_DENOMINATOR

    def _bucket_for(self, key: K) -> Optional[Bucket[K, V]]:
        if not self._buckets:
            return None
        return self._buckets[self._hash_index(key, len(self._buckets))]

    def _resize(self) -> None:
        """Grow the bucket array (0 -> initial size, else doubling) and rehash.

        The new array is filled completely before it replaces the old one,
        so a failure while staging leaves the table untouched.
        """
        old_size = len(self._buckets)
        target_size = config.INITIAL_NUM_BUCKETS if old_size == 0 else old_size * config.GROWTH_FACTOR

        new_buckets: List[Bucket[K, V]] = [Bucket() for _ in range(target_size)]
        for bucket in self._buckets:
            for entry in bucket.entries:
                new_buckets[self._hash_index(entry.key, target_size)].push(entry)

        self._buckets = new_buckets
        self._version += 1
        logger.debug("resized hash map from %d to %d buckets (%d entries)", old_size, target_size, self._size)

    # -----------------------------
    # Core operations
    # -----------------------------
    def insert(self, key: K, value: V) -> Optional[V]:
        """Insert or update a key/value pair.

        Returns the previous value when *key* was already present (the
        entry count is unchanged), otherwise None.
        """
        bucket = self._bucket_for(key)
        if bucket is not None:
            entry = bucket.find(key)
            if entry is not None:
                old, entry.value = entry.value, value
                self._version += 1
                return old

        pending = self._size + 1
        while not self._buckets or pending > self._max_entries(len(self._buckets)):
            self._resize()

        self._buckets[self._hash_index(key, len(self._buckets))].push(Entry(key, value))
        self._size = pending
        self._version += 1
        return None

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Retrieve value for key or return default."""
        bucket = self._bucket_for(key)
        if bucket is None:
            return default
        entry = bucket.find(key)
        return default if entry is None else entry.value

    def contains_key(self, key: K) -> bool:
        """Check if key exists in the map."""
        bucket = self._bucket_for(key)
        return bucket is not None and bucket.find(key) is not None

    def remove(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Remove *key* and return its value, or return *default* if absent."""
        bucket = self._bucket_for(key)
        if bucket is None:
            return default
        entry = bucket.swap_remove(key)
        if entry is None:
            return default
        self._size -= 1
        self._version += 1
        return entry.value

    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def bucket_count(self) -> int:
        """Current length of the bucket array."""
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        if not self._buckets:
            return 0.0
        return self._size / len(self._buckets)

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def items(self) -> HashMapCursor[K, V]:
        """Return a fresh cursor over (key, value) pairs."""
        return HashMapCursor(self)

    def keys(self) -> Iterator[K]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[V]:
        for _, v in self.items():
            yield v

    def to_py(self) -> dict[K, V]:
        """Convert to a native *dict*; recursively uses ``to_py`` when present."""
        d: dict[K, V] = {}
        for k, v in self.items():
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                d[k] = v.to_py()  # type: ignore[attr-defined]
            else:
                d[k] = v
        return d

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __getitem__(self, key: K) -> V:
        val = self.get(key, _MISSING)
        if val is _MISSING:
            raise KeyError(key)
        return val  # type: ignore[return-value]

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __delitem__(self, key: K) -> None:
        if self.remove(key, _MISSING) is _MISSING:
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashMap({{{pairs}}})"
