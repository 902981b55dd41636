from .bucket import Bucket, Entry
from .cursor import HashMapCursor
from .hash_map import HashMap

__all__ = [
    "Bucket",
    "Entry",
    "HashMap",
    "HashMapCursor",
]
