"""
bucketmap: a separate-chaining hash table built from first principles.

Exposes:
- HashMap: the table (insert / get / contains_key / remove / items)
- HashMapCursor: the read-only traversal returned by ``HashMap.items()``
- HashMapError, ConcurrentModificationError: the exception taxonomy
"""

import logging

from .datastructures import Bucket, Entry, HashMap, HashMapCursor
from .errors import ConcurrentModificationError, HashMapError

# Library logging stays silent unless the application configures it.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Bucket",
    "ConcurrentModificationError",
    "Entry",
    "HashMap",
    "HashMapCursor",
    "HashMapError",
]
