"""Exceptions raised by the bucketmap containers."""


class HashMapError(Exception):
    """Base class for errors raised by :mod:`bucketmap`."""


class ConcurrentModificationError(HashMapError, RuntimeError):
    """A table was mutated while one of its cursors was still active."""
