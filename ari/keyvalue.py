"""Helpers for key/value sequences and small collection builders."""

__all__ = [
    "keys",
    "values",
    "hash_map",
    "btree_map",
    "hash_set",
    "btree_set",
]


def keys(source):
    """Yield the key of every ``(key, value)`` pair in ``source``."""
    return (key for key, _ in source)


def values(source):
    """Yield the value of every ``(key, value)`` pair in ``source``."""
    return (value for _, value in source)


def hash_map(*args):
    """Build a dict from ``(key, value)`` pairs; later pairs overwrite earlier ones."""
    return {key: value for key, value in args}


def btree_map(*args):
    """Build a dict from ``(key, value)`` pairs, ordered by key."""
    return dict(sorted(hash_map(*args).items(), key=lambda item: item[0]))


def hash_set(*args):
    """Build a set of the given values."""
    return set(args)


def btree_set(*args):
    """Build a sorted list of the distinct given values."""
    return sorted(set(args))