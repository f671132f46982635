"""Comparison helpers for partially ordered values."""

import math

__all__ = ["partial_min", "partial_max", "compare_floating"]


def partial_min(a, b):
    """Return the smaller of two values, preferring ``a`` when they compare equal.

    If the values are unordered (for example a NaN is involved), ``b`` is returned.
    """
    if a < b or a == b:
        return a
    return b


def partial_max(a, b):
    """Return the larger of two values, preferring ``a`` when they compare equal.

    If the values are unordered (for example a NaN is involved), ``b`` is returned.
    """
    if a > b or a == b:
        return a
    return b


def compare_floating(a, b):
    """Three-way compare two floats, ordering NaN after every other value.

    Returns a negative number, zero or a positive number, usable with
    ``functools.cmp_to_key``.
    """
    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan and b_nan:
        return 0
    if a_nan:
        return 1
    if b_nan:
        return -1
    return (a > b) - (a < b)