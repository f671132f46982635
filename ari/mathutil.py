"""Linear interpolation helpers."""

__all__ = ["lerp", "bounded_lerp"]


def lerp(a, b, amount):
    """Linearly interpolate between ``a`` and ``b`` by ``amount``."""
    return a * (1 - amount) + b * amount


def bounded_lerp(a, b, amount):
    """Linearly interpolate between ``a`` and ``b`` with ``amount`` clamped to ``[0, 1]``."""
    if amount < 0:
        amount = 0.0
    elif amount > 1:
        amount = 1.0
    return lerp(a, b, amount)