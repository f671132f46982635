"""ASCII-only character classification and case mapping.

Every function accepts a byte value (an int in ``0..255``), a ``str`` or a
bytes-like object. Predicates hold when every character or byte satisfies
them, so they are true for empty input. Characters outside ASCII never
satisfy a predicate and are left alone by the case mappings.
"""

import string as _string

__all__ = [
    "is_ascii",
    "to_ascii_uppercase",
    "to_ascii_lowercase",
    "eq_ignore_ascii_case",
    "is_ascii_alphabetic",
    "is_ascii_uppercase",
    "is_ascii_lowercase",
    "is_ascii_alphanumeric",
    "is_ascii_digit",
    "is_ascii_hexdigit",
    "is_ascii_punctuation",
    "is_ascii_graphic",
    "is_ascii_whitespace",
    "is_ascii_control",
]

_UPPER = _string.ascii_uppercase
_LOWER = _string.ascii_lowercase
_TO_UPPER_STR = str.maketrans(_LOWER, _UPPER)
_TO_LOWER_STR = str.maketrans(_UPPER, _LOWER)


def _check_byte(value):
    if not 0 <= value <= 0xFF:
        raise ValueError("byte values must be in the range 0..255")
    return value


def _units(value):
    if isinstance(value, bool):
        raise TypeError("expected a byte value, a str or a bytes-like object")
    if isinstance(value, int):
        return (_check_byte(value),)
    if isinstance(value, str):
        return map(ord, value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError("expected a byte value, a str or a bytes-like object")


def _all(value, predicate):
    return all(predicate(unit) for unit in _units(value))


def _upper_unit(unit):
    return unit - 32 if 0x61 <= unit <= 0x7A else unit


def _lower_unit(unit):
    return unit + 32 if 0x41 <= unit <= 0x5A else unit


def is_ascii(value):
    """Return True if every character is within ASCII."""
    return _all(value, lambda unit: unit < 0x80)


def to_ascii_uppercase(value):
    """Return a copy with ASCII letters mapped to upper case."""
    if isinstance(value, str):
        return value.translate(_TO_UPPER_STR)
    if isinstance(value, (bytes, bytearray)):
        return value.upper()
    if isinstance(value, memoryview):
        return bytes(value).upper()
    (unit,) = _units(value)
    return _upper_unit(unit)


def to_ascii_lowercase(value):
    """Return a copy with ASCII letters mapped to lower case."""
    if isinstance(value, str):
        return value.translate(_TO_LOWER_STR)
    if isinstance(value, (bytes, bytearray)):
        return value.lower()
    if isinstance(value, memoryview):
        return bytes(value).lower()
    (unit,) = _units(value)
    return _lower_unit(unit)


def eq_ignore_ascii_case(a, b):
    """Return True if ``a`` and ``b`` are equal apart from ASCII letter case."""
    return list(map(_lower_unit, _units(a))) == list(map(_lower_unit, _units(b))) and (
        isinstance(a, str) == isinstance(b, str)
    )


def is_ascii_alphabetic(value):
    """A-Z or a-z."""
    return _all(value, lambda unit: 0x41 <= unit <= 0x5A or 0x61 <= unit <= 0x7A)


def is_ascii_uppercase(value):
    """A-Z."""
    return _all(value, lambda unit: 0x41 <= unit <= 0x5A)


def is_ascii_lowercase(value):
    """a-z."""
    return _all(value, lambda unit: 0x61 <= unit <= 0x7A)


def is_ascii_alphanumeric(value):
    """A-Z, a-z or 0-9."""
    return _all(
        value,
        lambda unit: 0x30 <= unit <= 0x39 or 0x41 <= unit <= 0x5A or 0x61 <= unit <= 0x7A,
    )


def is_ascii_digit(value):
    """0-9."""
    return _all(value, lambda unit: 0x30 <= unit <= 0x39)


def is_ascii_hexdigit(value):
    """0-9, A-F or a-f."""
    return _all(
        value,
        lambda unit: 0x30 <= unit <= 0x39 or 0x41 <= unit <= 0x46 or 0x61 <= unit <= 0x66,
    )


def is_ascii_punctuation(value):
    """One of ``!"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~``."""
    return _all(
        value,
        lambda unit: 0x21 <= unit <= 0x2F
        or 0x3A <= unit <= 0x40
        or 0x5B <= unit <= 0x60
        or 0x7B <= unit <= 0x7E,
    )


def is_ascii_graphic(value):
    """Any visible ASCII character, ``!`` through ``~``."""
    return _all(value, lambda unit: 0x21 <= unit <= 0x7E)


def is_ascii_whitespace(value):
    """Space, horizontal tab, line feed, form feed or carriage return."""
    return _all(value, lambda unit: unit in (0x20, 0x09, 0x0A, 0x0C, 0x0D))


def is_ascii_control(value):
    """An ASCII control character: 0x00-0x1F or 0x7F."""
    return _all(value, lambda unit: unit <= 0x1F or unit == 0x7F)