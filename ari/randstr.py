"""Random strings and random bytes from a cryptographically strong source."""

import secrets
import string as _string

__all__ = [
    "random_string",
    "alpha_string",
    "alphanumeric_string",
    "random_bytes",
    "array_16",
    "array_32",
]

_LOWERCASE_ALPHABET = _string.ascii_lowercase
_LOWERCASE_ALPHANUMERIC = _string.ascii_lowercase + _string.digits


def _choose(alphabet, length):
    if length < 0:
        raise ValueError("length must be non-negative")
    characters = list(alphabet)
    if not characters:
        return ""
    return "".join(secrets.choice(characters) for _ in range(length))


def random_string(alphabet, length):
    """Return ``length`` characters drawn from ``alphabet``.

    An empty alphabet yields an empty string.
    """
    return _choose(alphabet, length)


def alpha_string(length):
    """Return ``length`` random lower-case ASCII letters."""
    return _choose(_LOWERCASE_ALPHABET, length)


def alphanumeric_string(length):
    """Return ``length`` random lower-case ASCII letters and digits."""
    return _choose(_LOWERCASE_ALPHANUMERIC, length)


def random_bytes(length):
    """Return ``length`` random bytes."""
    if length < 0:
        raise ValueError("length must be non-negative")
    return secrets.token_bytes(length)


def array_16():
    """Return 16 random bytes."""
    return secrets.token_bytes(16)


def array_32():
    """Return 32 random bytes."""
    return secrets.token_bytes(32)