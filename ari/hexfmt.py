"""Hexadecimal encoding and decoding of byte strings."""

__all__ = ["to_hex", "to_upper_hex", "from_hex"]

_WHITESPACE = frozenset(" \r\n\t")
_DIGITS = "0123456789abcdef"


def to_hex(data):
    """Encode ``data`` as lower-case hexadecimal."""
    return bytes(data).hex()


def to_upper_hex(data):
    """Encode ``data`` as upper-case hexadecimal."""
    return bytes(data).hex().upper()


def from_hex(string):
    """Decode a hexadecimal string into bytes.

    Spaces, tabs, carriage returns and newlines are ignored anywhere. Raises
    ``ValueError`` on any other non-hex character or an odd number of digits.
    """
    nibbles = []
    for character in string:
        if character in _WHITESPACE:
            continue
        digit = _DIGITS.find(character.lower()) if character.isascii() else -1
        if digit < 0:
            raise ValueError(f"invalid hex character: {character!r}")
        nibbles.append(digit)

    if len(nibbles) % 2:
        raise ValueError("hex string has an odd number of digits")

    pairs = zip(nibbles[::2], nibbles[1::2])
    return bytes((high << 4) | low for high, low in pairs)