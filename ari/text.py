"""Display-width aware padding and UTF-16 conversions."""

import enum
import itertools
import struct

from wcwidth import wcwidth

__all__ = [
    "TextAlignment",
    "pad",
    "pad_left",
    "pad_right",
    "pad_left_with",
    "pad_right_with",
    "pad_to_width_with_alignment",
    "to_utf16",
    "to_utf16_null",
    "from_utf16",
    "from_utf16_null",
    "from_utf16_lossy",
    "from_utf16_lossy_null",
]


class TextAlignment(enum.Enum):
    """Where text sits within a padded field."""

    LEFT = "left"
    RIGHT = "right"


def _display_width(string):
    return sum(max(wcwidth(character), 0) for character in string)


def pad(string, width, character, alignment):
    """Pad ``string`` with ``character`` to ``width`` display columns.

    Strings already at least ``width`` columns wide are returned unchanged.
    """
    if len(character) != 1:
        raise ValueError("padding character must be a single character")
    required = width - _display_width(string)
    if required <= 0:
        return string
    filler = character * required
    if TextAlignment(alignment) is TextAlignment.LEFT:
        return string + filler
    return filler + string


def pad_left(string, width):
    """Pad with spaces on the left, aligning the text to the right."""
    return pad(string, width, " ", TextAlignment.RIGHT)


def pad_right(string, width):
    """Pad with spaces on the right, aligning the text to the left."""
    return pad(string, width, " ", TextAlignment.LEFT)


def pad_left_with(string, width, character):
    """Pad with ``character`` on the left."""
    return pad(string, width, character, TextAlignment.RIGHT)


def pad_right_with(string, width, character):
    """Pad with ``character`` on the right."""
    return pad(string, width, character, TextAlignment.LEFT)


def pad_to_width_with_alignment(string, width, alignment):
    """Pad with spaces according to ``alignment``."""
    return pad(string, width, " ", alignment)


def to_utf16(string):
    """Encode ``string`` as a list of UTF-16 code units."""
    encoded = string.encode("utf-16-le")
    return [unit for (unit,) in struct.iter_unpack("<H", encoded)]


def to_utf16_null(string):
    """Encode ``string`` as UTF-16 code units followed by a terminating zero."""
    return [*to_utf16(string), 0]


def _pack(data):
    units = list(data)
    try:
        return struct.pack(f"<{len(units)}H", *units)
    except struct.error as error:
        raise ValueError("UTF-16 code units must be in the range 0..65535") from error


def _extent(data):
    return itertools.takewhile(lambda unit: unit != 0, data)


def from_utf16(data):
    """Decode UTF-16 code units, raising ``ValueError`` on invalid sequences."""
    return _pack(data).decode("utf-16-le")


def from_utf16_null(data):
    """Decode UTF-16 code units up to the first zero."""
    return from_utf16(_extent(data))


def from_utf16_lossy(data):
    """Decode UTF-16 code units, replacing invalid sequences with U+FFFD."""
    return _pack(data).decode("utf-16-le", errors="replace")


def from_utf16_lossy_null(data):
    """Decode UTF-16 code units up to the first zero, replacing invalid sequences."""
    return from_utf16_lossy(_extent(data))