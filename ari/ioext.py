"""Helpers for reading from and seeking in streams."""

import io
import sys

__all__ = [
    "read_as_string",
    "read_as_bytes",
    "read_vec",
    "read_bytes_16",
    "read_bytes_32",
    "position",
    "read_enter_key",
]


def read_as_string(stream):
    """Read ``stream`` to its end and return the contents as text.

    Binary streams are decoded as UTF-8; invalid data raises ``UnicodeDecodeError``.
    """
    data = stream.read()
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8")


def read_as_bytes(stream):
    """Read a binary ``stream`` to its end and return the contents."""
    return bytes(stream.read())


def read_vec(stream, count):
    """Read exactly ``count`` bytes, raising ``EOFError`` if the stream ends first."""
    if count < 0:
        raise ValueError("count must be non-negative")
    buffer = bytearray()
    while len(buffer) < count:
        chunk = stream.read(count - len(buffer))
        if not chunk:
            raise EOFError(f"stream ended after {len(buffer)} of {count} bytes")
        buffer += chunk
    return bytes(buffer)


def read_bytes_16(stream):
    """Read exactly 16 bytes."""
    return read_vec(stream, 16)


def read_bytes_32(stream):
    """Read exactly 32 bytes."""
    return read_vec(stream, 32)


def position(stream):
    """Return the current position of a seekable ``stream``."""
    return stream.seek(0, io.SEEK_CUR)


def read_enter_key(stream=None):
    """Consume input up to and including the next newline.

    Reads standard input when ``stream`` is not given. Raises ``EOFError`` if
    the input ends before a newline arrives.
    """
    if stream is None:
        stream = getattr(sys.stdin, "buffer", sys.stdin)
    while True:
        character = stream.read(1)
        if not character:
            raise EOFError("input ended before a newline")
        if character in ("\n", b"\n"):
            return