"""Console helpers."""

import sys

__all__ = ["clear", "clear_into"]

_CLEAR_CONSOLE = b"\x1b[2J\x1b[1;1H"


def clear():
    """Clear standard output."""
    clear_into(sys.stdout)
    sys.stdout.flush()


def clear_into(stream):
    """Clear a console ``stream`` by writing the clear and cursor-home escapes.

    Works with both binary and text streams.
    """
    try:
        stream.write(_CLEAR_CONSOLE)
    except TypeError:
        stream.write(_CLEAR_CONSOLE.decode("ascii"))