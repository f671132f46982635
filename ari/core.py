"""Core utilities: one-time initialization, an opaque error and a bit field."""

import threading

__all__ = [
    "BlackHole",
    "BitField",
    "initialize",
    "initialized",
    "as_list",
    "option_as_list",
    "bool_as_option",
]

_init_lock = threading.Lock()
_initialized = False


def initialize():
    """Set up the environment for use; only the first call has any effect."""
    global _initialized
    with _init_lock:
        if not _initialized:
            _initialized = True


def initialized():
    """Return True once :func:`initialize` has run."""
    return _initialized


class BlackHole(Exception):
    """An opaque error that any other error can be collapsed into."""

    def __init__(self, *args):
        super().__init__(*args)

    def __str__(self):
        return "BlackHole"

    def __eq__(self, other):
        return isinstance(other, BlackHole)

    def __hash__(self):
        return hash(BlackHole)


def as_list(item):
    """Wrap a single item in a one-element list."""
    return [item]


def option_as_list(value):
    """Return an empty list for ``None``, otherwise a one-element list."""
    return [] if value is None else [value]


def bool_as_option(value):
    """Return ``()`` for a true value and ``None`` for a false one."""
    return () if value else None


_MAX_WIDTH = 64


class BitField:
    """A bit field over a fixed byte buffer.

    Bits are numbered from the least significant bit of the first byte, and
    multi-bit values are stored least significant bit first.
    """

    def __init__(self, storage):
        self._storage = bytearray(storage)

    def get(self, index):
        """Return the bit at ``index``."""
        byte = self._storage[self._byte_index(index)]
        return bool(byte & (1 << (index % 8)))

    def set(self, index, value):
        """Set the bit at ``index`` to ``value``."""
        position = self._byte_index(index)
        mask = 1 << (index % 8)
        if value:
            self._storage[position] |= mask
        else:
            self._storage[position] &= ~mask & 0xFF

    def get_value(self, offset, width):
        """Return the unsigned value held in bits ``[offset, offset + width)``."""
        self._check_width(width)
        return sum(1 << i for i in range(width) if self.get(offset + i))

    def set_value(self, offset, width, value):
        """Store ``value`` in bits ``[offset, offset + width)``, truncating it to fit."""
        self._check_width(width)
        if value < 0:
            raise ValueError("bit field values must be non-negative")
        for i in range(width):
            self.set(offset + i, (value >> i) & 1)

    def value(self):
        """Return the raw bytes of the field."""
        return bytes(self._storage)

    def _byte_index(self, index):
        if index < 0:
            raise IndexError("bit index must be non-negative")
        return index // 8

    @staticmethod
    def _check_width(width):
        if not 0 <= width <= _MAX_WIDTH:
            raise ValueError(f"width must be between 0 and {_MAX_WIDTH}")

    def __eq__(self, other):
        if not isinstance(other, BitField):
            return NotImplemented
        return self._storage == other._storage

    __hash__ = None

    def __repr__(self):
        return f"BitField({bytes(self._storage)!r})"