"""Keyed SipHash 2-4 and 1-3 hashers producing 64-bit values."""

import struct
import sys

__all__ = ["SipHasher24", "SipHasher13"]

_MASK = (1 << 64) - 1
_USIZE_BYTES = struct.calcsize("P")


def _rotl(value, bits):
    return ((value << bits) | (value >> (64 - bits))) & _MASK


def _sip_round(v0, v1, v2, v3):
    v0 = (v0 + v1) & _MASK
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def _check_key(key):
    if not 0 <= key <= _MASK:
        raise ValueError("keys must be unsigned 64-bit integers")
    return key


def _encode_usize(value):
    try:
        return value.to_bytes(_USIZE_BYTES, sys.byteorder)
    except OverflowError as error:
        raise ValueError("value does not fit in a native unsigned integer") from error


class _SipState:
    """The running state of a SipHash computation with fixed round counts."""

    def __init__(self, key0, key1, c_rounds, d_rounds):
        k0 = _check_key(key0)
        k1 = _check_key(key1)
        self.c_rounds = c_rounds
        self.d_rounds = d_rounds
        self.vector = (
            k0 ^ 0x736F6D6570736575,
            k1 ^ 0x646F72616E646F6D,
            k0 ^ 0x6C7967656E657261,
            k1 ^ 0x7465646279746573,
        )
        self.length = 0
        self.tail = b""

    @staticmethod
    def _rounds(vector, count):
        for _ in range(count):
            vector = _sip_round(*vector)
        return vector

    def _compress(self, vector, word):
        v0, v1, v2, v3 = vector
        v0, v1, v2, v3 = self._rounds((v0, v1, v2, v3 ^ word), self.c_rounds)
        return v0 ^ word, v1, v2, v3

    def write(self, data):
        data = bytes(data)
        self.length += len(data)
        buffer = self.tail + data
        full = len(buffer) - len(buffer) % 8
        vector = self.vector
        for offset in range(0, full, 8):
            word = int.from_bytes(buffer[offset:offset + 8], "little")
            vector = self._compress(vector, word)
        self.vector = vector
        self.tail = buffer[full:]

    def finish(self):
        last = ((self.length & 0xFF) << 56) | int.from_bytes(self.tail, "little")
        v0, v1, v2, v3 = self._compress(self.vector, last)
        v0, v1, v2, v3 = self._rounds((v0, v1, v2 ^ 0xFF, v3), self.d_rounds)
        return v0 ^ v1 ^ v2 ^ v3

    def copy(self):
        other = _SipState.__new__(_SipState)
        other.c_rounds = self.c_rounds
        other.d_rounds = self.d_rounds
        other.vector = self.vector
        other.length = self.length
        other.tail = self.tail
        return other


class SipHasher24:
    """SipHash 2-4: two compression rounds and four finalization rounds.

    A general-purpose keyed hash; not intended for cryptographic use.
    """

    def __init__(self, key0=0, key1=0):
        self._state = _SipState(key0, key1, 2, 4)

    def write(self, data):
        """Feed ``data`` into the hash."""
        self._state.write(data)

    def write_u8(self, value):
        """Feed a single byte into the hash."""
        self._state.write(bytes([value]))

    def write_usize(self, value):
        """Feed a native pointer-sized unsigned integer into the hash."""
        self._state.write(_encode_usize(value))

    def finish(self):
        """Return the 64-bit hash of everything written so far."""
        return self._state.finish()

    def copy(self):
        """Return an independent hasher with the same state."""
        other = SipHasher24.__new__(SipHasher24)
        other._state = self._state.copy()
        return other

    def __repr__(self):
        return f"SipHasher24(length={self._state.length})"


class SipHasher13:
    """SipHash 1-3: one compression round and three finalization rounds."""

    def __init__(self, key0=0, key1=0):
        self._state = _SipState(key0, key1, 1, 3)

    def write(self, data):
        """Feed ``data`` into the hash."""
        self._state.write(data)

    def write_u8(self, value):
        """Feed a single byte into the hash."""
        self._state.write(bytes([value]))

    def write_usize(self, value):
        """Feed a native pointer-sized unsigned integer into the hash."""
        self._state.write(_encode_usize(value))

    def finish(self):
        """Return the 64-bit hash of everything written so far."""
        return self._state.finish()

    def copy(self):
        """Return an independent hasher with the same state."""
        other = SipHasher13.__new__(SipHasher13)
        other._state = self._state.copy()
        return other

    def __repr__(self):
        return f"SipHasher13(length={self._state.length})"