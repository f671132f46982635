"""Cryptographic digests over byte strings and binary streams."""

import enum
import hashlib

__all__ = ["HashAlgorithm", "IncrementalHash", "hash_slice", "hash_read"]

_BUFFER_LENGTH = 1024 * 1024


class HashAlgorithm(enum.Enum):
    """The supported digest algorithms."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"


class IncrementalHash:
    """A digest computed from data fed in pieces.

    Once :meth:`finish` has been called the object is spent; further calls
    to :meth:`update` or :meth:`finish` raise ``ValueError``.
    """

    def __init__(self, algorithm):
        self._context = hashlib.new(HashAlgorithm(algorithm).value)
        self._finished = False

    def update(self, data):
        """Feed ``data`` into the digest."""
        self._ensure_open()
        self._context.update(data)

    def finish(self):
        """Return the digest of everything fed so far as bytes."""
        self._ensure_open()
        self._finished = True
        return self._context.digest()

    def _ensure_open(self):
        if self._finished:
            raise ValueError("hash has already been finished")


def hash_slice(data, algorithm):
    """Return the digest of ``data`` as bytes."""
    return hashlib.new(HashAlgorithm(algorithm).value, bytes(data)).digest()


def hash_read(source, algorithm):
    """Read a binary stream to its end and return the digest of its contents."""
    digest = IncrementalHash(algorithm)
    while chunk := source.read(_BUFFER_LENGTH):
        digest.update(chunk)
    return digest.finish()