"""Whole-file reads and writes, safe replacement and volume information."""

import os
import shutil
from dataclasses import dataclass

from ari.ioext import read_as_bytes

__all__ = [
    "VolumeInformation",
    "file_exists",
    "directory_exists",
    "read_all_bytes",
    "write_all_bytes",
    "read_all_text",
    "read_all_lines",
    "write_all_text",
    "replace",
    "allocation_size",
    "set_allocation_size",
    "get_volume_information",
    "volume_free_bytes",
    "volume_available_bytes",
    "volume_total_bytes",
    "allocation_granularity",
]


def file_exists(path):
    """Return True if ``path`` exists and is a file."""
    return os.path.isfile(path)


def directory_exists(path):
    """Return True if ``path`` exists and is a directory."""
    return os.path.isdir(path)


def read_all_bytes(path):
    """Return the whole contents of the file at ``path``."""
    with open(path, "rb") as file:
        return read_as_bytes(file)


def write_all_bytes(path, data):
    """Create or overwrite the file at ``path`` with ``data``."""
    with open(path, "wb") as file:
        file.write(data)


def read_all_text(path):
    """Return the contents of the file at ``path`` decoded as UTF-8."""
    return read_all_bytes(path).decode("utf-8")


def read_all_lines(path):
    """Return the lines of a text file, split on ``\\n`` with one trailing ``\\r`` removed."""
    return [line.removesuffix("\r") for line in read_all_text(path).split("\n")]


def write_all_text(path, data):
    """Create or overwrite the file at ``path`` with ``data`` encoded as UTF-8."""
    write_all_bytes(path, data.encode("utf-8"))


def replace(source, destination, backup):
    """Move ``source`` over ``destination``, keeping ``backup`` as an intermediate copy.

    On failure the backup is moved back to ``source`` and the error is re-raised.
    All three paths are expected to be on the same volume.
    """
    if file_exists(backup):
        os.remove(backup)
    if file_exists(destination):
        os.replace(destination, backup)
    try:
        os.replace(source, destination)
    except OSError:
        try:
            os.replace(backup, source)
        except OSError:
            pass
        raise
    try:
        os.remove(backup)
    except OSError:
        pass


def allocation_size(file):
    """Return the number of bytes allocated on disk for an open ``file``."""
    status = os.fstat(file.fileno())
    blocks = getattr(status, "st_blocks", None)
    if blocks is None:
        return status.st_size
    return blocks * 512


def set_allocation_size(file, length):
    """Allocate at least ``length`` bytes for an open ``file``.

    Has no effect where the platform offers no allocation call, or when the
    existing allocation is already large enough.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    fallocate = getattr(os, "posix_fallocate", None)
    if fallocate is not None and length > 0:
        fallocate(file.fileno(), 0, length)


@dataclass(frozen=True)
class VolumeInformation:
    """Space figures for the volume holding a path."""

    free_bytes: int
    available_bytes: int
    total_bytes: int
    allocation_granularity: int


def get_volume_information(path):
    """Return the :class:`VolumeInformation` of the volume holding ``path``."""
    statvfs = getattr(os, "statvfs", None)
    if statvfs is not None:
        stat = statvfs(path)
        return VolumeInformation(
            free_bytes=stat.f_frsize * stat.f_bfree,
            available_bytes=stat.f_frsize * stat.f_bavail,
            total_bytes=stat.f_frsize * stat.f_blocks,
            allocation_granularity=stat.f_frsize,
        )
    usage = shutil.disk_usage(path)
    return VolumeInformation(
        free_bytes=usage.free,
        available_bytes=usage.free,
        total_bytes=usage.total,
        allocation_granularity=getattr(os.stat(path), "st_blksize", 0),
    )


def volume_free_bytes(path):
    """Return the free bytes on the volume holding ``path``."""
    return get_volume_information(path).free_bytes


def volume_available_bytes(path):
    """Return the bytes available to this user on the volume holding ``path``."""
    return get_volume_information(path).available_bytes


def volume_total_bytes(path):
    """Return the total size of the volume holding ``path``."""
    return get_volume_information(path).total_bytes


def allocation_granularity(path):
    """Return the allocation unit of the volume holding ``path``."""
    return get_volume_information(path).allocation_granularity