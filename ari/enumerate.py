"""Enumeration of directory entries, optionally recursive."""

import enum
import os
from pathlib import Path

__all__ = ["SearchOption", "FsEntry", "entries", "directories", "files"]


class SearchOption(enum.Enum):
    """Whether to list only the top directory or descend into subdirectories."""

    TOP_ONLY = "top_only"
    RECURSIVE = "recursive"


class FsEntry:
    """A file system entry found during enumeration.

    Its type is captured when the entry is read; symbolic links are not followed.
    """

    def __init__(self, entry):
        self._entry = entry
        self._is_dir = entry.is_dir(follow_symlinks=False)
        self._is_file = entry.is_file(follow_symlinks=False)

    def path(self):
        """Return the full path of the entry."""
        return Path(self._entry.path)

    def name(self):
        """Return the file name of the entry."""
        return self._entry.name

    def is_dir(self):
        """Return True if the entry is a directory."""
        return self._is_dir

    def is_file(self):
        """Return True if the entry is a regular file."""
        return self._is_file

    def metadata(self):
        """Return the ``os.stat_result`` of the entry, without following links."""
        return self._entry.stat(follow_symlinks=False)

    def __repr__(self):
        return f"FsEntry({self._entry.path!r})"


def _walk(root, recursive):
    stack = [root]
    try:
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop().close()
                continue
            item = FsEntry(entry)
            yield item
            if recursive and item.is_dir():
                stack.append(os.scandir(item.path()))
    finally:
        for directory in stack:
            directory.close()


def entries(path, option):
    """Iterate over the entries below ``path``, depth first.

    The top directory is opened at once, so an unreadable ``path`` raises
    here; errors met later are raised while iterating.
    """
    recursive = SearchOption(option) is SearchOption.RECURSIVE
    return _walk(os.scandir(path), recursive)


def directories(path, option):
    """Iterate over the directory entries below ``path``."""
    return (entry for entry in entries(path, option) if entry.is_dir())


def files(path, option):
    """Iterate over the regular file entries below ``path``."""
    return (entry for entry in entries(path, option) if entry.is_file())