"""Path building that treats every appended piece as relative, and volume names."""

import os
import re
from pathlib import Path, PurePath

__all__ = ["volume_name", "path_append", "build_path"]

_SEPARATORS = re.compile(r"[/\\]")


def path_append(destination, path):
    """Return ``destination`` with ``path`` appended as a relative path.

    ``path`` is split on both ``/`` and ``\\``, so a leading separator does not
    make it absolute.
    """
    result = destination if isinstance(destination, PurePath) else Path(destination)
    for piece in _SEPARATORS.split(os.fsdecode(path)):
        if piece:
            result = result / piece
    return result


def build_path(*args):
    """Build a path from components; all but the first are treated as relative."""
    if not args:
        return Path()
    result = Path(args[0])
    for extra in args[1:]:
        result = path_append(result, extra)
    return result


def _prefix_name(drive):
    if len(drive) == 2 and drive[1] == ":":
        return f"{drive}\\"
    if drive.startswith(("\\\\?\\", "//?/")):
        rest = drive[4:]
        parts = [part for part in re.split(r"[/\\]", rest) if part]
        if parts and parts[0].upper() == "UNC" and len(parts) >= 3:
            return f"{parts[1]}\\{parts[2]}"
        if len(rest) == 2 and rest[1] == ":":
            return f"{rest}\\"
        return rest
    if drive.startswith(("\\\\.\\", "//./")):
        return drive[4:]
    parts = [part for part in re.split(r"[/\\]", drive) if part]
    if len(parts) >= 2:
        return f"{parts[0]}\\{parts[1]}\\"
    return drive


def volume_name(path):
    """Return a display name for the first component of ``path``, or None if empty.

    This is the drive or share on systems that have them, ``/`` for rooted
    paths, and otherwise the first relative component.
    """
    text = os.fsdecode(path)
    if not text:
        return None
    drive = PurePath(text).drive
    if drive:
        return _prefix_name(drive)
    separators = os.sep + (os.altsep or "")
    if text[0] in separators:
        return "/"
    first = re.split("[" + re.escape(separators) + "]", text, maxsplit=1)[0]
    return first