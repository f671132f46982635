"""Human-readable formatting of durations and byte counts."""

import datetime

__all__ = [
    "formatted_duration",
    "human_duration",
    "human_bytes",
    "human_detailed_bytes",
]

_DURATION_UNITS = (
    (365 * 24 * 60 * 60, "year", "years", "y"),
    (7 * 24 * 60 * 60, "week", "weeks", "w"),
    (24 * 60 * 60, "day", "days", "d"),
    (60 * 60, "hour", "hours", "h"),
    (60, "minute", "minutes", "m"),
    (1, "second", "seconds", "s"),
)

_BYTE_UNITS = (
    (6, "EiB"),
    (5, "PiB"),
    (4, "TiB"),
    (3, "GiB"),
    (2, "MiB"),
    (1, "KiB"),
)


def _whole_seconds(duration):
    if isinstance(duration, datetime.timedelta):
        duration = duration // datetime.timedelta(seconds=1)
    if duration < 0:
        raise ValueError("durations must be non-negative")
    return int(duration)


def formatted_duration(seconds):
    """Format a duration as ``HH:MM:SS``, prefixed by ``Nd `` when it spans days.

    ``seconds`` may be a number or a ``datetime.timedelta``; fractions are dropped.
    """
    total = _whole_seconds(seconds)
    minutes, secs = divmod(total, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    clock = f"{hours:02}:{minutes:02}:{secs:02}"
    return f"{days}d {clock}" if days > 0 else clock


def human_duration(seconds, short=False):
    """Describe a duration by its largest whole unit, such as ``3 days`` or ``3d``."""
    total = _whole_seconds(seconds)
    for size, singular, plural, shorthand in _DURATION_UNITS:
        count = total // size
        if count == 0:
            continue
        if short:
            return f"{count}{shorthand}"
        return f"{count} {singular if count == 1 else plural}"
    return "0s" if short else "0 seconds"


def human_bytes(count):
    """Format a byte count with binary units and two decimal places."""
    return human_detailed_bytes(count, 2)


def human_detailed_bytes(count, places=2):
    """Format a byte count with binary units and ``places`` decimal places."""
    if count < 0:
        raise ValueError("byte counts must be non-negative")
    amount = float(count)
    for power, unit in _BYTE_UNITS:
        scale = 1024.0**power
        if amount >= scale:
            return f"{amount / scale:.{places}f} {unit}"
    return f"{int(count)} B"