"""Conversions between timedelta and the representations used in reports."""

from datetime import timedelta

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE


def to_nanoseconds(duration: timedelta) -> int:
    """Whole nanoseconds in a timedelta."""
    return (duration // timedelta(microseconds=1)) * MICROSECOND


def from_nanoseconds(value: int) -> timedelta:
    """Timedelta for a nanosecond count, rounded down to microseconds."""
    return timedelta(microseconds=value // MICROSECOND)


def format_seconds(seconds: float) -> str:
    """Seconds with up to microsecond precision and trailing zeros trimmed."""
    text = f"{seconds:.6f}".rstrip("0").rstrip(".")
    return text if text not in {"", "-0"} else "0"


def _with_fraction(value: int, scale: int) -> str:
    whole, fraction = divmod(value, scale)
    digits = str(fraction).rjust(len(str(scale)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def format_duration(duration: timedelta) -> str:
    """Compact human form of a duration.

    Sub-second values use the largest fitting unit of ns, µs or ms. Longer
    values are written as hours, minutes and seconds, e.g. ``2m3.5s`` or
    ``1h0m0s``.
    """
    total = to_nanoseconds(duration)
    sign = "-" if total < 0 else ""
    total = abs(total)

    if total == 0:
        return "0s"
    if total < MICROSECOND:
        return f"{sign}{total}ns"
    if total < MILLISECOND:
        return f"{sign}{_with_fraction(total, MICROSECOND)}µs"
    if total < SECOND:
        return f"{sign}{_with_fraction(total, MILLISECOND)}ms"

    hours, rest = divmod(total, HOUR)
    minutes, rest = divmod(rest, MINUTE)
    seconds = f"{_with_fraction(rest, SECOND)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return f"{sign}{seconds}"
