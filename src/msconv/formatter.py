"""Millisecond count formatting."""

from __future__ import annotations

import math

from msconv.errors import InvalidArgumentError
from msconv.types import FormatOptions
from msconv.units import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

# Largest first: (size, short suffix, long name)
_UNITS: tuple[tuple[float, str, str], ...] = (
    (YEAR, "y", "year"),
    (MONTH, "mo", "month"),
    (WEEK, "w", "week"),
    (DAY, "d", "day"),
    (HOUR, "h", "hour"),
    (MINUTE, "m", "minute"),
    (SECOND, "s", "second"),
)


def _round(value: float) -> int:
    """Round half up toward positive infinity."""
    return math.floor(value + 0.5)


def _render(value: int | float) -> str:
    """Render a number without a trailing ".0" for integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_finite(ms: int | float) -> bool:
    try:
        return math.isfinite(ms)
    except OverflowError:  # int beyond float range
        return False


def _select_unit(ms: int | float) -> tuple[float, str, str] | None:
    """Pick the largest unit |ms| reaches, None for the millisecond fallback.

    A value whose rounded quotient reaches a whole larger unit (59.6s,
    3599999ms) is carried into that unit.
    """
    ms_abs = abs(ms)
    for index, unit in enumerate(_UNITS):
        size = unit[0]
        if ms_abs >= size:
            if index and abs(_round(ms / size)) * size >= _UNITS[index - 1][0]:
                return _UNITS[index - 1]
            return unit
    return None


def format_short(ms: int | float) -> str:
    """Format as the largest whole unit, e.g. "2h"."""
    unit = _select_unit(ms)
    if unit is None:
        return f"{_render(ms)}ms"
    size, suffix, _ = unit
    return f"{_round(ms / size)}{suffix}"


def format_long(ms: int | float) -> str:
    """Format as the largest whole unit spelled out, e.g. "2 hours"."""
    ms_abs = abs(ms)
    unit = _select_unit(ms)
    if unit is None:
        return f"{_render(ms)} ms"
    size, _, name = unit
    plural = "s" if ms_abs >= size * 1.5 else ""
    return f"{_round(ms / size)} {name}{plural}"


def format(
    ms: int | float,
    options: FormatOptions | None = None,
    *,
    long: bool | None = None,
) -> str:
    """Format a millisecond count as a duration string.

    Args:
        ms: Milliseconds, must be finite
        options: Formatting options
        long: Shorthand for FormatOptions(long=...), overrides options

    Returns:
        Compact ("2h") or verbose ("2 hours") duration string

    Raises:
        InvalidArgumentError: ms isn't a finite number
    """
    if (
        isinstance(ms, bool)
        or not isinstance(ms, int | float)
        or not _is_finite(ms)
    ):
        raise InvalidArgumentError(
            "Value provided to format() must be a finite number. "
            f"value={ms!r}"
        )

    if long is None:
        long = options.long if options is not None else False
    return format_long(ms) if long else format_short(ms)


format_duration = format
