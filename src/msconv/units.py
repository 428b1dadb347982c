"""Unit multipliers in milliseconds.

Month and year are fixed approximations: a year is 365.25 days and a month
is a twelfth of that.
"""

from types import MappingProxyType

MILLISECOND = 1
SECOND = 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7
YEAR = DAY * 365.25
MONTH = YEAR / 12

_SPELLINGS: tuple[tuple[float, tuple[str, ...]], ...] = (
    (YEAR, ("years", "year", "yrs", "yr", "y")),
    (MONTH, ("months", "month", "mo")),
    (WEEK, ("weeks", "week", "w")),
    (DAY, ("days", "day", "d")),
    (HOUR, ("hours", "hour", "hrs", "hr", "h")),
    (MINUTE, ("minutes", "minute", "mins", "min", "m")),
    (SECOND, ("seconds", "second", "secs", "sec", "s")),
    (MILLISECOND, ("milliseconds", "millisecond", "msecs", "msec", "ms")),
)

UNIT_MULTIPLIERS: MappingProxyType[str, float] = MappingProxyType(
    {
        spelling: multiplier
        for multiplier, spellings in _SPELLINGS
        for spelling in spellings
    }
)


def lookup_multiplier(unit: str) -> float | None:
    """Return the multiplier for a lowercased unit token, or None if unknown."""
    return UNIT_MULTIPLIERS.get(unit)
