"""Precomputed results for the most common duration strings."""

from types import MappingProxyType

from msconv.units import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

COMMON_VALUES: MappingProxyType[str, float] = MappingProxyType(
    {
        "1s": 1.0 * SECOND,
        "2s": 2.0 * SECOND,
        "5s": 5.0 * SECOND,
        "10s": 10.0 * SECOND,
        "15s": 15.0 * SECOND,
        "30s": 30.0 * SECOND,
        "1m": 1.0 * MINUTE,
        "2m": 2.0 * MINUTE,
        "5m": 5.0 * MINUTE,
        "10m": 10.0 * MINUTE,
        "15m": 15.0 * MINUTE,
        "30m": 30.0 * MINUTE,
        "1h": 1.0 * HOUR,
        "2h": 2.0 * HOUR,
        "3h": 3.0 * HOUR,
        "6h": 6.0 * HOUR,
        "12h": 12.0 * HOUR,
        "1d": 1.0 * DAY,
        "2d": 2.0 * DAY,
        "7d": 7.0 * DAY,
        "1w": 1.0 * WEEK,
        "2w": 2.0 * WEEK,
        "1mo": 1.0 * MONTH,
        "1y": 1.0 * YEAR,
        # With a space
        "1 s": 1.0 * SECOND,
        "1 m": 1.0 * MINUTE,
        "1 h": 1.0 * HOUR,
        "1 d": 1.0 * DAY,
        "1 w": 1.0 * WEEK,
        # Bare numbers are milliseconds
        "100": 100.0,
        "1000": 1000.0,
        "5000": 5000.0,
    }
)
