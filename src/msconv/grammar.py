"""Duration string grammar."""

import re
from dataclasses import dataclass

# Unit tokens are any run of letters; the unit table decides which are known.
_DURATION_PATTERN = re.compile(
    r"(?P<value>-?\d*\.?\d+) *(?P<unit>[a-z]+)?",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True, slots=True)
class DurationMatch:
    """Magnitude and lowercased unit token extracted from a duration string."""

    magnitude: float
    unit: str


def match_duration(value: str) -> DurationMatch | None:
    """Match the whole of value against the duration grammar.

    A missing unit defaults to "ms". Returns None if value doesn't conform.
    """
    match = _DURATION_PATTERN.fullmatch(value)
    if match is None:
        return None

    unit = match["unit"]
    return DurationMatch(
        magnitude=float(match["value"]),
        unit=unit.lower() if unit else "ms",
    )
