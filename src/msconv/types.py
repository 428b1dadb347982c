"""Shared types for msconv."""

from dataclasses import dataclass

# Duration strings like "30s", "5m", "2.5 hours" - static hint only
StringValue = str

# Anything ms() accepts: a duration string or a millisecond count
Duration = str | int | float


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Options for formatting a millisecond count."""

    long: bool = False  # "2 hours" instead of "2h"
