"""Duration string parsing.

Parsing runs, first hit wins:
- the fast-path table of common literal strings
- the LRU cache of previously parsed strings
- the grammar, then the unit table, caching the result
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from msconv.cache import DEFAULT_CACHE_SIZE, LRUCache
from msconv.errors import InvalidArgumentError, UnknownUnitError
from msconv.fast_path import COMMON_VALUES
from msconv.grammar import match_duration
from msconv.types import StringValue
from msconv.units import lookup_multiplier

logger = logging.getLogger(__name__)

MAX_INPUT_LENGTH = 99


@dataclass
class DurationParser:
    """Parses duration strings to milliseconds, caching repeat inputs."""

    _cache: LRUCache = field(default_factory=LRUCache)

    @property
    def cache(self) -> LRUCache:
        return self._cache

    def parse(self, value: str) -> float:
        """Parse a duration string to milliseconds.

        Args:
            value: Duration string such as "1s", "2.5h" or "3 days"

        Returns:
            Milliseconds, or NaN if value doesn't match the duration grammar

        Raises:
            InvalidArgumentError: value isn't a str of length 1 to 99
            UnknownUnitError: the unit token isn't a known unit
        """
        if (
            not isinstance(value, str)
            or not value
            or len(value) > MAX_INPUT_LENGTH
        ):
            raise InvalidArgumentError(
                "Value provided to parse() must be a string with length "
                f"between 1 and {MAX_INPUT_LENGTH}. value={value!r}"
            )

        common = COMMON_VALUES.get(value)
        if common is not None:
            return common

        cached = self._cache.get(value)
        if cached is not None:
            return cached

        match = match_duration(value)
        if match is None:
            return math.nan

        multiplier = lookup_multiplier(match.unit)
        if multiplier is None:
            logger.debug("unknown unit %r in %r", match.unit, value)
            raise UnknownUnitError(match.unit, value)

        result = match.magnitude * multiplier
        self._cache.set(value, result)
        return result


def create_parser(*, cache_size: int = DEFAULT_CACHE_SIZE) -> DurationParser:
    """Create a parser with its own cache.

    Args:
        cache_size: Maximum number of parsed strings to keep

    Returns:
        DurationParser independent of the module-level default
    """
    return DurationParser(_cache=LRUCache(cache_size))


_default_parser = DurationParser()


def parse(value: str) -> float:
    """Parse a duration string to milliseconds using the shared cache."""
    return _default_parser.parse(value)


def parse_strict(value: StringValue) -> float:
    """Parse a value already typed as a duration string."""
    return _default_parser.parse(value)


def default_parser() -> DurationParser:
    """Return the process-wide parser behind parse()."""
    return _default_parser
