"""msconv - Convert between duration strings and milliseconds."""

from msconv.cache import DEFAULT_CACHE_SIZE, LRUCache
from msconv.convert import convert, ms
from msconv.errors import InvalidArgumentError, MsError, UnknownUnitError
from msconv.formatter import format, format_duration, format_long, format_short
from msconv.parser import (
    MAX_INPUT_LENGTH,
    DurationParser,
    create_parser,
    parse,
    parse_strict,
)
from msconv.types import Duration, FormatOptions, StringValue

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CACHE_SIZE",
    "MAX_INPUT_LENGTH",
    "Duration",
    "DurationParser",
    "FormatOptions",
    "InvalidArgumentError",
    "LRUCache",
    "MsError",
    "StringValue",
    "UnknownUnitError",
    "convert",
    "create_parser",
    "format",
    "format_duration",
    "format_long",
    "format_short",
    "ms",
    "parse",
    "parse_strict",
]
