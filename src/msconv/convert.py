"""Single entry point dispatching to parse() or format()."""

from __future__ import annotations

from typing import overload

from msconv.errors import InvalidArgumentError
from msconv.formatter import format
from msconv.parser import parse
from msconv.types import Duration, FormatOptions, StringValue


@overload
def ms(value: StringValue, options: FormatOptions | None = None) -> float: ...


@overload
def ms(value: int | float, options: FormatOptions | None = None) -> str: ...


def ms(
    value: Duration,
    options: FormatOptions | None = None,
) -> float | str:
    """Parse a duration string, or format a millisecond count.

    Raises:
        InvalidArgumentError: value is neither a str nor a number
    """
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, int | float) and not isinstance(value, bool):
        return format(value, options)
    raise InvalidArgumentError(
        f"Value provided to ms() must be a string or number. value={value!r}"
    )


convert = ms
