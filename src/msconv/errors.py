"""Exceptions raised by msconv."""


class MsError(Exception):
    """Base class for msconv errors."""


class InvalidArgumentError(MsError, ValueError, TypeError):
    """Raised when an entry point receives a value of the wrong shape."""


class UnknownUnitError(MsError, ValueError):
    """Raised when a matched unit token has no multiplier."""

    def __init__(self, unit: str, value: str) -> None:
        super().__init__(
            f"Unknown unit {unit!r} provided to parse(). value={value!r}"
        )
        self.unit = unit
        self.value = value
