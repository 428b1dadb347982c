"""Tests for package exports."""


def test_exports_available() -> None:
    """Test that the public API is importable from the package root."""
    from msconv import (
        DurationParser,
        FormatOptions,
        InvalidArgumentError,
        LRUCache,
        MsError,
        UnknownUnitError,
        convert,
        create_parser,
        format,
        format_duration,
        ms,
        parse,
        parse_strict,
    )

    assert DurationParser is not None
    assert FormatOptions is not None
    assert LRUCache is not None
    assert create_parser is not None
    assert parse is not None
    assert parse_strict is not None
    assert format is format_duration
    assert convert is ms
    assert issubclass(InvalidArgumentError, MsError)
    assert issubclass(UnknownUnitError, MsError)


def test_all_matches_exports() -> None:
    """Test that __all__ only lists real attributes."""
    import msconv

    for name in msconv.__all__:
        assert hasattr(msconv, name), name
