"""Tests for the fast-path table."""

import pytest

from msconv.fast_path import COMMON_VALUES
from msconv.grammar import match_duration
from msconv.units import lookup_multiplier


class TestCommonValues:
    """Tests for COMMON_VALUES table."""

    @pytest.mark.parametrize(("value", "expected"), sorted(COMMON_VALUES.items()))
    def test_entry_agrees_with_grammar(self, value: str, expected: float) -> None:
        """Test that every shortcut equals the full grammar result."""
        match = match_duration(value)
        assert match is not None
        multiplier = lookup_multiplier(match.unit)
        assert multiplier is not None
        assert match.magnitude * multiplier == expected

    def test_known_entries(self) -> None:
        """Test a few literal values."""
        assert COMMON_VALUES["1s"] == 1000
        assert COMMON_VALUES["1 h"] == 3_600_000
        assert COMMON_VALUES["1mo"] == 2_629_800_000
        assert COMMON_VALUES["1y"] == 31_557_600_000
        assert COMMON_VALUES["5000"] == 5000

    def test_values_are_floats(self) -> None:
        """Test that shortcuts return the same type as the full path."""
        assert all(isinstance(value, float) for value in COMMON_VALUES.values())

    def test_table_is_read_only(self) -> None:
        """Test that the table cannot be mutated."""
        with pytest.raises(TypeError):
            COMMON_VALUES["1s"] = 0.0  # type: ignore[index]
