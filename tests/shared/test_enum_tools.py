"""
Unit tests for psychrocalc.shared._enum_tools.parse_enum
"""

import pytest

from psychrocalc.shared import parse_enum
from psychrocalc.units import UnitSystem


class TestParseEnum:
    """Parsing of strings and enum instances into UnitSystem."""

    @pytest.mark.parametrize("value,expected", [
        ("ip", UnitSystem.IP),
        ("si", UnitSystem.SI),
        ("IP", UnitSystem.IP),
        ("Si", UnitSystem.SI),
        ("  si ", UnitSystem.SI),
    ])
    def test_strings_are_case_insensitive(self, value, expected):
        """Test that member values match regardless of case and padding."""
        assert parse_enum(value, UnitSystem) is expected

    def test_enum_instance_passes_through(self):
        """Test that enum members are returned unchanged."""
        assert parse_enum(UnitSystem.SI, UnitSystem) is UnitSystem.SI

    def test_invalid_string_raises_value_error(self):
        """Test that unknown names list the available values."""
        with pytest.raises(ValueError, match=r"Available are the following: \[ip, si\]"):
            parse_enum("metric", UnitSystem)

    @pytest.mark.parametrize("value", [1, 1.5, None, ["ip"]])
    def test_wrong_type_raises_type_error(self, value):
        """Test that non-string, non-enum values are rejected."""
        with pytest.raises(TypeError, match="value must be str or UnitSystem"):
            parse_enum(value, UnitSystem)
