"""
Unit tests for the process-wide unit system context and the unit constants.
"""

import logging

import pytest
from numpy.testing import assert_allclose

from psychrocalc.shared import UnitSystemNotSetError
from psychrocalc.units import (
    IP_CONSTANTS,
    SI_CONSTANTS,
    UNIT_CONSTANTS_REGISTRY,
    UnitSystem,
    get_tolerance,
    get_unit_constants,
    get_unit_system,
    is_imperial,
    set_unit_system,
)


# ==============================================================================
# Test Class: Global context
# ==============================================================================

class TestUnitSystemContext:
    """set_unit_system / get_unit_system / is_imperial."""

    def test_get_before_set_raises(self):
        with pytest.raises(UnitSystemNotSetError):
            get_unit_system()

    def test_is_imperial_before_set_raises(self):
        with pytest.raises(UnitSystemNotSetError):
            is_imperial()

    def test_tolerance_before_set_raises(self):
        with pytest.raises(UnitSystemNotSetError):
            get_tolerance()

    @pytest.mark.parametrize("value,expected", [
        ("ip", UnitSystem.IP),
        ("SI", UnitSystem.SI),
        (UnitSystem.IP, UnitSystem.IP),
    ])
    def test_set_then_get(self, value, expected):
        set_unit_system(value)
        assert get_unit_system() is expected

    def test_is_imperial(self):
        set_unit_system("ip")
        assert is_imperial()

        set_unit_system("si")
        assert not is_imperial()

    def test_invalid_value_raises_and_keeps_state(self):
        set_unit_system("si")

        with pytest.raises(ValueError):
            set_unit_system("metric")
        assert get_unit_system() is UnitSystem.SI

    def test_invalid_type_raises(self):
        with pytest.raises(TypeError):
            set_unit_system(1)

    def test_switching_logs_warning(self, caplog):
        set_unit_system("ip")

        with caplog.at_level(logging.WARNING, logger="psychrocalc.units.core"):
            set_unit_system("si")

        assert any("Unit system changed from IP to SI" in r.getMessage() for r in caplog.records)

    def test_setting_same_system_does_not_warn(self, caplog):
        set_unit_system("si")

        with caplog.at_level(logging.WARNING, logger="psychrocalc.units.core"):
            set_unit_system(UnitSystem.SI)

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


# ==============================================================================
# Test Class: Tolerance and constants
# ==============================================================================

class TestUnitConstants:

    def test_tolerance_si(self):
        assert get_tolerance("si") == 0.001

    def test_tolerance_ip(self):
        assert_allclose(get_tolerance("ip"), 0.0018)

    def test_tolerance_from_active_system(self):
        set_unit_system("ip")
        assert get_tolerance() == IP_CONSTANTS.tolerance

    def test_tolerance_always_positive(self, unit_system):
        assert get_tolerance(unit_system) > 0.0

    def test_registry_lookup(self):
        assert get_unit_constants("ip") is IP_CONSTANTS
        assert get_unit_constants(UnitSystem.SI) is SI_CONSTANTS
        assert set(UNIT_CONSTANTS_REGISTRY) == {UnitSystem.IP, UnitSystem.SI}

    @pytest.mark.parametrize("constants,triple,freezing,bounds", [
        (IP_CONSTANTS, 32.018, 32.0, (-148.0, 392.0)),
        (SI_CONSTANTS, 0.01, 0.0, (-100.0, 200.0)),
    ])
    def test_water_constants(self, constants, triple, freezing, bounds):
        assert constants.triple_point == triple
        assert constants.freezing_point == freezing
        assert (constants.t_min, constants.t_max) == bounds

    def test_every_field_is_float(self, unit_system):
        """Test that constants are plain floats so the JIT kernels accept them."""
        for value in get_unit_constants(unit_system):
            assert isinstance(value, float)
