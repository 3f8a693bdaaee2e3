"""
Unit tests for psychrocalc.psychrometrics.Psychrometrics

Checks the three state resolvers against Example 1 of ch. 1 of the 2017
ASHRAE Handbook - Fundamentals (dry bulb 100 °F / 40 °C, wet bulb 65 °F /
20 °C at sea level), their reverse calculations, and the relations every
resolved state must satisfy.
"""

import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from psychrocalc.moist_air import MIN_HUM_RATIO
from psychrocalc.psychrometrics import Psychrometrics, PsychrometricState
from psychrocalc.shared import PsychroDomainError
from psychrocalc.units import UnitSystem


# ==============================================================================
# Fixtures
# ==============================================================================

@pytest.fixture
def psy_ip():
    return Psychrometrics(unit_system='ip')


@pytest.fixture
def psy_si():
    return Psychrometrics(unit_system='si')


# ==============================================================================
# Test Class: Initialization
# ==============================================================================

class TestPsychrometricsInit:

    def test_unit_system_bound(self, psy_ip):
        assert psy_ip.unit_system is UnitSystem.IP
        assert psy_ip.dewpoint_solver.unit_system is UnitSystem.IP
        assert psy_ip.wet_bulb_solver.unit_system is UnitSystem.IP

    def test_repr(self, psy_si):
        assert repr(psy_si) == "Psychrometrics(unit_system='si')"

    def test_invalid_unit_system(self):
        with pytest.raises(ValueError):
            Psychrometrics(unit_system='metric')

    def test_independent_of_global_unit_system(self, psy_si):
        """Test that a bound calculator works without set_unit_system()."""
        assert_allclose(psy_si.get_sat_vapor_pressure(25.0), 3169.7, rtol=3e-4)


# ==============================================================================
# Test Class: ASHRAE Example 1
# ==============================================================================

class TestAshraeExample1:

    def test_ip_from_wet_bulb(self, psy_ip):
        state = psy_ip.calc_psychrometrics_from_wet_bulb(100.0, 65.0, 14.696)

        assert_allclose(state.hum_ratio, 0.00523, atol=0.001)
        assert_allclose(state.t_dew_point, 40.0, atol=1.0)
        assert_allclose(state.rel_hum, 0.13, atol=0.01)
        assert_allclose(state.moist_air_enthalpy, 29.80, atol=0.1)
        assert_allclose(state.moist_air_volume, 14.22, rtol=0.01)

    def test_ip_reverse_from_dewpoint(self, psy_ip):
        state = psy_ip.calc_psychrometrics_from_wet_bulb(100.0, 65.0, 14.696)
        reverse = psy_ip.calc_psychrometrics_from_dewpoint(100.0, state.t_dew_point, 14.696)

        assert_allclose(reverse.t_wet_bulb, 65.0, atol=0.1)

    def test_ip_reverse_from_rel_hum(self, psy_ip):
        state = psy_ip.calc_psychrometrics_from_wet_bulb(100.0, 65.0, 14.696)
        reverse = psy_ip.calc_psychrometrics_from_rel_hum(100.0, state.rel_hum, 14.696)

        assert_allclose(reverse.t_wet_bulb, 65.0, atol=0.1)

    def test_si_from_wet_bulb(self, psy_si):
        state = psy_si.calc_psychrometrics_from_wet_bulb(40.0, 20.0, 101325.0)

        assert_allclose(state.hum_ratio, 0.0065, atol=0.0001)
        assert_allclose(state.t_dew_point, 7.0, atol=0.5)
        assert_allclose(state.rel_hum, 0.14, atol=0.01)
        assert_allclose(state.moist_air_enthalpy, 56700.0, atol=100.0)
        assert_allclose(state.moist_air_volume, 0.896, rtol=0.01)

    def test_si_reverse_from_dewpoint(self, psy_si):
        state = psy_si.calc_psychrometrics_from_wet_bulb(40.0, 20.0, 101325.0)
        reverse = psy_si.calc_psychrometrics_from_dewpoint(40.0, state.t_dew_point, 101325.0)

        assert_allclose(reverse.t_wet_bulb, 20.0, atol=0.1)

    def test_si_reverse_from_rel_hum(self, psy_si):
        state = psy_si.calc_psychrometrics_from_wet_bulb(40.0, 20.0, 101325.0)
        reverse = psy_si.calc_psychrometrics_from_rel_hum(40.0, state.rel_hum, 101325.0)

        assert_allclose(reverse.t_wet_bulb, 20.0, atol=0.1)
        assert_allclose(reverse.hum_ratio, state.hum_ratio, rtol=1e-6)

    def test_si_wet_bulb_from_rel_hum(self, psy_si):
        assert_allclose(psy_si.get_wet_bulb_from_rel_hum(7.0, 0.61, 100000.0), 3.92667433781955, rtol=0.001)


# ==============================================================================
# Test Class: State invariants
# ==============================================================================

class TestStateInvariants:

    @pytest.mark.parametrize("t_dry_bulb,rel_hum", [
        (-20.0, 0.3),
        (0.0, 0.8),
        (20.0, 0.5),
        (35.0, 0.9),
        (60.0, 0.1),
    ])
    def test_temperature_ordering(self, psy_si, t_dry_bulb, rel_hum):
        state = psy_si.calc_psychrometrics_from_rel_hum(t_dry_bulb, rel_hum, 101325.0)

        assert state.t_dew_point <= state.t_wet_bulb + psy_si.wet_bulb_solver.tolerance
        assert state.t_wet_bulb <= state.t_dry_bulb

    def test_density_volume_relation(self, psy_ip):
        state = psy_ip.calc_psychrometrics_from_rel_hum(80.0, 0.4, 14.696)
        assert_allclose(state.moist_air_density * state.moist_air_volume, 1.0 + state.hum_ratio, rtol=1e-12)

    def test_saturated_air(self, psy_si):
        state = psy_si.calc_psychrometrics_from_rel_hum(25.0, 1.0, 101325.0)

        assert_allclose(state.t_dew_point, 25.0, atol=0.001)
        assert_allclose(state.t_wet_bulb, 25.0, atol=0.001)
        assert_allclose(state.degree_of_saturation, 1.0, rtol=1e-9)

    def test_bone_dry_air(self, psy_si):
        """Test that zero relative humidity resolves to the floored humidity ratio."""
        state = psy_si.calc_psychrometrics_from_rel_hum(25.0, 0.0, 101325.0)

        assert state.hum_ratio == MIN_HUM_RATIO
        assert state.rel_hum == 0.0
        assert np.isfinite(state.t_dew_point)
        assert state.t_wet_bulb < 25.0

    @pytest.mark.parametrize("rel_hum", [0.0, 0.3, 1.0])
    def test_rel_hum_state_wet_bulb_matches_direct_solve(self, psy_si, rel_hum):
        state = psy_si.calc_psychrometrics_from_rel_hum(15.0, rel_hum, 101325.0)
        expected = psy_si.get_wet_bulb_from_hum_ratio(15.0, state.hum_ratio, 101325.0)

        assert_allclose(state.t_wet_bulb, expected, rtol=0, atol=1e-12)

    def test_rel_hum_state_reuses_dew_point(self, psy_ip, monkeypatch):
        """Test that the solved dew point is handed to the wet-bulb bisection."""
        calls = []
        calculate = psy_ip.wet_bulb_solver.calculate

        def recording_calculate(*args, **kwargs):
            calls.append(kwargs)
            return calculate(*args, **kwargs)

        monkeypatch.setattr(psy_ip.wet_bulb_solver, "calculate", recording_calculate)
        state = psy_ip.calc_psychrometrics_from_rel_hum(80.0, 0.4, 14.696)

        assert len(calls) == 1
        assert calls[0]["t_dew_point"] == state.t_dew_point

    def test_rel_hum_is_kept_as_input(self, psy_si):
        state = psy_si.calc_psychrometrics_from_rel_hum(30.0, 0.45, 101325.0)
        assert state.rel_hum == 0.45

    def test_state_is_named_tuple(self, psy_si):
        state = psy_si.calc_psychrometrics_from_dewpoint(30.0, 10.0, 101325.0)

        assert isinstance(state, PsychrometricState)
        assert state._fields[:3] == ('t_dry_bulb', 'pressure', 'hum_ratio')
        assert isinstance(state.t_wet_bulb, float)

    def test_three_entry_points_agree(self, psy_ip):
        from_wet_bulb = psy_ip.calc_psychrometrics_from_wet_bulb(85.0, 70.0, 14.696)
        from_dewpoint = psy_ip.calc_psychrometrics_from_dewpoint(85.0, from_wet_bulb.t_dew_point, 14.696)
        from_rel_hum = psy_ip.calc_psychrometrics_from_rel_hum(85.0, from_wet_bulb.rel_hum, 14.696)

        for state in (from_dewpoint, from_rel_hum):
            assert_allclose(state.hum_ratio, from_wet_bulb.hum_ratio, rtol=1e-4)
            assert_allclose(state.t_wet_bulb, 70.0, atol=0.01)
            assert_allclose(state.moist_air_enthalpy, from_wet_bulb.moist_air_enthalpy, rtol=1e-4)


# ==============================================================================
# Test Class: Arrays
# ==============================================================================

class TestArrayStates:

    def test_broadcast_array_with_scalars(self, psy_si):
        t_dry_bulb = np.array([10.0, 20.0, 30.0])
        state = psy_si.calc_psychrometrics_from_rel_hum(t_dry_bulb, 0.5, 101325.0)

        assert state.t_wet_bulb.shape == (3,)
        assert state.pressure.shape == (3,)
        assert np.all(np.diff(state.hum_ratio) > 0.0)

    def test_array_matches_scalar(self, psy_si):
        t_dry_bulb = np.array([5.0, 25.0])
        t_wet_bulb = np.array([1.0, 18.0])
        states = psy_si.calc_psychrometrics_from_wet_bulb(t_dry_bulb, t_wet_bulb, 95461.0)

        for i in range(2):
            single = psy_si.calc_psychrometrics_from_wet_bulb(t_dry_bulb[i], t_wet_bulb[i], 95461.0)
            assert_allclose(states.t_dew_point[i], single.t_dew_point, rtol=1e-12)
            assert_allclose(states.moist_air_density[i], single.moist_air_density, rtol=1e-12)

    def test_two_dimensional_inputs(self, psy_ip):
        t_dry_bulb = np.array([[70.0, 80.0], [90.0, 100.0]])
        state = psy_ip.calc_psychrometrics_from_dewpoint(t_dry_bulb, 50.0, 14.696)

        assert state.t_wet_bulb.shape == (2, 2)
        assert state.rel_hum.shape == (2, 2)


# ==============================================================================
# Test Class: Validation
# ==============================================================================

class TestValidation:

    def test_wet_bulb_above_dry_bulb(self, psy_si):
        with pytest.raises(PsychroDomainError, match="Wet bulb temperature is above dry bulb temperature"):
            psy_si.calc_psychrometrics_from_wet_bulb(20.0, 22.0, 101325.0)

    def test_dew_point_above_dry_bulb(self, psy_si):
        with pytest.raises(PsychroDomainError, match="Dew point temperature is above dry bulb temperature"):
            psy_si.calc_psychrometrics_from_dewpoint(20.0, 22.0, 101325.0)

    @pytest.mark.parametrize("rel_hum", [-0.1, 1.2])
    def test_rel_hum_out_of_range(self, psy_si, rel_hum):
        with pytest.raises(PsychroDomainError, match="Relative humidity is outside range"):
            psy_si.calc_psychrometrics_from_rel_hum(20.0, rel_hum, 101325.0)

    def test_dry_bulb_out_of_bounds(self, psy_ip):
        with pytest.raises(PsychroDomainError):
            psy_ip.calc_psychrometrics_from_rel_hum(400.0, 0.5, 14.696)

    def test_nan_rel_hum_raises(self, psy_si):
        with pytest.raises(PsychroDomainError, match="Relative humidity is outside range"):
            psy_si.calc_psychrometrics_from_rel_hum(20.0, np.nan, 101325.0)

    def test_nan_dry_bulb_raises(self, psy_ip):
        with pytest.raises(PsychroDomainError):
            psy_ip.calc_psychrometrics_from_wet_bulb(np.array([70.0, np.nan]), 60.0, 14.696)

    def test_one_bad_array_element_rejects_call(self, psy_si):
        with pytest.raises(PsychroDomainError):
            psy_si.calc_psychrometrics_from_dewpoint(np.array([20.0, 20.0]), np.array([10.0, 25.0]), 101325.0)

    def test_dewpoint_from_zero_rel_hum_raises(self, psy_si):
        with pytest.raises(PsychroDomainError):
            psy_si.get_dewpoint_from_rel_hum(20.0, 0.0)


# ==============================================================================
# Test Class: Single conversions
# ==============================================================================

class TestConversions:

    def test_dewpoint_from_rel_hum_and_back(self, psy_si):
        t_dew_point = psy_si.get_dewpoint_from_rel_hum(25.0, 0.6)
        assert_allclose(psy_si.get_rel_hum_from_dewpoint(25.0, t_dew_point), 0.6, rtol=1e-3)

    def test_dewpoint_from_wet_bulb_matches_state(self, psy_si):
        state = psy_si.calc_psychrometrics_from_wet_bulb(30.0, 22.0, 101325.0)
        assert psy_si.get_dewpoint_from_wet_bulb(30.0, 22.0, 101325.0) == state.t_dew_point

    def test_wet_bulb_from_dewpoint_matches_state(self, psy_ip):
        state = psy_ip.calc_psychrometrics_from_dewpoint(90.0, 60.0, 14.696)
        assert psy_ip.get_wet_bulb_from_dewpoint(90.0, 60.0, 14.696) == state.t_wet_bulb

    def test_rel_hum_from_wet_bulb_matches_state(self, psy_si):
        state = psy_si.calc_psychrometrics_from_wet_bulb(30.0, 22.0, 101325.0)
        assert_allclose(psy_si.get_rel_hum_from_wet_bulb(30.0, 22.0, 101325.0), state.rel_hum, rtol=1e-12)

    def test_dewpoint_from_hum_ratio(self, psy_si):
        hum_ratio = psy_si.calc_psychrometrics_from_dewpoint(30.0, 12.0, 101325.0).hum_ratio
        assert_allclose(psy_si.get_dewpoint_from_hum_ratio(30.0, hum_ratio, 101325.0), 12.0, atol=0.001)

    def test_entry_points_log_at_debug(self, psy_si, caplog):
        with caplog.at_level(logging.DEBUG, logger="psychrocalc"):
            psy_si.calc_psychrometrics_from_rel_hum(25.0, 0.5, 101325.0)

        messages = [r.getMessage() for r in caplog.records]
        assert "Resolved psychrometric state from relative humidity (SI)" in messages
