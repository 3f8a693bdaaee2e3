"""
Numba kernels for the humidity ratio relations called from inside the
wet-bulb bisection loop.
"""

import numpy as np
import numpy.typing as npt
from numba import njit, prange

from psychrocalc.moist_air._moist_air_constants import (
    MIN_HUM_RATIO,
    MOLECULAR_WEIGHT_RATIO,
)
from psychrocalc.vapor._jit_equations import _sat_vapor_pressure_scalar


@njit
def _hum_ratio_from_vapor_pressure_scalar(vapor_pressure: float, pressure: float) -> float:
    """
    Humidity ratio from the partial pressure of water vapor (eqn 20).

    Args:
        vapor_pressure: Partial pressure of water vapor in psi [IP] or Pa [SI]
        pressure: Atmospheric pressure in psi [IP] or Pa [SI]

    Returns:
        Humidity ratio, floored at MIN_HUM_RATIO
    """
    hum_ratio = MOLECULAR_WEIGHT_RATIO * vapor_pressure / (pressure - vapor_pressure)
    return max(hum_ratio, MIN_HUM_RATIO)


@njit
def _vapor_pressure_from_hum_ratio_scalar(hum_ratio: float, pressure: float) -> float:
    """
    Partial pressure of water vapor from humidity ratio (eqn 20 solved for pw).

    Args:
        hum_ratio: Humidity ratio, floored at MIN_HUM_RATIO before use
        pressure: Atmospheric pressure in psi [IP] or Pa [SI]

    Returns:
        Partial pressure of water vapor in psi [IP] or Pa [SI]
    """
    bounded_hum_ratio = max(hum_ratio, MIN_HUM_RATIO)
    return pressure * bounded_hum_ratio / (MOLECULAR_WEIGHT_RATIO + bounded_hum_ratio)


@njit
def _sat_hum_ratio_scalar(t_dry_bulb: float, pressure: float, unit, ice, water) -> float:
    """
    Humidity ratio of saturated air (eqn 36 solved for W).
    """
    sat_vapor_pressure = _sat_vapor_pressure_scalar(t_dry_bulb, unit, ice, water)
    return _hum_ratio_from_vapor_pressure_scalar(sat_vapor_pressure, pressure)


@njit
def _hum_ratio_from_wet_bulb_scalar(
    t_dry_bulb: float, t_wet_bulb: float, pressure: float, unit, ice, water, wb_ice, wb_water
) -> float:
    """
    Humidity ratio from dry-bulb and wet-bulb temperatures.

    Equation (eqn 33 at or above freezing, eqn 35 below):
        W = ((L - a·Twb)·Ws* - cp·(Tdb - Twb)) / (L + b·Tdb - c·Twb)

    where Ws* is the saturation humidity ratio at the wet-bulb temperature.

    Args:
        t_dry_bulb: Dry-bulb temperature in °F [IP] or °C [SI]
        t_wet_bulb: Wet-bulb temperature in °F [IP] or °C [SI]
        pressure: Atmospheric pressure in psi [IP] or Pa [SI]
        unit: UnitConstants of the unit system
        ice: SaturationConstants over ice
        water: SaturationConstants over water
        wb_ice: WetBulbConstants below freezing
        wb_water: WetBulbConstants at or above freezing

    Returns:
        Humidity ratio, floored at MIN_HUM_RATIO
    """
    sat_hum_ratio = _sat_hum_ratio_scalar(t_wet_bulb, pressure, unit, ice, water)
    c = wb_water if t_wet_bulb >= unit.freezing_point else wb_ice

    hum_ratio = (
        (c.latent - c.latent_slope * t_wet_bulb) * sat_hum_ratio
        - c.cp_air * (t_dry_bulb - t_wet_bulb)
    ) / (c.latent + c.cp_vapor * t_dry_bulb - c.wet_bulb_slope * t_wet_bulb)

    return max(hum_ratio, MIN_HUM_RATIO)


@njit(parallel=True)
def _hum_ratio_from_wet_bulb_vectorised(
    t_dry_bulb: npt.ArrayLike, t_wet_bulb: npt.ArrayLike, pressure: npt.ArrayLike, unit, ice, water, wb_ice, wb_water
) -> npt.NDArray[np.float64]:
    """
    Humidity ratio from wet-bulb temperature for arrays.
    """
    n = len(t_dry_bulb)
    result = np.empty(n, dtype=np.float64)

    for i in prange(n):
        result[i] = _hum_ratio_from_wet_bulb_scalar(
            t_dry_bulb[i], t_wet_bulb[i], pressure[i], unit, ice, water, wb_ice, wb_water
        )
    return result


@njit(parallel=True)
def _sat_hum_ratio_vectorised(
    t_dry_bulb: npt.ArrayLike, pressure: npt.ArrayLike, unit, ice, water
) -> npt.NDArray[np.float64]:
    """
    Saturation humidity ratio for arrays.
    """
    n = len(t_dry_bulb)
    result = np.empty(n, dtype=np.float64)

    for i in prange(n):
        result[i] = _sat_hum_ratio_scalar(t_dry_bulb[i], pressure[i], unit, ice, water)
    return result
