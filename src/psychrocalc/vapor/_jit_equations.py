"""
Numba kernels for the ASHRAE saturation vapor pressure equation and its
logarithmic derivative.

The curve is split at the triple point of water, not at the freezing point.
ASHRAE states the ice/water formulae above and below freezing, which leaves a
small discontinuity at 0 °C / 32 °F; splitting at the triple point removes it,
and the dew point Newton-Raphson solver depends on that continuity to
converge near freezing.

Every kernel takes the unit constants and the ice/water coefficients as
NamedTuples, so one compiled kernel serves both IP and SI.
"""

import numpy as np
import numpy.typing as npt
from numba import njit, prange


@njit
def _ln_sat_vapor_pressure_scalar(temp: float, unit, ice, water) -> float:
    """
    Natural log of the saturation vapor pressure.

    Equation:
        ln(pws) = A/T + B + C·T + D·T² + E·T³ + F·T⁴ + G·ln(T)

    Args:
        temp: Dry-bulb temperature in °F [IP] or °C [SI]
        unit: UnitConstants of the unit system
        ice: SaturationConstants used at or below the triple point
        water: SaturationConstants used above the triple point

    Returns:
        ln of the saturation vapor pressure in psi [IP] or Pa [SI]
    """
    c = ice if temp <= unit.triple_point else water
    t_abs = temp + unit.zero_offset

    return float(
        c.A / t_abs
        + c.B
        + c.C * t_abs
        + c.D * t_abs**2
        + c.E * t_abs**3
        + c.F * t_abs**4
        + c.G * np.log(t_abs)
    )


@njit
def _sat_vapor_pressure_scalar(temp: float, unit, ice, water) -> float:
    """
    Saturation vapor pressure over ice or liquid water.

    Args:
        temp: Dry-bulb temperature in °F [IP] or °C [SI]
        unit: UnitConstants of the unit system
        ice: SaturationConstants used at or below the triple point
        water: SaturationConstants used above the triple point

    Returns:
        Saturation vapor pressure in psi [IP] or Pa [SI]
    """
    return float(np.exp(_ln_sat_vapor_pressure_scalar(temp, unit, ice, water)))


@njit
def _d_ln_sat_vapor_pressure_scalar(temp: float, unit, ice, water) -> float:
    """
    Derivative of ln(pws) with respect to temperature.

    Equation:
        d ln(pws)/dT = -A/T² + C + 2·D·T + 3·E·T² + 4·F·T³ + G/T

    The derivative with respect to the user scale equals the derivative with
    respect to the absolute scale, both scales having the same step.

    Args:
        temp: Dry-bulb temperature in °F [IP] or °C [SI]
        unit: UnitConstants of the unit system
        ice: SaturationConstants used at or below the triple point
        water: SaturationConstants used above the triple point

    Returns:
        d ln(pws)/dT in 1/°F [IP] or 1/K [SI]
    """
    c = ice if temp <= unit.triple_point else water
    t_abs = temp + unit.zero_offset

    return float(
        -c.A / t_abs**2
        + c.C
        + 2.0 * c.D * t_abs
        + 3.0 * c.E * t_abs**2
        + 4.0 * c.F * t_abs**3
        + c.G / t_abs
    )


@njit(parallel=True)
def _sat_vapor_pressure_vectorised(temp: npt.ArrayLike, unit, ice, water) -> npt.NDArray[np.float64]:
    """
    Saturation vapor pressure for arrays of temperatures.

    Args:
        temp: Array of dry-bulb temperatures in °F [IP] or °C [SI]

    Returns:
        Saturation vapor pressure in psi [IP] or Pa [SI]
    """
    n = len(temp)
    result = np.empty(n, dtype=np.float64)

    for i in prange(n):
        result[i] = _sat_vapor_pressure_scalar(temp[i], unit, ice, water)
    return result


@njit(parallel=True)
def _d_ln_sat_vapor_pressure_vectorised(temp: npt.ArrayLike, unit, ice, water) -> npt.NDArray[np.float64]:
    """
    Derivative of ln(pws) for arrays of temperatures.
    """
    n = len(temp)
    result = np.empty(n, dtype=np.float64)

    for i in prange(n):
        result[i] = _d_ln_sat_vapor_pressure_scalar(temp[i], unit, ice, water)
    return result
