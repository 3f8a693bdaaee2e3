"""
Numba kernels for the bisection wet-bulb solver.
"""

import numpy as np
import numpy.typing as npt
from numba import njit, prange

from psychrocalc.dewpoint._jit_equations import _dewpoint_newton_scalar
from psychrocalc.moist_air._jit_equations import (
    _hum_ratio_from_wet_bulb_scalar,
    _vapor_pressure_from_hum_ratio_scalar,
)
from psychrocalc.moist_air._moist_air_constants import MIN_HUM_RATIO
from psychrocalc.shared._solver_result import (
    MAX_ITER_COUNT,
    STATUS_CONVERGED,
    STATUS_MAX_ITERATIONS,
)


@njit
def _wet_bulb_bisection_scalar(
    t_dry_bulb: float, hum_ratio: float, pressure: float, unit, ice, water, wb_ice, wb_water
):
    """
    Wet-bulb temperature by bisection of the humidity ratio from wet-bulb
    equation.

    The lower bound of the bracket is the dew point, found here with the
    Newton-Raphson kernel. See _wet_bulb_bisection_bracketed_scalar for the
    bisection itself.

    Args:
        t_dry_bulb: Dry-bulb temperature in °F [IP] or °C [SI]
        hum_ratio: Humidity ratio, non-negative
        pressure: Atmospheric pressure in psi [IP] or Pa [SI]
        unit: UnitConstants of the unit system
        ice, water: SaturationConstants
        wb_ice, wb_water: WetBulbConstants

    Returns:
        (wet bulb, iterations, status). A failed dew point solve for the
        lower bound is returned with its own status.
    """
    bounded_hum_ratio = max(hum_ratio, MIN_HUM_RATIO)

    vapor_pressure = _vapor_pressure_from_hum_ratio_scalar(bounded_hum_ratio, pressure)
    t_dew_point, _, status = _dewpoint_newton_scalar(t_dry_bulb, vapor_pressure, unit, ice, water)
    if status != STATUS_CONVERGED:
        return np.nan, 0, status

    return _wet_bulb_bisection_bracketed_scalar(
        t_dry_bulb, bounded_hum_ratio, pressure, t_dew_point, unit, ice, water, wb_ice, wb_water
    )


@njit
def _wet_bulb_bisection_bracketed_scalar(
    t_dry_bulb: float, hum_ratio: float, pressure: float, t_dew_point: float, unit, ice, water, wb_ice, wb_water
):
    """
    Bisection on [t_dew_point, t_dry_bulb] for a dew point already known.

    W(t_wet_bulb) is non-decreasing on the bracket, so a computed W* above
    the target moves the upper bound down, otherwise the lower bound moves
    up.

    Returns:
        (wet bulb, iterations, status)
    """
    bounded_hum_ratio = max(hum_ratio, MIN_HUM_RATIO)

    t_wet_bulb_sup = t_dry_bulb
    t_wet_bulb_inf = t_dew_point
    t_wet_bulb = (t_wet_bulb_inf + t_wet_bulb_sup) / 2.0

    iterations = 0
    while t_wet_bulb_sup - t_wet_bulb_inf > unit.tolerance:
        if iterations >= MAX_ITER_COUNT:
            return t_wet_bulb, iterations, STATUS_MAX_ITERATIONS

        w_star = _hum_ratio_from_wet_bulb_scalar(
            t_dry_bulb, t_wet_bulb, pressure, unit, ice, water, wb_ice, wb_water
        )
        if w_star > bounded_hum_ratio:
            t_wet_bulb_sup = t_wet_bulb
        else:
            t_wet_bulb_inf = t_wet_bulb

        t_wet_bulb = (t_wet_bulb_sup + t_wet_bulb_inf) / 2.0
        iterations += 1

    return t_wet_bulb, iterations, STATUS_CONVERGED


@njit(parallel=True)
def _wet_bulb_bisection_vectorised(
    t_dry_bulb: npt.ArrayLike, hum_ratio: npt.ArrayLike, pressure: npt.ArrayLike, unit, ice, water, wb_ice, wb_water
):
    """
    Bisection wet-bulb solver for arrays.

    Returns:
        (wet bulbs, iterations, statuses) arrays
    """
    n = len(t_dry_bulb)
    roots = np.empty(n, dtype=np.float64)
    iterations = np.empty(n, dtype=np.int64)
    status = np.empty(n, dtype=np.int64)

    for i in prange(n):
        root, iters, code = _wet_bulb_bisection_scalar(
            t_dry_bulb[i], hum_ratio[i], pressure[i], unit, ice, water, wb_ice, wb_water
        )
        roots[i] = root
        iterations[i] = iters
        status[i] = code
    return roots, iterations, status


@njit(parallel=True)
def _wet_bulb_bisection_bracketed_vectorised(
    t_dry_bulb: npt.ArrayLike,
    hum_ratio: npt.ArrayLike,
    pressure: npt.ArrayLike,
    t_dew_point: npt.ArrayLike,
    unit,
    ice,
    water,
    wb_ice,
    wb_water,
):
    """
    Bracketed bisection wet-bulb solver for arrays.

    Returns:
        (wet bulbs, iterations, statuses) arrays
    """
    n = len(t_dry_bulb)
    roots = np.empty(n, dtype=np.float64)
    iterations = np.empty(n, dtype=np.int64)
    status = np.empty(n, dtype=np.int64)

    for i in prange(n):
        root, iters, code = _wet_bulb_bisection_bracketed_scalar(
            t_dry_bulb[i], hum_ratio[i], pressure[i], t_dew_point[i], unit, ice, water, wb_ice, wb_water
        )
        roots[i] = root
        iterations[i] = iters
        status[i] = code
    return roots, iterations, status
