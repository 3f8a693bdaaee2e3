"""
Numba kernels for the Newton-Raphson dew point solver.
"""

import numpy as np
import numpy.typing as npt
from numba import njit, prange

from psychrocalc.shared._solver_result import (
    MAX_ITER_COUNT,
    STATUS_CONVERGED,
    STATUS_MAX_ITERATIONS,
    STATUS_OUT_OF_BOUNDS,
)
from psychrocalc.vapor._jit_equations import (
    _d_ln_sat_vapor_pressure_scalar,
    _ln_sat_vapor_pressure_scalar,
    _sat_vapor_pressure_scalar,
)


@njit
def _dewpoint_newton_scalar(t_dry_bulb: float, vapor_pressure: float, unit, ice, water):
    """
    Dew point temperature by inverting the saturation vapor pressure curve.

    Newton-Raphson on ln(pws), which is smooth and close to linear in
    temperature, so 3 to 5 iterations are typical. Each iterate is clamped
    to the validity bounds of the saturation equation, and the converged
    dew point is capped at the dry-bulb temperature.

    Args:
        t_dry_bulb: Dry-bulb temperature in °F [IP] or °C [SI], first guess
        vapor_pressure: Partial pressure of water vapor in psi [IP] or Pa [SI]
        unit: UnitConstants of the unit system
        ice: SaturationConstants over ice
        water: SaturationConstants over water

    Returns:
        (dew point, iterations, status)
    """
    p_min = _sat_vapor_pressure_scalar(unit.t_min, unit, ice, water)
    p_max = _sat_vapor_pressure_scalar(unit.t_max, unit, ice, water)

    if not (p_min <= vapor_pressure <= p_max):
        return np.nan, 0, STATUS_OUT_OF_BOUNDS

    ln_vp = np.log(vapor_pressure)
    t_dew_point = t_dry_bulb

    for i in range(1, MAX_ITER_COUNT + 1):
        t_iter = t_dew_point
        ln_vp_iter = _ln_sat_vapor_pressure_scalar(t_iter, unit, ice, water)
        d_ln_vp = _d_ln_sat_vapor_pressure_scalar(t_iter, unit, ice, water)

        t_dew_point = t_iter - (ln_vp_iter - ln_vp) / d_ln_vp
        t_dew_point = max(t_dew_point, unit.t_min)
        t_dew_point = min(t_dew_point, unit.t_max)

        if abs(t_dew_point - t_iter) <= unit.tolerance:
            return min(t_dew_point, t_dry_bulb), i, STATUS_CONVERGED

    return t_dew_point, MAX_ITER_COUNT, STATUS_MAX_ITERATIONS


@njit(parallel=True)
def _dewpoint_newton_vectorised(t_dry_bulb: npt.ArrayLike, vapor_pressure: npt.ArrayLike, unit, ice, water):
    """
    Newton-Raphson dew point solver for arrays.

    Args:
        t_dry_bulb: Array of dry-bulb temperatures in °F [IP] or °C [SI]
        vapor_pressure: Array of vapor pressures in psi [IP] or Pa [SI]

    Returns:
        (dew points, iterations, statuses) arrays
    """
    n = len(t_dry_bulb)
    roots = np.empty(n, dtype=np.float64)
    iterations = np.empty(n, dtype=np.int64)
    status = np.empty(n, dtype=np.int64)

    for i in prange(n):
        root, iters, code = _dewpoint_newton_scalar(t_dry_bulb[i], vapor_pressure[i], unit, ice, water)
        roots[i] = root
        iterations[i] = iters
        status[i] = code
    return roots, iterations, status
