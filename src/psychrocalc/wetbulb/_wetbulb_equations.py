"""
Wet-bulb temperature from humidity ratio by bisection.
"""

import logging
from typing import Optional, Union

import numpy as np
import numpy.typing as npt

from psychrocalc.moist_air._moist_air_constants import WET_BULB_CONSTANTS_REGISTRY, WetBulbCurve
from psychrocalc.moist_air._validation import check_hum_ratio, check_not_above_dry_bulb
from psychrocalc.shared._dispatch import dispatch_solver
from psychrocalc.shared._solver_result import SolverResult, raise_for_status
from psychrocalc.units._enums import UnitSystem
from psychrocalc.vapor._vapor_equations import AshraeSaturationVapor
from psychrocalc.wetbulb._jit_equations import (
    _wet_bulb_bisection_bracketed_scalar,
    _wet_bulb_bisection_bracketed_vectorised,
    _wet_bulb_bisection_scalar,
    _wet_bulb_bisection_vectorised,
)

logger = logging.getLogger(__name__)


class BisectionWetBulb:
    """
    Thermodynamic wet-bulb temperature from dry-bulb temperature, humidity
    ratio and pressure.

    Inverts ASHRAE Handbook - Fundamentals (2017) ch. 1 eqn 33 and 35 for
    the wet-bulb temperature. The bracket is [dew point, dry bulb]: the dew
    point comes from the Newton-Raphson dew point solver, so every call runs
    that solver once before bisecting unless the caller already holds the
    dew point and passes it as t_dew_point. Bisection halves the bracket until it
    is no wider than the unit tolerance, which takes about 15 iterations for
    typical inputs.

    Humidity ratios below MIN_HUM_RATIO are raised to it before solving.

    Parameters
    ----------
    unit_system : str or UnitSystem
        'ip' (°F, psi) or 'si' (°C, Pa).

    Attributes
    ----------
    unit_system : UnitSystem
        System of units of inputs and outputs.
    vapor_equation : AshraeSaturationVapor
        Saturation model used by the bracket and the W* evaluations.
    wet_bulb_curve : WetBulbCurve
        Coefficients of eqn 35 (ice) and eqn 33 (water).
    tolerance : float
        Final bracket width, 0.0018 °F or 0.001 °C.

    Examples
    --------
    >>> solver = BisectionWetBulb(unit_system='ip')
    >>> twb = solver.calculate(t_dry_bulb=86.0, hum_ratio=0.0187193288418892, pressure=14.175)
    >>> print(f"{twb:.2f}°F")
    77.00°F

    >>> solver.calculate(t_dry_bulb=86.0, hum_ratio=-0.01, pressure=14.175)
    PsychroDomainError: Humidity ratio cannot be negative

    See Also
    --------
    NewtonRaphsonDewpoint : Provides the lower bound of the bracket
    """

    unit_system: UnitSystem
    vapor_equation: AshraeSaturationVapor
    wet_bulb_curve: WetBulbCurve
    tolerance: float

    def __init__(self, unit_system: Union[str, UnitSystem]):
        self.vapor_equation = AshraeSaturationVapor(unit_system=unit_system)
        self.unit_system = self.vapor_equation.unit_system
        self.wet_bulb_curve = WET_BULB_CONSTANTS_REGISTRY[self.unit_system]
        self.tolerance = self.vapor_equation.unit.tolerance

    def solve(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        hum_ratio: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
        t_dew_point: Optional[Union[float, npt.ArrayLike]] = None,
    ) -> SolverResult:
        """
        Run the solver and return the tagged result without raising on
        solver failures.

        Parameters
        ----------
        t_dry_bulb : float or array-like
            Dry-bulb temperature(s) in °F [IP] or °C [SI].
        hum_ratio : float or array-like
            Humidity ratio(s) in lb_H2O/lb_dry_air [IP] or kg_H2O/kg_dry_air [SI].
        pressure : float or array-like
            Atmospheric pressure(s) in psi [IP] or Pa [SI].
        t_dew_point : float or array-like, optional
            Dew point temperature(s) of the same air in °F [IP] or °C [SI].
            Used as the lower bound of the bracket instead of solving for it.

        Returns
        -------
        SolverResult
            (root, iterations, status). OUT_OF_BOUNDS is reported when the
            dew point of the bracket cannot be found.

        Raises
        ------
        PsychroDomainError
            If a humidity ratio is negative, a dry-bulb temperature is
            outside the saturation equation bounds, or a given dew point is
            above the dry bulb.
        """
        check_hum_ratio(hum_ratio)
        self.vapor_equation._check_bounds(t_dry_bulb)

        constants = (
            self.vapor_equation.unit,
            self.vapor_equation.curve.ice,
            self.vapor_equation.curve.water,
            self.wet_bulb_curve.ice,
            self.wet_bulb_curve.water,
        )
        if t_dew_point is None:
            result = dispatch_solver(
                scalar_func=_wet_bulb_bisection_scalar,
                vector_func=_wet_bulb_bisection_vectorised,
                inputs=(t_dry_bulb, hum_ratio, pressure),
                constants=constants,
            )
        else:
            check_not_above_dry_bulb(t_dew_point, t_dry_bulb, name="Dew point")
            result = dispatch_solver(
                scalar_func=_wet_bulb_bisection_bracketed_scalar,
                vector_func=_wet_bulb_bisection_bracketed_vectorised,
                inputs=(t_dry_bulb, hum_ratio, pressure, t_dew_point),
                constants=constants,
            )
        logger.debug(
            "Wet bulb bisection finished in at most %d iterations",
            int(np.max(result.iterations)),
        )
        return result

    def calculate(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        hum_ratio: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
        t_dew_point: Optional[Union[float, npt.ArrayLike]] = None,
    ) -> Union[float, npt.NDArray]:
        """
        Wet-bulb temperature given dry-bulb temperature, humidity ratio and
        pressure. See solve() for the optional t_dew_point.

        Returns
        -------
        float or ndarray
            Wet-bulb temperature(s) in °F [IP] or °C [SI].

        Raises
        ------
        PsychroDomainError
            If a humidity ratio is negative, a dry-bulb temperature is out of
            bounds, or the dew point bracket cannot be found.
        ConvergenceError
            If the bisection or the dew point solver does not converge
            within MAX_ITER_COUNT iterations.
        """
        result = self.solve(
            t_dry_bulb=t_dry_bulb, hum_ratio=hum_ratio, pressure=pressure, t_dew_point=t_dew_point
        )

        raise_for_status(
            result,
            solver_name="BisectionWetBulb",
            out_of_bounds_message="Partial pressure of water vapor is outside range of validity of equations",
        )
        return result.root
