"""
Dew point temperature from vapor pressure by Newton-Raphson inversion of
the ASHRAE saturation vapor pressure equation.
"""

import logging
from typing import Tuple, Union

import numpy as np
import numpy.typing as npt

from psychrocalc.dewpoint._jit_equations import (
    _dewpoint_newton_scalar,
    _dewpoint_newton_vectorised,
)
from psychrocalc.shared._dispatch import dispatch_solver
from psychrocalc.shared._solver_result import SolverResult, raise_for_status
from psychrocalc.units._enums import UnitSystem
from psychrocalc.vapor._vapor_equations import AshraeSaturationVapor

logger = logging.getLogger(__name__)


class NewtonRaphsonDewpoint:
    """
    Exact dew point temperature from the partial pressure of water vapor.

    Numerically inverts the saturation vapor pressure equation instead of
    using the ASHRAE dew point regressions (ch. 1 eqn 37 and 38), which are
    less accurate and valid over a narrower range.

    The Newton-Raphson method runs on ln(pws), a very smooth function of
    temperature, starting from the dry-bulb temperature. Convergence usually
    takes 3 to 5 iterations; the solver gives up after MAX_ITER_COUNT.

    Parameters
    ----------
    unit_system : str or UnitSystem
        'ip' (°F, psi) or 'si' (°C, Pa).

    Attributes
    ----------
    unit_system : UnitSystem
        System of units of inputs and outputs.
    vapor_equation : AshraeSaturationVapor
        The saturation equation being inverted.
    tolerance : float
        Stopping criterion on successive iterates, 0.0018 °F or 0.001 °C.

    Examples
    --------
    >>> solver = NewtonRaphsonDewpoint(unit_system='si')
    >>> vapor_pressure = solver.vapor_equation.calculate(5.0)
    >>> td = solver.calculate(t_dry_bulb=30.0, vapor_pressure=vapor_pressure)
    >>> print(f"{td:.3f}°C")
    5.000°C

    >>> # Iteration count and status without raising
    >>> result = solver.solve(t_dry_bulb=30.0, vapor_pressure=vapor_pressure)
    >>> result.converged
    True
    >>> result.iterations < 10
    True

    >>> # Vapor pressure above saturation at the upper bound
    >>> solver.calculate(t_dry_bulb=30.0, vapor_pressure=2.0e6)
    PsychroDomainError: Partial pressure of water vapor is outside range of validity of equations

    See Also
    --------
    AshraeSaturationVapor : Saturation vapor pressure and its log-derivative
    BisectionWetBulb : Wet bulb solver, bracketed by this dew point
    """

    unit_system: UnitSystem
    vapor_equation: AshraeSaturationVapor
    tolerance: float

    def __init__(self, unit_system: Union[str, UnitSystem]):
        self.vapor_equation = AshraeSaturationVapor(unit_system=unit_system)
        self.unit_system = self.vapor_equation.unit_system
        self.tolerance = self.vapor_equation.unit.tolerance

    def get_vapor_pressure_bounds(self) -> Tuple[float, float]:
        """
        Range of vapor pressures for which a dew point exists.

        Returns
        -------
        tuple[float, float]
            (pws(t_min), pws(t_max)) in psi [IP] or Pa [SI].
        """
        t_min, t_max = self.vapor_equation.get_temp_bounds()
        return self.vapor_equation.calculate(t_min), self.vapor_equation.calculate(t_max)

    def solve(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        vapor_pressure: Union[float, npt.ArrayLike],
    ) -> SolverResult:
        """
        Run the solver and return the tagged result without raising on
        solver failures.

        Parameters
        ----------
        t_dry_bulb : float or array-like
            Dry-bulb temperature(s) in °F [IP] or °C [SI]. Used as the first
            guess and as the upper cap of the dew point.
        vapor_pressure : float or array-like
            Partial pressure(s) of water vapor in psi [IP] or Pa [SI].

        Returns
        -------
        SolverResult
            (root, iterations, status); status is OUT_OF_BOUNDS where the
            vapor pressure has no dew point inside the temperature bounds.

        Raises
        ------
        PsychroDomainError
            If a dry-bulb temperature is outside the saturation equation
            bounds.
        """
        self.vapor_equation._check_bounds(t_dry_bulb)

        result = dispatch_solver(
            scalar_func=_dewpoint_newton_scalar,
            vector_func=_dewpoint_newton_vectorised,
            inputs=(t_dry_bulb, vapor_pressure),
            constants=(
                self.vapor_equation.unit,
                self.vapor_equation.curve.ice,
                self.vapor_equation.curve.water,
            ),
        )
        logger.debug(
            "Dew point Newton-Raphson finished in at most %d iterations",
            int(np.max(result.iterations)),
        )
        return result

    def calculate(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        vapor_pressure: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Dew point temperature given dry-bulb temperature and vapor pressure.

        Parameters
        ----------
        t_dry_bulb : float or array-like
            Dry-bulb temperature(s) in °F [IP] or °C [SI].
        vapor_pressure : float or array-like
            Partial pressure(s) of water vapor in psi [IP] or Pa [SI].

        Returns
        -------
        float or ndarray
            Dew point temperature(s) in °F [IP] or °C [SI], never above the
            dry-bulb temperature.

        Raises
        ------
        PsychroDomainError
            If the vapor pressure is outside [pws(t_min), pws(t_max)] or the
            dry-bulb temperature is outside the bounds.
        ConvergenceError
            If the solver does not converge within MAX_ITER_COUNT iterations.
        """
        result = self.solve(t_dry_bulb=t_dry_bulb, vapor_pressure=vapor_pressure)

        raise_for_status(
            result,
            solver_name="NewtonRaphsonDewpoint",
            out_of_bounds_message="Partial pressure of water vapor is outside range of validity of equations",
        )
        return result.root
