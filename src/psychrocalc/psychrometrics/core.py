"""
Core interface for resolving psychrometric states.

Psychrometrics binds a unit system at construction and routes every
solver-backed conversion through one NewtonRaphsonDewpoint and one
BisectionWetBulb. The module-level functions below it use the process-wide
unit system set with set_unit_system().
"""

import logging
from typing import Union

import numpy as np
import numpy.typing as npt

from psychrocalc.dewpoint._dewpoint_equations import NewtonRaphsonDewpoint
from psychrocalc.moist_air._air_properties import (
    get_degree_of_saturation,
    get_moist_air_density,
    get_moist_air_enthalpy,
    get_moist_air_volume,
)
from psychrocalc.moist_air._humidity_conversions import (
    get_hum_ratio_from_rel_hum,
    get_hum_ratio_from_vapor_pressure,
    get_hum_ratio_from_wet_bulb,
    get_rel_hum_from_hum_ratio,
    get_vapor_pressure_from_dewpoint,
    get_vapor_pressure_from_hum_ratio,
)
from psychrocalc.moist_air._validation import (
    check_not_above_dry_bulb,
    check_rel_hum,
)
from psychrocalc.psychrometrics._state import PsychrometricState
from psychrocalc.shared._dispatch import as_scalar_or_array, broadcast_inputs
from psychrocalc.units._enums import UnitSystem
from psychrocalc.units.core import get_unit_system
from psychrocalc.vapor._vapor_equations import AshraeSaturationVapor
from psychrocalc.wetbulb._wetbulb_equations import BisectionWetBulb

logger = logging.getLogger(__name__)


class Psychrometrics:
    """
    Psychrometric calculator bound to one system of units.

    Resolves the full state of moist air from dry-bulb temperature,
    pressure and one humidity descriptor (wet-bulb temperature, dew point
    temperature or relative humidity), following ASHRAE Handbook -
    Fundamentals (2017) ch. 1. Each entry point derives the humidity ratio
    first, runs each solver at most once for the descriptors it lacks, and
    evaluates everything else algebraically.

    Instances hold no mutable state and can be shared.

    Parameters
    ----------
    unit_system : str or UnitSystem
        'ip' (°F, psi, Btu/lb) or 'si' (°C, Pa, J/kg).

    Methods
    -------
    **State resolution:**
        calc_psychrometrics_from_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)
        calc_psychrometrics_from_dewpoint(t_dry_bulb, t_dew_point, pressure)
        calc_psychrometrics_from_rel_hum(t_dry_bulb, rel_hum, pressure)

    **Saturation:**
        get_sat_vapor_pressure(t_dry_bulb)

    **Solver-backed conversions:**
        get_dewpoint_from_vapor_pressure(t_dry_bulb, vapor_pressure)
        get_dewpoint_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)
        get_dewpoint_from_rel_hum(t_dry_bulb, rel_hum)
        get_dewpoint_from_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)
        get_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)
        get_wet_bulb_from_dewpoint(t_dry_bulb, t_dew_point, pressure)
        get_wet_bulb_from_rel_hum(t_dry_bulb, rel_hum, pressure)
        get_rel_hum_from_dewpoint(t_dry_bulb, t_dew_point)
        get_rel_hum_from_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)
        get_vapor_pressure_from_dewpoint(t_dew_point)

    Examples
    --------
    >>> # ASHRAE Handbook - Fundamentals (2017) ch. 1 Example 1
    >>> psy = Psychrometrics(unit_system='ip')
    >>> state = psy.calc_psychrometrics_from_wet_bulb(100.0, 65.0, 14.696)
    >>> print(f"W = {state.hum_ratio:.5f}, RH = {state.rel_hum:.2f}")
    W = 0.00523, RH = 0.13

    >>> # Reverse calculation from the dew point
    >>> back = psy.calc_psychrometrics_from_dewpoint(100.0, state.t_dew_point, 14.696)
    >>> print(f"{back.t_wet_bulb:.1f}°F")
    65.0°F

    >>> # Arrays broadcast against scalars
    >>> import numpy as np
    >>> psy = Psychrometrics(unit_system='si')
    >>> psy.get_wet_bulb_from_rel_hum(np.array([20.0, 30.0]), 0.5, 101325.0)
    array([13.7..., 22.0...])

    See Also
    --------
    psychrocalc.moist_air : Algebraic humidity and air property relations
    psychrocalc.atmosphere : Standard atmosphere pressure
    """

    unit_system: UnitSystem
    vapor_equation: AshraeSaturationVapor
    dewpoint_solver: NewtonRaphsonDewpoint
    wet_bulb_solver: BisectionWetBulb

    def __init__(self, unit_system: Union[str, UnitSystem]):
        self.dewpoint_solver = NewtonRaphsonDewpoint(unit_system=unit_system)
        self.wet_bulb_solver = BisectionWetBulb(unit_system=unit_system)
        self.vapor_equation = self.dewpoint_solver.vapor_equation
        self.unit_system = self.vapor_equation.unit_system

    def __repr__(self) -> str:
        return f"Psychrometrics(unit_system='{self.unit_system.value}')"

    def get_sat_vapor_pressure(self, t_dry_bulb: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
        """Saturation vapor pressure in psi [IP] or Pa [SI]."""
        return self.vapor_equation.calculate(t_dry_bulb)

    def get_vapor_pressure_from_dewpoint(self, t_dew_point: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
        """Partial pressure of water vapor, the saturation pressure at the dew point."""
        return get_vapor_pressure_from_dewpoint(t_dew_point, self.unit_system)

    def get_dewpoint_from_vapor_pressure(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        vapor_pressure: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Dew point temperature from vapor pressure.

        Parameters
        ----------
        t_dry_bulb : float or array-like
            Dry-bulb temperature in °F [IP] or °C [SI], the solver's first
            guess and the cap of the result.
        vapor_pressure : float or array-like
            Partial pressure of water vapor in psi [IP] or Pa [SI].

        Returns
        -------
        float or ndarray
            Dew point temperature in °F [IP] or °C [SI].

        Raises
        ------
        PsychroDomainError
            If the vapor pressure has no dew point inside the temperature
            bounds.
        ConvergenceError
            If Newton-Raphson does not converge.
        """
        return self.dewpoint_solver.calculate(t_dry_bulb=t_dry_bulb, vapor_pressure=vapor_pressure)

    def get_dewpoint_from_hum_ratio(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        hum_ratio: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Dew point temperature from humidity ratio.

        Raises
        ------
        PsychroDomainError
            If the humidity ratio is negative.
        """
        vapor_pressure = get_vapor_pressure_from_hum_ratio(hum_ratio, pressure)
        return self.get_dewpoint_from_vapor_pressure(t_dry_bulb, vapor_pressure)

    def get_dewpoint_from_rel_hum(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        rel_hum: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Dew point temperature from relative humidity.

        Raises
        ------
        PsychroDomainError
            If the relative humidity is outside [0, 1], or is 0 (no dew point
            exists for a vapor pressure of zero).
        """
        check_rel_hum(rel_hum)
        vapor_pressure = np.asarray(rel_hum, dtype=np.float64) * self.vapor_equation.calculate(t_dry_bulb)
        return self.get_dewpoint_from_vapor_pressure(t_dry_bulb, vapor_pressure)

    def get_dewpoint_from_wet_bulb(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        t_wet_bulb: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Dew point temperature from wet-bulb temperature.

        Raises
        ------
        PsychroDomainError
            If the wet-bulb temperature is above the dry-bulb temperature.
        """
        hum_ratio = get_hum_ratio_from_wet_bulb(t_dry_bulb, t_wet_bulb, pressure, self.unit_system)
        return self.get_dewpoint_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)

    def get_wet_bulb_from_hum_ratio(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        hum_ratio: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Wet-bulb temperature from humidity ratio.

        Parameters
        ----------
        t_dry_bulb : float or array-like
            Dry-bulb temperature in °F [IP] or °C [SI].
        hum_ratio : float or array-like
            Humidity ratio; values below MIN_HUM_RATIO are raised to it.
        pressure : float or array-like
            Atmospheric pressure in psi [IP] or Pa [SI].

        Returns
        -------
        float or ndarray
            Wet-bulb temperature in °F [IP] or °C [SI].

        Raises
        ------
        PsychroDomainError
            If the humidity ratio is negative.
        ConvergenceError
            If the bisection does not converge.
        """
        return self.wet_bulb_solver.calculate(t_dry_bulb=t_dry_bulb, hum_ratio=hum_ratio, pressure=pressure)

    def get_wet_bulb_from_dewpoint(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        t_dew_point: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Wet-bulb temperature from dew point temperature.

        Raises
        ------
        PsychroDomainError
            If the dew point is above the dry-bulb temperature.
        """
        check_not_above_dry_bulb(t_dew_point, t_dry_bulb, name="Dew point")

        vapor_pressure = self.get_vapor_pressure_from_dewpoint(t_dew_point)
        hum_ratio = get_hum_ratio_from_vapor_pressure(vapor_pressure, pressure)
        return self.get_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)

    def get_wet_bulb_from_rel_hum(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        rel_hum: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Wet-bulb temperature from relative humidity.

        Raises
        ------
        PsychroDomainError
            If the relative humidity is outside [0, 1].
        """
        hum_ratio = get_hum_ratio_from_rel_hum(t_dry_bulb, rel_hum, pressure, self.unit_system)
        return self.get_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)

    def get_rel_hum_from_dewpoint(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        t_dew_point: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Relative humidity from dew point temperature (eqn 22).

        Raises
        ------
        PsychroDomainError
            If the dew point is above the dry-bulb temperature.
        """
        check_not_above_dry_bulb(t_dew_point, t_dry_bulb, name="Dew point")

        vapor_pressure = self.get_vapor_pressure_from_dewpoint(t_dew_point)
        return as_scalar_or_array(np.asarray(vapor_pressure) / self.vapor_equation.calculate(t_dry_bulb))

    def get_rel_hum_from_wet_bulb(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        t_wet_bulb: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Relative humidity from wet-bulb temperature.

        Raises
        ------
        PsychroDomainError
            If the wet-bulb temperature is above the dry-bulb temperature.
        """
        hum_ratio = get_hum_ratio_from_wet_bulb(t_dry_bulb, t_wet_bulb, pressure, self.unit_system)
        return get_rel_hum_from_hum_ratio(t_dry_bulb, hum_ratio, pressure, self.unit_system)

    def _complete_state(
        self,
        t_dry_bulb: npt.NDArray,
        pressure: npt.NDArray,
        hum_ratio: Union[float, npt.NDArray],
        t_wet_bulb: Union[float, npt.NDArray],
        t_dew_point: Union[float, npt.NDArray],
        rel_hum: Union[float, npt.NDArray],
        vapor_pressure: Union[float, npt.NDArray],
    ) -> PsychrometricState:
        """Fill in the algebraic properties once every humidity descriptor is known."""
        return PsychrometricState(
            t_dry_bulb=as_scalar_or_array(t_dry_bulb),
            pressure=as_scalar_or_array(pressure),
            hum_ratio=hum_ratio,
            t_wet_bulb=t_wet_bulb,
            t_dew_point=t_dew_point,
            rel_hum=rel_hum,
            vapor_pressure=vapor_pressure,
            moist_air_enthalpy=get_moist_air_enthalpy(t_dry_bulb, hum_ratio, self.unit_system),
            moist_air_volume=get_moist_air_volume(t_dry_bulb, hum_ratio, pressure, self.unit_system),
            degree_of_saturation=get_degree_of_saturation(t_dry_bulb, hum_ratio, pressure, self.unit_system),
            moist_air_density=get_moist_air_density(t_dry_bulb, hum_ratio, pressure, self.unit_system),
        )

    def calc_psychrometrics_from_wet_bulb(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        t_wet_bulb: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
    ) -> PsychrometricState:
        """
        Full psychrometric state from dry-bulb temperature, wet-bulb
        temperature and pressure.

        The humidity ratio follows directly from eqn 33/35; only the dew
        point needs a solver.

        Parameters
        ----------
        t_dry_bulb : float or array-like
            Dry-bulb temperature in °F [IP] or °C [SI].
        t_wet_bulb : float or array-like
            Wet-bulb temperature in °F [IP] or °C [SI].
        pressure : float or array-like
            Atmospheric pressure in psi [IP] or Pa [SI].

        Returns
        -------
        PsychrometricState

        Raises
        ------
        PsychroDomainError
            If the wet-bulb temperature is above the dry-bulb temperature or
            a temperature is outside the saturation equation bounds.
        ConvergenceError
            If the dew point solver does not converge.
        """
        t_dry_bulb, t_wet_bulb, pressure = broadcast_inputs(t_dry_bulb, t_wet_bulb, pressure)

        hum_ratio = get_hum_ratio_from_wet_bulb(t_dry_bulb, t_wet_bulb, pressure, self.unit_system)
        vapor_pressure = get_vapor_pressure_from_hum_ratio(hum_ratio, pressure)
        t_dew_point = self.dewpoint_solver.calculate(t_dry_bulb=t_dry_bulb, vapor_pressure=vapor_pressure)
        rel_hum = as_scalar_or_array(np.asarray(vapor_pressure) / self.vapor_equation.calculate(t_dry_bulb))

        logger.debug("Resolved psychrometric state from wet bulb (%s)", self.unit_system.name)
        return self._complete_state(
            t_dry_bulb, pressure, hum_ratio, as_scalar_or_array(t_wet_bulb), t_dew_point, rel_hum, vapor_pressure
        )

    def calc_psychrometrics_from_dewpoint(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        t_dew_point: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
    ) -> PsychrometricState:
        """
        Full psychrometric state from dry-bulb temperature, dew point
        temperature and pressure.

        The vapor pressure is the saturation pressure at the dew point; only
        the wet bulb needs a solver.

        Raises
        ------
        PsychroDomainError
            If the dew point is above the dry-bulb temperature or a
            temperature is outside the saturation equation bounds.
        ConvergenceError
            If the wet-bulb solver does not converge.
        """
        t_dry_bulb, t_dew_point, pressure = broadcast_inputs(t_dry_bulb, t_dew_point, pressure)
        check_not_above_dry_bulb(t_dew_point, t_dry_bulb, name="Dew point")

        vapor_pressure = self.get_vapor_pressure_from_dewpoint(t_dew_point)
        hum_ratio = get_hum_ratio_from_vapor_pressure(vapor_pressure, pressure)
        t_wet_bulb = self.wet_bulb_solver.calculate(t_dry_bulb=t_dry_bulb, hum_ratio=hum_ratio, pressure=pressure)
        rel_hum = as_scalar_or_array(np.asarray(vapor_pressure) / self.vapor_equation.calculate(t_dry_bulb))

        logger.debug("Resolved psychrometric state from dew point (%s)", self.unit_system.name)
        return self._complete_state(
            t_dry_bulb, pressure, hum_ratio, t_wet_bulb, as_scalar_or_array(t_dew_point), rel_hum, vapor_pressure
        )

    def calc_psychrometrics_from_rel_hum(
        self,
        t_dry_bulb: Union[float, npt.ArrayLike],
        rel_hum: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
    ) -> PsychrometricState:
        """
        Full psychrometric state from dry-bulb temperature, relative
        humidity and pressure.

        The vapor pressure is taken from the floored humidity ratio, so a
        relative humidity of 0 still has a (very low) dew point. The dew point
        is solved once and reused as the lower bound of the wet-bulb bracket.

        Raises
        ------
        PsychroDomainError
            If the relative humidity is outside [0, 1] or the dry-bulb
            temperature is outside the saturation equation bounds.
        ConvergenceError
            If a solver does not converge.
        """
        t_dry_bulb, rel_hum, pressure = broadcast_inputs(t_dry_bulb, rel_hum, pressure)

        hum_ratio = get_hum_ratio_from_rel_hum(t_dry_bulb, rel_hum, pressure, self.unit_system)
        vapor_pressure = get_vapor_pressure_from_hum_ratio(hum_ratio, pressure)
        t_dew_point = self.dewpoint_solver.calculate(t_dry_bulb=t_dry_bulb, vapor_pressure=vapor_pressure)
        t_wet_bulb = self.wet_bulb_solver.calculate(
            t_dry_bulb=t_dry_bulb, hum_ratio=hum_ratio, pressure=pressure, t_dew_point=t_dew_point
        )

        logger.debug("Resolved psychrometric state from relative humidity (%s)", self.unit_system.name)
        return self._complete_state(
            t_dry_bulb, pressure, hum_ratio, t_wet_bulb, t_dew_point, as_scalar_or_array(rel_hum), vapor_pressure
        )


def _calculator() -> Psychrometrics:
    return Psychrometrics(unit_system=get_unit_system())


def get_sat_vapor_pressure(t_dry_bulb: Union[float, npt.ArrayLike]) -> Union[float, npt.NDArray]:
    """
    Saturation vapor pressure in the active unit system.

    Raises
    ------
    UnitSystemNotSetError
        If set_unit_system() has not been called.
    """
    return _calculator().get_sat_vapor_pressure(t_dry_bulb)


def get_dewpoint_from_vapor_pressure(
    t_dry_bulb: Union[float, npt.ArrayLike],
    vapor_pressure: Union[float, npt.ArrayLike],
) -> Union[float, npt.NDArray]:
    """
    Dew point temperature from vapor pressure in the active unit system.

    Raises
    ------
    UnitSystemNotSetError
        If set_unit_system() has not been called.
    """
    return _calculator().get_dewpoint_from_vapor_pressure(t_dry_bulb, vapor_pressure)


def get_wet_bulb_from_hum_ratio(
    t_dry_bulb: Union[float, npt.ArrayLike],
    hum_ratio: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
) -> Union[float, npt.NDArray]:
    """
    Wet-bulb temperature from humidity ratio in the active unit system.

    Raises
    ------
    UnitSystemNotSetError
        If set_unit_system() has not been called.
    """
    return _calculator().get_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)


def calc_psychrometrics_from_wet_bulb(
    t_dry_bulb: Union[float, npt.ArrayLike],
    t_wet_bulb: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
) -> PsychrometricState:
    """See Psychrometrics.calc_psychrometrics_from_wet_bulb; uses the active unit system."""
    return _calculator().calc_psychrometrics_from_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)


def calc_psychrometrics_from_dewpoint(
    t_dry_bulb: Union[float, npt.ArrayLike],
    t_dew_point: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
) -> PsychrometricState:
    """See Psychrometrics.calc_psychrometrics_from_dewpoint; uses the active unit system."""
    return _calculator().calc_psychrometrics_from_dewpoint(t_dry_bulb, t_dew_point, pressure)


def calc_psychrometrics_from_rel_hum(
    t_dry_bulb: Union[float, npt.ArrayLike],
    rel_hum: Union[float, npt.ArrayLike],
    pressure: Union[float, npt.ArrayLike],
) -> PsychrometricState:
    """See Psychrometrics.calc_psychrometrics_from_rel_hum; uses the active unit system."""
    return _calculator().calc_psychrometrics_from_rel_hum(t_dry_bulb, rel_hum, pressure)
