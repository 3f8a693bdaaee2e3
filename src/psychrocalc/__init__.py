"""
psychrocalc - psychrometric properties of moist air following ASHRAE
Handbook - Fundamentals (2017) ch. 1, in SI or IP units.

>>> import psychrocalc
>>> psy = psychrocalc.Psychrometrics(unit_system='si')
>>> state = psy.calc_psychrometrics_from_rel_hum(25.0, 0.5, 101325.0)

or, with the process-wide unit system:

>>> psychrocalc.set_unit_system('ip')
>>> state = psychrocalc.calc_psychrometrics_from_wet_bulb(100.0, 65.0, 14.696)
"""

import logging

from .shared import (
    MAX_ITER_COUNT,
    ConvergenceError,
    PsychroDomainError,
    PsychroError,
    SolverResult,
    SolverStatus,
    UnitSystemNotSetError,
)
from .units import (
    UnitSystem,
    get_tolerance,
    get_unit_system,
    is_imperial,
    set_unit_system,
)
from .vapor import AshraeSaturationVapor
from .dewpoint import NewtonRaphsonDewpoint
from .wetbulb import BisectionWetBulb
from .moist_air import MIN_HUM_RATIO
from .psychrometrics import (
    PsychrometricState,
    Psychrometrics,
    calc_psychrometrics_from_dewpoint,
    calc_psychrometrics_from_rel_hum,
    calc_psychrometrics_from_wet_bulb,
    get_dewpoint_from_vapor_pressure,
    get_sat_vapor_pressure,
    get_wet_bulb_from_hum_ratio,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"


__all__ = [
    'MAX_ITER_COUNT',
    'MIN_HUM_RATIO',

    'PsychroError',
    'UnitSystemNotSetError',
    'PsychroDomainError',
    'ConvergenceError',
    'SolverResult',
    'SolverStatus',

    'UnitSystem',
    'set_unit_system',
    'get_unit_system',
    'is_imperial',
    'get_tolerance',

    'AshraeSaturationVapor',
    'NewtonRaphsonDewpoint',
    'BisectionWetBulb',

    'PsychrometricState',
    'Psychrometrics',
    'get_sat_vapor_pressure',
    'get_dewpoint_from_vapor_pressure',
    'get_wet_bulb_from_hum_ratio',
    'calc_psychrometrics_from_wet_bulb',
    'calc_psychrometrics_from_dewpoint',
    'calc_psychrometrics_from_rel_hum',
]
