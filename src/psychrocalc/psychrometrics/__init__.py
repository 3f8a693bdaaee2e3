from ._state import PsychrometricState

from .core import (
    Psychrometrics,
    get_sat_vapor_pressure,
    get_dewpoint_from_vapor_pressure,
    get_wet_bulb_from_hum_ratio,
    calc_psychrometrics_from_wet_bulb,
    calc_psychrometrics_from_dewpoint,
    calc_psychrometrics_from_rel_hum
)


__all__ = [
    'PsychrometricState',
    'Psychrometrics',

    'get_sat_vapor_pressure',
    'get_dewpoint_from_vapor_pressure',
    'get_wet_bulb_from_hum_ratio',
    'calc_psychrometrics_from_wet_bulb',
    'calc_psychrometrics_from_dewpoint',
    'calc_psychrometrics_from_rel_hum'
]
