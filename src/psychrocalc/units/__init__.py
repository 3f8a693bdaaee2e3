from ._enums import UnitSystem

from ._unit_constants import (
    UnitConstants,
    IP_CONSTANTS,
    SI_CONSTANTS,
    UNIT_CONSTANTS_REGISTRY
)

from .core import (
    set_unit_system,
    get_unit_system,
    is_imperial,
    get_unit_constants,
    get_tolerance
)

from ._temperature import (
    get_t_rankine_from_t_fahrenheit,
    get_t_fahrenheit_from_t_rankine,
    get_t_kelvin_from_t_celsius,
    get_t_celsius_from_t_kelvin
)


__all__ = [
    'UnitSystem',

    'UnitConstants',
    'IP_CONSTANTS',
    'SI_CONSTANTS',
    'UNIT_CONSTANTS_REGISTRY',

    'set_unit_system',
    'get_unit_system',
    'is_imperial',
    'get_unit_constants',
    'get_tolerance',

    'get_t_rankine_from_t_fahrenheit',
    'get_t_fahrenheit_from_t_rankine',
    'get_t_kelvin_from_t_celsius',
    'get_t_celsius_from_t_kelvin'
]
