from ._atmosphere_constants import ATMOSPHERE_CONSTANTS_REGISTRY, AtmosphereConstants
from ._atmosphere_equations import (
    get_sea_level_pressure,
    get_standard_atm_pressure,
    get_standard_atm_temperature,
    get_station_pressure,
)


__all__ = [
    'ATMOSPHERE_CONSTANTS_REGISTRY',
    'AtmosphereConstants',
    'get_sea_level_pressure',
    'get_standard_atm_pressure',
    'get_standard_atm_temperature',
    'get_station_pressure',
]
