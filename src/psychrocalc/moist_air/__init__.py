from ._air_properties import (
    get_degree_of_saturation,
    get_dry_air_density,
    get_dry_air_enthalpy,
    get_dry_air_volume,
    get_hum_ratio_from_enthalpy_and_t_dry_bulb,
    get_moist_air_density,
    get_moist_air_enthalpy,
    get_moist_air_volume,
    get_sat_air_enthalpy,
    get_sat_hum_ratio,
    get_t_dry_bulb_from_enthalpy_and_hum_ratio,
    get_t_dry_bulb_from_moist_air_volume_and_hum_ratio,
    get_vapor_pressure_deficit,
)
from ._humidity_conversions import (
    get_hum_ratio_from_dewpoint,
    get_hum_ratio_from_rel_hum,
    get_hum_ratio_from_specific_hum,
    get_hum_ratio_from_vapor_pressure,
    get_hum_ratio_from_wet_bulb,
    get_rel_hum_from_hum_ratio,
    get_rel_hum_from_vapor_pressure,
    get_specific_hum_from_hum_ratio,
    get_vapor_pressure_from_dewpoint,
    get_vapor_pressure_from_hum_ratio,
    get_vapor_pressure_from_rel_hum,
)
from ._moist_air_constants import (
    MIN_HUM_RATIO,
    MOLECULAR_WEIGHT_RATIO,
    WET_BULB_CONSTANTS_REGISTRY,
    EnthalpyConstants,
    WetBulbConstants,
    WetBulbCurve,
)


__all__ = [
    'MIN_HUM_RATIO',
    'MOLECULAR_WEIGHT_RATIO',
    'WET_BULB_CONSTANTS_REGISTRY',
    'EnthalpyConstants',
    'WetBulbConstants',
    'WetBulbCurve',
    'get_degree_of_saturation',
    'get_dry_air_density',
    'get_dry_air_enthalpy',
    'get_dry_air_volume',
    'get_hum_ratio_from_dewpoint',
    'get_hum_ratio_from_enthalpy_and_t_dry_bulb',
    'get_hum_ratio_from_rel_hum',
    'get_hum_ratio_from_specific_hum',
    'get_hum_ratio_from_vapor_pressure',
    'get_hum_ratio_from_wet_bulb',
    'get_moist_air_density',
    'get_moist_air_enthalpy',
    'get_moist_air_volume',
    'get_rel_hum_from_hum_ratio',
    'get_rel_hum_from_vapor_pressure',
    'get_sat_air_enthalpy',
    'get_sat_hum_ratio',
    'get_specific_hum_from_hum_ratio',
    'get_t_dry_bulb_from_enthalpy_and_hum_ratio',
    'get_t_dry_bulb_from_moist_air_volume_and_hum_ratio',
    'get_vapor_pressure_deficit',
    'get_vapor_pressure_from_dewpoint',
    'get_vapor_pressure_from_hum_ratio',
    'get_vapor_pressure_from_rel_hum',
]
