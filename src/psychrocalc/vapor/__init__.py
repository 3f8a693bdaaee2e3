from ._vapor_equations import AshraeSaturationVapor

from ._vapor_constants import (
    SaturationConstants,
    SaturationCurve,
    SATURATION_CONSTANTS_REGISTRY
)


__all__ = [
    'AshraeSaturationVapor',

    'SaturationConstants',
    'SaturationCurve',
    'SATURATION_CONSTANTS_REGISTRY'
]
