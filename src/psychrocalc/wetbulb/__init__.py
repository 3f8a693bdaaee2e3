from ._wetbulb_equations import BisectionWetBulb


__all__ = [
    'BisectionWetBulb'
]
