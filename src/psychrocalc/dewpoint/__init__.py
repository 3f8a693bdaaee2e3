from ._dewpoint_equations import NewtonRaphsonDewpoint


__all__ = [
    'NewtonRaphsonDewpoint'
]
