"""Hypothesis strategies for M(a, b, z) parameters."""

from ._strategies import (
    avoiding_poles,
    kummer_parameters,
    non_positive_integers,
)

__all__ = [
    # Numeric strategies
    "avoiding_poles",
    "kummer_parameters",
    "non_positive_integers",
]
