"""kummer: Kummer's confluent hypergeometric function M(a, b, z) for PyTorch."""

from . import special_functions

__all__ = [
    "special_functions",
]

__version__ = "0.1.0"
