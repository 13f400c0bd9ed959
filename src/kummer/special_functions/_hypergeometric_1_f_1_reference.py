from torch import Tensor

from . import _ieee754
from ._gamma import gamma
from ._hypergeometric_1_f_1_series import EPSILON
from ._hypergeometric_core import _elementwise_1_f_1
from ._pochhammer import pochhammer

REFERENCE_MAX_TERMS = 100


def hyp1f1_slow(
    a: float,
    b: float,
    z: float,
    tol: float = EPSILON,
    *,
    max_terms: int = REFERENCE_MAX_TERMS,
) -> float:
    r"""
    Brute-force :math:`M(a, b, z)` for cross-checking :func:`hyp1f1`.

    Every term is built from scratch,

    .. math::

       t_j = \frac{(a)_j}{(b)_j\, \Gamma(j + 1)} z^j, \qquad j = 0, \ldots, N,

    and summation stops once :math:`|t_j| < \mathrm{tol} \cdot |S_j|`.
    The gamma ratios accumulate rounding error and ``N = 100`` truncates
    large-``|z|`` sums early, so this is a reference only.
    """
    result = 0.0
    for j in range(max_terms + 1):
        term = _ieee754.divide(pochhammer(a, j), pochhammer(b, j))
        term = term / gamma(j + 1.0) * _ieee754.power(z, j)
        result += term
        if abs(term) < tol * abs(result):
            break
    return result


def hypergeometric_1_f_1_reference(a: Tensor, b: Tensor, z: Tensor, *, tol: float = EPSILON) -> Tensor:
    """Elementwise :func:`hyp1f1_slow` over broadcast tensors.

    Like :func:`hypergeometric_1_f_1`, the result is not differentiable.
    """
    return _elementwise_1_f_1(hyp1f1_slow, a, b, z, tol=tol)


__all__ = [
    "REFERENCE_MAX_TERMS",
    "hyp1f1_slow",
    "hypergeometric_1_f_1_reference",
]
