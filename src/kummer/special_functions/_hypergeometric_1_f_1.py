import math
from typing import Callable, Dict

from torch import Tensor

from . import _ieee754
from ._hypergeometric_1_f_1_regime import (
    Hyp1F1Regime,
    classify_hypergeometric_1_f_1,
)
from ._hypergeometric_1_f_1_series import (
    EPSILON,
    hyp1f1_series,
    hyp1f1_series_track_convergence,
)
from ._hypergeometric_core import _elementwise_1_f_1


def _invalid(a: float, b: float, z: float, tol: float) -> float:
    return math.nan


def _pole(a: float, b: float, z: float, tol: float) -> float:
    return math.inf


def _unit(a: float, b: float, z: float, tol: float) -> float:
    return 1.0


def _linear(a: float, b: float, z: float, tol: float) -> float:
    return 1.0 - z / b


def _kummer(a: float, b: float, z: float, tol: float) -> float:
    return _ieee754.exp(z)


def _shifted_kummer(a: float, b: float, z: float, tol: float) -> float:
    return (1.0 + z / b) * _ieee754.exp(z)


def _expm1_ratio(a: float, b: float, z: float, tol: float) -> float:
    if z == math.inf:
        return math.inf
    return _ieee754.expm1(z) / z


def _tracked_series(a: float, b: float, z: float, tol: float) -> float:
    return hyp1f1_series_track_convergence(a, b, z, tol=tol)


def _series(a: float, b: float, z: float, tol: float) -> float:
    return hyp1f1_series(a, b, z, tol=tol)


_EVALUATORS: Dict[Hyp1F1Regime, Callable[[float, float, float, float], float]] = {
    Hyp1F1Regime.INVALID: _invalid,
    Hyp1F1Regime.POLE: _pole,
    Hyp1F1Regime.POLYNOMIAL_VIA_B: _tracked_series,
    Hyp1F1Regime.UNIT: _unit,
    Hyp1F1Regime.LINEAR: _linear,
    Hyp1F1Regime.KUMMER: _kummer,
    Hyp1F1Regime.SHIFTED_KUMMER: _shifted_kummer,
    Hyp1F1Regime.EXPM1_RATIO: _expm1_ratio,
    Hyp1F1Regime.POLYNOMIAL_VIA_A: _tracked_series,
    Hyp1F1Regime.SERIES: _series,
    # No dedicated method for slow convergence; the plain series is reused
    Hyp1F1Regime.FALLBACK_SERIES: _series,
}


def hyp1f1(a: float, b: float, z: float, tol: float = EPSILON) -> float:
    r"""
    Kummer's confluent hypergeometric function :math:`M(a, b, z)` for real
    scalars.

    .. math::

       M(a, b, z) = {}_1F_1(a; b; z) = \sum_{k=0}^{\infty}
       \frac{(a)_k}{(b)_k} \frac{z^k}{k!}

    The arguments are classified by
    :func:`classify_hypergeometric_1_f_1`; closed forms are returned
    directly, terminating series go through
    :func:`hyp1f1_series_track_convergence` and everything else through
    :func:`hyp1f1_series`.

    Parameters
    ----------
    a : float
        Numerator parameter.
    b : float
        Denominator parameter (pole when ``b`` is a non-positive integer,
        unless ``a`` is a negative integer with ``a >= b``).
    z : float
        Argument.
    tol : float, optional
        Relative truncation tolerance of the series.

    Returns
    -------
    float
        The value of :math:`M(a, b, z)`; ``inf`` at a pole, ``nan`` for NaN
        input or a terminating series that fails its convergence checks.

    Notes
    -----
    Large ``|z|`` outside the region :math:`(|a| + 1)|z| < 0.9 b` still
    uses the power series, which converges slowly and loses accuracy
    to cancellation for large negative ``z``.
    """
    regime = classify_hypergeometric_1_f_1(a, b, z)
    return _EVALUATORS[regime](a, b, z, tol)


def hypergeometric_1_f_1(a: Tensor, b: Tensor, z: Tensor, *, tol: float = EPSILON) -> Tensor:
    r"""
    Confluent hypergeometric function 1F1(a; b; z) (Kummer M), elementwise.

    Parameters
    ----------
    a : Tensor
        Numerator parameter. Broadcasting with ``b`` and ``z`` is supported.
    b : Tensor
        Denominator parameter.
    z : Tensor
        Argument tensor.
    tol : float, optional
        Relative tolerance for truncation of the series.

    Returns
    -------
    Tensor
        float64 tensor of :func:`hyp1f1` values with the broadcast shape.

    Notes
    -----
    The scalar kernel runs on Python floats, so the result is detached from
    the autograd graph: it never requires grad, whatever the inputs do.
    """
    return _elementwise_1_f_1(hyp1f1, a, b, z, tol=tol)


__all__ = ["hyp1f1", "hypergeometric_1_f_1"]
