import enum
import math

# Fast-convergence region: (|a| + 1) |z| < FAST_CONVERGENCE_RATIO * b
FAST_CONVERGENCE_RATIO = 0.9


class Hyp1F1Regime(enum.Enum):
    """Evaluation regime of M(a, b, z), in the order the guards are tried."""

    INVALID = "invalid"
    POLE = "pole"
    POLYNOMIAL_VIA_B = "polynomial_via_b"
    UNIT = "unit"
    LINEAR = "linear"
    KUMMER = "kummer"
    SHIFTED_KUMMER = "shifted_kummer"
    EXPM1_RATIO = "expm1_ratio"
    POLYNOMIAL_VIA_A = "polynomial_via_a"
    SERIES = "series"
    FALLBACK_SERIES = "fallback_series"


def _is_non_positive_integer(x: float) -> bool:
    return x <= 0.0 and float(x).is_integer()


def classify_hypergeometric_1_f_1(a: float, b: float, z: float) -> Hyp1F1Regime:
    r"""
    Classify ``(a, b, z)`` into the regime used to evaluate :math:`M(a, b, z)`.

    Guards are checked in order, exact ones first:

    ====================  ==================================================
    ``INVALID``           ``a``, ``b`` or ``z`` is NaN
    ``POLYNOMIAL_VIA_B``  ``b`` and ``a`` are non-positive integers with
                          ``b <= a < 0``; the 0/0 term at ``k = -a`` is
                          removable and the series terminates
    ``POLE``              any other non-positive integer ``b``
    ``UNIT``              ``a == 0`` or ``z == 0``: :math:`M = 1`
    ``LINEAR``            ``a == -1``: :math:`M = 1 - z/b`
    ``KUMMER``            ``a == b``: :math:`M = e^z`
    ``SHIFTED_KUMMER``    ``a - b == 1``: :math:`M = (1 + z/b) e^z`
    ``EXPM1_RATIO``       ``a == 1, b == 2``: :math:`M = (e^z - 1)/z`
    ``POLYNOMIAL_VIA_A``  ``a`` is a non-positive integer
    ``SERIES``            ``b > 0`` and :math:`(|a| + 1)|z| < 0.9 b`
    ``FALLBACK_SERIES``   everything else
    ====================  ==================================================

    Parameters
    ----------
    a, b, z : float
        Parameters and argument.

    Returns
    -------
    Hyp1F1Regime
    """
    if math.isnan(a) or math.isnan(b) or math.isnan(z):
        return Hyp1F1Regime.INVALID

    if _is_non_positive_integer(b):
        if _is_non_positive_integer(a) and a != 0.0 and a >= b:
            return Hyp1F1Regime.POLYNOMIAL_VIA_B
        return Hyp1F1Regime.POLE

    if a == 0.0 or z == 0.0:
        return Hyp1F1Regime.UNIT
    if a == -1.0:
        return Hyp1F1Regime.LINEAR
    if a == b:
        return Hyp1F1Regime.KUMMER
    if a - b == 1.0:
        return Hyp1F1Regime.SHIFTED_KUMMER
    if a == 1.0 and b == 2.0:
        return Hyp1F1Regime.EXPM1_RATIO
    if _is_non_positive_integer(a):
        return Hyp1F1Regime.POLYNOMIAL_VIA_A

    if b > 0.0 and (abs(a) + 1.0) * abs(z) < FAST_CONVERGENCE_RATIO * b:
        return Hyp1F1Regime.SERIES
    return Hyp1F1Regime.FALLBACK_SERIES


__all__ = [
    "FAST_CONVERGENCE_RATIO",
    "Hyp1F1Regime",
    "classify_hypergeometric_1_f_1",
]
