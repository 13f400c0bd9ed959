r"""Power series summation of Kummer's function M(a, b, z).

Both evaluators build the terms with the ratio recurrence

.. math::

   t_0 = 1, \qquad t_{k+1} = t_k \frac{(a + k)\, z}{(b + k)(k + 1)},

and differ only in how they decide that the partial sum can be trusted.
"""

import math
import sys
import warnings

from . import _ieee754
from ._exceptions import SeriesConvergenceWarning

EPSILON = sys.float_info.epsilon

SERIES_MAX_TERMS = 500
TRACKED_SERIES_MAX_TERMS = 1000

# Largest accepted ratio of estimated rounding error to |result|
PRECISION_BUDGET = 1e-7


def hyp1f1_series(
    a: float,
    b: float,
    z: float,
    tol: float = EPSILON,
    *,
    max_terms: int = SERIES_MAX_TERMS,
) -> float:
    r"""
    Sum the power series of :math:`M(a, b, z)` with a fixed term cap.

    Stops the first time :math:`|t_k| \leq \mathrm{tol} \cdot |S_k|` or
    after ``max_terms`` terms, and returns the partial sum either way.
    Only safe where the caller knows the series converges quickly.

    Parameters
    ----------
    a, b, z : float
        Parameters and argument.
    tol : float, optional
        Relative truncation tolerance.
    max_terms : int, optional
        Maximum number of recurrence steps.

    Returns
    -------
    float
        The partial sum.
    """
    term = 1.0
    result = 1.0
    for k in range(max_terms):
        term *= _ieee754.divide((a + k) * z, b + k) / (k + 1)
        result += term
        if abs(term) <= tol * abs(result):
            break
    return result


def hyp1f1_series_track_convergence(
    a: float,
    b: float,
    z: float,
    tol: float = EPSILON,
    *,
    max_terms: int = TRACKED_SERIES_MAX_TERMS,
) -> float:
    r"""
    Sum the power series of :math:`M(a, b, z)`, rejecting untrustworthy sums.

    Suited to the terminating (polynomial) cases. A step where
    :math:`b + k = 0` is handled explicitly: if :math:`a + k = 0` as well
    the term is the limit of a removable 0/0 and the series terminates,
    otherwise the term is undefined and the result is ``nan``.

    A sum that stops at step ``k`` is accepted only if the estimated
    rounding error stays within the precision budget,

    .. math::

       k \cdot \mathrm{tol} \cdot \sum_j |t_j| \leq 10^{-7} |S_k|.

    Parameters
    ----------
    a, b, z : float
        Parameters and argument.
    tol : float, optional
        Relative truncation tolerance.
    max_terms : int, optional
        Maximum number of recurrence steps.

    Returns
    -------
    float
        The sum, or ``nan`` when a term is undefined, the series does not
        terminate within ``max_terms`` steps, or the precision check fails.

    Warns
    -----
    SeriesConvergenceWarning
        On non-convergence and on a failed precision check.
    """
    term = 1.0
    result = 1.0
    abssum = 1.0
    for k in range(max_terms):
        apk = a + k
        bpk = b + k
        if bpk != 0.0:
            term *= apk * z / bpk / (k + 1)
        elif apk == 0.0:
            term = 0.0
        else:
            return math.nan

        result += term
        abssum += abs(term)
        if abs(term) <= tol * abs(result):
            break
    else:
        warnings.warn(
            f"hypergeometric 1F1 series did not converge within {max_terms} "
            f"terms for a={a}, b={b}, z={z}",
            SeriesConvergenceWarning,
            stacklevel=2,
        )
        return math.nan

    if k * tol * abssum > PRECISION_BUDGET * abs(result):
        warnings.warn(
            f"hypergeometric 1F1 series did not converge after precision "
            f"check for a={a}, b={b}, z={z}: estimated error "
            f"{k * tol * abssum:.2e} exceeds {PRECISION_BUDGET:.0e} * |result|",
            SeriesConvergenceWarning,
            stacklevel=2,
        )
        return math.nan

    return result


__all__ = [
    "EPSILON",
    "PRECISION_BUDGET",
    "SERIES_MAX_TERMS",
    "TRACKED_SERIES_MAX_TERMS",
    "hyp1f1_series",
    "hyp1f1_series_track_convergence",
]
