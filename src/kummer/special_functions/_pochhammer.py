from . import _ieee754
from ._gamma import gamma


def pochhammer(z: float, k: int) -> float:
    r"""
    Pochhammer symbol (rising factorial) :math:`(z)_k`.

    .. math::

       (z)_k = z (z + 1) \cdots (z + k - 1) = \frac{\Gamma(z + k)}{\Gamma(z)}

    Evaluated as a ratio of :func:`gamma` values, so the rounding error of
    both approximations accumulates. Fine for cross-checking, too coarse
    for production series.

    Parameters
    ----------
    z : float
        Base.
    k : int
        Non-negative number of factors.

    Returns
    -------
    float
        ``1.0`` for ``k == 0``, otherwise ``gamma(z + k) / gamma(z)``.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    if k == 0:
        return 1.0
    return _ieee754.divide(gamma(z + k), gamma(z))


__all__ = ["pochhammer"]
