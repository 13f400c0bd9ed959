import math

from . import _ieee754

_LANCZOS_G = 7
_LANCZOS_C0 = 0.99999999999980993
_LANCZOS_P = (
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)
_SQRT_TWO_PI = math.sqrt(2.0 * math.pi)


def gamma(z: float) -> float:
    r"""
    Gamma function via the Lanczos approximation (g = 7, n = 9).

    For :math:`z \geq 1/2`,

    .. math::

       \Gamma(z) = \sqrt{2\pi}\, t^{z - 1/2}\, e^{-t}\, A_g(z - 1),
       \qquad t = z - 1 + g + \tfrac{1}{2},

    with the partial fraction sum
    :math:`A_g(x) = c_0 + \sum_{i=0}^{7} p_i / (x + i + 1)`. For
    :math:`z < 1/2` the reflection formula

    .. math::

       \Gamma(z) = \frac{\pi}{\sin(\pi z)\, \Gamma(1 - z)}

    maps the argument into the right half-plane, so the function recurses
    at most once.

    Parameters
    ----------
    z : float
        Real argument.

    Returns
    -------
    float
        Approximation of :math:`\Gamma(z)`, accurate to roughly 15 digits
        away from the poles.

    Notes
    -----
    The non-positive integers are poles. There the result is ``inf`` (at
    ``z = 0``) or a huge finite value, because ``sin(pi * z)`` is not
    exactly zero in floating point. Arguments beyond about 171 overflow to
    ``inf``.
    """
    if math.isinf(z):
        return math.inf if z > 0 else math.nan

    if z < 0.5:
        return _ieee754.divide(math.pi, math.sin(math.pi * z) * gamma(1.0 - z))

    z2 = z - 1.0
    x = _LANCZOS_C0
    for i, p in enumerate(_LANCZOS_P):
        x += p / (z2 + i + 1.0)

    t = z2 + _LANCZOS_G + 0.5
    return _SQRT_TWO_PI * _ieee754.power(t, z2 + 0.5) * math.exp(-t) * x


__all__ = ["gamma"]
