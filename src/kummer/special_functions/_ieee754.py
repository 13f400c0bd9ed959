"""IEEE-754 semantics for scalar ``math`` operations.

Python floats raise ``ZeroDivisionError`` and ``OverflowError`` where the
IEEE-754 standard (and every tensor backend) returns ``inf`` or ``nan``.
The special function kernels report poles and overflow through their
return value, so they route the offending operations through here.
"""

import math


def divide(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def expm1(x: float) -> float:
    try:
        return math.expm1(x)
    except OverflowError:
        return math.inf


def power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        # odd integer exponents keep the sign of base
        if base < 0.0 and float(exponent).is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf


__all__ = ["divide", "exp", "expm1", "power"]
