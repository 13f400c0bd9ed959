from typing import Tuple

import hypothesis.strategies


def non_positive_integers(
    min_value: int = -50,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for the non-positive integers ``min_value, ..., 0`` as floats."""
    return hypothesis.strategies.integers(min_value=min_value, max_value=0).map(float)


def avoiding_poles(
    min_value: float = -20.0,
    max_value: float = 20.0,
    min_distance: float = 0.01,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for reals at least ``min_distance`` away from 0, -1, -2, ..."""
    return hypothesis.strategies.floats(
        min_value=min_value,
        max_value=max_value,
        allow_nan=False,
        allow_infinity=False,
    ).filter(lambda x: x > min_distance or abs(x - round(x)) > min_distance)


@hypothesis.strategies.composite
def kummer_parameters(
    draw,
    a_range: Tuple[float, float] = (-10.0, 10.0),
    b_range: Tuple[float, float] = (0.5, 10.0),
    z_range: Tuple[float, float] = (-5.0, 5.0),
) -> Tuple[float, float, float]:
    """Strategy for finite ``(a, b, z)`` triples within the given ranges.

    The default ``b_range`` stays clear of the poles at non-positive
    integer ``b``.
    """

    def finite(bounds: Tuple[float, float]):
        return hypothesis.strategies.floats(
            min_value=bounds[0],
            max_value=bounds[1],
            allow_nan=False,
            allow_infinity=False,
        )

    return draw(finite(a_range)), draw(finite(b_range)), draw(finite(z_range))


__all__ = ["avoiding_poles", "kummer_parameters", "non_positive_integers"]
