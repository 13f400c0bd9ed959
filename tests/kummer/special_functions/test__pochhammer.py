import math

import pytest
import scipy.special

from kummer.special_functions import pochhammer


def _rising_factorial(z, k):
    out = 1.0
    for i in range(k):
        out *= z + i
    return out


class TestPochhammer:
    @pytest.mark.parametrize("z", [-3.5, -2.0, 0.0, 2.5, 100.0, math.nan])
    def test_zero_factors(self, z):
        assert pochhammer(z, 0) == 1.0

    @pytest.mark.parametrize("z", [-0.5, 0.5, 1.5, 2.25, 3.0, 7.7])
    @pytest.mark.parametrize("k", [1, 2, 3, 4, 6])
    def test_rising_factorial(self, z, k):
        assert pochhammer(z, k) == pytest.approx(_rising_factorial(z, k), rel=1e-9)

    @pytest.mark.parametrize("z,k", [(0.3, 5), (4.5, 10), (1.0, 20)])
    def test_matches_scipy(self, z, k):
        assert pochhammer(z, k) == pytest.approx(scipy.special.poch(z, k), rel=1e-10)

    def test_negative_k_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            pochhammer(1.5, -1)
