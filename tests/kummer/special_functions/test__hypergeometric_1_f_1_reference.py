import pytest
import torch
import torch.testing

from kummer.special_functions import (
    hyp1f1,
    hyp1f1_slow,
    hypergeometric_1_f_1_reference,
)
from kummer.testing import backtest_relative_error, backtest_samples


class TestHyp1F1Slow:
    @pytest.mark.parametrize(
        "a,b,z",
        [
            (0.5, 1.5, 0.3),
            (2.5, 5.33, 6.4),
            (-2.5, 3.0, 0.7),
            (1.3, 2.4, -1.2),
        ],
    )
    def test_matches_dispatcher(self, a, b, z):
        assert hyp1f1_slow(a, b, z) == pytest.approx(hyp1f1(a, b, z), rel=1e-10)

    def test_first_term_only(self):
        assert hyp1f1_slow(0.5, 1.5, 3.0, max_terms=0) == pytest.approx(1.0, rel=1e-14)

    def test_tolerance_positional(self):
        assert hyp1f1_slow(0.5, 1.5, 0.3, 2.2e-16) == hyp1f1_slow(0.5, 1.5, 0.3)

    def test_tensor(self):
        a = torch.tensor([0.5, 2.5], dtype=torch.float64)
        b = torch.tensor([1.5, 5.33], dtype=torch.float64)
        z = torch.tensor([0.3, 6.4], dtype=torch.float64)
        out = hypergeometric_1_f_1_reference(a, b, z)
        expected = torch.tensor([hyp1f1_slow(0.5, 1.5, 0.3), hyp1f1_slow(2.5, 5.33, 6.4)], dtype=torch.float64)
        torch.testing.assert_close(out, expected, rtol=0, atol=0)


class TestBacktest:
    def test_dispatcher_agrees_with_reference(self):
        generator = torch.Generator().manual_seed(0)
        a, b, z = backtest_samples(200, generator=generator)
        error = backtest_relative_error(a, b, z)
        assert error.shape == (200,)
        assert error.max().item() < 1e-6

    def test_dispatcher_agrees_with_reference_relative(self):
        generator = torch.Generator().manual_seed(0)
        a, b, z = backtest_samples(200, generator=generator)
        error = backtest_relative_error(a, b, z, floor=0.0)
        assert not error.isnan().any()
        assert error.max().item() < 1e-6

    def test_dispatcher_agrees_with_reference_moderate_argument(self):
        generator = torch.Generator().manual_seed(1)
        a, b, z = backtest_samples(100, generator=generator, z_range=(0.0, 10.0))
        error = backtest_relative_error(a, b, z)
        assert error.max().item() < 1e-10
