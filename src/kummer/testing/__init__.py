"""Helpers for testing and back-testing M(a, b, z).

Random sweeps that compare :func:`kummer.special_functions.hyp1f1` against
the brute-force :func:`kummer.special_functions.hyp1f1_slow`. Hypothesis
strategies for the parameter space live in :mod:`kummer.testing.strategies`
and need the ``test`` extra.
"""

from ._backtest import backtest_relative_error, backtest_samples

__all__ = [
    # Back-testing
    "backtest_samples",
    "backtest_relative_error",
]
