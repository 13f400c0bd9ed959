"""Benchmark Kummer's function M(a, b, z).

Times repeated scalar evaluations at a fixed point for the dispatcher, the
plain power series and the brute-force reference, and compares against
scipy when it is installed.
"""

import time
from typing import Callable

import torch

from kummer.special_functions import (
    hyp1f1,
    hyp1f1_series,
    hyp1f1_slow,
    hypergeometric_1_f_1,
)

# scipy imports - handle optional dependency
try:
    from scipy.special import hyp1f1 as scipy_hyp1f1

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False


def benchmark_scalar(
    func: Callable[[float, float, float], float],
    a: float = 2.5,
    b: float = 5.33,
    z: float = 6.4,
    n_iterations: int = 10000,
) -> float:
    """Benchmark a scalar evaluator.

    Parameters
    ----------
    func : callable
        Evaluator called as ``func(a, b, z)``.
    a, b, z : float
        Evaluation point.
    n_iterations : int
        Number of iterations for timing.

    Returns
    -------
    float
        Total time for all iterations in milliseconds.
    """
    # Warmup
    for _ in range(10):
        _ = func(a, b, z)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = func(a, b, z)
    elapsed = time.perf_counter() - start
    return elapsed * 1000


def benchmark_tensor(n: int, n_iterations: int = 10) -> float:
    """Average time in milliseconds of one elementwise tensor evaluation."""
    a = torch.full((n,), 2.5, dtype=torch.float64)
    b = torch.full((n,), 5.33, dtype=torch.float64)
    z = torch.linspace(0.0, 6.4, n, dtype=torch.float64)

    _ = hypergeometric_1_f_1(a, b, z)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = hypergeometric_1_f_1(a, b, z)
    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000


def main():
    """Run the M(2.5, 5.33, 6.4) benchmarks."""
    print(f"M(2.5, 5.33, 6.4) = {hyp1f1(2.5, 5.33, 6.4)!r}")
    print()

    evaluators = [
        ("hyp1f1", hyp1f1),
        ("hyp1f1_series", hyp1f1_series),
        ("hyp1f1_slow", hyp1f1_slow),
    ]
    if SCIPY_AVAILABLE:
        evaluators.append(("scipy.special.hyp1f1", scipy_hyp1f1))

    print("Scalar evaluation, 10000 iterations")
    print("=" * 50)
    print(f"{'Evaluator':<24} {'Total (ms)':>12} {'Per call (us)':>12}")
    print("-" * 50)
    for name, func in evaluators:
        ms = benchmark_scalar(func)
        print(f"{name:<24} {ms:>12.2f} {ms / 10000 * 1000:>12.3f}")

    print()
    print("Elementwise tensor evaluation")
    print("=" * 50)
    print(f"{'Size':>8} {'Time (ms)':>14}")
    print("-" * 50)
    for n in [10, 100, 1000, 10000]:
        print(f"{n:>8} {benchmark_tensor(n):>14.4f}")


if __name__ == "__main__":
    main()
