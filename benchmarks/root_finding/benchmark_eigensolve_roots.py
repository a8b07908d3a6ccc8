"""Benchmark eigenvalue-based root finding.

Times the companion matrix solver on random polynomials and the Lobatto and
Laguerre node solvers across orders.
"""

import time

import torch

from eigenroots.polynomial import polynomial
from eigenroots.root_finding import (
    eigensolve_roots,
    eigensolve_roots_laguerre,
    eigensolve_roots_lobatto,
)


def _time(fn, n_iterations: int) -> float:
    # Warmup
    for _ in range(3):
        fn()

    start = time.perf_counter()
    for _ in range(n_iterations):
        fn()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def benchmark_roots(order: int, n_iterations: int = 10) -> float:
    """Average milliseconds per companion matrix solve at given order."""
    coeffs = torch.randn(order + 1, dtype=torch.float64)
    coeffs[-1] = 1.0
    p = polynomial(coeffs)

    return _time(lambda: eigensolve_roots(p), n_iterations)


def main():
    """Run root finding benchmarks across orders."""
    orders = [4, 8, 16, 32, 64, 128]

    print("Eigenvalue Root Finding Benchmark")
    print("=" * 58)
    print(
        f"{'Order':>8} {'Companion (ms)':>16} {'Lobatto (ms)':>16} {'Laguerre (ms)':>16}"
    )
    print("-" * 58)

    for order in orders:
        ms_companion = benchmark_roots(order)
        ms_lobatto = _time(lambda: eigensolve_roots_lobatto(order), 10)
        ms_laguerre = _time(lambda: eigensolve_roots_laguerre(order), 10)

        print(
            f"{order:>8} {ms_companion:>16.3f} {ms_lobatto:>16.3f} {ms_laguerre:>16.3f}"
        )


if __name__ == "__main__":
    main()
