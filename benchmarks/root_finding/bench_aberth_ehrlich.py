"""Benchmark polynomial root finding.

Compares Aberth-Ehrlich iteration (O(n^2 * iterations)) with the companion
matrix eigenvalues of numpy.roots on reverse Bessel polynomials, whose
roots are the Bessel filter poles.
"""

import time

import numpy as np
import torch

from torchiir.filter_design import bessel_polynomial
from torchiir.root_finding import aberth_ehrlich


def benchmark_roots(coeffs: torch.Tensor, method: str, n_iterations: int = 10) -> float:
    """Average time per root finding in milliseconds.

    Parameters
    ----------
    coeffs : Tensor
        Polynomial coefficients in ascending order.
    method : str
        'aberth' or 'companion'.
    n_iterations : int
        Number of iterations for timing.
    """
    if method == "aberth":
        func = lambda: aberth_ehrlich(coeffs)
    else:
        descending = coeffs.flip(0).numpy()
        func = lambda: np.roots(descending)

    for _ in range(3):
        func()

    start = time.perf_counter()
    for _ in range(n_iterations):
        func()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000


def max_root_error(coeffs: torch.Tensor) -> float:
    """Largest distance from an Aberth root to the nearest numpy root."""
    ours = aberth_ehrlich(coeffs).numpy()
    reference = np.roots(coeffs.flip(0).numpy())
    return float(
        max(np.min(np.abs(reference - r)) for r in ours)
    )


def main():
    """Run root finding benchmarks across Bessel polynomial degrees."""
    degrees = [4, 8, 11, 12, 16, 20, 25]

    print("Bessel Polynomial Root Finding Benchmark")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Companion (ms)':>16} {'Aberth (ms)':>16} {'Max error':>16}"
    )
    print("-" * 70)

    for degree in degrees:
        coeffs = bessel_polynomial(degree)

        ms_companion = benchmark_roots(coeffs, "companion")
        ms_aberth = benchmark_roots(coeffs, "aberth")
        error = max_root_error(coeffs)

        print(
            f"{degree:>8} {ms_companion:>16.4f} {ms_aberth:>16.4f} {error:>16.2e}"
        )

    print()
    print("Notes:")
    print("- Companion: O(n^3) via eigenvalue decomposition (numpy.roots)")
    print("- Aberth: O(n^2 * k) where k is iterations (typically 10-20)")
    print("- Filter design root-finds Bessel poles above order 10")


if __name__ == "__main__":
    main()
