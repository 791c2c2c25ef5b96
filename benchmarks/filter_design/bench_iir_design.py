"""Benchmarks for IIR filter design functions.

Times each design family against the matching scipy.signal designer and
reports the largest magnitude-response difference, so that speed and
agreement are read from the same run.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import scipy.signal
import torch

from torchiir.filter_design import (
    bessel_design,
    butterworth_design,
    chebyshev_type_1_design,
    chebyshev_type_2_design,
    elliptic_design,
    linkwitz_riley_design,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Mean, standard deviation, minimum and maximum time in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    times: dict[str, dict[str, float]],
    max_error: float,
) -> None:
    """Print timings for several implementations and their disagreement."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, t in times.items():
        slowdown = t["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(t['mean'])} +/- {format_time(t['std'])}{suffix}"
        )
    print(f"  max |H| difference: {max_error:.2e}")


def sos_magnitude(sos: np.ndarray, num_points: int = 512) -> np.ndarray:
    _, h = scipy.signal.sosfreqz(sos, worN=num_points)
    return np.abs(h)


class BenchIIRDesign:
    """Benchmarks for the IIR design functions."""

    def __init__(self, warmup: int = 3, iterations: int = 20):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def _compare(
        self,
        name: str,
        ours: Callable[[], Any],
        reference: Callable[[], np.ndarray],
    ) -> None:
        times = {
            "torchiir": self._bench(ours),
            "scipy.signal": self._bench(reference),
        }

        ours_h = sos_magnitude(ours().sos.numpy())
        reference_h = sos_magnitude(reference())
        # Both peak-normalize so that families normalized at a
        # different reference point still compare
        error = np.max(
            np.abs(ours_h / ours_h.max() - reference_h / reference_h.max())
        )

        print_comparison(name, times, error)

    def bench_family(self, family: str, order: int = 6) -> None:
        """Benchmark one family as a lowpass against scipy.signal.

        Parameters
        ----------
        family : str
            One of "butterworth", "chebyshev_type_1", "chebyshev_type_2",
            "elliptic", "bessel".
        order : int, optional
            Filter order. Default is 6.
        """
        fs = 48000.0
        cutoff = 2000.0
        options = dict(dtype=torch.float64)

        if family == "butterworth":
            ours = lambda: butterworth_design("lowpass", cutoff, fs, order, **options)
            reference = lambda: scipy.signal.butter(
                order, cutoff, fs=fs, output="sos"
            )
        elif family == "chebyshev_type_1":
            ours = lambda: chebyshev_type_1_design(
                "lowpass", cutoff, fs, order, 1.0, **options
            )
            reference = lambda: scipy.signal.cheby1(
                order, 1.0, cutoff, fs=fs, output="sos"
            )
        elif family == "chebyshev_type_2":
            ours = lambda: chebyshev_type_2_design(
                "lowpass", cutoff, fs, order, 40.0, **options
            )
            reference = lambda: scipy.signal.cheby2(
                order, 40.0, cutoff, fs=fs, output="sos"
            )
        elif family == "elliptic":
            ours = lambda: elliptic_design(
                "lowpass", cutoff, fs, order, 1.0, 40.0, **options
            )
            reference = lambda: scipy.signal.ellip(
                order, 1.0, 40.0, cutoff, fs=fs, output="sos"
            )
        elif family == "bessel":
            ours = lambda: bessel_design("lowpass", cutoff, fs, order, **options)
            reference = lambda: scipy.signal.bessel(
                order, cutoff, fs=fs, output="sos"
            )
        else:
            raise ValueError(f"Unknown family: {family}")

        self._compare(f"{family} lowpass (order={order})", ours, reference)

    def bench_bandpass(self, order: int = 4) -> None:
        """Benchmark the analog band transform against scipy.signal.butter."""
        fs = 48000.0
        edges = (500.0, 4000.0)

        self._compare(
            f"butterworth bandpass, transform (order={order})",
            lambda: butterworth_design(
                "bandpass",
                edges,
                fs,
                order,
                band_strategy="transform",
                dtype=torch.float64,
            ),
            lambda: scipy.signal.butter(
                order, edges, btype="bandpass", fs=fs, output="sos"
            ),
        )

    def bench_bandstop_composite(self, order: int = 4) -> None:
        """Time the parallel-section bandstop, which root-finds its numerator."""
        fs = 48000.0
        edges = (500.0, 4000.0)

        t = self._bench(
            butterworth_design,
            "bandstop",
            edges,
            fs,
            order,
            dtype=torch.float64,
        )

        name = f"butterworth bandstop, composite (order={order})"
        print(f"\n{name}")
        print("-" * len(name))
        print(f"  torchiir: {format_time(t['mean'])} +/- {format_time(t['std'])}")

    def bench_linkwitz_riley(self, order: int = 4) -> None:
        fs = 48000.0

        t = self._bench(
            linkwitz_riley_design, "lowpass", 2000.0, fs, order, dtype=torch.float64
        )

        name = f"linkwitz_riley lowpass (order={order})"
        print(f"\n{name}")
        print("-" * len(name))
        print(f"  torchiir: {format_time(t['mean'])} +/- {format_time(t['std'])}")

    def run_all(self) -> None:
        """Run all IIR design benchmarks."""
        print("=" * 60)
        print("IIR DESIGN BENCHMARKS")
        print("=" * 60)

        print("\n--- Lowpass Designs vs scipy.signal ---")
        for family in (
            "butterworth",
            "chebyshev_type_1",
            "chebyshev_type_2",
            "elliptic",
            "bessel",
        ):
            self.bench_family(family)

        print("\n--- Band Designs ---")
        self.bench_bandpass()
        self.bench_bandstop_composite()
        self.bench_linkwitz_riley()

    def run_scaling(self) -> None:
        """Run order scaling benchmarks."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Order Scaling (elliptic) ---")
        for order in [2, 4, 8, 12]:
            self.bench_family("elliptic", order=order)

        print("\n--- Order Scaling (bessel, root-found above 10) ---")
        for order in [4, 10, 11, 12]:
            self.bench_family("bessel", order=order)


if __name__ == "__main__":
    bench = BenchIIRDesign(warmup=3, iterations=20)
    bench.run_all()
    print("\n")
    bench.run_scaling()
