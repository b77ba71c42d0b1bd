"""Benchmarks for equidistant cubic spline fitting and evaluation."""

from __future__ import annotations

import math

import torch

from benchmarks._timing import benchmark, print_comparison
from torchnumerics.spline import cubic_spline_evaluate, cubic_spline_fit


def bench_fit(n: int) -> None:
    y = torch.sin(torch.linspace(0, 2 * math.pi, n + 1, dtype=torch.float64))
    result = benchmark(cubic_spline_fit, 0.0, 2 * math.pi, n, y)
    print_comparison(f"cubic_spline_fit (n={n})", result)


def bench_evaluate(n: int, n_queries: int = 10000) -> None:
    y = torch.sin(torch.linspace(0, 2 * math.pi, n + 1, dtype=torch.float64))
    spline = cubic_spline_fit(0.0, 2 * math.pi, n, y)
    z = torch.rand(n_queries, dtype=torch.float64) * 2 * math.pi
    result = benchmark(cubic_spline_evaluate, spline, z)
    print_comparison(
        f"cubic_spline_evaluate (n={n}, queries={n_queries})", result
    )


if __name__ == "__main__":
    for n in [16, 128, 1024]:
        bench_fit(n)
    for n in [16, 1024]:
        bench_evaluate(n)
