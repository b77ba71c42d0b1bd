"""Timing helpers shared by the benchmark scripts."""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Seconds per call of ``func(*args, **kwargs)``: mean, std, min, max."""
    for _ in range(warmup):
        func(*args, **kwargs)

    samples = np.empty(iterations)
    for i in range(iterations):
        tic = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        samples[i] = time.perf_counter() - tic

    return {
        "mean": float(samples.mean()),
        "std": float(samples.std()),
        "min": float(samples.min()),
        "max": float(samples.max()),
    }


_UNITS = ((1e-6, 1e9, "ns"), (1e-3, 1e6, "us"), (1.0, 1e3, "ms"))


def format_time(seconds: float) -> str:
    for bound, scale, unit in _UNITS:
        if seconds < bound:
            return f"{seconds * scale:.3f}{unit}"
    return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    tn_time: dict[str, float],
    baseline_time: dict[str, float] | None = None,
    baseline_name: str = "torch.fft",
) -> None:
    """Print benchmark comparison results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchnumerics: {format_time(tn_time['mean'])} +/- {format_time(tn_time['std'])}"
    )
    if baseline_time is not None:
        print(
            f"  {baseline_name}: {format_time(baseline_time['mean'])} +/- {format_time(baseline_time['std'])}"
        )
        ratio = tn_time["mean"] / baseline_time["mean"]
        print(f"  Ratio:         {ratio:.2f}x")
