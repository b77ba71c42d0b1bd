"""Benchmarks for the recursive radix-2 transforms against torch.fft.

Run from the repository root with ``python -m benchmarks.transform.bench_transforms``.
"""

from __future__ import annotations

import torch

import torchnumerics.transform as T
from benchmarks._timing import benchmark, print_comparison


class BenchTransforms:
    """Benchmarks for transform functions."""

    def __init__(
        self, warmup: int = 3, iterations: int = 10, device: str = "cpu"
    ):
        self.warmup = warmup
        self.iterations = iterations
        self.device = device

    def _bench(self, func, *args, **kwargs) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_fast_fourier_transform(self, n: int = 1024) -> None:
        """Benchmark fast_fourier_transform vs torch.fft.fft."""
        x = torch.randn(n, dtype=torch.complex128, device=self.device)

        tn_time = self._bench(T.fast_fourier_transform, x)
        torch_time = self._bench(torch.fft.fft, x)

        print_comparison(f"fast_fourier_transform (n={n})", tn_time, torch_time)

    def bench_inverse_fast_fourier_transform(self, n: int = 1024) -> None:
        """Benchmark inverse_fast_fourier_transform vs torch.fft.ifft."""
        x = torch.randn(n, dtype=torch.complex128, device=self.device)

        tn_time = self._bench(T.inverse_fast_fourier_transform, x)
        torch_time = self._bench(torch.fft.ifft, x, norm="forward")

        print_comparison(
            f"inverse_fast_fourier_transform (n={n})", tn_time, torch_time
        )

    def bench_batched(self, batch: int = 64, n: int = 256) -> None:
        """Benchmark a batch of rows transformed along the last dim."""
        x = torch.randn(batch, n, dtype=torch.complex128, device=self.device)

        tn_time = self._bench(T.fast_fourier_transform, x)
        torch_time = self._bench(torch.fft.fft, x)

        print_comparison(
            f"fast_fourier_transform (batch={batch}, n={n})",
            tn_time,
            torch_time,
        )

    def run_all(self) -> None:
        print("=" * 60)
        print(f"Transform Benchmarks (device={self.device})")
        print("=" * 60)
        self.bench_fast_fourier_transform()
        self.bench_inverse_fast_fourier_transform()
        self.bench_batched()

    def run_scaling(self) -> None:
        print("\n--- Length Scaling ---")
        for n in [64, 256, 1024, 4096]:
            self.bench_fast_fourier_transform(n=n)


if __name__ == "__main__":
    bench = BenchTransforms(warmup=5, iterations=20, device="cpu")
    bench.run_all()
    bench.run_scaling()

    if torch.cuda.is_available():
        print("\n" + "=" * 60)
        bench = BenchTransforms(warmup=5, iterations=20, device="cuda")
        bench.run_all()
