"""Radix-2 Fourier transforms for power-of-two length signals.

Transforms
----------
fast_fourier_transform, fft
    Unnormalized forward DFT by recursive decimation in time.
inverse_fast_fourier_transform, ifft
    Unnormalized inverse DFT (positive exponent, no 1/n factor).
"""

from ._fast_fourier_transform import fast_fourier_transform, fft
from ._inverse_fast_fourier_transform import (
    ifft,
    inverse_fast_fourier_transform,
)

__all__ = [
    "fast_fourier_transform",
    "fft",
    "ifft",
    "inverse_fast_fourier_transform",
]
