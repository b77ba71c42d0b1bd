"""torchnumerics: cubic splines and radix-2 Fourier transforms for PyTorch tensors."""

from . import (
    spline,
    transform,
)

__all__ = [
    "spline",
    "transform",
]

__version__ = "0.1.0"
