"""Recursive radix-2 decimation-in-time butterfly shared by fft and ifft."""

import math

import torch
from torch import Tensor


def _as_complex_sequence(input: Tensor, dim: int) -> Tensor:
    """Validate the transform length and move ``dim`` last as a complex tensor."""
    if input.dim() == 0:
        raise ValueError("input must have at least one dimension")

    n = input.shape[dim]
    if n < 1 or n & (n - 1) != 0:
        raise ValueError(
            f"Transform length must be a power of two, got {n} along dim {dim}"
        )

    x = input.movedim(dim, -1)

    if not x.is_complex():
        if x.dtype not in (torch.float32, torch.float64):
            x = x.to(torch.get_default_dtype())
        x = torch.complex(x, torch.zeros_like(x))

    return x


def _radix_2(x: Tensor, sign: float) -> Tensor:
    """Unnormalized DFT along the last dim with twiddle exp(sign*2*pi*i*j/n)."""
    n = x.shape[-1]

    if n == 1:
        return x.clone()

    m = n // 2

    z1 = _radix_2(x[..., 0::2], sign)
    z2 = _radix_2(x[..., 1::2], sign)

    # omega^j for j = 0, ..., m-1 with omega = exp(sign*2*pi*i/n)
    j = torch.arange(m, dtype=x.real.dtype, device=x.device)
    twiddle = torch.polar(torch.ones_like(j), sign * 2 * math.pi * j / n)

    w = twiddle * z2

    return torch.cat([z1 + w, z1 - w], dim=-1)
