from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._hermite_basis import hermite_basis

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def cubic_spline_evaluate(
    spline: CubicSpline,
    z: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a cubic spline at query points.

    On the interval [x_i, x_{i+1}] the spline is the cubic Hermite
    polynomial

        p(z) = y_i*H0(t) + y_{i+1}*H1(t) + h*d_i*H2(t) + h*d_{i+1}*H3(t)

    where t = (z - x_i)/h.

    Parameters
    ----------
    spline : CubicSpline
        Fitted cubic spline from cubic_spline_fit
    z : float or Tensor
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    Tensor
        Interpolated values, shape (*query_shape, *value_shape). Queries
        below a return y[0] and queries above b return y[n] exactly.
    """
    y = spline.y
    dydx = spline.dydx
    a = float(spline.a)
    b = float(spline.b)

    n = y.shape[0] - 1
    h = (b - a) / n

    # Positions use at least float64 regardless of the sample dtype
    position_dtype = torch.promote_types(y.dtype, torch.float64)

    if not isinstance(z, Tensor):
        z = torch.tensor(z, dtype=position_dtype, device=y.device)

    is_scalar = z.dim() == 0
    if is_scalar:
        z = z.unsqueeze(0)

    query_shape = z.shape
    z_flat = z.flatten().to(position_dtype)

    # Knot positions are reconstructed, not stored
    knots = a + h * torch.arange(n + 1, dtype=position_dtype, device=y.device)

    segment_idx = torch.searchsorted(knots, z_flat.contiguous(), right=True) - 1
    segment_idx = torch.clamp(segment_idx, 0, n - 1)

    t = torch.clamp((z_flat - knots[segment_idx]) / h, 0.0, 1.0).to(y.dtype)

    y_i = y[segment_idx]
    y_ip1 = y[segment_idx + 1]
    d_i = dydx[segment_idx]
    d_ip1 = dydx[segment_idx + 1]

    value_shape = y.shape[1:]
    below = z_flat < a
    above = z_flat > b
    if value_shape:
        expand = (-1, *([1] * len(value_shape)))
        t = t.view(expand)
        below = below.view(expand)
        above = above.view(expand)

    h0, h1, h2, h3 = hermite_basis(t)

    result = y_i * h0 + y_ip1 * h1 + h * d_i * h2 + h * d_ip1 * h3

    # Clamp to the boundary samples outside [a, b]
    result = torch.where(below, y[0], result)
    result = torch.where(above, y[n], result)

    result = result.view(*query_shape, *value_shape)

    if is_scalar:
        result = result.squeeze(0)

    return result
