from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import torch
from torch import Tensor

from .._knot_error import KnotError
from ._cubic_spline_derivatives import cubic_spline_derivatives

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def cubic_spline_fit(
    a: float,
    b: float,
    n: int,
    y: Tensor,
    boundary_values: Optional[Tensor] = None,
) -> CubicSpline:
    """
    Fit a cubic spline to samples at equidistant knots.

    Parameters
    ----------
    a, b : float
        Interval bounds. The knots are x[i] = a + i*h with h = (b - a)/n.
    n : int
        Number of intervals.
    y : Tensor
        Samples, shape (m, *value_shape) with m >= n+1. Only the first
        n+1 samples are used; they are copied.
    boundary_values : Tensor, optional
        Clamped first derivatives at x[0] and x[n], shape (2, *value_shape).
        Default is zero slope at both ends.

    Returns
    -------
    CubicSpline
        Fitted spline.

    Raises
    ------
    KnotError
        If n < 1 or b <= a.
    ValueError
        If y has fewer than n+1 samples or boundary_values does not hold
        two entries.
    """
    if n < 1:
        raise KnotError(f"Need at least 1 interval, got {n}")
    if not b > a:
        raise KnotError(f"Interval must satisfy a < b, got [{a}, {b}]")

    if y.dim() == 0 or y.shape[0] < n + 1:
        raise ValueError(
            f"Need {n + 1} samples for {n} intervals, got shape {tuple(y.shape)}"
        )

    if not y.is_floating_point():
        y = y.to(torch.get_default_dtype())

    y = y[: n + 1].clone()

    if boundary_values is None:
        boundary_values = torch.zeros(
            2, *y.shape[1:], dtype=y.dtype, device=y.device
        )
    else:
        boundary_values = torch.as_tensor(
            boundary_values, dtype=y.dtype, device=y.device
        )
        if boundary_values.dim() == 0 or boundary_values.shape[0] != 2:
            raise ValueError(
                "boundary_values must have leading dimension 2, got shape "
                f"{tuple(boundary_values.shape)}"
            )

    dydx = cubic_spline_derivatives(
        a, b, y, boundary_values[0], boundary_values[1]
    )

    # Lazy import to avoid circular dependency
    from ._cubic_spline import CubicSpline

    return CubicSpline(
        y=y,
        dydx=dydx,
        a=torch.tensor(float(a), dtype=torch.float64),
        b=torch.tensor(float(b), dtype=torch.float64),
        batch_size=[],
    )
