"""Cubic spline interpolation over equidistant knots."""

from typing import Callable, Optional

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._cubic_spline_evaluate import cubic_spline_evaluate
from ._cubic_spline_fit import cubic_spline_fit


@tensorclass
class CubicSpline:
    """Piecewise cubic Hermite interpolant on an equidistant grid.

    Attributes
    ----------
    y : Tensor
        Samples at the knots, shape (n+1, *value_shape).
    dydx : Tensor
        First derivatives at the knots, shape (n+1, *value_shape).
        dydx[0] and dydx[n] are the clamped boundary conditions.
    a : Tensor
        Left interval bound x[0], float64 scalar.
    b : Tensor
        Right interval bound x[n], float64 scalar. Knot i sits at
        a + i*(b - a)/n.
    """

    y: Tensor
    dydx: Tensor
    a: Tensor
    b: Tensor


def cubic_spline(
    a: float,
    b: float,
    n: int,
    y: torch.Tensor,
    boundary_values: Optional[torch.Tensor] = None,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a cubic spline interpolator from equidistant samples.

    This is a convenience function that fits a cubic spline and returns
    a callable that evaluates it.

    Parameters
    ----------
    a, b : float
        Interval bounds.
    n : int
        Number of intervals. y must hold at least n+1 samples.
    y : Tensor
        Samples at a, a+h, ..., b.
    boundary_values : Tensor, optional
        First derivatives at a and b. Default is zero slope.

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points. Points
        outside [a, b] evaluate to the nearest boundary sample.

    Examples
    --------
    >>> import torch
    >>> y = torch.sin(torch.linspace(0, 1, 11) * 2 * torch.pi)
    >>> f = cubic_spline(0.0, 1.0, 10, y)
    >>> f(torch.tensor([0.25]))
    """
    fitted = cubic_spline_fit(a, b, n, y, boundary_values=boundary_values)
    return lambda z: cubic_spline_evaluate(fitted, z)
