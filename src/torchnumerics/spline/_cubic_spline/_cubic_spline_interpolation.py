from typing import Optional, Union

import torch
from torch import Tensor

from .._interpolation_method import InterpolationMethod
from .._spline_error import SplineError
from ._cubic_spline import CubicSpline
from ._cubic_spline_evaluate import cubic_spline_evaluate
from ._cubic_spline_fit import cubic_spline_fit


class CubicSplineInterpolation(InterpolationMethod):
    """Cubic spline interpolation with clamped boundary derivatives.

    ``init`` fits the spline with zero slope at both ends.
    ``set_boundary_conditions`` replaces the two end derivatives and
    re-solves for every interior derivative.

    Examples
    --------
    >>> import torch
    >>> method = CubicSplineInterpolation()
    >>> method.init(0.0, 1.0, 4, torch.tensor([0.0, 1.0, 0.0, 1.0, 0.0]))
    >>> method.set_boundary_conditions(1.0, -1.0)
    >>> method.evaluate(0.3)
    """

    def __init__(self) -> None:
        self._spline: Optional[CubicSpline] = None

    @property
    def spline(self) -> CubicSpline:
        if self._spline is None:
            raise SplineError(
                "CubicSplineInterpolation used before init(a, b, n, y)"
            )
        return self._spline

    def init(self, a: float, b: float, n: int, y: Tensor) -> None:
        """Fit the spline to y on [a, b] with zero slope at both ends."""
        self._spline = cubic_spline_fit(a, b, n, torch.as_tensor(y))

    def set_boundary_conditions(
        self,
        dydx0: Union[float, Tensor],
        dydxn: Union[float, Tensor],
    ) -> None:
        """Clamp the derivatives at a and b and recompute the interior ones."""
        spline = self.spline
        y = spline.y
        boundary_values = torch.stack(
            [
                torch.as_tensor(dydx0, dtype=y.dtype, device=y.device).expand(
                    y.shape[1:]
                ),
                torch.as_tensor(dydxn, dtype=y.dtype, device=y.device).expand(
                    y.shape[1:]
                ),
            ]
        )
        self._spline = cubic_spline_fit(
            float(spline.a),
            float(spline.b),
            y.shape[0] - 1,
            y,
            boundary_values=boundary_values,
        )

    def evaluate(self, z: Union[float, Tensor]) -> Tensor:
        """Spline value at z, clamped to the boundary samples outside [a, b]."""
        return cubic_spline_evaluate(self.spline, z)

    def get_derivatives(self) -> Tensor:
        """Copy of the knot derivatives, shape (n+1, *value_shape)."""
        return self.spline.dydx.clone()
