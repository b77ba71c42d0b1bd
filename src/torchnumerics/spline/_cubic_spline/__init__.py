from ._cubic_spline import (
    CubicSpline,
    cubic_spline,
)
from ._cubic_spline_derivatives import cubic_spline_derivatives
from ._cubic_spline_evaluate import cubic_spline_evaluate
from ._cubic_spline_fit import cubic_spline_fit
from ._cubic_spline_interpolation import CubicSplineInterpolation
from ._hermite_basis import hermite_basis, hermite_basis_derivative

__all__ = [
    "CubicSpline",
    "CubicSplineInterpolation",
    "cubic_spline",
    "cubic_spline_derivatives",
    "cubic_spline_evaluate",
    "cubic_spline_fit",
    "hermite_basis",
    "hermite_basis_derivative",
]
