"""Cubic spline interpolation over equidistant knots for PyTorch tensors.

Convenience Functions
---------------------
cubic_spline
    Create a cubic spline interpolator from samples (fit + callable).

Cubic Splines
-------------
cubic_spline_fit
    Fit a cubic spline to equidistant samples.
cubic_spline_evaluate
    Evaluate a cubic spline at query points.
cubic_spline_derivatives
    Solve for the first derivatives at the knots.
hermite_basis, hermite_basis_derivative
    Cubic Hermite basis polynomials on [0, 1] and their derivatives.

Interpolation Methods
---------------------
InterpolationMethod
    Abstract ``init`` / ``evaluate`` / ``get_derivatives`` capability.
CubicSplineInterpolation
    Stateful cubic spline with settable boundary derivatives.

Linear Systems
--------------
tridiagonal_solve
    Thomas algorithm for tridiagonal systems.

Data Types
----------
CubicSpline
    Samples, knot derivatives and interval bounds.

Exceptions
----------
SplineError
    Base exception for spline operations.
KnotError
    Invalid equidistant grid.
SingularMatrixError
    Zero pivot in tridiagonal elimination.
"""

# Import base exception first
from ._spline_error import SplineError

# Import exception subclasses
from ._knot_error import KnotError
from ._singular_matrix_error import SingularMatrixError

# Import spline implementations
from ._cubic_spline import (
    CubicSpline,
    CubicSplineInterpolation,
    cubic_spline,
    cubic_spline_derivatives,
    cubic_spline_evaluate,
    cubic_spline_fit,
    hermite_basis,
    hermite_basis_derivative,
)
from ._interpolation_method import InterpolationMethod
from ._tridiagonal_solve import tridiagonal_solve

__all__ = [
    "CubicSpline",
    "CubicSplineInterpolation",
    "InterpolationMethod",
    "KnotError",
    "SingularMatrixError",
    "SplineError",
    "cubic_spline",
    "cubic_spline_derivatives",
    "cubic_spline_evaluate",
    "cubic_spline_fit",
    "hermite_basis",
    "hermite_basis_derivative",
    "tridiagonal_solve",
]
