from ._spline_error import SplineError


class SingularMatrixError(SplineError, ZeroDivisionError):
    """Raised when elimination without pivoting meets a zero pivot."""

    pass
