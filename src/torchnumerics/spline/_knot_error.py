from ._spline_error import SplineError


class KnotError(SplineError):
    """Raised for an invalid equidistant grid (fewer than one interval, empty interval)."""

    pass
