"""Hypothesis strategies for spline and transform testing."""

from ._complex_sequences import (
    complex_dtypes,
    complex_sequences,
    non_power_of_two_lengths,
)
from ._real_numbers import real_numbers
from ._sample_sets import sample_sets
from ._tridiagonal_systems import tridiagonal_systems

__all__ = [
    # Numeric strategies
    "real_numbers",
    # Spline strategies
    "sample_sets",
    "tridiagonal_systems",
    # Transform strategies
    "complex_sequences",
    "non_power_of_two_lengths",
    # Dtype strategies
    "complex_dtypes",
]
