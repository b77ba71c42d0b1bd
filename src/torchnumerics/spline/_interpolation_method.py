"""Capability shared by interpolation methods on equidistant grids."""

from abc import ABC, abstractmethod
from typing import Union

from torch import Tensor


class InterpolationMethod(ABC):
    """Interpolate samples taken at n+1 equidistant points of [a, b]."""

    @abstractmethod
    def init(self, a: float, b: float, n: int, y: Tensor) -> None:
        """Initialize from interval bounds, interval count and n+1 samples."""
        pass

    @abstractmethod
    def evaluate(self, z: Union[float, Tensor]) -> Tensor:
        """Return the interpolated value at position(s) z."""
        pass

    @abstractmethod
    def get_derivatives(self) -> Tensor:
        """Return the first derivatives at the knots."""
        pass
