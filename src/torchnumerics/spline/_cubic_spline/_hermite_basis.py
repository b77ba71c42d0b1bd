"""Cubic Hermite basis polynomials on the unit interval."""

from typing import Tuple

from torch import Tensor


def hermite_basis(t: Tensor) -> Tuple[Tensor, Tensor, Tensor, Tensor]:
    """
    Evaluate the four cubic Hermite basis polynomials at t.

    For t in [0, 1]:
    - H0(t) = 1 - 3t^2 + 2t^3  -- value at left endpoint
    - H1(t) = 3t^2 - 2t^3      -- value at right endpoint
    - H2(t) = t - 2t^2 + t^3   -- derivative at left endpoint
    - H3(t) = -t^2 + t^3       -- derivative at right endpoint

    Parameters
    ----------
    t : Tensor
        Normalized position(s), any shape.

    Returns
    -------
    h0, h1, h2, h3 : Tensor
        Basis values, each with the shape of ``t``.
    """
    t2 = t * t
    t3 = t2 * t

    h0 = 1 - 3 * t2 + 2 * t3
    h1 = 3 * t2 - 2 * t3
    h2 = t - 2 * t2 + t3
    h3 = t3 - t2

    return h0, h1, h2, h3


def hermite_basis_derivative(t: Tensor) -> Tuple[Tensor, Tensor, Tensor, Tensor]:
    """
    Evaluate the first derivatives d/dt of the cubic Hermite basis at t.

    - H0'(t) = -6t + 6t^2
    - H1'(t) = 6t - 6t^2
    - H2'(t) = 1 - 4t + 3t^2
    - H3'(t) = -2t + 3t^2
    """
    t2 = t * t

    dh0 = 6 * t2 - 6 * t
    dh1 = 6 * t - 6 * t2
    dh2 = 1 - 4 * t + 3 * t2
    dh3 = 3 * t2 - 2 * t

    return dh0, dh1, dh2, dh3
