from typing import Union

import torch
from torch import Tensor

from .._tridiagonal_solve import tridiagonal_solve


def cubic_spline_derivatives(
    a: float,
    b: float,
    y: Tensor,
    dydx0: Union[float, Tensor] = 0.0,
    dydxn: Union[float, Tensor] = 0.0,
) -> Tensor:
    """
    Compute the first derivatives of a cubic spline at equidistant knots.

    The derivatives at the end knots are clamped to ``dydx0`` and
    ``dydxn``. The interior derivatives d[1], ..., d[n-1] solve

        d[i-1] + 4*d[i] + d[i+1] = (3/h) * (y[i+1] - y[i-1])

    where the known boundary terms d[0] and d[n] are moved to the
    right-hand side of the first and last rows.

    Parameters
    ----------
    a, b : float
        Interval bounds x[0] and x[n].
    y : Tensor
        Samples at the knots, shape (n+1, *value_shape).
    dydx0, dydxn : float or Tensor
        Clamped derivatives at x[0] and x[n], broadcastable to value_shape.

    Returns
    -------
    Tensor
        Derivatives at the knots, shape (n+1, *value_shape).
    """
    n = y.shape[0] - 1
    h = (b - a) / n
    value_shape = y.shape[1:]

    y_flat = y.reshape(n + 1, -1)  # (n+1, n_values)

    d0 = torch.broadcast_to(
        torch.as_tensor(dydx0, dtype=y.dtype, device=y.device), value_shape
    ).reshape(1, -1)
    dn = torch.broadcast_to(
        torch.as_tensor(dydxn, dtype=y.dtype, device=y.device), value_shape
    ).reshape(1, -1)

    if n == 1:
        # No interior knots, only the boundary conditions
        return torch.cat([d0, dn], dim=0).reshape(y.shape)

    rhs = (3 / h) * (y_flat[2:] - y_flat[:-2])  # (n-1, n_values)

    if n == 2:
        # 1x1 system: the single row is both first and last
        interior = (rhs - d0 - dn) / 4
    else:
        rhs = torch.cat([rhs[:1] - d0, rhs[1:-1], rhs[-1:] - dn], dim=0)

        diag = torch.full((n - 1,), 4.0, dtype=y.dtype, device=y.device)
        upper = torch.ones(n - 2, dtype=y.dtype, device=y.device)
        lower = torch.ones(n - 2, dtype=y.dtype, device=y.device)

        interior = tridiagonal_solve(lower, diag, upper, rhs.T).T

    return torch.cat([d0, interior, dn], dim=0).reshape(y.shape)
