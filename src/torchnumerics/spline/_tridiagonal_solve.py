import warnings

import torch
from torch import Tensor

from ._singular_matrix_error import SingularMatrixError


def _is_diagonally_dominant(lower: Tensor, diag: Tensor, upper: Tensor) -> bool:
    # Row i sums |lower[i-1]| + |upper[i]|
    off = torch.nn.functional.pad(upper.abs(), (0, 1)) + torch.nn.functional.pad(
        lower.abs(), (1, 0)
    )
    return bool(torch.all(diag.abs() >= off))


def tridiagonal_solve(
    lower: Tensor,
    diag: Tensor,
    upper: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Ax = c using the Thomas algorithm.

    The matrix A has the form:
        [d0  u0   0   0  ...  0     0  ]
        [l0  d1  u1   0  ...  0     0  ]
        [ 0  l1  d2  u2  ...  0     0  ]
        [        ...                   ]
        [ 0   0   0   0  ... lk-2  dk-1]

    Parameters
    ----------
    lower : Tensor
        Lower diagonal, shape (k-1,)
    diag : Tensor
        Main diagonal, shape (k,)
    upper : Tensor
        Upper diagonal, shape (k-1,)
    rhs : Tensor
        Right-hand side, shape (*batch, k)

    Returns
    -------
    Tensor
        Solution x, shape (*batch, k)

    Raises
    ------
    ValueError
        If the coefficient tensors are not 1-D or their lengths do not
        match each other and the last dimension of ``rhs``.
    SingularMatrixError
        If a zero pivot is met during forward elimination.

    Warns
    -----
    RuntimeWarning
        If A is not diagonally dominant. No pivoting is performed, so the
        solve may be inaccurate.

    Notes
    -----
    Forward elimination subtracts ``lower[i-1] / diag'[i-1]`` times the
    previous row from row i, then back substitution runs from the last
    row to the first. The inputs are never written to, so autograd
    flows through the solve.
    """
    if diag.dim() != 1 or lower.dim() != 1 or upper.dim() != 1:
        raise ValueError(
            "lower, diag and upper must be 1-D, got shapes "
            f"{tuple(lower.shape)}, {tuple(diag.shape)}, {tuple(upper.shape)}"
        )

    k = diag.shape[0]

    if k == 0:
        raise ValueError("diag must not be empty")
    if rhs.dim() == 0 or rhs.shape[-1] != k:
        raise ValueError(
            f"rhs must have last dimension {k}, got shape {tuple(rhs.shape)}"
        )
    if lower.shape[0] != k - 1 or upper.shape[0] != k - 1:
        raise ValueError(
            f"lower and upper must have length {k - 1}, got "
            f"{lower.shape[0]} and {upper.shape[0]}"
        )

    if not _is_diagonally_dominant(lower, diag, upper):
        warnings.warn(
            "Tridiagonal matrix is not diagonally dominant; elimination "
            "without pivoting may be inaccurate.",
            RuntimeWarning,
            stacklevel=2,
        )

    # rhs: (*batch, k) -> (k, *batch)
    rhs_t = rhs.movedim(-1, 0)

    if diag[0] == 0:
        raise SingularMatrixError("Zero pivot in row 0")

    if k == 1:
        return (rhs_t[0] / diag[0]).unsqueeze(-1)

    # Forward elimination using lists to avoid in-place operations
    c_prime_list = [upper[0] / diag[0]]
    d_prime_list = [rhs_t[0] / diag[0]]

    for i in range(1, k):
        denom = diag[i] - lower[i - 1] * c_prime_list[i - 1]
        if denom == 0:
            raise SingularMatrixError(f"Zero pivot in row {i}")
        if i < k - 1:
            c_prime_list.append(upper[i] / denom)
        d_prime_list.append(
            (rhs_t[i] - lower[i - 1] * d_prime_list[i - 1]) / denom
        )

    # Back substitution, from back to front
    x_list = [None] * k
    x_list[k - 1] = d_prime_list[k - 1]

    for i in range(k - 2, -1, -1):
        x_list[i] = d_prime_list[i] - c_prime_list[i] * x_list[i + 1]

    x = torch.stack(x_list, dim=0)

    # (k, *batch) -> (*batch, k)
    return x.movedim(0, -1)
