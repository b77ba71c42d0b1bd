"""Recursive radix-2 inverse fast Fourier transform."""

from torch import Tensor

from ._radix_2 import _as_complex_sequence, _radix_2


def inverse_fast_fourier_transform(
    input: Tensor,
    *,
    dim: int = -1,
) -> Tensor:
    r"""Compute the unnormalized inverse discrete Fourier transform.

    .. math::
        v[k] = \sum_{j=0}^{n-1} c[j] \cdot e^{2\pi i j k / n}

    No :math:`1/n` factor is applied.

    Parameters
    ----------
    input : Tensor
        Input tensor. Real input is promoted to complex. The size along
        ``dim`` must be a power of two.
    dim : int, optional
        The dimension along which to compute the transform.
        Default: ``-1`` (last dimension).

    Returns
    -------
    Tensor
        Complex tensor with the shape of ``input``.

    Raises
    ------
    ValueError
        If the size along ``dim`` is not a power of two.

    Examples
    --------
    A unit impulse transforms to a constant sequence:

    >>> c = torch.tensor([1, 0, 0, 0], dtype=torch.complex128)
    >>> inverse_fast_fourier_transform(c)
    tensor([1.+0.j, 1.+0.j, 1.+0.j, 1.+0.j], dtype=torch.complex128)

    Round trip with the forward transform:

    >>> x = torch.randn(64, dtype=torch.complex128)
    >>> X = fast_fourier_transform(x)
    >>> torch.allclose(inverse_fast_fourier_transform(X) / 64, x)
    True

    Notes
    -----
    The sequence is split into even and odd indexed halves, each half is
    transformed recursively, and the halves are combined with the twiddle
    factors :math:`\omega^j = e^{2\pi i j / n}`:

    .. math::
        v[j] = z_1[j] + \omega^j z_2[j], \quad
        v[j + n/2] = z_1[j] - \omega^j z_2[j]

    Recursion depth is :math:`\log_2 n`. This equals
    ``n * torch.fft.ifft(input)``.

    See Also
    --------
    fast_fourier_transform : The forward transform.
    """
    x = _as_complex_sequence(input, dim)

    return _radix_2(x, 1.0).movedim(-1, dim)


# Short alias
ifft = inverse_fast_fourier_transform
