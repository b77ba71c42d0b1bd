"""Recursive radix-2 fast Fourier transform."""

from torch import Tensor

from ._radix_2 import _as_complex_sequence, _radix_2


def fast_fourier_transform(
    input: Tensor,
    *,
    dim: int = -1,
) -> Tensor:
    r"""Compute the unnormalized discrete Fourier transform.

    .. math::
        X[k] = \sum_{j=0}^{n-1} x[j] \cdot e^{-2\pi i j k / n}

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

    Notes
    -----
    Same butterfly as :func:`inverse_fast_fourier_transform` with twiddle
    factors :math:`e^{-2\pi i j / n}`. Matches ``torch.fft.fft``, so
    ``inverse_fast_fourier_transform(fast_fourier_transform(x)) / n``
    recovers ``x``.
    """
    x = _as_complex_sequence(input, dim)

    return _radix_2(x, -1.0).movedim(-1, dim)


# Short alias
fft = fast_fourier_transform
