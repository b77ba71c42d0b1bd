"""Tests for inverse_fast_fourier_transform."""

import hypothesis
import pytest
import torch

from torchnumerics.testing.strategies import (
    complex_sequences,
    non_power_of_two_lengths,
)
from torchnumerics.transform import ifft, inverse_fast_fourier_transform


class TestInverseFastFourierTransform:
    """Tests for inverse_fast_fourier_transform forward pass."""

    def test_single_element_is_identity(self):
        c = torch.tensor([3.0 - 4.0j], dtype=torch.complex128)

        v = inverse_fast_fourier_transform(c)

        assert torch.equal(v, c)

    def test_unit_impulse(self):
        """A unit impulse transforms to a constant sequence."""
        c = torch.tensor([1, 0, 0, 0], dtype=torch.complex128)

        v = inverse_fast_fourier_transform(c)

        torch.testing.assert_close(v, torch.ones(4, dtype=torch.complex128))

    def test_shifted_impulse(self):
        """An impulse at index 1 gives the positive-exponent roots of unity."""
        c = torch.tensor([0, 1, 0, 0], dtype=torch.complex128)

        v = inverse_fast_fourier_transform(c)

        torch.testing.assert_close(
            v, torch.tensor([1, 1j, -1, -1j], dtype=torch.complex128)
        )

    def test_unnormalized(self):
        """Equals n times torch.fft.ifft."""
        c = torch.randn(64, dtype=torch.complex128)

        v = inverse_fast_fourier_transform(c)

        torch.testing.assert_close(v, 64 * torch.fft.ifft(c))

    def test_applied_twice_reverses(self):
        """Applying the transform twice and dividing by n is a cyclic reversal."""
        c = torch.randn(16, dtype=torch.complex128)

        v = inverse_fast_fourier_transform(inverse_fast_fourier_transform(c)) / 16

        expected = torch.roll(torch.flip(c, dims=[0]), 1)
        torch.testing.assert_close(v, expected)

    def test_output_is_new_tensor(self):
        c = torch.tensor([1.0 + 1.0j], dtype=torch.complex128)
        original = c.clone()

        v = inverse_fast_fourier_transform(c)
        v[0] = 0

        assert torch.equal(c, original)

    def test_real_input_promoted(self):
        assert inverse_fast_fourier_transform(
            torch.ones(4, dtype=torch.float64)
        ).dtype == torch.complex128
        assert inverse_fast_fourier_transform(
            torch.ones(4, dtype=torch.float32)
        ).dtype == torch.complex64

    def test_batched(self):
        c = torch.randn(3, 5, 32, dtype=torch.complex128)

        v = inverse_fast_fourier_transform(c)

        assert v.shape == c.shape
        torch.testing.assert_close(v, 32 * torch.fft.ifft(c))

    def test_dim(self):
        c = torch.randn(8, 3, dtype=torch.complex128)

        v = inverse_fast_fourier_transform(c, dim=0)

        torch.testing.assert_close(v, 8 * torch.fft.ifft(c, dim=0))

    def test_alias(self):
        assert ifft is inverse_fast_fourier_transform

    def test_gradcheck(self):
        c = torch.randn(8, dtype=torch.complex128, requires_grad=True)

        assert torch.autograd.gradcheck(inverse_fast_fourier_transform, (c,))

    @hypothesis.given(c=complex_sequences())
    @hypothesis.settings(deadline=None, max_examples=30)
    def test_applied_twice_reverses_property(self, c):
        n = c.shape[0]

        v = inverse_fast_fourier_transform(inverse_fast_fourier_transform(c)) / n

        expected = torch.roll(torch.flip(c, dims=[0]), 1)
        torch.testing.assert_close(v, expected, atol=1e-9, rtol=1e-9)


class TestInverseFastFourierTransformErrors:
    @pytest.mark.parametrize("n", [0, 3, 6, 12, 100])
    def test_rejects_non_power_of_two(self, n):
        with pytest.raises(ValueError, match="power of two"):
            inverse_fast_fourier_transform(torch.zeros(n, dtype=torch.complex128))

    def test_rejects_non_power_of_two_along_dim(self):
        with pytest.raises(ValueError):
            inverse_fast_fourier_transform(
                torch.zeros(6, 8, dtype=torch.complex128), dim=0
            )

    def test_rejects_scalar(self):
        with pytest.raises(ValueError):
            inverse_fast_fourier_transform(torch.tensor(1.0 + 0.0j))

    @hypothesis.given(n=non_power_of_two_lengths())
    @hypothesis.settings(deadline=None, max_examples=30)
    def test_rejects_non_power_of_two_property(self, n):
        with pytest.raises(ValueError):
            inverse_fast_fourier_transform(torch.zeros(n, dtype=torch.complex128))
