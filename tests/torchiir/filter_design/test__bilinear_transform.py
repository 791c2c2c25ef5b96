import numpy as np
import pytest
import scipy.signal
import torch

from torchiir.filter_design import (
    Biquad,
    NumericallyUnstableError,
    bilinear_transform_biquad,
    bilinear_transform_zpk,
    butterworth_prototype,
    chebyshev_type_2_prototype,
    elliptic_prototype,
    lowpass_to_lowpass_zpk,
)


class TestBilinearTransformZpk:
    @pytest.mark.parametrize(
        "prototype",
        [
            butterworth_prototype(4, dtype=torch.float64),
            chebyshev_type_2_prototype(5, 40.0, dtype=torch.float64),
            elliptic_prototype(3, 1.0, 50.0, dtype=torch.float64),
        ],
    )
    @pytest.mark.parametrize("fs", [2.0, 1000.0, 48000.0])
    def test_matches_scipy(self, prototype, fs):
        z, p, k = lowpass_to_lowpass_zpk(*prototype, 0.3 * fs)

        zd, pd, kd = bilinear_transform_zpk(z, p, k, fs)
        ez, ep, ek = scipy.signal.bilinear_zpk(
            z.numpy(), p.numpy(), float(k), fs
        )

        np.testing.assert_allclose(
            _sorted(pd.numpy()), _sorted(ep), atol=1e-12
        )
        np.testing.assert_allclose(
            _sorted(zd.numpy()), _sorted(ez), atol=1e-9
        )
        np.testing.assert_allclose(float(kd), ek, rtol=1e-10)

    def test_stable_poles_map_inside_unit_circle(self):
        z, p, k = butterworth_prototype(6, dtype=torch.float64)

        _, pd, _ = bilinear_transform_zpk(z, p, k, 10.0)

        assert (pd.abs() < 1).all()

    def test_zeros_at_infinity_map_to_nyquist(self):
        z, p, k = butterworth_prototype(3, dtype=torch.float64)

        zd, _, _ = bilinear_transform_zpk(z, p, k, 10.0)

        torch.testing.assert_close(
            zd, -torch.ones(3, dtype=torch.complex128)
        )


class TestBilinearTransformBiquad:
    @pytest.mark.parametrize(
        "b,a",
        [
            ([1.0, 0.0, 0.0], [1.0, 1.41421356, 1.0]),
            ([0.0, 0.0, 1.0], [4.0, 0.8, 1.0]),
            ([2.0, 0.5, 0.3], [3.0, 1.2, 0.7]),
            ([25.0, 0.0, 1.0], [10.0, 2.0, 1.0]),
        ],
    )
    @pytest.mark.parametrize("fs", [1.0, 8.0, 44100.0])
    def test_matches_scipy_second_order(self, b, a, fs):
        section = bilinear_transform_biquad(b, a, fs)
        expected_b, expected_a = scipy.signal.bilinear(b[::-1], a[::-1], fs)

        assert isinstance(section, Biquad)
        np.testing.assert_allclose(section.b.numpy(), expected_b, rtol=1e-10, atol=1e-14)
        np.testing.assert_allclose(section.a.numpy(), expected_a, rtol=1e-10, atol=1e-14)
        assert section.order == 2

    @pytest.mark.parametrize("b", [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.5, 2.0, 0.0]])
    def test_matches_scipy_first_order(self, b):
        fs = 100.0
        a = [30.0, 1.0, 0.0]

        section = bilinear_transform_biquad(b, a, fs)
        expected_b, expected_a = scipy.signal.bilinear(b[1::-1], a[1::-1], fs)

        np.testing.assert_allclose(section.b[:2].numpy(), expected_b, rtol=1e-12)
        np.testing.assert_allclose(section.a[:2].numpy(), expected_a, rtol=1e-12)
        assert float(section.b[2]) == 0.0
        assert float(section.a[2]) == 0.0
        assert section.order == 1

    def test_a0_is_one(self):
        section = bilinear_transform_biquad(
            torch.tensor([1.0, 0.0, 0.0], dtype=torch.float64),
            torch.tensor([2.0, 3.0, 5.0], dtype=torch.float64),
            7.0,
        )

        assert float(section.a[0]) == 1.0

    def test_dc_gain_is_preserved(self):
        b, a = [3.0, 1.0, 2.0], [6.0, 0.5, 1.0]

        section = bilinear_transform_biquad(b, a, 50.0)

        np.testing.assert_allclose(
            float(section.b.sum() / section.a.sum()), 0.5, rtol=1e-12
        )

    def test_dtype(self):
        section = bilinear_transform_biquad(
            [1.0, 0.0, 0.0], [1.0, 1.0, 1.0], 2.0, dtype=torch.float32
        )

        assert section.b.dtype == torch.float32
        assert section.a.dtype == torch.float32

    def test_rejects_improper_section(self):
        with pytest.raises(ValueError, match="second order numerator"):
            bilinear_transform_biquad([1.0, 0.0, 1.0], [1.0, 1.0, 0.0], 2.0)

    def test_rejects_too_many_coefficients(self):
        with pytest.raises(ValueError, match="at most 3"):
            bilinear_transform_biquad([1.0, 0.0, 0.0, 0.0], [1.0, 1.0, 1.0], 2.0)

    def test_short_coefficients_are_padded(self):
        short = bilinear_transform_biquad([1.0], [1.0, 1.0], 2.0)
        full = bilinear_transform_biquad([1.0, 0.0, 0.0], [1.0, 1.0, 0.0], 2.0)

        torch.testing.assert_close(short.b, full.b)
        torch.testing.assert_close(short.a, full.a)

    def test_vanishing_leading_denominator(self):
        # a(s) = s - 2 fs maps the pole onto z = infinity
        fs = 1.0
        with pytest.raises(NumericallyUnstableError):
            bilinear_transform_biquad([1.0, 0.0, 0.0], [-2.0, 1.0, 0.0], fs)


def _sorted(values):
    """Sort complex values by rounded real part, then imaginary part."""
    values = np.asarray(values, dtype=complex)
    keys = [(round(v.real, 9), round(v.imag, 9)) for v in values]
    return values[sorted(range(len(values)), key=keys.__getitem__)]
