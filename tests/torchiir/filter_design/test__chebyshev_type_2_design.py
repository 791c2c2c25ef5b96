import numpy as np
import pytest
import scipy.signal
import torch

from torchiir.filter_design import (
    chebyshev_type_2_design,
    chebyshev_type_2_prototype,
    sos_to_zpk,
)


class TestChebyshevType2Design:
    def test_lowpass_attenuation_at_stopband_edge(self):
        fs = 1000.0
        result = chebyshev_type_2_design(
            "lowpass", 150.0, fs, 4, 40.0, dtype=torch.float64
        )

        h = _sos_freqz(result.sos, [2 * np.pi * 150.0 / fs])
        attenuation = -20 * np.log10(np.abs(h[0]))

        assert 39.5 <= attenuation <= 41.0
        np.testing.assert_allclose(attenuation, 40.0, atol=1e-6)

    def test_prototype_has_two_zero_pairs(self):
        zeros, _, _ = chebyshev_type_2_prototype(4, 40.0, dtype=torch.float64)

        assert zeros.numel() == 4
        np.testing.assert_allclose(zeros.real.numpy(), 0.0, atol=0.0)

    @pytest.mark.parametrize("filter_type", ["lowpass", "highpass"])
    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 8])
    @pytest.mark.parametrize("attenuation", [20.0, 40.0, 60.0])
    def test_matches_scipy(self, filter_type, order, attenuation):
        fs = 1000.0
        result = chebyshev_type_2_design(
            filter_type, 150.0, fs, order, attenuation, dtype=torch.float64
        )
        expected = scipy.signal.cheby2(
            order, attenuation, 150.0, btype=filter_type, fs=fs, output="sos"
        )

        w = np.linspace(0.0, np.pi, 128)
        reference = 0.0 if filter_type == "lowpass" else np.pi
        expected_h = np.abs(_sos_freqz(expected, w))
        expected_h = expected_h / np.abs(_sos_freqz(expected, [reference]))

        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, w)), expected_h, atol=1e-9
        )

    @pytest.mark.parametrize("order", [3, 4, 6])
    def test_stopband_floor(self, order):
        fs = 1000.0
        result = chebyshev_type_2_design(
            "lowpass", 150.0, fs, order, 40.0, dtype=torch.float64
        )

        w = np.linspace(2 * np.pi * 150.0 / fs, np.pi, 2000)
        db = 20 * np.log10(np.abs(_sos_freqz(result.sos, w)) + 1e-300)

        assert db.max() <= -40.0 + 1e-6

    @pytest.mark.parametrize("order", [2, 3, 4])
    def test_zeros_on_unit_circle(self, order):
        result = chebyshev_type_2_design(
            "highpass", 200.0, 1000.0, order, 40.0, dtype=torch.float64
        )

        zeros, poles, _ = sos_to_zpk(result.sos)

        np.testing.assert_allclose(zeros.abs().numpy(), 1.0, atol=1e-7)
        assert (poles.abs() < 1).all()
        assert result.order == order

    @pytest.mark.parametrize("band_strategy", ["composite", "transform"])
    @pytest.mark.parametrize("filter_type", ["bandpass", "bandstop"])
    def test_band_filters(self, band_strategy, filter_type):
        fs = 8000.0
        result = chebyshev_type_2_design(
            filter_type,
            (500.0, 1500.0),
            fs,
            4,
            40.0,
            band_strategy=band_strategy,
            dtype=torch.float64,
        )

        w = 2 * np.pi * result.reference_frequency / fs

        assert result.order == 8
        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, [w])), 1.0, atol=1e-9
        )
        _, poles, _ = sos_to_zpk(result.sos)
        assert (poles.abs() < 1).all()

    def test_transform_bandpass_matches_scipy(self):
        fs = 8000.0
        result = chebyshev_type_2_design(
            "bandpass",
            (500.0, 1500.0),
            fs,
            4,
            40.0,
            band_strategy="transform",
            dtype=torch.float64,
        )
        expected = scipy.signal.cheby2(
            4, 40.0, (500.0, 1500.0), btype="bandpass", fs=fs, output="sos"
        )

        w = np.linspace(0.0, np.pi, 128)
        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, w)),
            np.abs(_sos_freqz(expected, w)),
            atol=1e-9,
        )


def _sos_freqz(sos, w):
    if isinstance(sos, torch.Tensor):
        sos = sos.numpy()
    z_inv = np.exp(-1j * np.asarray(w, dtype=float))
    h = np.ones_like(z_inv)
    for row in sos:
        num = row[0] + row[1] * z_inv + row[2] * z_inv**2
        den = row[3] + row[4] * z_inv + row[5] * z_inv**2
        h = h * num / den
    return h
