import numpy as np
import pytest
import scipy.signal
import torch

from torchiir.filter_design import chebyshev_type_1_design, sos_to_zpk


class TestChebyshevType1Design:
    @pytest.mark.parametrize("filter_type", ["lowpass", "highpass"])
    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 8])
    @pytest.mark.parametrize("ripple", [0.5, 1.0, 3.0])
    def test_matches_scipy(self, filter_type, order, ripple):
        fs = 1000.0
        result = chebyshev_type_1_design(
            filter_type, 150.0, fs, order, ripple, dtype=torch.float64
        )
        expected = scipy.signal.cheby1(
            order, ripple, 150.0, btype=filter_type, fs=fs, output="sos"
        )

        w = np.linspace(0.0, np.pi, 128)
        reference = 0.0 if filter_type == "lowpass" else np.pi
        expected_h = np.abs(_sos_freqz(expected, w))
        expected_h = expected_h / np.abs(_sos_freqz(expected, [reference]))

        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, w)), expected_h, atol=1e-9
        )

    @pytest.mark.parametrize("order", [2, 3, 4, 5, 6])
    @pytest.mark.parametrize("ripple", [0.5, 1.0, 2.0])
    def test_passband_ripple(self, order, ripple):
        fs = 1000.0
        cutoff = 100.0
        result = chebyshev_type_1_design(
            "lowpass", cutoff, fs, order, ripple, dtype=torch.float64
        )

        w = np.linspace(0.0, 2 * np.pi * cutoff / fs, 4001)
        db = 20 * np.log10(np.abs(_sos_freqz(result.sos, w)))

        np.testing.assert_allclose(db.max() - db.min(), ripple, atol=1e-3)

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6])
    def test_unity_dc_gain(self, order):
        result = chebyshev_type_1_design(
            "lowpass", 100.0, 1000.0, order, 1.0, dtype=torch.float64
        )

        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, [0.0])), 1.0, atol=1e-9
        )

    @pytest.mark.parametrize("order", [3, 4])
    def test_stopband_is_monotonic(self, order):
        fs = 1000.0
        result = chebyshev_type_1_design(
            "lowpass", 100.0, fs, order, 1.0, dtype=torch.float64
        )

        w = np.linspace(2 * np.pi * 110.0 / fs, np.pi - 1e-3, 256)
        magnitude = np.abs(_sos_freqz(result.sos, w))

        assert (np.diff(magnitude) < 0).all()

    @pytest.mark.parametrize("filter_type", ["lowpass", "highpass"])
    @pytest.mark.parametrize("order", range(1, 13))
    def test_order_conserved(self, filter_type, order):
        result = chebyshev_type_1_design(
            filter_type, 200.0, 1000.0, order, dtype=torch.float64
        )

        assert result.order == order
        assert len(result.sections) == (order + 1) // 2
        _, poles, _ = sos_to_zpk(result.sos)
        assert (poles.abs() < 1).all()

    @pytest.mark.parametrize("band_strategy", ["composite", "transform"])
    def test_bandpass_unity_at_reference(self, band_strategy):
        fs = 8000.0
        result = chebyshev_type_1_design(
            "bandpass",
            (500.0, 1500.0),
            fs,
            3,
            1.0,
            band_strategy=band_strategy,
            dtype=torch.float64,
        )

        w = 2 * np.pi * result.reference_frequency / fs

        assert result.order == 6
        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, [w])), 1.0, atol=1e-9
        )

    def test_transform_bandstop_matches_scipy(self):
        fs = 8000.0
        result = chebyshev_type_1_design(
            "bandstop",
            (500.0, 1500.0),
            fs,
            3,
            1.0,
            band_strategy="transform",
            dtype=torch.float64,
        )
        expected = scipy.signal.cheby1(
            3, 1.0, (500.0, 1500.0), btype="bandstop", fs=fs, output="sos"
        )

        w = np.linspace(0.0, np.pi, 128)
        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, w)),
            np.abs(_sos_freqz(expected, w)),
            atol=1e-9,
        )

    def test_default_ripple(self):
        explicit = chebyshev_type_1_design(
            "lowpass", 100.0, 1000.0, 4, 1.0, dtype=torch.float64
        )
        default = chebyshev_type_1_design(
            "lowpass", 100.0, 1000.0, 4, dtype=torch.float64
        )

        torch.testing.assert_close(default.sos, explicit.sos)


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
