import numpy as np
import pytest
import scipy.signal
import torch

from torchiir.filter_design import elliptic_design, sos_to_ba, sos_to_zpk


class TestEllipticDesign:
    @pytest.mark.parametrize("filter_type", ["lowpass", "highpass"])
    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6])
    @pytest.mark.parametrize(
        "ripple,attenuation", [(0.5, 40.0), (1.0, 60.0), (3.0, 30.0)]
    )
    def test_matches_scipy(self, filter_type, order, ripple, attenuation):
        fs = 1000.0
        result = elliptic_design(
            filter_type,
            150.0,
            fs,
            order,
            ripple,
            attenuation,
            dtype=torch.float64,
        )
        expected = scipy.signal.ellip(
            order,
            ripple,
            attenuation,
            150.0,
            btype=filter_type,
            fs=fs,
            output="sos",
        )

        w = np.linspace(0.0, np.pi, 128)
        reference = 0.0 if filter_type == "lowpass" else np.pi
        expected_h = np.abs(_sos_freqz(expected, w))
        expected_h = expected_h / np.abs(_sos_freqz(expected, [reference]))

        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, w)), expected_h, atol=1e-7
        )

    @pytest.mark.parametrize("order", [3, 4, 5])
    def test_passband_ripple_and_stopband_floor(self, order):
        fs = 1000.0
        ripple, attenuation = 1.0, 50.0
        result = elliptic_design(
            "lowpass", 100.0, fs, order, ripple, attenuation, dtype=torch.float64
        )

        passband = np.linspace(0.0, 2 * np.pi * 100.0 / fs, 4001)
        db = 20 * np.log10(np.abs(_sos_freqz(result.sos, passband)))
        np.testing.assert_allclose(db.max() - db.min(), ripple, atol=1e-3)

        # Every point far in the stopband is attenuated by at least Rs
        # relative to the passband peak
        stopband = np.linspace(2 * np.pi * 300.0 / fs, np.pi, 2000)
        stop_db = 20 * np.log10(
            np.abs(_sos_freqz(result.sos, stopband)) + 1e-300
        )
        assert stop_db.max() <= db.max() - attenuation + 1e-6

    @pytest.mark.parametrize("order", [1, 2, 5, 8, 12])
    def test_order_and_stability(self, order):
        result = elliptic_design(
            "highpass", 300.0, 8000.0, order, 0.5, 40.0, dtype=torch.float64
        )

        _, poles, _ = sos_to_zpk(result.sos)

        assert result.order == order
        assert len(result.sections) == (order + 1) // 2
        assert (poles.abs() < 1).all()

    @pytest.mark.parametrize("filter_type", ["bandpass", "bandstop"])
    @pytest.mark.parametrize("band_strategy", ["composite", "transform"])
    def test_band_filters(self, filter_type, band_strategy):
        fs = 8000.0
        result = elliptic_design(
            filter_type,
            (600.0, 1800.0),
            fs,
            4,
            1.0,
            40.0,
            band_strategy=band_strategy,
            dtype=torch.float64,
        )

        w = 2 * np.pi * result.reference_frequency / fs

        assert result.order == 8
        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, [w])), 1.0, atol=1e-9
        )
        b, a = sos_to_ba(result.sos)
        torch.testing.assert_close(b, result.b)
        torch.testing.assert_close(a, result.a)

    def test_defaults(self):
        default = elliptic_design("lowpass", 100.0, 1000.0, 4, dtype=torch.float64)
        explicit = elliptic_design(
            "lowpass", 100.0, 1000.0, 4, 1.0, 40.0, dtype=torch.float64
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
