import numpy as np
import pytest
import scipy.signal
import torch

from torchiir.filter_design import (
    UnsupportedKindError,
    bessel_design,
    sos_to_zpk,
)

_SCIPY_NORM = {"phase": "phase", "delay": "delay", "magnitude": "mag"}


class TestBesselDesign:
    @pytest.mark.parametrize("filter_type", ["lowpass", "highpass"])
    @pytest.mark.parametrize("order", [1, 2, 3, 4, 6, 9])
    @pytest.mark.parametrize("normalization", ["phase", "delay", "magnitude"])
    def test_matches_scipy(self, filter_type, order, normalization):
        fs = 1000.0
        result = bessel_design(
            filter_type, 100.0, fs, order, normalization, dtype=torch.float64
        )
        expected = scipy.signal.bessel(
            order,
            100.0,
            btype=filter_type,
            norm=_SCIPY_NORM[normalization],
            fs=fs,
            output="sos",
        )

        w = np.linspace(0.0, np.pi, 128)
        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, w)),
            np.abs(_sos_freqz(expected, w)),
            atol=1e-9,
        )

    @pytest.mark.parametrize("order", [2, 4, 8])
    def test_magnitude_normalization_is_3db_at_cutoff(self, order):
        fs = 1000.0
        result = bessel_design(
            "lowpass", 100.0, fs, order, "magnitude", dtype=torch.float64
        )

        h = _sos_freqz(result.sos, [2 * np.pi * 100.0 / fs])

        np.testing.assert_allclose(np.abs(h), 1 / np.sqrt(2), rtol=1e-9)

    @pytest.mark.parametrize("order", [3, 5])
    def test_nearly_constant_group_delay(self, order):
        fs = 48000.0
        result = bessel_design(
            "lowpass", 1000.0, fs, order, "delay", dtype=torch.float64
        )

        w = np.linspace(2 * np.pi * 10.0 / fs, 2 * np.pi * 200.0 / fs, 32)
        _, delay = scipy.signal.group_delay(
            (result.b.numpy(), result.a.numpy()), w=w
        )

        # Passband delay varies by well under one percent
        assert np.ptp(delay) / np.mean(delay) < 0.01

    @pytest.mark.parametrize("order", [1, 5, 10, 11, 12])
    def test_order_and_stability(self, order):
        result = bessel_design("lowpass", 200.0, 1000.0, order, dtype=torch.float64)

        _, poles, _ = sos_to_zpk(result.sos)

        assert result.order == order
        assert (poles.abs() < 1).all()
        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, [0.0])), 1.0, atol=1e-9
        )

    @pytest.mark.parametrize("filter_type", ["bandpass", "bandstop"])
    def test_band_filters(self, filter_type):
        fs = 8000.0
        result = bessel_design(
            filter_type, (500.0, 1500.0), fs, 4, dtype=torch.float64
        )

        w = 2 * np.pi * result.reference_frequency / fs

        assert result.order == 8
        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, [w])), 1.0, atol=1e-9
        )

    def test_invalid_normalization(self):
        with pytest.raises(UnsupportedKindError):
            bessel_design("lowpass", 100.0, 1000.0, 4, "cutoff")


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
