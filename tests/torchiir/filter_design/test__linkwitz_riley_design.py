import numpy as np
import pytest
import torch

from torchiir.filter_design import (
    InvalidOrderError,
    LinkwitzRileyOrder,
    OrderTooHighError,
    butterworth_design,
    linkwitz_riley_design,
    linkwitz_riley_order_info,
)


class TestLinkwitzRileyOrderInfo:
    def test_odd_order_is_rounded_up(self):
        info = linkwitz_riley_order_info(5)

        assert info == LinkwitzRileyOrder(
            requested=5, actual=6, half=3, sections=4, is_adjusted=True
        )

    @pytest.mark.parametrize(
        "order,half,sections",
        [(2, 1, 2), (4, 2, 2), (6, 3, 4), (8, 4, 4), (10, 5, 6), (12, 6, 6)],
    )
    def test_even_orders(self, order, half, sections):
        info = linkwitz_riley_order_info(order)

        assert info.actual == order
        assert info.half == half
        assert info.sections == sections
        assert not info.is_adjusted

    def test_order_one_is_rejected(self):
        with pytest.raises(InvalidOrderError, match="at least 2"):
            linkwitz_riley_order_info(1)

    def test_order_above_ceiling_is_rejected(self):
        with pytest.raises(OrderTooHighError):
            linkwitz_riley_order_info(13)


class TestLinkwitzRileyDesign:
    def test_default_order_is_4(self):
        result = linkwitz_riley_design("lowpass", 2000.0, 48000.0, dtype=torch.float64)

        assert result.order == 4
        assert len(result.sections) == 2

    @pytest.mark.parametrize("order", [2, 4, 6, 8, 12])
    @pytest.mark.parametrize("filter_type", ["lowpass", "highpass"])
    def test_minus_6db_at_cutoff(self, order, filter_type):
        fs = 48000.0
        result = linkwitz_riley_design(
            filter_type, 2000.0, fs, order, dtype=torch.float64
        )

        h = _sos_freqz(result.sos, [2 * np.pi * 2000.0 / fs])

        np.testing.assert_allclose(np.abs(h), 0.5, rtol=1e-9)

    @pytest.mark.parametrize("order", [2, 4, 6, 8, 10, 12])
    def test_is_squared_butterworth(self, order):
        fs = 48000.0
        result = linkwitz_riley_design("lowpass", 1000.0, fs, order, dtype=torch.float64)
        butterworth = butterworth_design(
            "lowpass", 1000.0, fs, order // 2, dtype=torch.float64
        )

        np.testing.assert_allclose(
            result.a.numpy(),
            np.convolve(butterworth.a.numpy(), butterworth.a.numpy()),
            rtol=1e-9,
            atol=1e-12,
        )
        np.testing.assert_allclose(
            result.b.numpy(),
            np.convolve(butterworth.b.numpy(), butterworth.b.numpy()),
            rtol=1e-9,
            atol=1e-15,
        )

    def test_odd_order_matches_next_even(self):
        odd = linkwitz_riley_design("highpass", 500.0, 8000.0, 5, dtype=torch.float64)
        even = linkwitz_riley_design("highpass", 500.0, 8000.0, 6, dtype=torch.float64)

        assert odd.order == 6
        assert len(odd.sections) == linkwitz_riley_order_info(5).sections
        torch.testing.assert_close(odd.b, even.b)
        torch.testing.assert_close(odd.a, even.a)

    @pytest.mark.parametrize("order", [4, 8])
    def test_crossover_sums_flat(self, order):
        fs = 48000.0
        low = linkwitz_riley_design("lowpass", 2000.0, fs, order, dtype=torch.float64)
        high = linkwitz_riley_design("highpass", 2000.0, fs, order, dtype=torch.float64)

        w = np.linspace(0.01, np.pi - 0.01, 64)
        total = _sos_freqz(low.sos, w) + _sos_freqz(high.sos, w)

        np.testing.assert_allclose(np.abs(total), 1.0, atol=1e-9)

    @pytest.mark.parametrize("order", [2, 6])
    def test_crossover_sums_flat_with_inverted_highpass(self, order):
        fs = 48000.0
        low = linkwitz_riley_design("lowpass", 2000.0, fs, order, dtype=torch.float64)
        high = linkwitz_riley_design("highpass", 2000.0, fs, order, dtype=torch.float64)

        w = np.linspace(0.01, np.pi - 0.01, 64)
        total = _sos_freqz(low.sos, w) - _sos_freqz(high.sos, w)

        np.testing.assert_allclose(np.abs(total), 1.0, atol=1e-9)

    def test_bandpass(self):
        fs = 48000.0
        result = linkwitz_riley_design(
            "bandpass", (200.0, 2000.0), fs, 4, dtype=torch.float64
        )

        w = 2 * np.pi * result.reference_frequency / fs

        assert result.order == 8
        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, [w])), 1.0, atol=1e-9
        )

    @pytest.mark.parametrize("order", [2, 4, 6, 8])
    def test_bandstop_is_sum_of_lowpass_and_highpass(self, order):
        fs = 1000.0
        result = linkwitz_riley_design(
            "bandstop", (80.0, 220.0), fs, order, dtype=torch.float64
        )
        low = linkwitz_riley_design("lowpass", 80.0, fs, order, dtype=torch.float64)
        high = linkwitz_riley_design("highpass", 220.0, fs, order, dtype=torch.float64)

        w = np.linspace(0.0, np.pi, 257)
        expected = _sos_freqz(low.sos, w) + _sos_freqz(high.sos, w)

        assert result.order == 2 * order
        np.testing.assert_allclose(
            _sos_freqz(result.sos, w), expected, atol=1e-8
        )

    def test_bandstop_depth_at_center(self):
        fs = 1000.0
        result = linkwitz_riley_design(
            "bandstop", (80.0, 220.0), fs, 4, dtype=torch.float64
        )
        low = linkwitz_riley_design("lowpass", 80.0, fs, 4, dtype=torch.float64)
        high = linkwitz_riley_design("highpass", 220.0, fs, 4, dtype=torch.float64)

        w = [2 * np.pi * np.sqrt(80.0 * 220.0) / fs]
        expected = abs(_sos_freqz(low.sos, w) + _sos_freqz(high.sos, w))

        np.testing.assert_allclose(
            np.abs(_sos_freqz(result.sos, w)), expected, rtol=1e-9
        )
        assert np.abs(_sos_freqz(result.sos, w))[0] < 0.05

    @pytest.mark.parametrize("order", [0, 1])
    def test_rejects_low_orders(self, order):
        with pytest.raises(InvalidOrderError):
            linkwitz_riley_design("lowpass", 100.0, 1000.0, order)

    def test_rejects_high_orders(self):
        with pytest.raises(OrderTooHighError):
            linkwitz_riley_design("lowpass", 100.0, 1000.0, 14)


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
