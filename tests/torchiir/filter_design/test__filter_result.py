import dataclasses

import pytest
import torch

from torchiir.filter_design import Biquad, FilterResult


def _sos():
    return torch.tensor(
        [
            [0.1, 0.2, 0.1, 1.0, -0.5, 0.2],
            [0.3, 0.3, 0.0, 1.0, -0.4, 0.0],
        ],
        dtype=torch.float64,
    )


class TestBiquad:
    def test_to_row(self):
        section = Biquad(
            torch.tensor([1.0, 2.0, 3.0]), torch.tensor([1.0, 0.5, 0.25])
        )

        torch.testing.assert_close(
            section.to_row(), torch.tensor([1.0, 2.0, 3.0, 1.0, 0.5, 0.25])
        )

    def test_order(self):
        second = Biquad(torch.tensor([1.0, 0.0, 1.0]), torch.tensor([1.0, 0.0, 0.5]))
        first = Biquad(torch.tensor([1.0, 1.0, 0.0]), torch.tensor([1.0, 0.5, 0.0]))

        assert second.order == 2
        assert first.order == 1


class TestFilterResult:
    def test_from_sos(self):
        result = FilterResult.from_sos(_sos(), 0.0)

        assert len(result.sections) == 2
        assert result.order == 3
        assert result.a.numel() == 4
        torch.testing.assert_close(result.sos, _sos())
        assert result.reference_frequency == 0.0

    def test_sections_are_biquads(self):
        result = FilterResult.from_sos(_sos(), 0.0)

        assert all(isinstance(s, Biquad) for s in result.sections)
        torch.testing.assert_close(result.sections[1].b, _sos()[1, :3])

    def test_to(self):
        result = FilterResult.from_sos(_sos(), 12.5).to(dtype=torch.float32)

        assert result.b.dtype == torch.float32
        assert result.a.dtype == torch.float32
        assert result.sos.dtype == torch.float32
        assert result.reference_frequency == 12.5

    def test_empty(self):
        result = FilterResult.from_sos(torch.zeros((0, 6), dtype=torch.float64), 0.0)

        assert result.order == 0
        assert result.sos.shape == (0, 6)
        torch.testing.assert_close(result.b, torch.ones(1, dtype=torch.float64))

    def test_is_frozen(self):
        result = FilterResult.from_sos(_sos(), 0.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.reference_frequency = 1.0
