"""Result types returned by the design functions."""

from dataclasses import dataclass
from typing import NamedTuple, Tuple

import torch
from torch import Tensor

from ._sos_to_ba import sos_to_ba


class Biquad(NamedTuple):
    """One second-order section.

    ``b`` and ``a`` hold three coefficients each in ascending powers of
    z^-1, with ``a[0] == 1``. A first-order section has ``b[2] == a[2] == 0``.
    """

    b: Tensor
    a: Tensor

    @property
    def order(self) -> int:
        if self.b[2] == 0 and self.a[2] == 0:
            return 1
        return 2

    def to_row(self) -> Tensor:
        """The section as ``[b0, b1, b2, a0, a1, a2]``."""
        return torch.cat([self.b, self.a])


@dataclass(frozen=True, eq=False)
class FilterResult:
    """A digital IIR filter as a transfer function and its section cascade.

    Attributes
    ----------
    b : Tensor
        Numerator coefficients in ascending powers of z^-1.
    a : Tensor
        Denominator coefficients in ascending powers of z^-1, a[0] = 1.
    sections : tuple of Biquad
        Second-order sections whose product is b / a. Empty for a filter
        without poles.
    reference_frequency : float
        Frequency (Hz) at which the magnitude response was normalized
        to one.
    """

    b: Tensor
    a: Tensor
    sections: Tuple[Biquad, ...]
    reference_frequency: float

    @property
    def sos(self) -> Tensor:
        """Sections stacked as an (n_sections, 6) tensor."""
        if not self.sections:
            return torch.zeros((0, 6), dtype=self.b.dtype, device=self.b.device)
        return torch.stack([section.to_row() for section in self.sections])

    @property
    def order(self) -> int:
        """Number of digital poles."""
        return sum(section.order for section in self.sections)

    @classmethod
    def from_sos(cls, sos: Tensor, reference_frequency: float) -> "FilterResult":
        """Build a result whose (b, a) are recomposed from ``sos``."""
        b, a = sos_to_ba(sos)
        sections = tuple(Biquad(row[:3], row[3:]) for row in sos)
        return cls(
            b=b,
            a=a,
            sections=sections,
            reference_frequency=float(reference_frequency),
        )

    def to(self, dtype=None, device=None) -> "FilterResult":
        """Copy with every tensor cast to ``dtype`` and moved to ``device``."""
        return FilterResult(
            b=self.b.to(dtype=dtype, device=device),
            a=self.a.to(dtype=dtype, device=device),
            sections=tuple(
                Biquad(
                    s.b.to(dtype=dtype, device=device),
                    s.a.to(dtype=dtype, device=device),
                )
                for s in self.sections
            ),
            reference_frequency=self.reference_frequency,
        )
