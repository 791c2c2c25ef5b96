"""Parallel connection of two section cascades."""

from typing import List, Tuple

import torch
from torch import Tensor

from .._complex import nearest_conjugate_pairs
from ..polynomial import (
    polynomial_add,
    polynomial_from_roots,
    polynomial_multiply,
)
from ..root_finding import aberth_ehrlich, polish_roots
from ._constants import GAIN_FLOOR, ROOT_PAIRING_TOLERANCE
from ._exceptions import NumericallyUnstableError
from ._sos_to_ba import sos_to_ba
from ._sos_to_zpk import _roots


class _Section:
    __slots__ = ("a", "poles", "zeros")

    def __init__(self, a: List[float]):
        self.a = a
        self.poles = _roots(a if a[2] != 0.0 else a[:2])
        self.zeros: List[complex] = []

    @property
    def free(self) -> int:
        return len(self.poles) - len(self.zeros)

    def merge(self, other: "_Section") -> "_Section":
        merged = _Section(
            polynomial_multiply(
                torch.tensor(self.a[:2], dtype=torch.float64),
                torch.tensor(other.a[:2], dtype=torch.float64),
            ).tolist()
        )
        merged.zeros = self.zeros + other.zeros
        return merged


def _numerator(zeros: List[complex]) -> List[float]:
    """prod(1 - r z^-1) in ascending powers of z^-1, padded to 3."""
    coeffs = polynomial_from_roots(zeros, tol=ROOT_PAIRING_TOLERANCE)
    coeffs = coeffs.flip(0).tolist()
    return coeffs + [0.0] * (3 - len(coeffs))


def _nearest(sections: List[_Section], group: Tuple[complex, ...]) -> _Section:
    def distance(section: _Section) -> float:
        return min(abs(z - p) for z in group for p in section.poles)

    size = len(group)
    exact = [s for s in sections if s.free == size]
    if exact:
        return min(exact, key=distance)
    return min((s for s in sections if s.free > size), key=distance)


def parallel_filters(
    first: Tensor,
    second: Tensor,
    *,
    gain_floor: float = GAIN_FLOOR,
) -> Tensor:
    """
    Parallel connection of two section cascades, as sections.

    The transfer function of the result is B1/A1 + B2/A2 =
    (B1 A2 + B2 A1) / (A1 A2).

    Parameters
    ----------
    first, second : Tensor
        Second-order sections, shape (n_sections, 6), with a0 = 1.
    gain_floor : float
        Smallest accepted leading coefficient of the summed numerator,
        relative to its largest coefficient.

    Returns
    -------
    Tensor
        Sections whose product is the summed transfer function. They keep
        the input sections' denominators.

    Raises
    ------
    NumericallyUnstableError
        If the summed numerator has a vanishing leading coefficient, or
        its roots cannot be distributed over the sections.

    Notes
    -----
    The summed numerator has no section structure of its own, so it is
    factored with :func:`aberth_ehrlich`. The roots are polished with a
    few Newton steps, paired by nearest conjugate and handed out to the
    sections nearest them. Conjugate pairs need a section with two
    poles; when there are more pairs than such sections, first-order
    sections are merged two by two. Real roots fill first-order sections
    first. The leading coefficient of the sum goes to the last section.

    Examples
    --------
    >>> low = butterworth_design("lowpass", 500.0, 8000.0, 2).sos
    >>> high = butterworth_design("highpass", 2000.0, 8000.0, 2).sos
    >>> parallel_filters(low, high).shape
    torch.Size([2, 6])
    """
    b1, a1 = sos_to_ba(first)
    b2, a2 = sos_to_ba(second)

    b = polynomial_add(polynomial_multiply(b1, a2), polynomial_multiply(b2, a1))

    n = b.numel()
    while n > 1 and b[n - 1] == 0:
        n -= 1
    b = b[:n]

    leading = float(b[0])
    scale = float(b.abs().max())
    if scale == 0.0 or abs(leading) < gain_floor * scale:
        raise NumericallyUnstableError(
            f"Parallel numerator has a negligible leading coefficient "
            f"{leading}; the sum cannot be factored into sections"
        )

    denominators = torch.cat([first, second])[:, 3:].tolist()
    sections = [_Section(row) for row in denominators]

    # In z the numerator is b0 z^n + b1 z^(n-1) + ... + bn
    roots = []
    if n > 1:
        in_z = b.flip(0)
        roots = polish_roots(in_z, aberth_ehrlich(in_z))
    groups = nearest_conjugate_pairs(roots, ROOT_PAIRING_TOLERANCE)
    pairs = [g for g in groups if len(g) == 2]
    reals = [g for g in groups if len(g) == 1]

    quadratics = sum(1 for s in sections if len(s.poles) == 2)
    firsts = [s for s in sections if len(s.poles) == 1]
    while len(pairs) > quadratics:
        if len(firsts) < 2:
            raise NumericallyUnstableError(
                f"Cannot place {len(pairs)} conjugate zero pairs in "
                f"{quadratics} second-order sections"
            )
        one, two = firsts.pop(0), firsts.pop(0)
        index = sections.index(one)
        sections.remove(one)
        sections.remove(two)
        sections.insert(index, one.merge(two))
        quadratics += 1

    for group in pairs + reals:
        _nearest(sections, group).zeros.extend(group)

    rows = []
    for section in sections:
        a = section.a + [0.0] * (3 - len(section.a))
        rows.append(_numerator(section.zeros) + a)

    sos = torch.tensor(rows, dtype=first.dtype, device=first.device)
    sos[-1, :3] = sos[-1, :3] * leading
    return sos
