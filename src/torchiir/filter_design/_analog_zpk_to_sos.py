"""Grouping of analog poles and zeros into digital second-order sections."""

from typing import List, Optional, Tuple, Union

import torch
from torch import Tensor

from .._complex import conjugate_pairs
from ._bilinear_transform_biquad import bilinear_transform_biquad
from ._constants import CONJUGATE_TOLERANCE


def _group_values(values: Tensor, tol: float) -> List[Tuple[complex, ...]]:
    """Conjugate pairs, then real values two at a time, then a leftover real."""
    pairs = []
    reals = []
    for group in conjugate_pairs(values, tol):
        if len(group) == 2:
            pairs.append(group)
        else:
            reals.append(group[0])

    groups: List[Tuple[complex, ...]] = list(pairs)
    for i in range(0, len(reals) - 1, 2):
        groups.append((reals[i], reals[i + 1]))
    if len(reals) % 2 == 1:
        groups.append((reals[-1],))

    return groups


def _expand(roots: Tuple[complex, ...]) -> List[float]:
    """Real coefficients of prod(s - r) in ascending powers, padded to 3."""
    if len(roots) == 0:
        return [1.0, 0.0, 0.0]
    if len(roots) == 1:
        return [-roots[0].real, 1.0, 0.0]
    r1, r2 = roots
    return [(r1 * r2).real, -(r1 + r2).real, 1.0]


def _distance(zeros: Tuple[complex, ...], poles: Tuple[complex, ...]) -> float:
    return min(abs(z - p) for z in zeros for p in poles)


class _Section:
    __slots__ = ("poles", "zeros")

    def __init__(self, poles: Tuple[complex, ...]):
        self.poles = poles
        self.zeros: List[complex] = []

    @property
    def free(self) -> int:
        return len(self.poles) - len(self.zeros)


def _assign(
    sections: List[_Section], group: Tuple[complex, ...]
) -> bool:
    """Put a zero group in the nearest section with room, exact fits first."""
    size = len(group)
    for exact in (True, False):
        candidates = [
            s
            for s in sections
            if (s.free == size if exact else s.free > size)
        ]
        if candidates:
            target = min(candidates, key=lambda s: _distance(group, s.poles))
            target.zeros.extend(group)
            return True
    return False


def analog_zpk_to_sos(
    zeros: Tensor,
    poles: Tensor,
    sampling_frequency: float,
    *,
    gain: Optional[Union[float, Tensor]] = None,
    tol: float = CONJUGATE_TOLERANCE,
    dtype: torch.dtype = torch.float64,
) -> Tensor:
    """
    Convert analog zeros and poles to digital second-order sections.

    Poles are grouped into sections in the s-plane, each section is given
    the zeros nearest its poles, and each is then mapped with the
    closed-form :func:`bilinear_transform_biquad`.

    Parameters
    ----------
    zeros : Tensor
        Analog zeros. Non-real zeros must come in conjugate pairs.
    poles : Tensor
        Analog poles. Non-real poles must come in conjugate pairs.
    sampling_frequency : float
        Sampling frequency (Hz).
    gain : float or Tensor, optional
        Analog gain, applied to the last section's numerator. Without it
        every section has a monic analog numerator and the overall gain is
        left to :func:`normalize_sos_gain`.
    tol : float
        Relative tolerance for the real test and conjugate matching.
    dtype : torch.dtype, default torch.float64
        Output dtype.

    Returns
    -------
    Tensor
        Second-order sections, shape (n_sections, 6), rows
        [b0, b1, b2, 1, a1, a2] in ascending powers of z^-1.

    Raises
    ------
    ValueError
        If a non-real pole or zero has no conjugate partner, or if there
        are more zeros than poles.

    Notes
    -----
    Sections are formed from conjugate pole pairs, then from real poles
    two at a time; a leftover real pole gives a first-order section.

    Zeros are grouped the same way. Conjugate pairs are placed first,
    then real pairs, then a single real zero. Each group goes to the
    nearest section (smallest pole/zero distance) whose remaining room
    matches the group size exactly, or failing that to one with more
    room. A real pair that finds no room is split into two singles.
    Sections left with fewer zeros than poles keep the missing zeros at
    infinity, which the bilinear map places at z = -1.

    Examples
    --------
    >>> z, p, k = butterworth_prototype(3, dtype=torch.float64)
    >>> analog_zpk_to_sos(z, p, 2.0).shape
    torch.Size([2, 6])
    """
    if zeros.numel() > poles.numel():
        raise ValueError(
            f"Cannot build sections with more zeros ({zeros.numel()}) "
            f"than poles ({poles.numel()})"
        )

    sections = [_Section(group) for group in _group_values(poles, tol)]

    pending = _group_values(zeros, tol)
    while pending:
        group = pending.pop(0)
        if _assign(sections, group):
            continue
        if len(group) == 2 and group[0].imag == 0 and group[1].imag == 0:
            pending[:0] = [(group[0],), (group[1],)]
            continue
        raise ValueError(
            f"No section has room for the zero group {group}"
        )

    rows = []
    for section in sections:
        biquad = bilinear_transform_biquad(
            _expand(tuple(section.zeros)),
            _expand(section.poles),
            sampling_frequency,
            dtype=dtype,
            device=poles.device,
        )
        rows.append(biquad.to_row())

    if not rows:
        return torch.zeros((0, 6), dtype=dtype, device=poles.device)

    sos = torch.stack(rows)

    if gain is not None:
        sos[-1, :3] = sos[-1, :3] * float(gain)

    return sos
