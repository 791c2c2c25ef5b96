"""Lowpass to bandpass substitution on analog (zeros, poles, gain)."""

from typing import Tuple

import torch
from torch import Tensor


def quadratic_split(half: Tensor, center: float) -> Tensor:
    """Both roots of s^2 - 2 h s + center^2 for each h in ``half``.

    Returned as [h + d, h - d] with d = sqrt(h^2 - center^2), so the
    roots for half[i] sit at i and i + len(half).
    """
    disc = torch.sqrt(half * half - center * center)
    return torch.cat([half + disc, half - disc])


def lowpass_to_bandpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    center: float = 1.0,
    width: float = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Turn an analog lowpass at 1 rad/s into a bandpass.

    Substitutes s -> (s^2 + center^2) / (width s). The order doubles:
    every root r becomes the two roots of s^2 - width r s + center^2.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the lowpass, complex, shape (M,).
    poles : Tensor
        Poles of the lowpass, complex, shape (N,).
    gain : Tensor
        Real scalar gain of the lowpass.
    center : float
        Center of the passband in rad/s, the geometric mean of the edges.
    width : float
        Passband width in rad/s, the difference of the edges.

    Returns
    -------
    zeros : Tensor
        Shape (2N,): the 2M images of the finite zeros followed by N - M
        zeros at the origin. A lowpass zero at the origin becomes the
        pair +/- j center.
    poles : Tensor
        Shape (2N,).
    gain : Tensor
        gain * width^(N - M).

    Examples
    --------
    >>> z, p, k = lowpass_to_bandpass_zpk(*butterworth_prototype(2), 10.0, 2.0)
    >>> p.shape, z.shape
    (torch.Size([4]), torch.Size([2]))
    """
    center = float(center)
    width = float(width)
    zeros = zeros.to(poles.dtype)
    excess = poles.numel() - zeros.numel()

    poles_bp = quadratic_split(poles * (width / 2), center)
    zeros_bp = torch.cat(
        [
            quadratic_split(zeros * (width / 2), center),
            torch.zeros(excess, dtype=poles.dtype, device=poles.device),
        ]
    )

    return zeros_bp, poles_bp, gain * width**excess
