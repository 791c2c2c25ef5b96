"""Lowpass to highpass substitution on analog (zeros, poles, gain)."""

from typing import Tuple

import torch
from torch import Tensor


def lowpass_to_highpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    cutoff: float = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Turn an analog lowpass at 1 rad/s into a highpass at ``cutoff`` rad/s.

    Substitutes s -> cutoff / s, so every root r maps to cutoff / r.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the lowpass, complex, shape (M,). May contain zeros at
        the origin.
    poles : Tensor
        Poles of the lowpass, complex, shape (N,), none at the origin.
    gain : Tensor
        Real scalar gain of the lowpass.
    cutoff : float
        Highpass cutoff in rad/s.

    Returns
    -------
    zeros : Tensor
        Inverted finite zeros followed by N - M zeros at the origin, the
        images of the lowpass zeros at infinity. Lowpass zeros at the
        origin go to infinity and are dropped.
    poles : Tensor
        Inverted poles, shape (N,).
    gain : Tensor
        gain * cutoff^n0 * prod(-z) / prod(-p), n0 the number of dropped
        origin zeros and the products over the remaining zeros and all
        poles. The highpass response at infinity then equals the lowpass
        response at DC.

    Examples
    --------
    >>> z, p, k = lowpass_to_highpass_zpk(
    ...     *butterworth_prototype(3, dtype=torch.float64), 5.0
    ... )
    >>> z
    tensor([0.+0.j, 0.+0.j, 0.+0.j], dtype=torch.complex128)
    """
    cutoff = float(cutoff)
    zeros = zeros.to(poles.dtype)

    nonzero = zeros != 0
    finite = zeros[nonzero]
    dropped = zeros.numel() - finite.numel()
    excess = poles.numel() - zeros.numel()

    origin = torch.zeros(excess, dtype=poles.dtype, device=poles.device)
    zeros_hp = torch.cat([cutoff / finite, origin])
    poles_hp = cutoff / poles

    # prod over an empty tensor is 1
    ratio = torch.prod(-finite) / torch.prod(-poles)
    gain_hp = gain * cutoff**dropped * ratio.real

    return zeros_hp, poles_hp, gain_hp
