"""Lowpass to bandstop substitution on analog (zeros, poles, gain)."""

from typing import Tuple

import torch
from torch import Tensor

from ._lowpass_to_bandpass_zpk import quadratic_split


def lowpass_to_bandstop_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    center: float = 1.0,
    width: float = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Turn an analog lowpass at 1 rad/s into a bandstop.

    Substitutes s -> width s / (s^2 + center^2), the reciprocal of the
    bandpass map. A root r becomes the two roots of
    s^2 - (width / r) s + center^2.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the lowpass, complex, shape (M,). May contain zeros at
        the origin.
    poles : Tensor
        Poles of the lowpass, complex, shape (N,), none at the origin.
    gain : Tensor
        Real scalar gain of the lowpass.
    center : float
        Center of the stopband in rad/s.
    width : float
        Stopband width in rad/s.

    Returns
    -------
    zeros : Tensor
        Shape (2N,): images of the nonzero lowpass zeros, then one origin
        zero per origin zero of the lowpass, then N - M pairs at
        +/- j center, the notch.
    poles : Tensor
        Shape (2N,).
    gain : Tensor
        gain * width^n0 * prod(-z) / prod(-p), n0 the number of origin
        zeros and the products over the nonzero zeros and all poles.

    Examples
    --------
    >>> z, p, k = lowpass_to_bandstop_zpk(
    ...     *butterworth_prototype(1, dtype=torch.float64), 3.0, 1.0
    ... )
    >>> z
    tensor([0.+3.j, 0.-3.j], dtype=torch.complex128)
    """
    center = float(center)
    width = float(width)
    zeros = zeros.to(poles.dtype)

    nonzero = zeros != 0
    finite = zeros[nonzero]
    n_origin = zeros.numel() - finite.numel()
    excess = poles.numel() - zeros.numel()

    notch = torch.full(
        (excess,), 1j * center, dtype=poles.dtype, device=poles.device
    )
    zeros_bs = torch.cat(
        [
            quadratic_split(width / (2 * finite), center),
            torch.zeros(n_origin, dtype=poles.dtype, device=poles.device),
            notch,
            notch.conj(),
        ]
    )
    poles_bs = quadratic_split(width / (2 * poles), center)

    # prod over an empty tensor is 1
    ratio = torch.prod(-finite) / torch.prod(-poles)
    gain_bs = gain * width**n_origin * ratio.real

    return zeros_bs, poles_bs, gain_bs
