"""Whole-filter bilinear map of analog zeros, poles and gain."""

from typing import Tuple

import torch
from torch import Tensor


def bilinear_transform_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    sampling_frequency: float,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Map an analog (zeros, poles, gain) to the z-plane.

    Each root r goes to (K + r) / (K - r) with K = 2 * sampling_frequency,
    the inverse of s = K (1 - z^-1) / (1 + z^-1). Analog zeros at
    infinity, one per excess pole, land on z = -1.

    Parameters
    ----------
    zeros : Tensor
        Finite analog zeros, complex, shape (M,).
    poles : Tensor
        Analog poles, complex, shape (N,) with N >= M.
    gain : Tensor
        Real scalar gain of the analog filter.
    sampling_frequency : float
        Sampling frequency in Hz.

    Returns
    -------
    zeros : Tensor
        Digital zeros, shape (N,): the M mapped zeros followed by N - M
        zeros at -1.
    poles : Tensor
        Digital poles, shape (N,).
    gain : Tensor
        Real scalar gain, k * prod(K - z) / prod(K - p), so that the
        digital and analog responses agree at DC.

    Notes
    -----
    The design functions map section by section with
    :func:`bilinear_transform_biquad`, which never forms the full
    polynomials. This form is the whole-filter counterpart, used to check
    pole and zero placement.

    Examples
    --------
    >>> z, p, k = butterworth_prototype(2, dtype=torch.float64)
    >>> zd, pd, kd = bilinear_transform_zpk(z, p, k, 2.0)
    >>> zd
    tensor([-1.+0.j, -1.+0.j], dtype=torch.complex128)
    """
    k2 = 2.0 * float(sampling_frequency)
    zeros = zeros.to(poles.dtype)

    excess = poles.numel() - zeros.numel()
    at_nyquist = torch.full(
        (excess,), -1.0, dtype=poles.dtype, device=poles.device
    )

    zeros_z = torch.cat([(k2 + zeros) / (k2 - zeros), at_nyquist])
    poles_z = (k2 + poles) / (k2 - poles)

    # prod over an empty tensor is 1
    scale = torch.prod(k2 - zeros) / torch.prod(k2 - poles)
    gain_z = gain * scale.real

    return zeros_z, poles_z, gain_z
