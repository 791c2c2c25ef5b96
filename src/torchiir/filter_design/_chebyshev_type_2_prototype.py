"""Chebyshev Type II (inverse Chebyshev) analog lowpass prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from .._complex import resolve_dtypes
from ._chebyshev_type_1_prototype import chebyshev_ellipse_poles
from ._validation import validate_order, validate_stopband_attenuation


def chebyshev_type_2_prototype(
    order: int,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Analog lowpass with a flat passband and an equiripple stopband.

    The critical frequency 1 rad/s is the stopband edge: the attenuation
    there is exactly ``stopband_attenuation_db`` and never less above it.

    Parameters
    ----------
    order : int
        Number of poles, 1 to 12.
    stopband_attenuation_db : float
        Minimum stopband attenuation Rs in dB, positive.
    dtype : torch.dtype, optional
        Real dtype of the gain; zeros and poles use the matching complex
        dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Conjugate pairs on the imaginary axis, shape (2 * (order // 2),).
    poles : Tensor
        Shape (order,).
    gain : Tensor
        prod(-p) / prod(-z), unity at DC.

    Raises
    ------
    InvalidOrderError
        If order is not an integer in [1, 12].
    InvalidAttenuationError
        If the attenuation is not positive.

    Notes
    -----
    The poles are the reciprocals of Chebyshev ellipse poles with
    mu = arcsinh(1/eps) / n, eps = 1 / sqrt(10^(Rs/10) - 1), and the
    zeros are +/- j / cos(t_k) with t_k = pi (2k - 1) / (2n). The middle
    angle of an odd order has cos(t) = 0, a zero at infinity, so only
    floor(n/2) pairs are finite.

    Examples
    --------
    >>> zeros, poles, gain = chebyshev_type_2_prototype(5, 40.0)
    >>> zeros.shape
    torch.Size([4])
    """
    order = validate_order(order)
    stopband_attenuation_db = validate_stopband_attenuation(
        stopband_attenuation_db
    )
    dtype, complex_dtype, device = resolve_dtypes(dtype, device)

    eps = 1.0 / math.sqrt(10 ** (stopband_attenuation_db / 10) - 1)
    poles = 1.0 / chebyshev_ellipse_poles(order, math.asinh(1.0 / eps) / order)

    pairs = order // 2
    k = torch.arange(1, pairs + 1, dtype=torch.float64)
    heights = 1.0 / torch.cos((2 * k - 1) * (math.pi / (2 * order)))
    re = torch.zeros_like(heights)
    zeros = torch.complex(
        torch.cat([re, re]), torch.cat([heights, -heights])
    )

    gain = (torch.prod(-poles) / torch.prod(-zeros)).real

    return (
        zeros.to(complex_dtype).to(device),
        poles.to(complex_dtype).to(device),
        gain.to(dtype).to(device),
    )
