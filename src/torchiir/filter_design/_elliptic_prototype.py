"""Elliptic (Cauer) analog lowpass prototype."""

from typing import Optional, Tuple

import torch
from torch import Tensor

from .._complex import resolve_dtypes
from ._elliptic_functions import elliptic_zpk
from ._validation import (
    validate_order,
    validate_passband_ripple,
    validate_stopband_attenuation,
)


def elliptic_prototype(
    order: int,
    passband_ripple_db: float,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Analog lowpass that is equiripple in both bands, edge at 1 rad/s.

    For a given order no other prototype has a narrower transition band
    for the same ripple and attenuation.

    Parameters
    ----------
    order : int
        Number of poles, 1 to 12.
    passband_ripple_db : float
        Peak-to-peak passband ripple Rp in dB, in (0, 10].
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
        Shape (order,); one is real for odd orders.
    gain : Tensor
        Gives a DC magnitude of 1 for odd orders and 1/sqrt(1 + eps^2)
        for even ones, eps^2 = 10^(Rp/10) - 1.

    Raises
    ------
    InvalidOrderError
        If order is not an integer in [1, 12].
    InvalidRippleError
        If the ripple is not in (0, 10] dB.
    InvalidAttenuationError
        If the attenuation is not positive.

    Notes
    -----
    The magnitude at 1 rad/s is exactly 1/sqrt(1 + eps^2). The modulus
    comes from the selectivity k1^2 = eps^2 / (10^(Rs/10) - 1) through the
    degree equation, solved with a truncated nome series; see
    :func:`elliptic_zpk`.

    Examples
    --------
    >>> zeros, poles, gain = elliptic_prototype(5, 0.5, 60.0)
    >>> zeros.shape, poles.shape
    (torch.Size([4]), torch.Size([5]))
    """
    order = validate_order(order)
    passband_ripple_db = validate_passband_ripple(passband_ripple_db)
    stopband_attenuation_db = validate_stopband_attenuation(
        stopband_attenuation_db
    )
    dtype, complex_dtype, device = resolve_dtypes(dtype, device)

    zeros, poles, gain = elliptic_zpk(
        order, passband_ripple_db, stopband_attenuation_db
    )

    def as_roots(values):
        return torch.tensor(values, dtype=torch.complex128).to(
            dtype=complex_dtype, device=device
        )

    return (
        as_roots(zeros),
        as_roots(poles),
        torch.tensor(gain, dtype=dtype, device=device),
    )
