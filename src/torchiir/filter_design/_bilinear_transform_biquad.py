"""Closed-form bilinear transform of a single analog section."""

from typing import Sequence, Union

import torch
from torch import Tensor

from ._exceptions import NumericallyUnstableError
from ._filter_result import Biquad


def _as_list(coeffs: Union[Sequence[float], Tensor]) -> list:
    if isinstance(coeffs, Tensor):
        coeffs = coeffs.tolist()
    coeffs = [float(c) for c in coeffs]
    if len(coeffs) > 3:
        raise ValueError(
            f"Analog section coefficients must have at most 3 entries, "
            f"got {len(coeffs)}"
        )
    return coeffs + [0.0] * (3 - len(coeffs))


def bilinear_transform_biquad(
    b_analog: Union[Sequence[float], Tensor],
    a_analog: Union[Sequence[float], Tensor],
    sampling_frequency: float,
    *,
    dtype: torch.dtype = torch.float64,
    device=None,
) -> Biquad:
    """
    Bilinear transform of one analog section of degree at most two.

    Parameters
    ----------
    b_analog : sequence of float or Tensor
        Numerator [b0, b1, b2] in ascending powers of s.
    a_analog : sequence of float or Tensor
        Denominator [a0, a1, a2] in ascending powers of s.
    sampling_frequency : float
        Sampling frequency (Hz).
    dtype : torch.dtype, default torch.float64
        Output dtype.
    device : torch.device, optional
        Output device.

    Returns
    -------
    Biquad
        Digital section with coefficients in ascending powers of z^-1,
        normalized so that a[0] = 1.

    Raises
    ------
    ValueError
        If the numerator is second order over a first order denominator.
    NumericallyUnstableError
        If the leading digital denominator coefficient vanishes.

    Notes
    -----
    With K = 2 * sampling_frequency and s = K (1 - z^-1) / (1 + z^-1),
    multiplying through by (1 + z^-1)^2 gives

    .. math::
        B_0 = b_2 K^2 + b_1 K + b_0, \\quad
        B_1 = 2 (b_0 - b_2 K^2), \\quad
        B_2 = b_2 K^2 - b_1 K + b_0

    and the same for the denominator. When both numerator and denominator
    are first order (b2 = a2 = 0) the section is multiplied by
    (1 + z^-1) only:

    .. math::
        B_0 = b_1 K + b_0, \\quad B_1 = b_0 - b_1 K, \\quad B_2 = 0

    so no cancelling pole/zero pair at z = -1 is introduced.

    Examples
    --------
    >>> section = bilinear_transform_biquad([1.0, 0.0, 0.0], [1.0, 1.0, 0.0], 0.5)
    >>> section.b
    tensor([0.5000, 0.5000, 0.0000], dtype=torch.float64)
    """
    b0, b1, b2 = _as_list(b_analog)
    a0, a1, a2 = _as_list(a_analog)

    k = 2.0 * sampling_frequency
    k_sq = k * k

    if a2 == 0.0 and b2 != 0.0:
        raise ValueError(
            "Analog section has a second order numerator over a first "
            f"order denominator: b={[b0, b1, b2]}, a={[a0, a1, a2]}"
        )

    if a2 == 0.0:
        num = [b1 * k + b0, b0 - b1 * k, 0.0]
        den = [a1 * k + a0, a0 - a1 * k, 0.0]
    else:
        num = [
            b2 * k_sq + b1 * k + b0,
            2.0 * (b0 - b2 * k_sq),
            b2 * k_sq - b1 * k + b0,
        ]
        den = [
            a2 * k_sq + a1 * k + a0,
            2.0 * (a0 - a2 * k_sq),
            a2 * k_sq - a1 * k + a0,
        ]

    if den[0] == 0.0:
        raise NumericallyUnstableError(
            "Bilinear transform gives a zero leading denominator "
            f"coefficient for a={[a0, a1, a2]} at "
            f"sampling_frequency={sampling_frequency}"
        )

    scale = den[0]
    b = torch.tensor([c / scale for c in num], dtype=dtype, device=device)
    a = torch.tensor([c / scale for c in den], dtype=dtype, device=device)

    return Biquad(b, a)
