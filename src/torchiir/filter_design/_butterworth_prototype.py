"""Butterworth analog lowpass prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from .._complex import resolve_dtypes
from ._validation import validate_order


def butterworth_prototype(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Maximally flat analog lowpass with its -3 dB point at 1 rad/s.

    Parameters
    ----------
    order : int
        Number of poles, 1 to 12.
    dtype : torch.dtype, optional
        Real dtype of the gain; zeros and poles use the matching complex
        dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Empty; all zeros are at infinity.
    poles : Tensor
        Shape (order,), on the left half of the unit circle.
    gain : Tensor
        1.0.

    Raises
    ------
    InvalidOrderError
        If order is not an integer in [1, 12].

    Notes
    -----
    Pole k sits at angle pi (2k + n + 1) / (2n), k = 0, ..., n - 1, which
    walks the left half-plane from just above the positive imaginary
    axis to just below the negative one. |H(jw)|^2 = 1 / (1 + w^(2n)).

    Examples
    --------
    >>> zeros, poles, gain = butterworth_prototype(3, dtype=torch.float64)
    >>> poles[1]
    tensor(-1.+0.j, dtype=torch.complex128)
    """
    order = validate_order(order)
    dtype, complex_dtype, device = resolve_dtypes(dtype, device)

    k = torch.arange(order, dtype=torch.float64, device=device)
    theta = (2 * k + order + 1) * (math.pi / (2 * order))
    poles = torch.polar(torch.ones_like(theta), theta)

    # the middle pole of an odd order is exactly -1, not cos(pi) + j sin(pi)
    if order % 2:
        poles[order // 2] = -1.0

    return (
        torch.empty(0, dtype=complex_dtype, device=device),
        poles.to(complex_dtype),
        torch.ones((), dtype=dtype, device=device),
    )
