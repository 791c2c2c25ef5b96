"""Chebyshev Type I analog lowpass prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from .._complex import resolve_dtypes
from ._validation import validate_order, validate_passband_ripple


def chebyshev_ellipse_poles(order: int, mu: float) -> Tensor:
    """Poles -sinh(mu) sin(t_k) + j cosh(mu) cos(t_k), complex128.

    t_k = pi (2k - 1) / (2n) for k = 1, ..., n. These lie on an ellipse
    with semi-axes sinh(mu) and cosh(mu). For odd n the middle pole is
    placed exactly on the real axis.
    """
    k = torch.arange(1, order + 1, dtype=torch.float64)
    t = (2 * k - 1) * (math.pi / (2 * order))

    real = -math.sinh(mu) * torch.sin(t)
    imag = math.cosh(mu) * torch.cos(t)
    if order % 2:
        imag[order // 2] = 0.0

    return torch.complex(real, imag)


def chebyshev_type_1_prototype(
    order: int,
    passband_ripple_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Equiripple-passband analog lowpass with its passband edge at 1 rad/s.

    Parameters
    ----------
    order : int
        Number of poles, 1 to 12.
    passband_ripple_db : float
        Peak-to-peak passband ripple Rp in dB, in (0, 10].
    dtype : torch.dtype, optional
        Real dtype of the gain; zeros and poles use the matching complex
        dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Empty.
    poles : Tensor
        Shape (order,).
    gain : Tensor
        prod(-p), divided by sqrt(1 + eps^2) for even orders, so the
        passband peaks at 1.

    Raises
    ------
    InvalidOrderError
        If order is not an integer in [1, 12].
    InvalidRippleError
        If the ripple is not in (0, 10] dB.

    Notes
    -----
    With eps = sqrt(10^(Rp/10) - 1) the poles lie on the ellipse of
    :func:`chebyshev_ellipse_poles` with mu = arcsinh(1/eps) / n. The
    magnitude swings between 1 and 1/sqrt(1 + eps^2) up to 1 rad/s and
    falls monotonically after it. At DC it is 1 for odd orders and
    1/sqrt(1 + eps^2) for even ones.

    Examples
    --------
    >>> _, poles, gain = chebyshev_type_1_prototype(3, 1.0, dtype=torch.float64)
    >>> poles.shape
    torch.Size([3])
    """
    order = validate_order(order)
    passband_ripple_db = validate_passband_ripple(passband_ripple_db)
    dtype, complex_dtype, device = resolve_dtypes(dtype, device)

    eps = math.sqrt(10 ** (passband_ripple_db / 10) - 1)
    poles = chebyshev_ellipse_poles(order, math.asinh(1.0 / eps) / order)

    gain = torch.prod(-poles).real
    if order % 2 == 0:
        gain = gain / math.sqrt(1 + eps * eps)

    return (
        torch.empty(0, dtype=complex_dtype, device=device),
        poles.to(complex_dtype).to(device),
        gain.to(dtype).to(device),
    )
