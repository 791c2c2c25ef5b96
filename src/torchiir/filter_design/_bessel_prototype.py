"""Bessel (Thomson) analog lowpass prototype."""

import math
from typing import List, Literal, Optional, Tuple

import torch
from torch import Tensor

from .._complex import nearest_conjugate_pairs, resolve_dtypes
from ..root_finding import aberth_ehrlich, polish_roots
from ._bessel_poles import tabulated_bessel_poles
from ._bessel_polynomial import bessel_polynomial
from ._constants import BESSEL_TABLE_MAX_ORDER, CONJUGATE_TOLERANCE
from ._exceptions import NumericallyUnstableError, UnsupportedKindError
from ._validation import validate_order

BesselNormalization = Literal["phase", "delay", "magnitude"]

_NORMALIZATIONS = ("phase", "delay", "magnitude")


def bessel_prototype(
    order: int,
    normalization: BesselNormalization = "phase",
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    All-pole analog lowpass with maximally flat group delay.

    H(s) = B_n(0) / B_n(s), B_n the reverse Bessel polynomial. What
    "1 rad/s" means depends on ``normalization``.

    Parameters
    ----------
    order : int
        Number of poles, 1 to 12.
    normalization : {"phase", "delay", "magnitude"}, default "phase"
        ``"phase"`` scales the poles by B_n(0)^(-1/n). The denominator
        then has unit constant and leading terms, so the high-frequency
        asymptote matches a Butterworth at 1 rad/s and the phase at
        1 rad/s is -n pi / 4. ``"delay"`` keeps the raw roots, with a
        group delay of 1 s at DC. ``"magnitude"`` puts the -3 dB point at
        1 rad/s.
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
        prod(-p), unity at DC.

    Raises
    ------
    InvalidOrderError
        If order is not an integer in [1, 12].
    UnsupportedKindError
        If normalization is not recognized.
    NumericallyUnstableError
        If root finding does not give ``order`` left half-plane poles.

    Notes
    -----
    Up to order 10 the delay-normalized poles come from
    :data:`BESSEL_POLES`; above that they are the roots of
    :func:`bessel_polynomial` found by :func:`aberth_ehrlich`.

    Examples
    --------
    >>> _, poles, gain = bessel_prototype(4, "magnitude", dtype=torch.float64)
    >>> poles.shape
    torch.Size([4])
    """
    order = validate_order(order)
    if normalization not in _NORMALIZATIONS:
        raise UnsupportedKindError(
            f"normalization must be one of {_NORMALIZATIONS}, "
            f"got {normalization!r}"
        )
    dtype, complex_dtype, device = resolve_dtypes(dtype, device)

    poles = _delay_normalized_poles(order)

    if normalization == "phase":
        # B_n(0) = prod(-p)
        scale = float(bessel_polynomial(order)[0]) ** (-1.0 / order)
    elif normalization == "magnitude":
        scale = 1.0 / _half_power_frequency(poles)
    else:
        scale = 1.0

    poles = torch.tensor([p * scale for p in poles], dtype=torch.complex128)
    gain = torch.prod(-poles).real

    return (
        torch.empty(0, dtype=complex_dtype, device=device),
        poles.to(dtype=complex_dtype, device=device),
        gain.to(dtype=dtype, device=device),
    )


def _delay_normalized_poles(order: int) -> List[complex]:
    if order <= BESSEL_TABLE_MAX_ORDER:
        return list(tabulated_bessel_poles(order, CONJUGATE_TOLERANCE))

    coeffs = bessel_polynomial(order)
    roots = polish_roots(coeffs, aberth_ehrlich(coeffs))
    # snap to exact conjugate pairs
    groups = nearest_conjugate_pairs(roots, CONJUGATE_TOLERANCE)
    poles = [p for group in groups for p in group if p.real < 0]

    if len(poles) != order:
        raise NumericallyUnstableError(
            f"Expected {order} left half-plane Bessel poles, "
            f"root finding gave {len(poles)}"
        )

    return poles


def _half_power_frequency(poles: List[complex]) -> float:
    """Frequency where |H(jw)|^2 = 1/2 for the unity-DC-gain all-pole H.

    Newton iteration in w on
    f(w) = sum log|p|^2 - sum log|jw - p|^2 - log(1/2), from w = 1.5.
    f is smooth and decreasing, so the iteration does not oscillate even
    for the very flat passbands of high orders.
    """
    offset = sum(math.log(abs(p) ** 2) for p in poles) - math.log(0.5)

    w = 1.5
    for _ in range(50):
        value = offset
        slope = 0.0
        for p in poles:
            distance_sq = abs(complex(0.0, w) - p) ** 2
            value -= math.log(distance_sq)
            slope -= 2.0 * (w - p.imag) / distance_sq

        if abs(value) < 1e-14:
            break
        w = max(w - value / slope, 0.01)

    return w
