"""Recompose direct-form (b, a) from second-order sections."""

from typing import Tuple

import torch
from torch import Tensor

from ..polynomial import polynomial_multiply
from ._exceptions import SOSNormalizationError


def sos_to_ba(
    sos: Tensor,
    validate: bool = True,
) -> Tuple[Tensor, Tensor]:
    """Multiply out a cascade of biquads into one numerator and denominator.

    Parameters
    ----------
    sos : Tensor
        Shape (n_sections, 6), rows [b0, b1, b2, 1, a1, a2] in ascending
        powers of z^-1.
    validate : bool, default True
        Check the shape and that every a0 is 1 (to within 1e-10).

    Returns
    -------
    b, a : Tensor
        Products of the section numerators and denominators, ascending in
        z^-1. Trailing positions that are zero in both are dropped, so a
        cascade containing first-order sections (b2 = a2 = 0) gives
        len(a) - 1 equal to the filter order. An empty cascade gives
        b = a = [1].

    Raises
    ------
    SOSNormalizationError
        If ``validate`` and the shape is not (n, 6) or some a0 != 1.

    Examples
    --------
    >>> sos = torch.tensor([[0.5, 0.5, 0.0, 1.0, -0.2, 0.0],
    ...                     [1.0, 2.0, 1.0, 1.0, -0.5, 0.1]])
    >>> b, a = sos_to_ba(sos)
    >>> a.numel()
    4
    """
    if sos.numel() == 0:
        one = torch.ones(1, dtype=sos.dtype, device=sos.device)
        return one, one.clone()

    if validate:
        if sos.dim() != 2 or sos.shape[1] != 6:
            raise SOSNormalizationError(
                f"SOS must have shape (n_sections, 6), got {tuple(sos.shape)}"
            )
        leading = sos[:, 3]
        if (leading - 1).abs().max() > 1e-10:
            raise SOSNormalizationError(
                f"SOS sections must have a0 = 1, got {leading.tolist()}"
            )

    b, a = sos[0, :3], sos[0, 3:]
    for section in sos[1:]:
        b = polynomial_multiply(b, section[:3])
        a = polynomial_multiply(a, section[3:])

    # b and a always have the same length here
    n = b.numel()
    while n > 1 and b[n - 1] == 0 and a[n - 1] == 0:
        n -= 1

    return b[:n].clone(), a[:n].clone()
