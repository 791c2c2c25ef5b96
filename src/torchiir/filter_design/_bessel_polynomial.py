from typing import Optional

import torch
from torch import Tensor

from ._validation import validate_order


def bessel_polynomial(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Reverse Bessel polynomial coefficients.

    Parameters
    ----------
    order : int
        Polynomial degree n. Must be positive.
    dtype : torch.dtype, optional
        Output dtype. Defaults to float64; coefficients are integers and
        are exact in float64 up to n = 10.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    Tensor
        Coefficients [a_0, a_1, ..., a_n] in ascending order of powers,
        a_n = 1.

    Notes
    -----
    Built from the recurrence

    .. math::
        \\theta_n(s) = (2n - 1) \\theta_{n-1}(s) + s^2 \\theta_{n-2}(s)

    with theta_0 = 1 and theta_1 = s + 1. Equivalently
    a_k = (2n-k)! / (2^(n-k) k! (n-k)!). The roots are the poles of the
    Bessel filter with unit group delay at DC.

    Examples
    --------
    >>> bessel_polynomial(2)
    tensor([3., 3., 1.], dtype=torch.float64)
    """
    order = validate_order(order)

    if dtype is None:
        dtype = torch.float64

    # Python integers keep the recurrence exact
    previous = [1]
    current = [1, 1]
    for n in range(2, order + 1):
        nxt = [(2 * n - 1) * c for c in current] + [0, 0]
        for i, c in enumerate(previous):
            nxt[i + 2] += c
        previous, current = current, nxt[: n + 1]

    return torch.tensor(
        [float(c) for c in current], dtype=dtype, device=device
    )
