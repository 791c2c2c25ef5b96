from typing import List, Union

import torch
from torch import Tensor

from .._complex import conjugate_pairs
from ._polynomial_multiply import polynomial_multiply


def polynomial_from_roots(
    roots: Union[Tensor, List[complex]],
    *,
    tol: float = 1e-12,
    dtype: torch.dtype = torch.float64,
) -> Tensor:
    """Construct the real monic polynomial with the given roots.

    Conjugate pairs are multiplied in as real quadratics
    x^2 - 2 Re(r) x + |r|^2 so that the result has exactly real
    coefficients.

    Parameters
    ----------
    roots : Tensor or list of complex
        Roots; non-real roots must come in conjugate pairs.
    tol : float
        Relative tolerance for matching conjugates.
    dtype : torch.dtype
        Real dtype of the result.

    Returns
    -------
    Tensor
        Coefficients in ascending order, length len(roots) + 1.

    Raises
    ------
    ValueError
        If a non-real root has no conjugate partner.

    Examples
    --------
    >>> polynomial_from_roots([1j, -1j])  # x^2 + 1
    tensor([1., 0., 1.], dtype=torch.float64)
    """
    device = roots.device if isinstance(roots, Tensor) else None
    result = torch.ones(1, dtype=dtype, device=device)

    for group in conjugate_pairs(roots, tol):
        r = group[0]
        if len(group) == 1:
            factor = torch.tensor([-r.real, 1.0], dtype=dtype, device=device)
        else:
            factor = torch.tensor(
                [r.real * r.real + r.imag * r.imag, -2.0 * r.real, 1.0],
                dtype=dtype,
                device=device,
            )
        result = polynomial_multiply(result, factor)

    return result
