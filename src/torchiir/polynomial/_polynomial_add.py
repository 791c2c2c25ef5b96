import torch
from torch import Tensor


def polynomial_add(p: Tensor, q: Tensor) -> Tensor:
    """Add two polynomials.

    The shorter coefficient vector is zero-padded at the high-degree end,
    so the result has length max(len(p), len(q)).

    Parameters
    ----------
    p, q : Tensor
        1-D coefficients in ascending order of powers.

    Returns
    -------
    Tensor
        Coefficients of p + q.

    Examples
    --------
    >>> polynomial_add(torch.tensor([1.0, 2.0]), torch.tensor([1.0, 0.0, 3.0]))
    tensor([2., 2., 3.])
    """
    common_dtype = torch.promote_types(p.dtype, q.dtype)
    n = max(p.numel(), q.numel())

    result = torch.zeros(n, dtype=common_dtype, device=p.device)
    result[: p.numel()] += p.to(common_dtype)
    result[: q.numel()] += q.to(common_dtype)

    return result
