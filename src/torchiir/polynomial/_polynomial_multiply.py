import torch
from torch import Tensor


def polynomial_multiply(p: Tensor, q: Tensor) -> Tensor:
    """Multiply two polynomials.

    Computes the convolution of the coefficient vectors. Result degree is
    deg(p) + deg(q).

    Parameters
    ----------
    p, q : Tensor
        1-D coefficients in ascending order of powers. Real or complex.

    Returns
    -------
    Tensor
        Coefficients of p * q, length len(p) + len(q) - 1.

    Examples
    --------
    >>> polynomial_multiply(torch.tensor([1.0, 1.0]), torch.tensor([1.0, 1.0]))
    tensor([1., 2., 1.])
    """
    common_dtype = torch.promote_types(p.dtype, q.dtype)
    n_p = p.numel()
    n_q = q.numel()

    if n_p == 0 or n_q == 0:
        return torch.zeros(0, dtype=common_dtype, device=p.device)

    p = p.to(common_dtype)
    q = q.to(common_dtype)

    result = torch.zeros(n_p + n_q - 1, dtype=common_dtype, device=p.device)

    # Accumulate shifted copies of q scaled by each coefficient of p
    for i in range(n_p):
        result[i : i + n_q] += p[i] * q

    return result
