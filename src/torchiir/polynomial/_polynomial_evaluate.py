from typing import Union

import torch
from torch import Tensor

from .._complex import complex_dtype_for


def polynomial_evaluate(p: Tensor, x: Union[Tensor, float, complex]) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Tensor
        1-D coefficients in ascending order of powers.
    x : Tensor, float or complex
        Evaluation points, any shape. May be complex.

    Returns
    -------
    Tensor
        Values p(x), same shape as x, in the promoted dtype of p and x.

    Examples
    --------
    >>> polynomial_evaluate(torch.tensor([1.0, 2.0, 3.0]), torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    if not isinstance(x, Tensor):
        # Python scalars take the precision of the coefficients
        x_dtype = p.dtype
        if not (p.is_floating_point() or p.is_complex()):
            x_dtype = torch.get_default_dtype()
        if isinstance(x, complex) and not p.is_complex():
            x_dtype = complex_dtype_for(x_dtype)
        x = torch.as_tensor(x, dtype=x_dtype, device=p.device)
    common_dtype = torch.promote_types(p.dtype, x.dtype)

    if p.numel() == 0:
        return torch.zeros_like(x, dtype=common_dtype)

    p = p.to(common_dtype)
    x = x.to(common_dtype)

    # Start with leading coefficient
    result = torch.zeros_like(x) + p[-1]

    for i in range(p.numel() - 2, -1, -1):
        result = result * x + p[i]

    return result
