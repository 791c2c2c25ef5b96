from typing import Union

import torch
from torch import Tensor

from ..polynomial import polynomial_evaluate


def transfer_function_at(
    b: Tensor,
    a: Tensor,
    z: Union[complex, float, Tensor],
) -> Tensor:
    """Evaluate H(z) = B(z) / A(z) for coefficients in ascending powers of z^-1.

    Parameters
    ----------
    b, a : Tensor
        Numerator and denominator, b[0] + b[1] z^-1 + ...
    z : complex, float or Tensor
        Evaluation point(s) in the z-plane, nonzero.

    Returns
    -------
    Tensor
        Complex value(s) of the transfer function.

    Examples
    --------
    >>> b = torch.tensor([0.5, 0.5], dtype=torch.float64)
    >>> a = torch.tensor([1.0, 0.0], dtype=torch.float64)
    >>> transfer_function_at(b, a, 1.0)
    tensor(1.+0.j, dtype=torch.complex128)
    """
    complex_dtype = (
        torch.complex64 if b.dtype == torch.float32 else torch.complex128
    )
    if isinstance(z, Tensor):
        z = z.to(device=b.device, dtype=complex_dtype)
    else:
        z = torch.tensor(complex(z), dtype=complex_dtype, device=b.device)
    z_inv = 1.0 / z

    return polynomial_evaluate(b.to(complex_dtype), z_inv) / polynomial_evaluate(
        a.to(complex_dtype), z_inv
    )
