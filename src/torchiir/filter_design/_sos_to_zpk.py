"""Conversion from second-order sections to zeros, poles, and gain."""

import cmath
from typing import List, Tuple

import torch
from torch import Tensor


def _roots(coeffs: List[float]) -> List[complex]:
    """Roots of c[0] x^d + c[1] x^(d-1) + ... with leading zeros dropped."""
    while coeffs and coeffs[0] == 0.0:
        coeffs = coeffs[1:]

    if len(coeffs) <= 1:
        return []
    if len(coeffs) == 2:
        return [complex(-coeffs[1] / coeffs[0])]

    c2, c1, c0 = coeffs
    sqrt_disc = cmath.sqrt(c1 * c1 - 4 * c2 * c0)
    # Avoid cancellation: q takes the sign of c1
    if c1 >= 0:
        q = -(c1 + sqrt_disc) / 2
    else:
        q = -(c1 - sqrt_disc) / 2
    if q == 0:
        return [0j, 0j]
    return [q / c2, c0 / q]


def sos_to_zpk(sos: Tensor) -> Tuple[Tensor, Tensor, Tensor]:
    """Convert second-order sections to zeros, poles, and gain.

    Parameters
    ----------
    sos : Tensor
        Second-order sections, shape (n_sections, 6).
        Each row is [b0, b1, b2, a0, a1, a2].

    Returns
    -------
    zeros : Tensor
        Digital zeros, complex.
    poles : Tensor
        Digital poles, complex.
    gain : Tensor
        Product of the leading numerator coefficients over the leading
        denominator coefficients.

    Notes
    -----
    A section b0 + b1 z^-1 + b2 z^-2 has the zeros of b0 z^2 + b1 z + b2.
    First-order sections (b2 = a2 = 0) contribute one zero and one pole.

    Examples
    --------
    >>> sos = torch.tensor([[1.0, 0.0, -1.0, 1.0, 0.0, -0.25]], dtype=torch.float64)
    >>> z, p, k = sos_to_zpk(sos)
    >>> sorted(p.real.tolist())
    [-0.5, 0.5]
    """
    complex_dtype = (
        torch.complex64 if sos.dtype == torch.float32 else torch.complex128
    )

    zeros: List[complex] = []
    poles: List[complex] = []
    gain = 1.0

    for row in sos.tolist():
        b, a = row[:3], row[3:]
        if b[2] == 0.0 and a[2] == 0.0:
            b, a = b[:2], a[:2]

        zeros.extend(_roots(list(b)))
        poles.extend(_roots(list(a)))

        lead_b = next((c for c in b if c != 0.0), 0.0)
        lead_a = next((c for c in a if c != 0.0), 1.0)
        gain *= lead_b / lead_a

    return (
        torch.tensor(zeros, dtype=complex_dtype, device=sos.device),
        torch.tensor(poles, dtype=complex_dtype, device=sos.device),
        torch.tensor(gain, dtype=sos.dtype, device=sos.device),
    )
