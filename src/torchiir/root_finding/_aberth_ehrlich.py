"""Aberth-Ehrlich polynomial root finding algorithm."""

import math
import warnings

import torch
from torch import Tensor

from .._complex import complex_dtype_for
from ..polynomial import polynomial_evaluate
from ._constants import (
    ROOT_FINDER_DENOMINATOR_FLOOR,
    ROOT_FINDER_LEADING_TRIM,
    ROOT_FINDER_MAX_ITERATIONS,
    ROOT_FINDER_RESIDUAL_FACTOR,
    ROOT_FINDER_TOLERANCE,
)
from ._exceptions import DegreeError


def _trim_leading(coeffs: Tensor, rtol: float) -> Tensor:
    """Drop numerically zero high-degree coefficients."""
    scale = coeffs.abs().max()
    n = coeffs.numel()
    while n > 1 and coeffs[n - 1].abs() <= rtol * scale:
        n -= 1
    return coeffs[:n]


def _get_initial_roots(coeffs_norm: Tensor, degree: int) -> Tensor:
    """Compute initial root guesses on a circle.

    The radius is the geometric mean of the root magnitudes,
    |c_0 / c_n|^(1/n), which places the circle among the roots for
    polynomials whose roots have similar size (Bessel polynomials, for
    example). A polynomial with a root at the origin has c_0 = 0; the
    Cauchy bound 1 + max|c_i / c_n| is used instead.

    Parameters
    ----------
    coeffs_norm : Tensor
        Monic coefficients, shape (degree + 1,).
    degree : int
        Polynomial degree.

    Returns
    -------
    Tensor
        Initial root guesses, shape (degree,).
    """
    constant = float(coeffs_norm[0].abs())
    if constant > 0.0:
        radius = constant ** (1.0 / degree)
    else:
        radius = float(coeffs_norm[:-1].abs().max()) + 1.0

    real_dtype = coeffs_norm.real.dtype
    angles = (
        2
        * math.pi
        * torch.arange(degree, device=coeffs_norm.device, dtype=real_dtype)
        / degree
    )
    angles = angles + 0.2  # Slight offset to break symmetry

    return radius * torch.complex(torch.cos(angles), torch.sin(angles))


def aberth_ehrlich(
    coeffs: Tensor,
    *,
    maxiter: int = ROOT_FINDER_MAX_ITERATIONS,
    tol: float = ROOT_FINDER_TOLERANCE,
    denominator_floor: float = ROOT_FINDER_DENOMINATOR_FLOOR,
) -> Tensor:
    """Find all roots of a polynomial using Aberth-Ehrlich iteration.

    All root estimates are refined simultaneously. Each step is a Newton
    step corrected by a term that repels an estimate from the others,
    so distinct estimates do not collapse onto the same root.

    Parameters
    ----------
    coeffs : Tensor
        1-D polynomial coefficients in ascending order of powers,
        c_0 + c_1*x + ... + c_n*x^n. Real or complex.
    maxiter : int, default=200
        Maximum number of iterations.
    tol : float, default=1e-12
        Convergence tolerance. Iteration stops when, for every estimate,
        the update is smaller than ``tol * max(1, |z|)`` or |p(z)| is
        already at the rounding level of evaluating p at z.
    denominator_floor : float, default=1e-14
        Lower bound on the magnitude of |z_i - z_j| and of the update
        denominator.

    Returns
    -------
    Tensor
        Complex roots, shape (n,). complex128 for float64 input,
        complex64 for float32 input.

    Raises
    ------
    DegreeError
        If the polynomial has degree < 1 after trimming numerically zero
        leading coefficients.

    Warns
    -----
    RuntimeWarning
        If the iteration cap is reached before convergence. The current
        estimates are returned.

    Examples
    --------
    Find roots of x^2 - 5x + 6 = (x-2)(x-3):

    >>> coeffs = torch.tensor([6.0, -5.0, 1.0], dtype=torch.float64)
    >>> roots = aberth_ehrlich(coeffs)
    >>> sorted(roots.real.tolist())  # doctest: +ELLIPSIS
    [2.0..., 3.0...]

    Notes
    -----
    At each iteration, for each estimate z_k:

    1. Newton ratio: r_k = p(z_k) / p'(z_k)
    2. Aberth sum: S_k = sum_{j != k} 1 / (z_k - z_j)
    3. Update: z_k <- z_k - r_k / (1 - r_k * S_k)

    The update is evaluated as p / (p' - p * S) so that a vanishing
    derivative does not produce an infinite Newton ratio.

    References
    ----------
    .. [1] O. Aberth, "Iteration methods for finding all zeros of a polynomial
           simultaneously", Mathematics of Computation, 27(122):339-344, 1973.
    .. [2] L.W. Ehrlich, "A modified Newton method for polynomials",
           Communications of the ACM, 10(2):107-108, 1967.
    """
    if coeffs.dim() != 1:
        raise ValueError(
            f"coeffs must be 1-D, got shape {tuple(coeffs.shape)}"
        )

    cdtype = complex_dtype_for(coeffs.dtype)
    coeffs = _trim_leading(coeffs.to(cdtype), ROOT_FINDER_LEADING_TRIM)

    n = coeffs.numel()
    degree = n - 1

    if degree < 1:
        raise DegreeError(
            f"Polynomial must have degree >= 1, got degree {degree}"
        )

    # Normalize by leading coefficient to make monic
    coeffs_norm = coeffs / coeffs[-1]

    if degree == 1:
        return -coeffs_norm[:1]

    real_dtype = coeffs_norm.real.dtype
    powers = torch.arange(1, n, device=coeffs.device, dtype=real_dtype)
    deriv_coeffs = coeffs_norm[1:] * powers.to(cdtype)

    z = _get_initial_roots(coeffs_norm, degree)

    eye = torch.eye(degree, device=coeffs.device, dtype=torch.bool)
    one = torch.ones((), dtype=cdtype, device=coeffs.device)

    # |p(z)| below this multiple of sum |c_i| |z|^i is rounding noise
    magnitudes = coeffs_norm.abs()
    noise = ROOT_FINDER_RESIDUAL_FACTOR * degree * torch.finfo(real_dtype).eps

    converged = False
    for _ in range(maxiter):
        p_z = polynomial_evaluate(coeffs_norm, z)
        bound = polynomial_evaluate(magnitudes, z.abs())
        at_noise = p_z.abs() <= noise * bound
        dp_z = polynomial_evaluate(deriv_coeffs, z)

        # Pairwise differences z_k - z_j, diagonal replaced by 1 so the
        # reciprocal stays finite, then masked out of the sum
        z_diff = z.unsqueeze(-1) - z.unsqueeze(-2)
        z_diff = torch.where(eye, one, z_diff)
        tiny = z_diff.abs() < denominator_floor
        z_diff = torch.where(tiny, one * denominator_floor, z_diff)
        inverse = torch.where(eye, torch.zeros_like(z_diff), 1.0 / z_diff)
        correction_sum = inverse.sum(dim=-1)

        denominator = dp_z - p_z * correction_sum
        denominator = torch.where(
            denominator.abs() < denominator_floor,
            one * denominator_floor,
            denominator,
        )
        delta = p_z / denominator

        z = z - delta

        scale = torch.clamp(z.abs(), min=1.0)
        settled = (delta.abs() / scale < tol) | at_noise
        if bool(settled.all()):
            converged = True
            break

    if not converged:
        warnings.warn(
            f"aberth_ehrlich did not converge in {maxiter} iterations "
            f"for a degree {degree} polynomial",
            RuntimeWarning,
            stacklevel=2,
        )

    return z
