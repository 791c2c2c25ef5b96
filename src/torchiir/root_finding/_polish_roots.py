"""Newton refinement of approximate polynomial roots."""

import math

import torch
from torch import Tensor

from ..polynomial import polynomial_evaluate
from ._constants import ROOT_POLISH_STEPS


def polish_roots(
    coeffs: Tensor,
    roots: Tensor,
    *,
    steps: int = ROOT_POLISH_STEPS,
) -> Tensor:
    """Refine root estimates with Newton steps on ``coeffs``.

    A step is kept only if it lowers |p(z)| and moves the estimate by
    less than half the distance to its nearest neighbour, so two
    estimates of a cluster cannot end up on the same root.

    Parameters
    ----------
    coeffs : Tensor
        1-D coefficients in ascending order of powers, not necessarily
        monic.
    roots : Tensor
        Complex root estimates, shape (n,).
    steps : int, default=3
        Number of Newton steps.

    Returns
    -------
    Tensor
        Refined roots, same shape and dtype as ``roots``.

    Examples
    --------
    >>> coeffs = torch.tensor([-2.0, 0.0, 1.0], dtype=torch.float64)
    >>> roots = torch.tensor([1.41, -1.41], dtype=torch.complex128)
    >>> polish_roots(coeffs, roots).real
    tensor([ 1.4142, -1.4142], dtype=torch.float64)
    """
    if roots.numel() == 0:
        return roots

    c = coeffs.to(roots.dtype)
    powers = torch.arange(1, c.numel(), dtype=c.real.dtype, device=c.device)
    dc = c[1:] * powers.to(roots.dtype)

    if roots.numel() > 1:
        gaps = (roots.unsqueeze(-1) - roots.unsqueeze(-2)).abs()
        gaps.fill_diagonal_(math.inf)
        reach = gaps.min(dim=-1).values / 2
    else:
        reach = torch.full((1,), math.inf, dtype=c.real.dtype, device=c.device)

    z = roots
    for _ in range(steps):
        p = polynomial_evaluate(c, z)
        dp = polynomial_evaluate(dc, z)
        step = torch.where(dp != 0, p / dp, torch.zeros_like(p))

        candidate = z - step
        better = (polynomial_evaluate(c, candidate).abs() < p.abs()) & (
            step.abs() < reach
        )
        z = torch.where(better, candidate, z)

    return z
