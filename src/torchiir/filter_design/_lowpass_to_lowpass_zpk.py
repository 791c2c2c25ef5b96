"""Cutoff scaling of an analog lowpass (zeros, poles, gain)."""

from typing import Tuple

from torch import Tensor


def lowpass_to_lowpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    cutoff: float = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Move the cutoff of an analog lowpass from 1 rad/s to ``cutoff`` rad/s.

    Substitutes s -> s / cutoff: every root is multiplied by ``cutoff`` and
    the gain by cutoff^(N - M), N poles and M zeros, so the response at
    cutoff * w equals the prototype response at w.

    Examples
    --------
    >>> z, p, k = lowpass_to_lowpass_zpk(*butterworth_prototype(2), 100.0)
    >>> float(k)
    10000.0
    """
    cutoff = float(cutoff)
    excess = poles.numel() - zeros.numel()

    return zeros * cutoff, poles * cutoff, gain * cutoff**excess
