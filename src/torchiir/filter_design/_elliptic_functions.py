"""Elliptic functions for filter design.

Jacobi elliptic functions and complete/incomplete integrals come from
``scipy.special``; this module adds the degree equation and the inverse
of ``sc`` needed to place the elliptic prototype's poles and zeros.
"""

import math
from typing import List, Tuple

import numpy as np
from scipy import special

from ._constants import ELLIPDEG_NOME_TERMS

# Values of sn below this are treated as zero (zero at infinity)
EPSILON = 2e-16


def _pow10m1(x: float) -> float:
    """Compute 10^x - 1 accurately for small x."""
    return math.expm1(x * math.log(10.0))


def _ellipdeg(n: int, m1: float) -> float:
    """Solve the degree equation using nomes.

    Given n and m1, solve

        n * K(m) / K'(m) = K(m1) / K'(m1)

    for m. With the nome q1 of m1, the nome of m is q = q1^(1/n) and m
    follows from the theta-function series in q.
    """
    K1 = special.ellipk(m1)
    K1p = special.ellipkm1(m1)

    q1 = np.exp(-np.pi * K1p / K1)
    q = q1 ** (1 / n)

    mnum = np.arange(ELLIPDEG_NOME_TERMS + 1)
    mden = np.arange(1, ELLIPDEG_NOME_TERMS + 2)

    num = np.sum(q ** (mnum * (mnum + 1)))
    den = 1 + 2 * np.sum(q ** (mden**2))

    return float(16 * q * (num / den) ** 4)


def _arc_jac_sc1(w: float, m: float) -> float:
    """Real inverse Jacobian sc, with complementary parameter.

    Solve for real z in w = sc(z, 1 - m).

    sc = sn / cn = tan(am(z)), so the amplitude is atan(w) and z is the
    incomplete integral of the first kind F(atan(w) | 1 - m).
    """
    return float(special.ellipkinc(math.atan(w), 1.0 - m))


def elliptic_zpk(
    order: int,
    passband_ripple_db: float,
    stopband_attenuation_db: float,
) -> Tuple[List[complex], List[complex], float]:
    """Compute zeros, poles, and gain of the elliptic analog lowpass prototype.

    Parameters are assumed validated. The passband edge is 1 rad/s.

    Returns
    -------
    zeros : list of complex
        Conjugate zero pairs on the imaginary axis, 2 * floor(order / 2)
        values.
    poles : list of complex
        Poles in the left half-plane, ``order`` values, with one real pole
        for odd order.
    gain : float
        Gain giving unity DC magnitude for odd order and 1/sqrt(1+eps^2)
        for even order.
    """
    eps_sq = _pow10m1(0.1 * passband_ripple_db)

    if order == 1:
        p = -math.sqrt(1.0 / eps_sq)
        return [], [complex(p, 0.0)], -p

    # Selectivity k1^2 from the ripple ratio
    ck1_sq = eps_sq / _pow10m1(0.1 * stopband_attenuation_db)
    if ck1_sq == 0:
        raise ValueError(
            "Cannot design elliptic filter: passband ripple "
            f"{passband_ripple_db} dB is negligible against stopband "
            f"attenuation {stopband_attenuation_db} dB"
        )

    m = _ellipdeg(order, ck1_sq)
    capk = float(special.ellipk(m))

    # j = 1, 3, 5, ... for even order; 0, 2, 4, ... for odd order
    j_vals = range(1 - order % 2, order, 2)

    r = _arc_jac_sc1(1.0 / math.sqrt(eps_sq), ck1_sq)
    v0 = capk * r / (order * float(special.ellipk(ck1_sq)))
    sv, cv, dv, _ = special.ellipj(v0, 1 - m)

    upper_zeros = []
    upper_poles = []
    for j in j_vals:
        s, c, d, _ = special.ellipj(j * capk / order, m)

        if abs(s) > EPSILON:
            upper_zeros.append(complex(0.0, 1.0 / (math.sqrt(m) * s)))

        denom = 1 - (d * sv) ** 2
        upper_poles.append(
            complex(-c * d * sv * cv / denom, -s * dv / denom)
        )

    zeros = upper_zeros + [z.conjugate() for z in upper_zeros]

    poles = []
    for p in upper_poles:
        poles.append(p)
        # s = 0 at j = 0 gives the real pole of odd orders
        if abs(p.imag) > EPSILON * abs(p):
            poles.append(p.conjugate())
        else:
            poles[-1] = complex(p.real, 0.0)

    num = complex(1.0)
    for p in poles:
        num *= -p
    den = complex(1.0)
    for z in zeros:
        den *= -z
    gain = (num / den).real

    if order % 2 == 0:
        gain = gain / math.sqrt(1 + eps_sq)

    return zeros, poles, gain
