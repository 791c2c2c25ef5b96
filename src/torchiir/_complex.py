"""Complex-value helpers shared by the polynomial and filter design code.

Scalars are plain Python ``complex`` values and arrays are complex torch
tensors; this module only adds what those types do not provide: tolerant
comparison, conjugate-pair grouping and complex dtype selection.
"""

import math
from typing import List, Optional, Tuple, Union

import torch
from torch import Tensor

ComplexLike = Union[complex, float, int]


def complex_dtype_for(dtype: torch.dtype) -> torch.dtype:
    """Return the complex dtype that pairs with a real dtype."""
    if dtype == torch.float32:
        return torch.complex64
    elif dtype == torch.float64:
        return torch.complex128
    elif dtype in (torch.complex64, torch.complex128):
        return dtype
    else:
        raise ValueError(f"Unsupported dtype: {dtype}")


def resolve_dtypes(
    dtype: Optional[torch.dtype], device: Optional[torch.device]
) -> Tuple[torch.dtype, torch.dtype, torch.device]:
    """Real dtype, matching complex dtype and device for prototype outputs.

    ``None`` means torch.get_default_dtype() and the CPU.
    """
    if dtype is None:
        dtype = torch.get_default_dtype()
    if device is None:
        device = torch.device("cpu")
    return dtype, complex_dtype_for(dtype), device


def unit_phasor(angle: float) -> complex:
    """Return exp(j * angle)."""
    return complex(math.cos(angle), math.sin(angle))


def isclose(a: ComplexLike, b: ComplexLike, tol: float) -> bool:
    """Value equality of two complex numbers, relative to max(1, |a|, |b|)."""
    scale = max(1.0, abs(a), abs(b))
    return abs(complex(a) - complex(b)) <= tol * scale


def is_real(x: ComplexLike, tol: float) -> bool:
    """True if the imaginary part of x is negligible."""
    x = complex(x)
    return abs(x.imag) <= tol * max(1.0, abs(x))


def conjugate_pairs(
    values: Union[Tensor, List[complex]],
    tol: float,
) -> List[Tuple[complex, ...]]:
    """Group complex values into conjugate pairs and real singletons.

    Parameters
    ----------
    values : Tensor or list of complex
        Values whose non-real members come in conjugate pairs, as the
        poles and zeros of a real-coefficient system do.
    tol : float
        Relative tolerance for the real test and the conjugate match.

    Returns
    -------
    list of tuple
        ``(x,)`` for every real value (imaginary part dropped) and
        ``(c, c.conjugate())`` with ``c.imag > 0`` for every pair, in
        order of first appearance.

    Raises
    ------
    ValueError
        If a non-real value has no conjugate partner.
    """
    if isinstance(values, Tensor):
        items = [complex(v) for v in values.reshape(-1).tolist()]
    else:
        items = [complex(v) for v in values]

    used = [False] * len(items)
    groups: List[Tuple[complex, ...]] = []

    for i, value in enumerate(items):
        if used[i]:
            continue
        used[i] = True

        if is_real(value, tol):
            groups.append((complex(value.real, 0.0),))
            continue

        partner = -1
        for j in range(i + 1, len(items)):
            if not used[j] and isclose(items[j], value.conjugate(), tol):
                partner = j
                break

        if partner < 0:
            raise ValueError(
                f"Complex value {value} has no conjugate partner within "
                f"tolerance {tol}"
            )

        used[partner] = True
        mean = (value + items[partner].conjugate()) / 2
        upper = mean if mean.imag > 0 else mean.conjugate()
        groups.append((upper, upper.conjugate()))

    return groups


def nearest_conjugate_pairs(
    values: Union[Tensor, List[complex]],
    tol: float,
) -> List[Tuple[complex, ...]]:
    """Group the roots of a real polynomial into conjugate pairs and reals.

    Unlike :func:`conjugate_pairs` no partner has to lie within ``tol``:
    values in the upper half-plane are matched to the lower half-plane
    value nearest their conjugate, closest matches first. ``tol`` only
    decides which values are real. When the half-planes hold unequal
    counts, the surplus values with the smallest imaginary parts are
    taken as real.

    Returns
    -------
    list of tuple
        ``(x,)`` for real values and ``(c, c.conjugate())`` with
        ``c.imag > 0`` for pairs, each pair the mean of its two members.
        Reals come first, sorted; pairs follow, sorted by real part.
    """
    if isinstance(values, Tensor):
        items = [complex(v) for v in values.reshape(-1).tolist()]
    else:
        items = [complex(v) for v in values]

    reals = [v for v in items if is_real(v, tol)]
    upper = [v for v in items if not is_real(v, tol) and v.imag > 0]
    lower = [v for v in items if not is_real(v, tol) and v.imag < 0]

    for side in (upper, lower):
        side.sort(key=lambda v: abs(v.imag))
    while len(upper) > len(lower):
        reals.append(upper.pop(0))
    while len(lower) > len(upper):
        reals.append(lower.pop(0))

    candidates = sorted(
        (abs(u - w.conjugate()), i, j)
        for i, u in enumerate(upper)
        for j, w in enumerate(lower)
    )
    taken_upper = set()
    taken_lower = set()
    pairs = []
    for _, i, j in candidates:
        if i in taken_upper or j in taken_lower:
            continue
        taken_upper.add(i)
        taken_lower.add(j)
        mean = (upper[i] + lower[j].conjugate()) / 2
        pairs.append((mean, mean.conjugate()))

    groups: List[Tuple[complex, ...]] = [
        (complex(v.real, 0.0),) for v in sorted(reals, key=lambda v: v.real)
    ]
    groups.extend(sorted(pairs, key=lambda g: g[0].real))
    return groups
