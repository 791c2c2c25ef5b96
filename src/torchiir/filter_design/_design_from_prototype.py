"""Shared analog-prototype-to-digital pipeline of the design functions."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._analog_zpk_to_sos import analog_zpk_to_sos
from ._cascade_filters import cascade_filters
from ._filter_result import FilterResult
from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_bandstop_zpk import lowpass_to_bandstop_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk
from ._lowpass_to_lowpass_zpk import lowpass_to_lowpass_zpk
from ._normalize_sos_gain import normalize_sos_gain
from ._parallel_filters import parallel_filters
from ._prewarp import prewarp, unwarp
from ._reference_frequency import reference_frequency, reference_point
from ._validation import Cutoff

Prototype = Tuple[Tensor, Tensor, Tensor]


def lowpass_sos(prototype: Prototype, cutoff: float, fs: float) -> Tensor:
    z, p, k = lowpass_to_lowpass_zpk(*prototype, prewarp(cutoff, fs))
    return analog_zpk_to_sos(z, p, fs, gain=k)


def highpass_sos(prototype: Prototype, cutoff: float, fs: float) -> Tensor:
    z, p, k = lowpass_to_highpass_zpk(*prototype, prewarp(cutoff, fs))
    return analog_zpk_to_sos(z, p, fs, gain=k)


def _band_edges(low: float, high: float, fs: float) -> Tuple[float, float]:
    """Center frequency and bandwidth (rad/s) of the prewarped band."""
    w_low = prewarp(low, fs)
    w_high = prewarp(high, fs)
    return math.sqrt(w_low * w_high), w_high - w_low


def design_sos(
    prototype: Prototype,
    filter_type: str,
    cutoff: Cutoff,
    sampling_frequency: float,
    band_strategy: str,
) -> Tuple[Tensor, float]:
    """Unnormalized float64 sections and the reference frequency (Hz).

    ``prototype`` is an analog lowpass (zeros, poles, gain) at 1 rad/s in
    complex128/float64. Arguments are assumed validated.
    """
    fs = sampling_frequency

    if filter_type == "lowpass":
        sos = lowpass_sos(prototype, cutoff, fs)
    elif filter_type == "highpass":
        sos = highpass_sos(prototype, cutoff, fs)
    elif band_strategy == "composite":
        low, high = cutoff
        if filter_type == "bandpass":
            sos = cascade_filters(
                highpass_sos(prototype, low, fs),
                lowpass_sos(prototype, high, fs),
            )
        else:
            sos = parallel_filters(
                lowpass_sos(prototype, low, fs),
                highpass_sos(prototype, high, fs),
            )
    else:
        center, bandwidth = _band_edges(*cutoff, fs)
        if filter_type == "bandpass":
            z, p, k = lowpass_to_bandpass_zpk(*prototype, center, bandwidth)
            sos = analog_zpk_to_sos(z, p, fs, gain=k)
            return sos, unwarp(center, fs)
        z, p, k = lowpass_to_bandstop_zpk(*prototype, center, bandwidth)
        sos = analog_zpk_to_sos(z, p, fs, gain=k)

    return sos, reference_frequency(filter_type, cutoff, fs)


def finish_design(
    sos: Tensor,
    reference: float,
    sampling_frequency: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> FilterResult:
    """Normalize to unit gain at ``reference`` Hz and recompose (b, a)."""
    sos = normalize_sos_gain(sos, reference_point(reference, sampling_frequency))
    result = FilterResult.from_sos(sos, reference)

    if dtype is None:
        dtype = torch.get_default_dtype()
    return result.to(dtype=dtype, device=device)


def design_from_prototype(
    prototype: Prototype,
    filter_type: str,
    cutoff: Cutoff,
    sampling_frequency: float,
    *,
    band_strategy: str = "composite",
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> FilterResult:
    """
    Turn an analog lowpass prototype into a normalized digital filter.

    Parameters
    ----------
    prototype : tuple of Tensor
        Analog lowpass (zeros, poles, gain) with its critical frequency at
        1 rad/s, in complex128/float64.
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}
        Response type.
    cutoff : float or (float, float)
        Cutoff (Hz) for lowpass/highpass, band edges (Hz) otherwise.
    sampling_frequency : float
        Sampling frequency (Hz).
    band_strategy : {"composite", "transform"}
        How bandpass and bandstop filters are built; see Notes.
    dtype, device
        Dtype and device of the returned tensors. Computation is always
        in float64.

    Returns
    -------
    FilterResult
        Normalized filter with (b, a) recomposed from its sections.

    Notes
    -----
    Every edge is prewarped, Omega = 2 fs tan(pi f / fs), so that the
    digital filter has its critical frequencies exactly at the requested
    Hz values.

    With ``band_strategy="composite"`` a bandpass filter is a highpass at
    the lower edge in series with a lowpass at the upper edge, and a
    bandstop filter is a lowpass at the lower edge in parallel with a
    highpass at the upper edge. With ``"transform"`` the prototype goes
    through the analog lowpass-to-bandpass or lowpass-to-bandstop
    transform at the geometric center of the prewarped edges.

    The gain is normalized to one at DC (lowpass, bandstop), at the
    Nyquist frequency (highpass), at sqrt(low * high) for a composite
    bandpass, and at the digital image of the analog center for a
    transformed bandpass.
    """
    sos, reference = design_sos(
        prototype, filter_type, cutoff, sampling_frequency, band_strategy
    )
    return finish_design(
        sos, reference, sampling_frequency, dtype=dtype, device=device
    )
