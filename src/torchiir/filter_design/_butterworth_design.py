"""Butterworth digital filter design function."""

from typing import Optional

import torch

from ._butterworth_prototype import butterworth_prototype
from ._design_from_prototype import design_from_prototype
from ._filter_result import FilterResult
from ._validation import (
    BandStrategy,
    Cutoff,
    FilterType,
    validate_design_arguments,
)


def butterworth_design(
    filter_type: FilterType,
    cutoff: Cutoff,
    sampling_frequency: float,
    order: int,
    *,
    band_strategy: BandStrategy = "composite",
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> FilterResult:
    """Design an Nth-order digital Butterworth filter.

    Butterworth filters have a maximally flat passband and a monotonic
    response everywhere.

    Parameters
    ----------
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}
        The type of filter.
    cutoff : float or (float, float)
        The -3 dB frequency in Hz for lowpass and highpass, or the band
        edges (low, high) in Hz for bandpass and bandstop.
    sampling_frequency : float
        The sampling frequency in Hz.
    order : int
        The order of the filter, 1 to 12.
    band_strategy : {"composite", "transform"}, default "composite"
        How bandpass and bandstop filters are built. "composite" combines a
        lowpass and a highpass of the given order; "transform" applies the
        analog band transform, which doubles the order.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    FilterResult
        Coefficients (b, a), second-order sections, and the frequency at
        which the gain is one.

    Raises
    ------
    UnsupportedKindError
        If filter_type or band_strategy is not recognized.
    InvalidSamplingFrequencyError
        If sampling_frequency is not a positive finite number.
    InvalidOrderError
        If order is not an integer in [1, 12].
    InvalidCutoffError
        If the cutoff or band edges are outside (0, sampling_frequency / 2).

    Examples
    --------
    >>> result = butterworth_design("lowpass", 1000.0, 48000.0, 4, dtype=torch.float64)
    >>> result.sos.shape
    torch.Size([2, 6])
    >>> len(result.a)
    5
    """
    filter_type, cutoff, sampling_frequency, order, band_strategy = (
        validate_design_arguments(
            filter_type, cutoff, sampling_frequency, order, band_strategy
        )
    )

    prototype = butterworth_prototype(order, dtype=torch.float64)

    return design_from_prototype(
        prototype,
        filter_type,
        cutoff,
        sampling_frequency,
        band_strategy=band_strategy,
        dtype=dtype,
        device=device,
    )
