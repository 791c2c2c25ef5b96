"""Chebyshev Type II digital filter design function."""

from typing import Optional

import torch

from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._constants import DEFAULT_STOPBAND_ATTENUATION_DB
from ._design_from_prototype import design_from_prototype
from ._filter_result import FilterResult
from ._validation import (
    BandStrategy,
    Cutoff,
    FilterType,
    validate_design_arguments,
    validate_stopband_attenuation,
)


def chebyshev_type_2_design(
    filter_type: FilterType,
    cutoff: Cutoff,
    sampling_frequency: float,
    order: int,
    stopband_attenuation_db: float = DEFAULT_STOPBAND_ATTENUATION_DB,
    *,
    band_strategy: BandStrategy = "composite",
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> FilterResult:
    """Design an Nth-order digital Chebyshev Type II filter.

    Chebyshev Type II (inverse Chebyshev) filters have a monotonic passband
    and an equiripple stopband with finite transmission zeros.

    Parameters
    ----------
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}
        The type of filter.
    cutoff : float or (float, float)
        The stopband edge in Hz for lowpass and highpass, or the band edges
        (low, high) in Hz for bandpass and bandstop. At the edge the
        attenuation is exactly ``stopband_attenuation_db``.
    sampling_frequency : float
        The sampling frequency in Hz.
    order : int
        The order of the filter, 1 to 12.
    stopband_attenuation_db : float, default 40.0
        Minimum attenuation in the stopband in decibels. Must be positive.
    band_strategy : {"composite", "transform"}, default "composite"
        How bandpass and bandstop filters are built.
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
    InvalidAttenuationError
        If stopband_attenuation_db is not positive.

    Examples
    --------
    >>> result = chebyshev_type_2_design("lowpass", 150.0, 1000.0, 4, 40.0)
    >>> result.sos.shape
    torch.Size([2, 6])
    """
    filter_type, cutoff, sampling_frequency, order, band_strategy = (
        validate_design_arguments(
            filter_type, cutoff, sampling_frequency, order, band_strategy
        )
    )
    stopband_attenuation_db = validate_stopband_attenuation(
        stopband_attenuation_db
    )

    prototype = chebyshev_type_2_prototype(
        order, stopband_attenuation_db, dtype=torch.float64
    )

    return design_from_prototype(
        prototype,
        filter_type,
        cutoff,
        sampling_frequency,
        band_strategy=band_strategy,
        dtype=dtype,
        device=device,
    )
