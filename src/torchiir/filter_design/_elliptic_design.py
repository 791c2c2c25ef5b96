"""Elliptic (Cauer) digital filter design function."""

from typing import Optional

import torch

from ._constants import (
    DEFAULT_PASSBAND_RIPPLE_DB,
    DEFAULT_STOPBAND_ATTENUATION_DB,
)
from ._design_from_prototype import design_from_prototype
from ._elliptic_prototype import elliptic_prototype
from ._filter_result import FilterResult
from ._validation import (
    BandStrategy,
    Cutoff,
    FilterType,
    validate_design_arguments,
    validate_passband_ripple,
    validate_stopband_attenuation,
)


def elliptic_design(
    filter_type: FilterType,
    cutoff: Cutoff,
    sampling_frequency: float,
    order: int,
    passband_ripple_db: float = DEFAULT_PASSBAND_RIPPLE_DB,
    stopband_attenuation_db: float = DEFAULT_STOPBAND_ATTENUATION_DB,
    *,
    band_strategy: BandStrategy = "composite",
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> FilterResult:
    """Design an Nth-order digital elliptic (Cauer) filter.

    Elliptic filters are equiripple in both the passband and the stopband
    and give the narrowest transition band of the supported families.

    Parameters
    ----------
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}
        The type of filter.
    cutoff : float or (float, float)
        The passband edge in Hz for lowpass and highpass, or the band edges
        (low, high) in Hz for bandpass and bandstop.
    sampling_frequency : float
        The sampling frequency in Hz.
    order : int
        The order of the filter, 1 to 12.
    passband_ripple_db : float, default 1.0
        Maximum ripple in the passband in decibels, in (0, 10].
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
    InvalidRippleError
        If passband_ripple_db is outside (0, 10].
    InvalidAttenuationError
        If stopband_attenuation_db is not positive.

    Examples
    --------
    >>> result = elliptic_design("lowpass", 1000.0, 48000.0, 5, 0.5, 60.0)
    >>> result.order
    5
    """
    filter_type, cutoff, sampling_frequency, order, band_strategy = (
        validate_design_arguments(
            filter_type, cutoff, sampling_frequency, order, band_strategy
        )
    )
    passband_ripple_db = validate_passband_ripple(passband_ripple_db)
    stopband_attenuation_db = validate_stopband_attenuation(
        stopband_attenuation_db
    )

    prototype = elliptic_prototype(
        order,
        passband_ripple_db,
        stopband_attenuation_db,
        dtype=torch.float64,
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
