"""Chebyshev Type I digital filter design function."""

from typing import Optional

import torch

from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._constants import DEFAULT_PASSBAND_RIPPLE_DB
from ._design_from_prototype import design_from_prototype
from ._filter_result import FilterResult
from ._validation import (
    BandStrategy,
    Cutoff,
    FilterType,
    validate_design_arguments,
    validate_passband_ripple,
)


def chebyshev_type_1_design(
    filter_type: FilterType,
    cutoff: Cutoff,
    sampling_frequency: float,
    order: int,
    passband_ripple_db: float = DEFAULT_PASSBAND_RIPPLE_DB,
    *,
    band_strategy: BandStrategy = "composite",
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> FilterResult:
    """Design an Nth-order digital Chebyshev Type I filter.

    Chebyshev Type I filters have equiripple passband and monotonic stopband.
    They provide steeper rolloff than Butterworth filters at the cost of
    passband ripple.

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

    Notes
    -----
    The gain is normalized to one at the reference frequency for every
    order, so for even orders the passband ripple lies between 1 and
    10^(Rp/20) rather than below 1.

    Lower ripple gives a flatter passband but a wider transition band.

    Examples
    --------
    >>> result = chebyshev_type_1_design("lowpass", 1000.0, 48000.0, 4, 0.5)
    >>> result.order
    4
    """
    filter_type, cutoff, sampling_frequency, order, band_strategy = (
        validate_design_arguments(
            filter_type, cutoff, sampling_frequency, order, band_strategy
        )
    )
    passband_ripple_db = validate_passband_ripple(passband_ripple_db)

    prototype = chebyshev_type_1_prototype(
        order, passband_ripple_db, dtype=torch.float64
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
