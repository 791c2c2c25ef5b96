"""Bessel/Thomson digital filter design function."""

from typing import Optional

import torch

from ._bessel_prototype import BesselNormalization, bessel_prototype
from ._design_from_prototype import design_from_prototype
from ._filter_result import FilterResult
from ._validation import (
    BandStrategy,
    Cutoff,
    FilterType,
    validate_design_arguments,
)


def bessel_design(
    filter_type: FilterType,
    cutoff: Cutoff,
    sampling_frequency: float,
    order: int,
    normalization: BesselNormalization = "phase",
    *,
    band_strategy: BandStrategy = "composite",
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> FilterResult:
    """Design an Nth-order digital Bessel/Thomson filter.

    Bessel filters have maximally flat group delay in the analog domain;
    the bilinear transform keeps the delay nearly constant well below the
    cutoff.

    Parameters
    ----------
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}
        The type of filter.
    cutoff : float or (float, float)
        The critical frequency in Hz for lowpass and highpass, or the band
        edges (low, high) in Hz for bandpass and bandstop. Its meaning
        depends on ``normalization``.
    sampling_frequency : float
        The sampling frequency in Hz.
    order : int
        The order of the filter, 1 to 12.
    normalization : {"phase", "delay", "magnitude"}, default "phase"
        Normalization of the analog prototype, see :func:`bessel_prototype`.
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
    UnsupportedKindError
        If normalization is not recognized.

    Examples
    --------
    >>> result = bessel_design("lowpass", 1000.0, 48000.0, 4, "magnitude")
    >>> result.order
    4
    """
    filter_type, cutoff, sampling_frequency, order, band_strategy = (
        validate_design_arguments(
            filter_type, cutoff, sampling_frequency, order, band_strategy
        )
    )

    prototype = bessel_prototype(order, normalization, dtype=torch.float64)

    return design_from_prototype(
        prototype,
        filter_type,
        cutoff,
        sampling_frequency,
        band_strategy=band_strategy,
        dtype=dtype,
        device=device,
    )
