"""Family dispatch for IIR filter design."""

from typing import Literal, Optional

import torch

from ._bessel_design import bessel_design
from ._bessel_prototype import BesselNormalization
from ._butterworth_design import butterworth_design
from ._chebyshev_type_1_design import chebyshev_type_1_design
from ._chebyshev_type_2_design import chebyshev_type_2_design
from ._constants import (
    DEFAULT_PASSBAND_RIPPLE_DB,
    DEFAULT_STOPBAND_ATTENUATION_DB,
)
from ._elliptic_design import elliptic_design
from ._exceptions import UnsupportedKindError
from ._filter_result import FilterResult
from ._linkwitz_riley_design import linkwitz_riley_design
from ._validation import BandStrategy, Cutoff, FilterType

FilterFamily = Literal[
    "butterworth",
    "chebyshev_type_1",
    "chebyshev_type_2",
    "elliptic",
    "bessel",
    "linkwitz_riley",
]

FILTER_FAMILIES = (
    "butterworth",
    "chebyshev_type_1",
    "chebyshev_type_2",
    "elliptic",
    "bessel",
    "linkwitz_riley",
)


def iir_design(
    filter_type: FilterType,
    cutoff: Cutoff,
    sampling_frequency: float,
    order: int,
    *,
    family: FilterFamily = "butterworth",
    passband_ripple_db: Optional[float] = None,
    stopband_attenuation_db: Optional[float] = None,
    normalization: BesselNormalization = "phase",
    band_strategy: BandStrategy = "composite",
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> FilterResult:
    """Design a digital IIR filter of any supported family.

    Parameters
    ----------
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}
        The type of filter.
    cutoff : float or (float, float)
        Cutoff in Hz, or band edges (low, high) in Hz.
    sampling_frequency : float
        The sampling frequency in Hz.
    order : int
        The order of the filter.
    family : str, default "butterworth"
        One of "butterworth", "chebyshev_type_1", "chebyshev_type_2",
        "elliptic", "bessel", "linkwitz_riley".
    passband_ripple_db : float, optional
        Passband ripple for "chebyshev_type_1" and "elliptic". Defaults to
        1 dB. Ignored by the other families.
    stopband_attenuation_db : float, optional
        Stopband attenuation for "chebyshev_type_2" and "elliptic".
        Defaults to 40 dB. Ignored by the other families.
    normalization : {"phase", "delay", "magnitude"}, default "phase"
        Prototype normalization for "bessel". Ignored by the other
        families.
    band_strategy : {"composite", "transform"}, default "composite"
        How bandpass and bandstop filters are built.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    FilterResult
        The designed filter.

    Raises
    ------
    UnsupportedKindError
        If family is not recognized.

    Examples
    --------
    >>> result = iir_design("highpass", 300.0, 8000.0, 3, family="elliptic")
    >>> result.order
    3
    """
    if passband_ripple_db is None:
        passband_ripple_db = DEFAULT_PASSBAND_RIPPLE_DB
    if stopband_attenuation_db is None:
        stopband_attenuation_db = DEFAULT_STOPBAND_ATTENUATION_DB

    options = dict(band_strategy=band_strategy, dtype=dtype, device=device)
    args = (filter_type, cutoff, sampling_frequency, order)

    if family == "butterworth":
        return butterworth_design(*args, **options)
    elif family == "chebyshev_type_1":
        return chebyshev_type_1_design(*args, passband_ripple_db, **options)
    elif family == "chebyshev_type_2":
        return chebyshev_type_2_design(
            *args, stopband_attenuation_db, **options
        )
    elif family == "elliptic":
        return elliptic_design(
            *args, passband_ripple_db, stopband_attenuation_db, **options
        )
    elif family == "bessel":
        return bessel_design(*args, normalization, **options)
    elif family == "linkwitz_riley":
        return linkwitz_riley_design(*args, **options)
    else:
        raise UnsupportedKindError(
            f"family must be one of {FILTER_FAMILIES}, got {family!r}"
        )
