"""Digital IIR filter design from analog prototypes."""

from ._analog_zpk_to_sos import analog_zpk_to_sos
from ._bessel_design import bessel_design
from ._bessel_poles import BESSEL_POLES
from ._bessel_polynomial import bessel_polynomial
from ._bessel_prototype import bessel_prototype
from ._bilinear_transform_biquad import bilinear_transform_biquad
from ._bilinear_transform_zpk import bilinear_transform_zpk
from ._butterworth_design import butterworth_design
from ._butterworth_prototype import butterworth_prototype
from ._cascade_filters import cascade_filters
from ._chebyshev_type_1_design import chebyshev_type_1_design
from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._chebyshev_type_2_design import chebyshev_type_2_design
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._elliptic_design import elliptic_design
from ._elliptic_prototype import elliptic_prototype
from ._exceptions import (
    FilterDesignError,
    InvalidAttenuationError,
    InvalidBandEdgesError,
    InvalidCutoffError,
    InvalidOrderError,
    InvalidRippleError,
    InvalidSamplingFrequencyError,
    NumericallyUnstableError,
    OrderTooHighError,
    SOSNormalizationError,
    UnsupportedKindError,
)
from ._filter_result import Biquad, FilterResult
from ._iir_design import FilterFamily, iir_design
from ._linkwitz_riley_design import (
    LinkwitzRileyOrder,
    linkwitz_riley_design,
    linkwitz_riley_order_info,
)
from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_bandstop_zpk import lowpass_to_bandstop_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk
from ._lowpass_to_lowpass_zpk import lowpass_to_lowpass_zpk
from ._normalize_sos_gain import normalize_sos_gain
from ._parallel_filters import parallel_filters
from ._prewarp import prewarp
from ._reference_frequency import reference_frequency
from ._sos_to_ba import sos_to_ba
from ._sos_to_zpk import sos_to_zpk
from ._transfer_function_at import transfer_function_at

__all__ = [
    "BESSEL_POLES",
    "Biquad",
    "FilterDesignError",
    "FilterFamily",
    "FilterResult",
    "InvalidAttenuationError",
    "InvalidBandEdgesError",
    "InvalidCutoffError",
    "InvalidOrderError",
    "InvalidRippleError",
    "InvalidSamplingFrequencyError",
    "LinkwitzRileyOrder",
    "NumericallyUnstableError",
    "OrderTooHighError",
    "SOSNormalizationError",
    "UnsupportedKindError",
    "analog_zpk_to_sos",
    "bessel_design",
    "bessel_polynomial",
    "bessel_prototype",
    "bilinear_transform_biquad",
    "bilinear_transform_zpk",
    "butterworth_design",
    "butterworth_prototype",
    "cascade_filters",
    "chebyshev_type_1_design",
    "chebyshev_type_1_prototype",
    "chebyshev_type_2_design",
    "chebyshev_type_2_prototype",
    "elliptic_design",
    "elliptic_prototype",
    "iir_design",
    "linkwitz_riley_design",
    "linkwitz_riley_order_info",
    "lowpass_to_bandpass_zpk",
    "lowpass_to_bandstop_zpk",
    "lowpass_to_highpass_zpk",
    "lowpass_to_lowpass_zpk",
    "normalize_sos_gain",
    "parallel_filters",
    "prewarp",
    "reference_frequency",
    "sos_to_ba",
    "sos_to_zpk",
    "transfer_function_at",
]
