"""Argument checks shared by the prototypes and the design functions.

Every check raises a subclass of ``FilterDesignError`` naming the
parameter, its value and the violated constraint. The design functions
run all checks before any numeric work.
"""

import math
import numbers
from typing import Literal, Sequence, Tuple, Union

from ._constants import MAX_ORDER, MAX_PASSBAND_RIPPLE_DB
from ._exceptions import (
    InvalidAttenuationError,
    InvalidBandEdgesError,
    InvalidCutoffError,
    InvalidOrderError,
    InvalidRippleError,
    InvalidSamplingFrequencyError,
    OrderTooHighError,
    UnsupportedKindError,
)

FilterType = Literal["lowpass", "highpass", "bandpass", "bandstop"]
BandStrategy = Literal["composite", "transform"]

Cutoff = Union[float, Sequence[float]]

FILTER_TYPES: Tuple[str, ...] = ("lowpass", "highpass", "bandpass", "bandstop")
BAND_STRATEGIES: Tuple[str, ...] = ("composite", "transform")


def _is_real_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_filter_type(filter_type) -> str:
    if filter_type not in FILTER_TYPES:
        raise UnsupportedKindError(
            f"filter_type must be one of {FILTER_TYPES}, got {filter_type!r}"
        )
    return filter_type


def validate_band_strategy(band_strategy) -> str:
    if band_strategy not in BAND_STRATEGIES:
        raise UnsupportedKindError(
            f"band_strategy must be one of {BAND_STRATEGIES}, "
            f"got {band_strategy!r}"
        )
    return band_strategy


def validate_order(order, *, maximum: Union[int, None] = None) -> int:
    """Check that order is an integer >= 1 and, if given, <= maximum."""
    if isinstance(order, bool) or not isinstance(order, numbers.Integral):
        raise InvalidOrderError(
            f"Filter order must be an integer, got {order!r}"
        )
    order = int(order)
    if order < 1:
        raise InvalidOrderError(f"Filter order must be positive, got {order}")
    if maximum is not None and order > maximum:
        raise OrderTooHighError(
            f"Filter order must be at most {maximum}, got {order}"
        )
    return order


def validate_design_order(order) -> int:
    return validate_order(order, maximum=MAX_ORDER)


def validate_sampling_frequency(sampling_frequency) -> float:
    if not _is_real_number(sampling_frequency) or not (
        math.isfinite(sampling_frequency) and sampling_frequency > 0
    ):
        raise InvalidSamplingFrequencyError(
            f"sampling_frequency must be a positive finite number, "
            f"got {sampling_frequency!r}"
        )
    return float(sampling_frequency)


def validate_cutoff(
    filter_type: str,
    cutoff: Cutoff,
    sampling_frequency: float,
) -> Union[float, Tuple[float, float]]:
    """Check cutoff or band edges against the Nyquist frequency.

    Returns a float for lowpass/highpass and a ``(low, high)`` tuple for
    bandpass/bandstop.
    """
    nyquist = sampling_frequency / 2

    if filter_type in ("lowpass", "highpass"):
        if not _is_real_number(cutoff) or not math.isfinite(cutoff):
            raise InvalidCutoffError(
                f"{filter_type} cutoff must be a single finite number, "
                f"got {cutoff!r}"
            )
        if not 0 < cutoff < nyquist:
            raise InvalidCutoffError(
                f"{filter_type} cutoff must satisfy 0 < cutoff < {nyquist} "
                f"(sampling_frequency / 2), got {cutoff}"
            )
        return float(cutoff)

    try:
        low, high = cutoff
    except (TypeError, ValueError):
        raise InvalidBandEdgesError(
            f"{filter_type} cutoff must be a (low, high) pair, got {cutoff!r}"
        ) from None

    if not (_is_real_number(low) and _is_real_number(high)):
        raise InvalidBandEdgesError(
            f"{filter_type} band edges must be numbers, got {cutoff!r}"
        )
    if not 0 < low < high < nyquist:
        raise InvalidBandEdgesError(
            f"{filter_type} band edges must satisfy "
            f"0 < low < high < {nyquist} (sampling_frequency / 2), "
            f"got ({low}, {high})"
        )
    return float(low), float(high)


def validate_passband_ripple(passband_ripple_db) -> float:
    if not _is_real_number(passband_ripple_db) or not (
        0 < passband_ripple_db <= MAX_PASSBAND_RIPPLE_DB
    ):
        raise InvalidRippleError(
            f"Passband ripple must satisfy "
            f"0 < passband_ripple_db <= {MAX_PASSBAND_RIPPLE_DB}, "
            f"got {passband_ripple_db!r}"
        )
    return float(passband_ripple_db)


def validate_stopband_attenuation(stopband_attenuation_db) -> float:
    if not _is_real_number(stopband_attenuation_db) or not (
        0 < stopband_attenuation_db and math.isfinite(stopband_attenuation_db)
    ):
        raise InvalidAttenuationError(
            f"Stopband attenuation must be a positive finite number, "
            f"got {stopband_attenuation_db!r}"
        )
    return float(stopband_attenuation_db)


def validate_design_arguments(
    filter_type,
    cutoff,
    sampling_frequency,
    order,
    band_strategy="composite",
) -> Tuple[str, Union[float, Tuple[float, float]], float, int, str]:
    """Run the checks common to every design function, in order."""
    filter_type = validate_filter_type(filter_type)
    sampling_frequency = validate_sampling_frequency(sampling_frequency)
    order = validate_design_order(order)
    cutoff = validate_cutoff(filter_type, cutoff, sampling_frequency)
    band_strategy = validate_band_strategy(band_strategy)
    return filter_type, cutoff, sampling_frequency, order, band_strategy
