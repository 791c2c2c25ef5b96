"""Exceptions for filter design module."""


class FilterDesignError(ValueError):
    """Base exception for filter design errors."""

    pass


class InvalidOrderError(FilterDesignError):
    """Raised when filter order is invalid.

    This occurs when:
    - Order is not an integer
    - Order is less than 1
    """

    pass


class OrderTooHighError(InvalidOrderError):
    """Raised when filter order exceeds the implementation ceiling.

    Direct-form cascades lose accuracy quickly beyond the ceiling, so
    designs above it are refused rather than returned silently degraded.
    """

    pass


class InvalidCutoffError(FilterDesignError):
    """Raised when a lowpass/highpass cutoff frequency is invalid.

    This occurs when:
    - Cutoff is not a single finite number
    - Cutoff is outside the open interval (0, sampling_frequency / 2)
    """

    pass


class InvalidBandEdgesError(InvalidCutoffError):
    """Raised when bandpass/bandstop band edges are invalid.

    This occurs when:
    - Band edges are not a pair of numbers
    - Edges violate 0 < low < high < sampling_frequency / 2
    """

    pass


class InvalidSamplingFrequencyError(FilterDesignError):
    """Raised when the sampling frequency is not a positive finite number."""

    pass


class InvalidRippleError(FilterDesignError):
    """Raised when passband ripple is not positive or above the ceiling."""

    pass


class InvalidAttenuationError(FilterDesignError):
    """Raised when stopband attenuation is not positive."""

    pass


class UnsupportedKindError(FilterDesignError):
    """Raised when the filter type or family is not recognized."""

    pass


class NumericallyUnstableError(FilterDesignError):
    """Raised when a design step degenerates numerically.

    This occurs when:
    - The gain at the reference frequency is zero or not finite
    - A bilinear section has a vanishing leading denominator coefficient
    - A parallel combination cannot be factored into sections
    """

    pass


class SOSNormalizationError(FilterDesignError):
    """Raised when second-order section normalization fails.

    This occurs when:
    - a0 coefficient is not 1 for a section
    - Sections do not have six coefficients
    """

    pass
