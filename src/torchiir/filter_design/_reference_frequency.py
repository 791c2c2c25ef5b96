import math

from .._complex import unit_phasor
from ._validation import Cutoff


def reference_frequency(
    filter_type: str,
    cutoff: Cutoff,
    sampling_frequency: float,
) -> float:
    """Frequency (Hz) where a design is normalized to unity gain.

    DC for lowpass and bandstop, the Nyquist frequency for highpass, and
    the geometric center sqrt(low * high) of the band for bandpass.

    Examples
    --------
    >>> reference_frequency("bandpass", (100.0, 400.0), 8000.0)
    200.0
    """
    if filter_type in ("lowpass", "bandstop"):
        return 0.0
    if filter_type == "highpass":
        return sampling_frequency / 2
    low, high = cutoff
    return math.sqrt(low * high)


def reference_point(frequency: float, sampling_frequency: float) -> complex:
    """The point exp(j 2 pi f / fs) on the unit circle, exact at DC and Nyquist."""
    if frequency == 0.0:
        return complex(1.0, 0.0)
    if frequency == sampling_frequency / 2:
        return complex(-1.0, 0.0)
    theta = 2.0 * math.pi * frequency / sampling_frequency
    return unit_phasor(theta)
