import math


def prewarp(frequency: float, sampling_frequency: float) -> float:
    """Analog frequency (rad/s) that the bilinear transform maps to ``frequency`` Hz.

    .. math::
        \\Omega = 2 f_s \\tan(\\pi f / f_s)

    Designing the analog filter at the prewarped edge cancels the
    frequency compression of the bilinear transform at that edge.

    Examples
    --------
    >>> round(prewarp(1000.0, 48000.0), 3)
    6287.146
    """
    return 2.0 * sampling_frequency * math.tan(math.pi * frequency / sampling_frequency)


def unwarp(angular_frequency: float, sampling_frequency: float) -> float:
    """Inverse of :func:`prewarp`: digital frequency (Hz) of an analog one."""
    return (sampling_frequency / math.pi) * math.atan(
        angular_frequency / (2.0 * sampling_frequency)
    )
