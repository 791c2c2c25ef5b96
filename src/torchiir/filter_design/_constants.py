"""Constants for filter design module."""

# Highest IIR order accepted by the design functions. Direct-form
# cascades above this lose too much precision to be useful in float64.
MAX_ORDER: int = 12

# Passband ripple ceiling (dB) for Chebyshev Type I and elliptic designs
MAX_PASSBAND_RIPPLE_DB: float = 10.0

# Defaults for the family-specific parameters
DEFAULT_PASSBAND_RIPPLE_DB: float = 1.0
DEFAULT_STOPBAND_ATTENUATION_DB: float = 40.0
DEFAULT_LINKWITZ_RILEY_ORDER: int = 4

# Relative tolerance used to match complex conjugates and to decide that
# a value is real, scaled by max(1, |x|)
CONJUGATE_TOLERANCE: float = 1e-10

# |H(z0)| below this is treated as a degenerate reference gain
GAIN_FLOOR: float = 1e-12

# Terms kept in the nome series of the elliptic degree equation. The
# series terms decay like q^(m^2) and the nome q stays well below 0.5
# for positive ripple/attenuation, so later terms are below double
# precision.
ELLIPDEG_NOME_TERMS: int = 7

# Orders whose Bessel poles are tabulated instead of root-found
BESSEL_TABLE_MAX_ORDER: int = 10

# Relative tolerance for pairing conjugate roots that come out of the
# root finder, which are only accurate to a few ulps of their cluster
ROOT_PAIRING_TOLERANCE: float = 1e-8
