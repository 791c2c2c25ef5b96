"""Iteration limits for the polynomial root finder."""

# Upper bound on simultaneous-iteration sweeps. Aberth converges
# cubically, so well-separated roots settle in 10-20 sweeps.
ROOT_FINDER_MAX_ITERATIONS: int = 200

# Stop when every root moved less than this, relative to max(1, |z|)
ROOT_FINDER_TOLERANCE: float = 1e-12

# Floor for |z_i - z_j| when two estimates nearly coincide
ROOT_FINDER_DENOMINATOR_FLOOR: float = 1e-14

# Coefficients smaller than this times the largest one are trimmed from
# the leading end before iterating
ROOT_FINDER_LEADING_TRIM: float = 1e-18

# A root also counts as converged once |p(z)| is within this many
# multiples of degree * eps * sum |c_i| |z|^i, the rounding error of
# Horner evaluation at z
ROOT_FINDER_RESIDUAL_FACTOR: float = 4.0

# Newton steps used to polish roots on the unnormalized polynomial
ROOT_POLISH_STEPS: int = 3
