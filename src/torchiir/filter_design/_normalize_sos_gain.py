import math
from typing import Union

from torch import Tensor

from ._constants import GAIN_FLOOR
from ._exceptions import NumericallyUnstableError
from ._transfer_function_at import transfer_function_at


def normalize_sos_gain(
    sos: Tensor,
    z: Union[complex, float],
    *,
    gain_floor: float = GAIN_FLOOR,
) -> Tensor:
    """
    Scale a section cascade to unit magnitude at a point of the z-plane.

    Parameters
    ----------
    sos : Tensor
        Second-order sections, shape (n_sections, 6).
    z : complex or float
        Reference point, normally on the unit circle.
    gain_floor : float
        Smallest |H(z)| accepted.

    Returns
    -------
    Tensor
        New sections with the last section's numerator multiplied by
        1 / |H(z)|. The other sections are unchanged.

    Raises
    ------
    NumericallyUnstableError
        If |H(z)| is not finite or is below ``gain_floor``.
    """
    if sos.shape[0] == 0:
        return sos

    h = complex(1.0)
    for row in sos:
        h *= complex(transfer_function_at(row[:3], row[3:], z))

    magnitude = abs(h)
    if not math.isfinite(magnitude) or magnitude < gain_floor:
        raise NumericallyUnstableError(
            f"Cannot normalize gain: |H({z})| = {magnitude} is not a finite "
            f"value of at least {gain_floor}"
        )

    normalized = sos.clone()
    normalized[-1, :3] = normalized[-1, :3] / magnitude
    return normalized
