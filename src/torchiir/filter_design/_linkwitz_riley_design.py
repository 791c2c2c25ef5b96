"""Linkwitz-Riley digital filter design function."""

from typing import NamedTuple, Optional

import torch

from ._butterworth_prototype import butterworth_prototype
from ._cascade_filters import cascade_filters
from ._constants import DEFAULT_LINKWITZ_RILEY_ORDER, MAX_ORDER
from ._design_from_prototype import (
    design_sos,
    finish_design,
    highpass_sos,
    lowpass_sos,
)
from ._exceptions import InvalidOrderError
from ._filter_result import FilterResult
from ._parallel_filters import parallel_filters
from ._reference_frequency import reference_frequency
from ._validation import (
    BandStrategy,
    Cutoff,
    FilterType,
    validate_design_arguments,
    validate_order,
)


class LinkwitzRileyOrder(NamedTuple):
    """How a requested Linkwitz-Riley order is realized.

    Attributes
    ----------
    requested : int
        Order passed by the caller.
    actual : int
        Even order of the designed filter.
    half : int
        Order of each of the two cascaded Butterworth filters.
    sections : int
        Number of second-order sections of a lowpass or highpass design.
    is_adjusted : bool
        True when an odd request was rounded up.
    """

    requested: int
    actual: int
    half: int
    sections: int
    is_adjusted: bool


def linkwitz_riley_order_info(order: int) -> LinkwitzRileyOrder:
    """Describe the even order used for a requested Linkwitz-Riley order.

    Raises
    ------
    InvalidOrderError
        If order is not an integer in [2, 12].

    Examples
    --------
    >>> linkwitz_riley_order_info(5)
    LinkwitzRileyOrder(requested=5, actual=6, half=3, sections=4, is_adjusted=True)
    """
    order = validate_order(order, maximum=MAX_ORDER)
    if order < 2:
        raise InvalidOrderError(
            f"Linkwitz-Riley order must be at least 2, got {order}"
        )

    actual = order + order % 2
    half = actual // 2
    return LinkwitzRileyOrder(
        requested=order,
        actual=actual,
        half=half,
        sections=2 * ((half + 1) // 2),
        is_adjusted=actual != order,
    )


def linkwitz_riley_design(
    filter_type: FilterType,
    cutoff: Cutoff,
    sampling_frequency: float,
    order: int = DEFAULT_LINKWITZ_RILEY_ORDER,
    *,
    band_strategy: BandStrategy = "composite",
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> FilterResult:
    """Design a digital Linkwitz-Riley filter.

    A Linkwitz-Riley filter of order N is a Butterworth filter of order
    N / 2 in series with itself. Its response is -6 dB at the cutoff, so a
    lowpass and a highpass of the same order and cutoff sum to a flat
    magnitude, which makes it the usual choice for crossovers.

    Parameters
    ----------
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}
        The type of filter.
    cutoff : float or (float, float)
        The crossover frequency in Hz for lowpass and highpass, or the band
        edges (low, high) in Hz for bandpass and bandstop.
    sampling_frequency : float
        The sampling frequency in Hz.
    order : int, default 4
        The order of the filter, 2 to 12. Odd orders are rounded up to the
        next even order.
    band_strategy : {"composite", "transform"}, default "composite"
        How the underlying Butterworth bandpass and bandstop filters are
        built.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    FilterResult
        The sections of the Butterworth design, twice, with (b, a) equal
        to the squares of the Butterworth (b, a). A composite bandstop is
        instead the parallel sum of a Linkwitz-Riley lowpass at the lower
        edge and a Linkwitz-Riley highpass at the upper edge.

    Raises
    ------
    InvalidOrderError
        If order is below 2 or above 12.

    Examples
    --------
    >>> result = linkwitz_riley_design("lowpass", 2000.0, 48000.0, 4)
    >>> result.sos.shape
    torch.Size([2, 6])
    """
    filter_type, cutoff, sampling_frequency, _, band_strategy = (
        validate_design_arguments(
            filter_type, cutoff, sampling_frequency, order, band_strategy
        )
    )
    info = linkwitz_riley_order_info(order)

    prototype = butterworth_prototype(info.half, dtype=torch.float64)

    if filter_type == "bandstop" and band_strategy == "composite":
        # LR lowpass(low) + LR highpass(high)
        low, high = cutoff
        fs = sampling_frequency
        lp = lowpass_sos(prototype, low, fs)
        hp = highpass_sos(prototype, high, fs)
        sos = parallel_filters(
            cascade_filters(lp, lp), cascade_filters(hp, hp)
        )
        reference = reference_frequency(filter_type, cutoff, fs)
    else:
        sos, reference = design_sos(
            prototype, filter_type, cutoff, sampling_frequency, band_strategy
        )
        sos = cascade_filters(sos, sos)

    return finish_design(
        sos,
        reference,
        sampling_frequency,
        dtype=dtype,
        device=device,
    )
