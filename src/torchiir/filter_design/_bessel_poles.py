"""Tabulated poles of the delay-normalized Bessel filter.

``BESSEL_POLES[n]`` holds the roots of the reverse Bessel polynomial of
degree n with non-negative imaginary part; the conjugates of the complex
entries complete the set. The values can be regenerated by root finding
``bessel_polynomial(n)``.
"""

from typing import Tuple

from .._complex import is_real

BESSEL_POLES: Tuple[Tuple[complex, ...], ...] = (
    (),
    (complex(-1.0, 0.0),),
    (complex(-1.5000000000000000, 0.86602540378443860),),
    (
        complex(-2.3221853546260860, 0.0),
        complex(-1.8389073226869572, 1.7543809597837217),
    ),
    (
        complex(-2.8962106028203718, 0.86723412893450313),
        complex(-2.1037893971796278, 2.6574180418567530),
    ),
    (
        complex(-3.6467385953296363, 0.0),
        complex(-3.3519563991535359, 1.7426614161831979),
        complex(-2.3246743031816455, 3.5710229203379757),
    ),
    (
        complex(-4.2483593958633525, 0.86750967323135864),
        complex(-3.7357083563258136, 2.6262723114471274),
        complex(-2.5159322478108250, 4.4926729536539458),
    ),
    (
        complex(-4.9717868585278762, 0.0),
        complex(-4.7582905281545607, 1.7392860611305221),
        complex(-4.0701391636381619, 3.5171740477097404),
        complex(-2.6856768789432692, 5.4206941307167469),
    ),
    (
        complex(-5.5878860432632917, 0.86761444535227494),
        complex(-5.2048407906371139, 2.6161751526425734),
        complex(-4.3682892172022632, 4.4144425004715391),
        complex(-2.8389839488976265, 6.3539112986048902),
    ),
    (
        complex(-6.2970191817156991, 0.0),
        complex(-6.1293679042745213, 1.7378483834806000),
        complex(-5.6044218195076834, 3.4981569178859440),
        complex(-4.6384398871804571, 5.3172716754355509),
        complex(-2.9792607981800816, 7.2914636883422173),
    ),
    (
        complex(-6.9220449054272475, 0.86766519544941578),
        complex(-6.6152909654753929, 2.6115679208033464),
        complex(-5.9675283285878828, 4.3849471889398739),
        complex(-4.8862195668595092, 6.2249854824717730),
        complex(-3.1089162336490523, 8.2326994590736220),
    ),
)


def tabulated_bessel_poles(order: int, tol: float = 0.0) -> Tuple[complex, ...]:
    """All ``order`` tabulated poles, conjugates included."""
    poles = []
    for p in BESSEL_POLES[order]:
        poles.append(p)
        if not is_real(p, tol):
            poles.append(p.conjugate())
    return tuple(poles)
