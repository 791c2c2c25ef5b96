"""Polynomial root finding."""

from ._aberth_ehrlich import aberth_ehrlich
from ._exceptions import DegreeError, RootFindingError
from ._polish_roots import polish_roots

__all__ = [
    "DegreeError",
    "RootFindingError",
    "aberth_ehrlich",
    "polish_roots",
]
