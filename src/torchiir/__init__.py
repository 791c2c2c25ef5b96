"""torchiir: IIR digital filter design from analog prototypes, in PyTorch."""

from . import (
    filter_design,
    polynomial,
    root_finding,
)

__all__ = [
    "filter_design",
    "polynomial",
    "root_finding",
]

__version__ = "0.1.0"
