"""Polynomial utilities on 1-D coefficient tensors (ascending powers)."""

from ._polynomial_add import polynomial_add
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_from_roots import polynomial_from_roots
from ._polynomial_multiply import polynomial_multiply

__all__ = [
    "polynomial_add",
    "polynomial_evaluate",
    "polynomial_from_roots",
    "polynomial_multiply",
]
