"""Exception classes for root finding module."""


class RootFindingError(Exception):
    """Base exception for root finding errors."""

    pass


class DegreeError(RootFindingError, ValueError):
    """Raised when a polynomial has no roots to find (degree < 1)."""

    pass
