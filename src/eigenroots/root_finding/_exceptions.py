"""Exception classes for root finding module."""


class RootFindingError(Exception):
    """Base exception for root finding errors."""

    pass


class EigenSolverError(RootFindingError):
    """Raised when the generalized eigenvalue solve behind a root set fails."""

    pass
