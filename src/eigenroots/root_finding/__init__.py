"""Root finding through generalized eigenvalue problems.

Functions
---------
eigensolve_roots
    Real and complex roots of a polynomial from its companion matrix.
eigensolve_roots_lobatto
    Interior roots of the derivative of a Legendre polynomial.
eigensolve_roots_laguerre
    Roots of the Laguerre derivative family for Gauss-Laguerre nodes.
lobatto_points
    Full Gauss-Lobatto-Legendre point set including the endpoints.

Result Types
------------
EigenRootsResult
    Named tuple with real, imag, nreal, info.
"""

from ._eigensolve_roots import eigensolve_roots
from ._eigensolve_roots_laguerre import eigensolve_roots_laguerre
from ._eigensolve_roots_lobatto import eigensolve_roots_lobatto
from ._exceptions import EigenSolverError, RootFindingError
from ._lobatto_points import lobatto_points
from ._result_types import (
    SOLVER_FAILURE,
    SUCCESS,
    ZERO_DENOMINATOR,
    EigenRootsResult,
)

__all__ = [
    "SOLVER_FAILURE",
    "SUCCESS",
    "ZERO_DENOMINATOR",
    "EigenRootsResult",
    "EigenSolverError",
    "RootFindingError",
    "eigensolve_roots",
    "eigensolve_roots_laguerre",
    "eigensolve_roots_lobatto",
    "lobatto_points",
]
