"""Matrix containers and generalized eigenvalue solvers.

Classes
-------
DenseMatrix
    Resizable dense matrix with zero, identity and element access.
GeneralizedEigenSolver
    Abstract solver for the matrix pencil problem Ax = λBx.
ScipyGeneralizedEigenSolver
    Default solver backed by LAPACK ``?ggev``.

Functions
---------
generalized_eigenvalue
    Eigenvalue triples and right eigenvectors of a real pencil (A, B).

Result Types
------------
GeneralizedEigenvalueResult
    Named tuple with eigenvalues, eigenvectors, info.
"""

from eigenroots.linear_algebra._dense_matrix import DenseMatrix
from eigenroots.linear_algebra._generalized_eigen_solver import (
    DEFAULT_SOLVER,
    GeneralizedEigenSolver,
    ScipyGeneralizedEigenSolver,
)
from eigenroots.linear_algebra._generalized_eigenvalue import (
    generalized_eigenvalue,
)
from eigenroots.linear_algebra._result_types import (
    GeneralizedEigenvalueResult,
)

__all__ = [
    "DEFAULT_SOLVER",
    "DenseMatrix",
    "GeneralizedEigenSolver",
    "GeneralizedEigenvalueResult",
    "ScipyGeneralizedEigenSolver",
    "generalized_eigenvalue",
]
