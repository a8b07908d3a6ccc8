"""Pluggable generalized eigenvalue solver backends."""

from abc import ABC, abstractmethod

from eigenroots.linear_algebra._dense_matrix import DenseMatrix
from eigenroots.linear_algebra._generalized_eigenvalue import (
    generalized_eigenvalue,
)
from eigenroots.linear_algebra._result_types import (
    GeneralizedEigenvalueResult,
)


class GeneralizedEigenSolver(ABC):
    """Solves the generalized eigenvalue problem for a matrix pencil (A, B).

    Implementations return a :class:`GeneralizedEigenvalueResult` whose
    ``eigenvalues`` table holds (real numerator, imaginary numerator,
    denominator) rows and whose ``info`` is 0 on success. Failure is
    reported through ``info``, not by raising.
    """

    @abstractmethod
    def solve(
        self, a: DenseMatrix, b: DenseMatrix
    ) -> GeneralizedEigenvalueResult: ...


class ScipyGeneralizedEigenSolver(GeneralizedEigenSolver):
    """LAPACK ``?ggev`` through :func:`scipy.linalg.eig`."""

    def solve(
        self, a: DenseMatrix, b: DenseMatrix
    ) -> GeneralizedEigenvalueResult:
        if a.shape != b.shape:
            raise ValueError(
                f"a and b must have the same shape, got {a.shape} and {b.shape}"
            )

        return generalized_eigenvalue(a.tensor, b.tensor)

    def __repr__(self) -> str:
        return "ScipyGeneralizedEigenSolver()"


DEFAULT_SOLVER = ScipyGeneralizedEigenSolver()
