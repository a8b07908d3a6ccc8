"""Test fixtures for root_finding tests."""

import pytest
import torch

from eigenroots.linear_algebra import (
    GeneralizedEigenSolver,
    GeneralizedEigenvalueResult,
    ScipyGeneralizedEigenSolver,
)


class FailingSolver(GeneralizedEigenSolver):
    """Reports a non-converged solve for every pencil."""

    def __init__(self):
        self.calls = 0

    def solve(self, a, b):
        self.calls += 1
        n = a.shape[0]
        return GeneralizedEigenvalueResult(
            eigenvalues=torch.full((n, 3), float("nan"), dtype=torch.float64),
            eigenvectors=torch.full(
                (n, n), complex(float("nan"), 0), dtype=torch.complex128
            ),
            info=torch.tensor(1, dtype=torch.int32),
        )


class ZeroDenominatorSolver(ScipyGeneralizedEigenSolver):
    """Solves correctly, then zeroes the denominator of the last eigenvalue."""

    def solve(self, a, b):
        result = super().solve(a, b)
        eigenvalues = result.eigenvalues.clone()
        eigenvalues[-1, 2] = 0.0
        return result._replace(eigenvalues=eigenvalues)


class RecordingSolver(ScipyGeneralizedEigenSolver):
    """Records the pencils it is asked to solve."""

    def __init__(self):
        self.pencils = []

    def solve(self, a, b):
        self.pencils.append((a.tensor.clone(), b.tensor.clone()))
        return super().solve(a, b)


class ScaledDenominatorSolver(ScipyGeneralizedEigenSolver):
    """Returns the same eigenvalues with every triple scaled by 2."""

    def solve(self, a, b):
        result = super().solve(a, b)
        return result._replace(eigenvalues=2.0 * result.eigenvalues)


class FixedTableSolver(GeneralizedEigenSolver):
    """Returns a preset eigenvalue table regardless of the pencil."""

    def __init__(self, rows):
        self.table = torch.tensor(rows, dtype=torch.float64)

    def solve(self, a, b):
        n = self.table.shape[0]
        return GeneralizedEigenvalueResult(
            eigenvalues=self.table.clone(),
            eigenvectors=torch.eye(n, dtype=torch.complex128),
            info=torch.tensor(0, dtype=torch.int32),
        )


@pytest.fixture
def failing_solver():
    return FailingSolver()


@pytest.fixture
def zero_denominator_solver():
    return ZeroDenominatorSolver()


@pytest.fixture
def recording_solver():
    return RecordingSolver()


@pytest.fixture
def scaled_denominator_solver():
    return ScaledDenominatorSolver()


@pytest.fixture
def fixed_table_solver():
    return FixedTableSolver
