"""Tests for generalized eigenvalue decomposition."""

import math

import pytest
import scipy.linalg
import torch

from eigenroots.linear_algebra import (
    DenseMatrix,
    GeneralizedEigenSolver,
    ScipyGeneralizedEigenSolver,
    generalized_eigenvalue,
)


def _eigenvalues(table):
    return torch.complex(table[:, 0], table[:, 1]) / table[:, 2]


class TestGeneralizedEigenvalue:
    """Tests for generalized_eigenvalue."""

    def test_basic(self):
        """Test basic generalized eigenvalue problem."""
        a = torch.tensor(
            [
                [1.0, 2.0],
                [3.0, 4.0],
            ],
            dtype=torch.float64,
        )
        b = torch.tensor(
            [
                [5.0, 6.0],
                [7.0, 8.0],
            ],
            dtype=torch.float64,
        )

        result = generalized_eigenvalue(a, b)

        assert result.eigenvalues.shape == (2, 3)
        assert result.eigenvalues.dtype == torch.float64
        assert result.eigenvectors.shape == (2, 2)
        assert result.eigenvectors.dtype == torch.complex128
        assert result.info.item() == 0

    def test_matches_scipy(self):
        torch.manual_seed(0)
        a = torch.randn(5, 5, dtype=torch.float64)
        b = torch.randn(5, 5, dtype=torch.float64) + 3.0 * torch.eye(
            5, dtype=torch.float64
        )

        result = generalized_eigenvalue(a, b)
        expected = scipy.linalg.eigvals(a.numpy(), b.numpy())

        computed = _eigenvalues(result.eigenvalues).numpy()
        key = lambda z: (round(z.real, 8), z.imag)  # noqa: E731
        for x, y in zip(sorted(computed, key=key), sorted(expected, key=key)):
            assert x == pytest.approx(y, rel=1e-10, abs=1e-12)

    def test_reconstruction(self):
        """Test A @ vr = B @ vr @ diag(eigenvalues)."""
        torch.manual_seed(42)
        n = 4

        a = torch.randn(n, n, dtype=torch.float64)
        b = torch.randn(n, n, dtype=torch.float64)
        b = b + 2.0 * torch.eye(n, dtype=torch.float64)

        result = generalized_eigenvalue(a, b)
        eigenvalues = _eigenvalues(result.eigenvalues)

        a_complex = a.to(torch.complex128)
        b_complex = b.to(torch.complex128)

        for i in range(n):
            v = result.eigenvectors[:, i]
            lhs = a_complex @ v
            rhs = eigenvalues[i] * (b_complex @ v)
            torch.testing.assert_close(lhs, rhs, rtol=1e-10, atol=1e-10)

    def test_real_eigenvalues_have_zero_imaginary_part(self):
        """Symmetric A with B = I gives exactly zero imaginary numerators."""
        a = torch.tensor(
            [
                [2.0, 1.0, 0.0],
                [1.0, 2.0, 1.0],
                [0.0, 1.0, 2.0],
            ],
            dtype=torch.float64,
        )
        result = generalized_eigenvalue(a, torch.eye(3, dtype=torch.float64))

        assert torch.all(result.eigenvalues[:, 1] == 0.0)
        eigenvalues = (
            result.eigenvalues[:, 0] / result.eigenvalues[:, 2]
        ).sort().values
        expected = torch.tensor(
            [2.0 - math.sqrt(2.0), 2.0, 2.0 + math.sqrt(2.0)],
            dtype=torch.float64,
        )
        torch.testing.assert_close(eigenvalues, expected)

    def test_complex_pair(self):
        """Rotation matrix has eigenvalues +-i."""
        a = torch.tensor([[0.0, -1.0], [1.0, 0.0]], dtype=torch.float64)
        result = generalized_eigenvalue(a, torch.eye(2, dtype=torch.float64))

        imag = (result.eigenvalues[:, 1] / result.eigenvalues[:, 2]).sort()
        torch.testing.assert_close(
            imag.values, torch.tensor([-1.0, 1.0], dtype=torch.float64)
        )

    def test_float32(self):
        a = torch.tensor([[0.0, 1.0], [1.0, 0.0]])
        result = generalized_eigenvalue(a, torch.eye(2))

        assert result.eigenvalues.dtype == torch.float32
        assert result.eigenvectors.dtype == torch.complex64

    def test_non_finite_input_reports_failure(self):
        a = torch.tensor(
            [[float("nan"), 1.0], [1.0, 0.0]], dtype=torch.float64
        )
        result = generalized_eigenvalue(a, torch.eye(2, dtype=torch.float64))

        assert result.info.item() == 1
        assert torch.all(torch.isnan(result.eigenvalues))

    def test_not_square_raises(self):
        with pytest.raises(ValueError):
            generalized_eigenvalue(torch.zeros(2, 3), torch.zeros(2, 3))

    def test_size_mismatch_raises(self):
        with pytest.raises(ValueError):
            generalized_eigenvalue(torch.zeros(2, 2), torch.zeros(3, 3))

    def test_not_2d_raises(self):
        with pytest.raises(ValueError):
            generalized_eigenvalue(torch.zeros(2), torch.zeros(2, 2))


class TestScipyGeneralizedEigenSolver:
    """Tests for the default solver backend."""

    def test_is_solver(self):
        assert isinstance(ScipyGeneralizedEigenSolver(), GeneralizedEigenSolver)

    def test_abstract(self):
        with pytest.raises(TypeError):
            GeneralizedEigenSolver()

    def test_solve_pencil(self):
        a = DenseMatrix(dtype=torch.float64)
        a.resize(2, 2)
        a[0, 0] = 1.0
        a[1, 1] = 3.0
        identity = DenseMatrix().set_identity(2)

        result = ScipyGeneralizedEigenSolver().solve(a, identity)

        assert result.info.item() == 0
        eigenvalues = (
            result.eigenvalues[:, 0] / result.eigenvalues[:, 2]
        ).sort().values
        torch.testing.assert_close(
            eigenvalues, torch.tensor([1.0, 3.0], dtype=torch.float64)
        )

    def test_shape_mismatch_raises(self):
        with pytest.raises(ValueError):
            ScipyGeneralizedEigenSolver().solve(
                DenseMatrix(2, 2), DenseMatrix().set_identity(3)
            )
