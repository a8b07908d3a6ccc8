"""Solving a matrix pencil and classifying its eigenvalue triples."""

import logging
from typing import Optional, Tuple

import torch
from torch import Tensor

from eigenroots.linear_algebra import (
    DEFAULT_SOLVER,
    DenseMatrix,
    GeneralizedEigenSolver,
)

from ._result_types import SOLVER_FAILURE, SUCCESS, ZERO_DENOMINATOR

logger = logging.getLogger(__name__)

DEFAULT_DTYPE = torch.float64

# Pencils for the orthogonal polynomial families are always assembled and
# solved in this dtype; results are narrowed to the requested dtype.
WORKING_DTYPE = torch.float64


def check_dtype(dtype: Optional[torch.dtype]) -> torch.dtype:
    if dtype is None:
        return DEFAULT_DTYPE
    if not dtype.is_floating_point:
        raise ValueError(f"dtype must be a floating point dtype, got {dtype}")
    return dtype


def check_imag_tol(imag_tol: float) -> float:
    imag_tol = float(imag_tol)
    if not imag_tol >= 0.0:
        raise ValueError(f"imag_tol must be non-negative, got {imag_tol}")
    return imag_tol


def solve_pencil(
    a: DenseMatrix,
    b: DenseMatrix,
    solver: Optional[GeneralizedEigenSolver],
) -> Tuple[Optional[Tensor], int]:
    """Solve (A, B) and validate the eigenvalue table.

    Returns
    -------
    table : Tensor or None
        (n, 3) table of (real numerator, imaginary numerator, denominator),
        None on failure.
    info : int
        ``SUCCESS``, ``SOLVER_FAILURE`` or ``ZERO_DENOMINATOR``.
    """
    if solver is None:
        solver = DEFAULT_SOLVER

    result = solver.solve(a, b)

    info = int(result.info)
    if info != 0:
        logger.error("Failed to compute eigen values (info=%d)", info)
        return None, SOLVER_FAILURE

    table = result.eigenvalues
    zero_denominator = table[:, 2] == 0
    if torch.any(zero_denominator):
        logger.error(
            "Failed to compute eigen values: %d of %d denominators are zero",
            int(zero_denominator.sum()),
            table.shape[0],
        )
        return None, ZERO_DENOMINATOR

    return table, SUCCESS


def real_mask(table: Tensor, imag_tol: float) -> Tensor:
    """Rows of the table that hold real eigenvalues.

    With ``imag_tol == 0`` the imaginary numerator must be exactly zero.
    Otherwise |imag / denominator| <= imag_tol is accepted as real.
    """
    if imag_tol == 0.0:
        return table[:, 1] == 0.0
    return torch.abs(table[:, 1] / table[:, 2]) <= imag_tol


def split_roots(table: Tensor, imag_tol: float) -> Tuple[Tensor, Tensor, int]:
    """Pack real roots ascending at the front, complex roots at the tail.

    Complex roots are written from the last slot inward in the order the
    solver emitted them, so the tail is the reversed solver order.
    """
    values_real = table[:, 0] / table[:, 2]
    values_imag = table[:, 1] / table[:, 2]

    is_real = real_mask(table, imag_tol)
    nreal = int(is_real.sum())

    real = torch.cat(
        [values_real[is_real].sort().values, values_real[~is_real].flip(0)]
    )
    imag = torch.cat(
        [torch.zeros_like(values_imag[is_real]), values_imag[~is_real].flip(0)]
    )

    logger.debug(
        "Extracted %d real and %d complex roots from %d eigenvalues",
        nreal,
        table.shape[0] - nreal,
        table.shape[0],
    )

    return real, imag, nreal


def sorted_real_roots(table: Tensor, imag_tol: float) -> Tensor:
    """Real eigenvalues of the table in ascending order."""
    is_real = real_mask(table, imag_tol)
    roots = table[is_real, 0] / table[is_real, 2]

    dropped = table.shape[0] - roots.shape[0]
    if dropped:
        logger.debug("Dropped %d complex eigenvalues", dropped)

    return roots.sort().values
