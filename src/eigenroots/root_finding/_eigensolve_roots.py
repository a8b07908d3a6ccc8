from typing import Optional

import torch

from eigenroots.linear_algebra import DenseMatrix, GeneralizedEigenSolver
from eigenroots.polynomial import DegreeError, Polynomial

from ._eigen_triples import (
    check_dtype,
    check_imag_tol,
    solve_pencil,
    split_roots,
)
from ._result_types import EigenRootsResult, _failed_result


def eigensolve_roots(
    p: Polynomial,
    *,
    dtype: Optional[torch.dtype] = None,
    solver: Optional[GeneralizedEigenSolver] = None,
    imag_tol: float = 0.0,
) -> EigenRootsResult:
    """Find polynomial roots as the eigenvalues of its companion matrix.

    Parameters
    ----------
    p : Polynomial
        Polynomial of order N >= 1. Leading coefficient must be non-zero.
    dtype : torch.dtype, optional
        Working and output dtype. Defaults to the coefficient dtype, or
        float64 for non-floating coefficients.
    solver : GeneralizedEigenSolver, optional
        Backend for the pencil (A, I). Defaults to LAPACK ``?ggev``.
    imag_tol : float, optional
        Eigenvalues with |imaginary part| <= imag_tol are classified as real.
        Default 0.0 requires an imaginary part of exactly zero.

    Returns
    -------
    EigenRootsResult
        ``real[:nreal]`` are the real roots in ascending order. Complex roots
        occupy ``real[nreal:]`` and ``imag[nreal:]``, filled from the tail
        inward in solver order and not sorted.

    Raises
    ------
    DegreeError
        If the polynomial is constant or its leading coefficient is zero.
    ValueError
        If dtype is not a floating point dtype.

    Examples
    --------
    >>> result = eigensolve_roots(polynomial(torch.tensor([-1.0, 0.0, 1.0])))
    >>> result.nreal, result.real_roots
    (2, tensor([-1.,  1.]))

    Notes
    -----
    The companion matrix holds ``-coeff[N-i-1] / coeff[N]`` in row 0 and
    ones on the sub-diagonal, so its characteristic polynomial is the
    monic form of p. The pencil (A, I) is solved as a generalized problem
    so that every root set in this package goes through one solver.
    """
    imag_tol = check_imag_tol(imag_tol)

    n = p.order()
    if n < 1:
        raise DegreeError(
            f"Cannot find roots of constant polynomial (order 0), got {n + 1} coefficients"
        )

    if dtype is None and p.coeffs.dtype.is_floating_point:
        dtype = p.coeffs.dtype
    dtype = check_dtype(dtype)
    device = p.coeffs.device

    leading = p.coefficient(n).to(dtype)

    if leading == 0:
        raise DegreeError(
            "Leading coefficient must be non-zero for root finding, "
            f"got polynomial of order {n} with coefficient {n} equal to zero"
        )

    a = DenseMatrix(dtype=dtype, device=device)
    a.resize(n, n)
    a.set_zero()

    identity = DenseMatrix(dtype=dtype, device=device)
    identity.set_identity(n)

    for i in range(n):
        a[0, i] = -p.coefficient(n - i - 1).to(dtype) / leading

        if i < n - 1:
            a[i + 1, i] = 1.0

    table, info = solve_pencil(a, identity, solver)
    if table is None:
        return _failed_result(info, dtype, device)

    real, imag, nreal = split_roots(table.to(dtype), imag_tol)

    return EigenRootsResult(real=real, imag=imag, nreal=nreal)
