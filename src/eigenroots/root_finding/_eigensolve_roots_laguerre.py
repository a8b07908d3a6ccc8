import math
import operator
from typing import Optional

import torch

from eigenroots.linear_algebra import DenseMatrix, GeneralizedEigenSolver

from ._eigen_triples import (
    WORKING_DTYPE,
    check_dtype,
    check_imag_tol,
    solve_pencil,
    sorted_real_roots,
)
from ._result_types import (
    EigenRootsResult,
    _failed_result,
    _real_roots_result,
)


def eigensolve_roots_laguerre(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
    solver: Optional[GeneralizedEigenSolver] = None,
    imag_tol: float = 0.0,
) -> EigenRootsResult:
    r"""Roots of the Laguerre derivative family used for Gauss-Laguerre nodes.

    Parameters
    ----------
    order : int
        Number of roots requested, non-negative.
    dtype : torch.dtype, optional
        Output dtype. Defaults to float64. The Jacobi matrix is always
        built and solved in float64.
    device : torch.device, optional
        Device for the output tensors.
    solver : GeneralizedEigenSolver, optional
        Backend for the pencil (A, I).
    imag_tol : float, optional
        Tolerance for classifying an eigenvalue as real. Default 0.0.

    Returns
    -------
    EigenRootsResult
        ``order`` positive roots in ascending order in ``real``.

    Raises
    ------
    ValueError
        If order is negative or dtype is not a floating point dtype.

    Notes
    -----
    Order 0 has no roots and order 1 has the single root 2. For order >= 2
    the roots are the eigenvalues of the symmetric tridiagonal matrix

    .. math::

        A_{ii} = 2(i + 1), \quad A_{i,i+1} = A_{i+1,i} = \sqrt{(i + 1)(i + 2)}

    which is the Jacobi matrix of the generalized Laguerre polynomial
    L^{(1)}_{order}. Since L'_{m} = -L^{(1)}_{m-1}, these are the roots of
    the derivative of L_{order + 1}.

    Examples
    --------
    >>> eigensolve_roots_laguerre(2).real
    tensor([1.2679, 4.7321], dtype=torch.float64)
    """
    order = operator.index(order)
    if order < 0:
        raise ValueError(f"order must be non-negative, got {order}")
    imag_tol = check_imag_tol(imag_tol)

    dtype = check_dtype(dtype)

    if order == 0:
        return _real_roots_result(torch.empty(0, dtype=dtype, device=device))

    if order == 1:
        return _real_roots_result(torch.tensor([2.0], dtype=dtype, device=device))

    n = order

    a = DenseMatrix(dtype=WORKING_DTYPE, device=device)
    a.resize(n, n)
    a.set_zero()

    identity = DenseMatrix(dtype=WORKING_DTYPE, device=device)
    identity.set_identity(n)

    for i in range(n):
        a[i, i] = 2.0 * (i + 1)

        if i < n - 1:
            value = math.sqrt((1.0 + i) * (2.0 + i))
            a[i, i + 1] = value
            a[i + 1, i] = value

    table, info = solve_pencil(a, identity, solver)
    if table is None:
        return _failed_result(info, dtype, device)

    roots = sorted_real_roots(table, imag_tol)

    return _real_roots_result(roots.to(dtype))
