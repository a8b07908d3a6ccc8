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


_CLOSED_FORM = {
    0: [0.0],
    1: [-1.0, 1.0],
    2: [-1.0, 0.0, 1.0],
}


def eigensolve_roots_lobatto(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
    solver: Optional[GeneralizedEigenSolver] = None,
    imag_tol: float = 0.0,
) -> EigenRootsResult:
    r"""Interior roots of the derivative of the Legendre polynomial P_order.

    These are the interior Gauss-Lobatto-Legendre nodes.

    Parameters
    ----------
    order : int
        Legendre order, non-negative.
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
        Roots in ascending order in ``real``, ``nreal`` of them.

    Raises
    ------
    ValueError
        If order is negative or dtype is not a floating point dtype.

    Notes
    -----
    Orders 0, 1 and 2 are closed form: {0}, {-1, 1} and {-1, 0, 1}. For
    order >= 3 the order - 1 roots of P'_order are the eigenvalues of a
    symmetric tridiagonal Jacobi matrix with zero diagonal, first
    off-diagonal entry 1/sqrt(5) and, for one-based k = i + 1,

    .. math::

        \beta_k = \frac{2}{2k + 2} \sqrt{\frac{k (k + 1)^2 (k + 2)}{(2k + 2)^2 - 1}}

    The endpoints -1 and 1 are not included, see ``lobatto_points``.

    Examples
    --------
    >>> eigensolve_roots_lobatto(3).real
    tensor([-0.4472,  0.4472], dtype=torch.float64)
    """
    order = operator.index(order)
    if order < 0:
        raise ValueError(f"order must be non-negative, got {order}")
    imag_tol = check_imag_tol(imag_tol)

    dtype = check_dtype(dtype)

    if order in _CLOSED_FORM:
        return _real_roots_result(
            torch.tensor(_CLOSED_FORM[order], dtype=dtype, device=device)
        )

    n = order - 1

    a = DenseMatrix(dtype=WORKING_DTYPE, device=device)
    a.resize(n, n)
    a.set_zero()

    identity = DenseMatrix(dtype=WORKING_DTYPE, device=device)
    identity.set_identity(n)

    for i in range(n - 1):
        if i == 0:
            value = 1.0 / math.sqrt(5.0)
        else:
            k = 1.0 + i
            value = (
                2.0
                * math.sqrt(
                    k
                    * (k + 1.0)
                    * (k + 1.0)
                    * (k + 2.0)
                    / ((2.0 * k + 2.0) * (2.0 * k + 2.0) - 1.0)
                )
                / (2.0 * k + 2.0)
            )

        a[i, i + 1] = value
        a[i + 1, i] = value

    table, info = solve_pencil(a, identity, solver)
    if table is None:
        return _failed_result(info, dtype, device)

    roots = sorted_real_roots(table, imag_tol)

    return _real_roots_result(roots.to(dtype))
