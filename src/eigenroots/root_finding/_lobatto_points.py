import operator
from typing import Optional

import torch
from torch import Tensor

from eigenroots.linear_algebra import GeneralizedEigenSolver

from ._eigen_triples import check_dtype
from ._eigensolve_roots_lobatto import eigensolve_roots_lobatto


def lobatto_points(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
    solver: Optional[GeneralizedEigenSolver] = None,
) -> Tensor:
    """Gauss-Lobatto-Legendre points of the given order.

    Returns ``order + 1`` points: -1, the interior roots of P'_order and 1.
    Order 0 returns the single point 0.

    Raises
    ------
    EigenSolverError
        If the eigenvalue solve for the interior points fails.
    """
    order = operator.index(order)
    dtype = check_dtype(dtype)

    result = eigensolve_roots_lobatto(
        order, dtype=dtype, device=device, solver=solver
    ).raise_for_status()

    if order < 3:
        return result.real_roots

    endpoint = torch.ones(1, dtype=dtype, device=device)
    return torch.cat([-endpoint, result.real_roots, endpoint])
