from typing import NamedTuple, Optional

import torch
from torch import Tensor

from ._exceptions import EigenSolverError

SUCCESS = 0
SOLVER_FAILURE = 1
ZERO_DENOMINATOR = 2

_REASONS = {
    SOLVER_FAILURE: "generalized eigenvalue solver failed",
    ZERO_DENOMINATOR: "generalized eigenvalue solver returned a zero denominator",
}


class EigenRootsResult(NamedTuple):
    """Roots extracted from the eigenvalues of a matrix pencil.

    Attributes
    ----------
    real : Tensor
        ``real[:nreal]`` holds the real roots in ascending order. For the
        generic solver ``real[nreal:]`` holds the real parts of the complex
        roots, written from the tail inward in solver order.
    imag : Tensor
        Imaginary parts paired with ``real`` index by index. Zero for the
        real roots.
    nreal : int
        Number of real roots.
    info : int
        0 on success. ``SOLVER_FAILURE`` or ``ZERO_DENOMINATOR`` otherwise,
        in which case ``real`` and ``imag`` are empty.
    """

    real: Tensor
    imag: Tensor
    nreal: int
    info: int = SUCCESS

    @property
    def success(self) -> bool:
        return self.info == SUCCESS

    @property
    def reason(self) -> Optional[str]:
        """Failure reason, None on success."""
        if self.success:
            return None
        return _REASONS.get(self.info, f"unknown failure (info={self.info})")

    @property
    def real_roots(self) -> Tensor:
        """Sorted real roots, ``real[:nreal]``."""
        return self.real[: self.nreal]

    @property
    def complex_roots(self) -> Tensor:
        """Complex roots in tail order, as a complex tensor."""
        return torch.complex(self.real[self.nreal :], self.imag[self.nreal :])

    def roots(self) -> Tensor:
        """All roots as a complex tensor, real roots first."""
        return torch.complex(self.real, self.imag)

    def raise_for_status(self) -> "EigenRootsResult":
        """Return self on success, raise EigenSolverError otherwise."""
        if not self.success:
            raise EigenSolverError(self.reason)
        return self


def _real_roots_result(roots: Tensor) -> EigenRootsResult:
    return EigenRootsResult(
        real=roots, imag=torch.zeros_like(roots), nreal=roots.shape[0]
    )


def _failed_result(
    info: int, dtype: torch.dtype, device: Optional[torch.device]
) -> EigenRootsResult:
    empty = torch.empty(0, dtype=dtype, device=device)
    return EigenRootsResult(real=empty, imag=empty.clone(), nreal=0, info=info)
