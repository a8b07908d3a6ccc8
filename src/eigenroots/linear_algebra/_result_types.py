from typing import NamedTuple

from torch import Tensor


class GeneralizedEigenvalueResult(NamedTuple):
    """Result of generalized eigenvalue decomposition Ax = λBx.

    ``eigenvalues`` is a table with one row per eigenvalue holding
    (real numerator, imaginary numerator, denominator). The eigenvalue is
    (real + i * imaginary) / denominator.
    """

    eigenvalues: Tensor
    eigenvectors: Tensor
    info: Tensor
