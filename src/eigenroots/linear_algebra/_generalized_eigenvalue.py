"""Generalized eigenvalue decomposition."""

import numpy as np
import scipy.linalg
import torch
from torch import Tensor

from eigenroots.linear_algebra._result_types import (
    GeneralizedEigenvalueResult,
)


def generalized_eigenvalue(
    a: Tensor,
    b: Tensor,
) -> GeneralizedEigenvalueResult:
    r"""
    Generalized eigenvalue decomposition.

    Computes eigenvalues and right eigenvectors for Ax = λBx where A and B
    are real square matrices, with eigenvalues returned in homogeneous form.

    Parameters
    ----------
    a : Tensor
        Input matrix of shape (n, n).
    b : Tensor
        Input matrix of shape (n, n).

    Returns
    -------
    GeneralizedEigenvalueResult
        eigenvalues : Tensor of shape (n, 3), real
            Rows of (alpha real part, alpha imaginary part, beta), the
            eigenvalue being alpha / beta.
        eigenvectors : Tensor of shape (n, n), complex
            Right eigenvectors, column i pairs with row i of eigenvalues.
        info : Tensor, int
            0 indicates success. 1 indicates that the QZ iteration failed
            or that the input was not finite; the tables are then NaN.

    Notes
    -----
    Real eigenvalues carry an imaginary numerator of exactly zero, since
    the QZ iteration only produces complex values from 2x2 blocks.
    """
    if a.dim() != 2:
        raise ValueError(f"a must be 2D, got {a.dim()}D")
    if b.dim() != 2:
        raise ValueError(f"b must be 2D, got {b.dim()}D")
    if a.shape[-2] != a.shape[-1]:
        raise ValueError(f"a must be square, got shape {a.shape}")
    if b.shape[-2] != b.shape[-1]:
        raise ValueError(f"b must be square, got shape {b.shape}")
    if a.shape[-1] != b.shape[-1]:
        raise ValueError(
            f"a and b must have same size, got {a.shape[-1]} and {b.shape[-1]}"
        )
    if a.is_complex() or b.is_complex():
        raise ValueError("a and b must be real")

    dtype = torch.promote_types(a.dtype, b.dtype)
    if dtype not in (torch.float32, torch.float64):
        dtype = torch.float64
    complex_dtype = torch.complex128 if dtype == torch.float64 else torch.complex64

    n = a.shape[-1]
    device = a.device

    a_np = a.detach().to(dtype).cpu().numpy()
    b_np = b.detach().to(dtype).cpu().numpy()

    try:
        w, vr = scipy.linalg.eig(
            a_np, b_np, left=False, right=True, homogeneous_eigvals=True
        )
    except (scipy.linalg.LinAlgError, ValueError):
        return GeneralizedEigenvalueResult(
            eigenvalues=torch.full(
                (n, 3), float("nan"), dtype=dtype, device=device
            ),
            eigenvectors=torch.full(
                (n, n), complex(float("nan"), 0), dtype=complex_dtype, device=device
            ),
            info=torch.tensor(1, dtype=torch.int32, device=device),
        )

    alpha, beta = w[0], w[1]
    table = np.stack([alpha.real, alpha.imag, beta.real], axis=-1)

    return GeneralizedEigenvalueResult(
        eigenvalues=torch.from_numpy(np.ascontiguousarray(table)).to(
            dtype=dtype, device=device
        ),
        eigenvectors=torch.from_numpy(np.ascontiguousarray(vr)).to(
            dtype=complex_dtype, device=device
        ),
        info=torch.tensor(0, dtype=torch.int32, device=device),
    )
