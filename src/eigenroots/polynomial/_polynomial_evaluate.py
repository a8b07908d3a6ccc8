import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Tensor) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (N + 1,).
    x : Tensor
        Evaluation points, any shape. Complex points are allowed, which is
        how complex roots are checked.

    Returns
    -------
    Tensor
        Values p(x), same shape as x, in the promoted dtype of the
        coefficients and the points.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    x = torch.as_tensor(x, device=p.coeffs.device)

    common_dtype = torch.promote_types(p.coeffs.dtype, x.dtype)
    coeffs = p.coeffs.to(common_dtype)
    x = x.to(common_dtype)

    n = coeffs.shape[-1]

    result = torch.full_like(x, 0) + coeffs[n - 1]
    for k in range(n - 2, -1, -1):
        result = result * x + coeffs[k]

    return result
