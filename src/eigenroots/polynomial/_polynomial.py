from typing import Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from eigenroots.polynomial._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N + 1,) where N is the
        order of the polynomial. coeffs[i] is the coefficient of x^i.

    Examples
    --------
    The polynomial x^2 - 1:
        Polynomial(coeffs=torch.tensor([-1.0, 0.0, 1.0]))

    Order and coefficient access:
        p.order()          # 2
        p.coefficient(2)   # 1.0
        p(x)               # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def order(self) -> int:
        """Formal degree of the polynomial, len(coeffs) - 1."""
        return self.coeffs.shape[-1] - 1

    def coefficient(self, i: int) -> Tensor:
        """Coefficient of x^i as a 0-dim tensor."""
        return self.coeffs[i]

    def __call__(self, x: Tensor) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(coeffs: Union[Tensor, Sequence[float]]) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Coefficients in ascending order, shape (N + 1,).
        Must have at least one coefficient.

    Returns
    -------
    Polynomial
        Polynomial instance.

    Raises
    ------
    PolynomialError
        If coeffs is empty, not one-dimensional, or complex.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> p.order()
    2
    """
    coeffs = torch.as_tensor(coeffs)

    if coeffs.dim() != 1:
        raise PolynomialError(
            f"Polynomial coefficients must be one-dimensional, got {coeffs.dim()}D"
        )

    if coeffs.numel() == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    if coeffs.is_complex():
        raise PolynomialError("Polynomial coefficients must be real")

    return Polynomial(coeffs=coeffs)
