"""Power-basis polynomials consumed by the root solvers.

Classes
-------
Polynomial
    Tensorclass holding ascending coefficients, with ``order()`` and
    ``coefficient(i)`` access.

Functions
---------
polynomial
    Create a Polynomial from a coefficient tensor or sequence.
polynomial_order
    Formal order of a polynomial.
polynomial_evaluate
    Horner evaluation at real or complex points.

Exceptions
----------
PolynomialError
    Base exception for polynomial errors.
DegreeError
    Invalid order or zero leading coefficient.
"""

from eigenroots.polynomial._degree_error import DegreeError
from eigenroots.polynomial._polynomial import Polynomial, polynomial
from eigenroots.polynomial._polynomial_error import PolynomialError
from eigenroots.polynomial._polynomial_evaluate import polynomial_evaluate
from eigenroots.polynomial._polynomial_order import polynomial_order

__all__ = [
    "DegreeError",
    "Polynomial",
    "PolynomialError",
    "polynomial",
    "polynomial_evaluate",
    "polynomial_order",
]
