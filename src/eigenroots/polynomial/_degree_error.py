from eigenroots.polynomial._polynomial_error import PolynomialError


class DegreeError(PolynomialError):
    """Raised when a polynomial's degree or leading coefficient is invalid."""

    pass
