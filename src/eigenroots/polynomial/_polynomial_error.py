class PolynomialError(Exception):
    """Base exception for polynomial errors."""

    pass
