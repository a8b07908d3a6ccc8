from ._polynomial import Polynomial


def polynomial_order(p: Polynomial) -> int:
    """Return order of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of coefficients minus 1.

    Notes
    -----
    This returns the formal order (len(coeffs) - 1), not the actual degree
    which would require checking for trailing zeros. Root finding rejects
    polynomials whose formal leading coefficient is zero.
    """
    return p.order()
