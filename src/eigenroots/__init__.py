"""eigenroots: polynomial and orthogonal-polynomial roots from matrix pencils."""

import logging

from . import linear_algebra, polynomial, root_finding

__all__ = [
    "linear_algebra",
    "polynomial",
    "root_finding",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
