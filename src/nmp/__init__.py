"""
NMP - Numeric Matrix Processor
==============================

Immutable dense matrices with cofactor-based determinant and inverse.

Quick start:
    import nmp

    a = nmp.create(2, 2, [1, 2, 3, 4])
    a.determinant()                              # -2.0
    a.inverse()                                  # Matrix, or None if singular
    a.transpose(nmp.Transposition.SIDE_DIAGONAL)
    print(a @ nmp.identity(2))

    # Generator construction: element i of a 3 x 3 matrix
    b = nmp.create(3, 3, lambda i: i * 0.5)

Interactive menu:
    python -m nmp --verbose

License: MIT
"""

__version__ = "0.1.0"

from nmp.errors import MatrixError, DimensionMismatch, NotSquare, IndexOutOfRange
from nmp.transposition import Transposition
from nmp.matrix import Matrix, create, identity
from nmp.console import format_matrix

__all__ = [
    "Matrix", "create", "identity", "Transposition", "format_matrix",
    "MatrixError", "DimensionMismatch", "NotSquare", "IndexOutOfRange",
]
