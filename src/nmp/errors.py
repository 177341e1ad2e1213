"""
NMP Errors: validation failures raised by the matrix engine.

All errors are local and synchronous. They are raised the moment a
precondition is violated and never carry a partial result.
"""


class MatrixError(Exception):
    """Base class for every matrix engine failure."""


class DimensionMismatch(MatrixError, ValueError):
    """Element count or operand shapes do not fit the operation."""


class NotSquare(MatrixError, ValueError):
    """Operation is defined only for square matrices."""


class IndexOutOfRange(MatrixError, IndexError):
    """Linear, row or column index outside the matrix bounds."""
