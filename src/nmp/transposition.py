"""
NMP Transposition: the four reflections of a square matrix.

Each mode is a pure index formula: for output linear index i of an
n x n matrix it gives the source linear index. The formulas use only
integer arithmetic, so they accept a Python int or a numpy int array.

First output row of each mode for a 3 x 3 source:

    ( 0, 1, 2 )      MAIN_DIAGONAL    ( 0, 3, 6 )
    ( 3, 4, 5 )  ->  SIDE_DIAGONAL    ( 8, 5, 2 )
    ( 6, 7, 8 )      VERTICAL_AXIS    ( 2, 1, 0 )
                     HORIZONTAL_AXIS  ( 6, 7, 8 )
"""

from enum import Enum


class Transposition(Enum):
    """Axis or diagonal a square matrix is reflected across."""

    MAIN_DIAGONAL = "main"
    SIDE_DIAGONAL = "side"
    VERTICAL_AXIS = "vertical"
    HORIZONTAL_AXIS = "horizontal"

    # Short aliases
    MAIN = "main"
    SIDE = "side"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @property
    def label(self):
        """Menu caption of the mode."""
        return _LABELS[self]

    def source_index(self, index, size):
        """
        Source linear index for output linear index `index`.

        Parameters
        ----------
        index : int or numpy.ndarray of int
            Output linear index (or indices) in [0, size*size).
        size : int
            Matrix size n (rows == cols == n), n > 0.

        Returns
        -------
        int or numpy.ndarray of int
        """
        return _FORMULAS[self](index, size)


_FORMULAS = {
    Transposition.MAIN_DIAGONAL: lambda i, n: i // n + i % n * n,
    Transposition.SIDE_DIAGONAL: lambda i, n: n * (n - i % n) - i // n - 1,
    Transposition.VERTICAL_AXIS: lambda i, n: n - i % n - 1 + i // n * n,
    Transposition.HORIZONTAL_AXIS: lambda i, n: n * (n - i // n - 1) + i % n,
}

_LABELS = {
    Transposition.MAIN_DIAGONAL: "Main diagonal",
    Transposition.SIDE_DIAGONAL: "Side diagonal",
    Transposition.VERTICAL_AXIS: "Vertical line",
    Transposition.HORIZONTAL_AXIS: "Horizontal line",
}
