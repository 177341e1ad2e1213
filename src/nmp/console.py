"""
NMP Console: token input and fixed-width matrix rendering.

Input is read the way a Scanner reads it: whitespace-separated tokens,
regardless of how they are spread across lines.

Output renders each element as a fixed-point number in a field of
CELL_WIDTH characters with CELL_PRECISION decimals, one space between
elements of a row, every row terminated by a newline:

         1.00      2.00      3.00
         4.00      5.00      6.00
"""

import sys

from nmp.errors import DimensionMismatch
from nmp.matrix import Matrix

CELL_WIDTH = 9
CELL_PRECISION = 2


def format_matrix(matrix, width=CELL_WIDTH, precision=CELL_PRECISION):
    """
    Render a matrix row by row.

    Parameters
    ----------
    matrix : Matrix
    width : int
        Field width of each element.
    precision : int
        Decimals of each element.

    Returns
    -------
    str
        One newline-terminated line per row; "" for a matrix without columns.
    """
    if matrix.cols == 0:
        return ""
    parts = []
    for i, value in enumerate(matrix):
        parts.append(f"{value:{width}.{precision}f}")
        parts.append("\n" if (i + 1) % matrix.cols == 0 else " ")
    return "".join(parts)


class Console:
    """
    Prompting reader/writer over a pair of text streams.

    Parameters
    ----------
    stdin : text stream
        Source of tokens (default sys.stdin).
    stdout : text stream
        Destination of prompts and results (default sys.stdout).
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._pending = []

    def write(self, text="", end="\n"):
        """Write a line (or a prompt, with end="")."""
        self.stdout.write(f"{text}{end}")
        self.stdout.flush()

    def next_token(self):
        """Next whitespace-separated token; EOFError when input is exhausted."""
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                raise EOFError("no more input")
            self._pending = line.split()[::-1]
        return self._pending.pop()

    def discard_pending(self):
        """Drop the unread tokens of the current line."""
        self._pending = []

    def read_int(self):
        return self._to_int(self.next_token())

    def read_float(self):
        return self._to_float(self.next_token())

    @staticmethod
    def _to_int(token):
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    @staticmethod
    def _to_float(token):
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def read_matrix(self, name):
        """
        Prompt for the size and the elements of a matrix.

        All rows * cols element tokens are consumed before any is parsed,
        so a malformed element never leaves the rest of the matrix unread.

        Parameters
        ----------
        name : str
            Word used in the prompts ("first", "second", "the").

        Returns
        -------
        Matrix
        """
        self.write(f"Enter size (rows and cols) of {name} matrix:")
        size = [self.next_token(), self.next_token()]
        rows, cols = self._to_int(size[0]), self._to_int(size[1])
        if rows < 0 or cols < 0:
            raise DimensionMismatch(
                f"dimensions must be non-negative, got {rows} x {cols}")
        self.write(f"Enter {name} matrix:")
        tokens = [self.next_token() for _ in range(rows * cols)]
        return Matrix.create(rows, cols, lambda i: self._to_float(tokens[i]))

    def print_result(self, result):
        """Print the result header followed by a matrix or a number.

        A matrix rendering already ends in a newline; the line end after it
        leaves a blank line before the next prompt.
        """
        self.write("The result is:")
        if isinstance(result, Matrix):
            self.write(format_matrix(result))
        else:
            self.write(result)
