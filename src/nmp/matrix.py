"""
NMP Matrix: immutable dense matrix over a flat float64 buffer.

The buffer is row-major: linear index i addresses row i // cols and
column i % cols. Every operation returns a new Matrix; buffers are
copied on construction and marked read-only.

Usage:
    from nmp import create, identity, Transposition

    a = create(2, 2, [1, 2, 3, 4])
    a.determinant()                       # -2.0
    a @ identity(2) == a                  # True
    a.transpose(Transposition.SIDE_DIAGONAL)
    a.inverse()                           # Matrix, or None if singular

Determinant and inverse use cofactor expansion, which costs O(n!)
products. Intended for small matrices only.
"""

import numpy as np

from nmp import fast as _fast
from nmp.errors import DimensionMismatch, IndexOutOfRange, NotSquare
from nmp.transposition import Transposition


class Matrix:
    """
    Immutable rows x cols matrix of doubles.

    Parameters
    ----------
    rows, cols : int
        Non-negative dimensions.
    cells : sequence of float
        Flat row-major elements, length rows * cols. Copied.

    Raises
    ------
    DimensionMismatch
        Negative dimension, non-flat buffer or wrong element count.

    Examples
    --------
    The index of elements starts from zero:

        ( 0, 1, 2 )
        ( 3, 4, 5 )
        ( 6, 7, 8 )

    >>> m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    >>> m.element(4), m.element(1, 1)
    (5.0, 5.0)
    """

    __slots__ = ("_rows", "_cols", "_cells")

    # numpy scalars on the left of an operator defer to our reflected methods
    __array_ufunc__ = None

    def __init__(self, rows, cols, cells):
        if rows < 0 or cols < 0:
            raise DimensionMismatch(
                f"dimensions must be non-negative, got {rows} x {cols}")
        buf = np.array(cells, dtype=np.float64)
        if buf.ndim != 1 or buf.shape[0] != rows * cols:
            raise DimensionMismatch(
                f"the number of cells ({buf.size}) is not equal to "
                f"rows * cols ({rows} x {cols})")
        buf.flags.writeable = False
        self._init(int(rows), int(cols), buf)

    # ------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------

    @classmethod
    def create(cls, rows, cols, source):
        """
        Build a matrix from a buffer or from an index generator.

        Parameters
        ----------
        rows, cols : int
            Dimensions.
        source : sequence of float or callable
            Either the flat row-major elements, or a function called as
            source(i) for every linear index i in increasing order.

        Returns
        -------
        Matrix
        """
        if callable(source):
            if rows < 0 or cols < 0:
                raise DimensionMismatch(
                    f"dimensions must be non-negative, got {rows} x {cols}")
            source = [source(i) for i in range(rows * cols)]
        return cls(rows, cols, source)

    @classmethod
    def identity(cls, size):
        """Square matrix with 1.0 on the main diagonal, 0.0 elsewhere."""
        return cls.create(size, size, lambda i: 1.0 if i % (size + 1) == 0 else 0.0)

    @classmethod
    def from_rows(cls, rows):
        """Build a matrix from a list of equal-length rows."""
        rows = [list(r) for r in rows]
        if not rows:
            return cls(0, 0, [])
        width = len(rows[0])
        for r in rows:
            if len(r) != width:
                raise DimensionMismatch(
                    f"ragged rows: expected {width} values, got {len(r)}")
        return cls(len(rows), width, [x for r in rows for x in r])

    @classmethod
    def _wrap(cls, rows, cols, buf):
        """Adopt a freshly computed buffer without copying it again."""
        m = cls.__new__(cls)
        buf.flags.writeable = False
        m._init(rows, cols, buf)
        return m

    def _init(self, rows, cols, buf):
        object.__setattr__(self, "_rows", rows)
        object.__setattr__(self, "_cols", cols)
        object.__setattr__(self, "_cells", buf)

    def __setattr__(self, name, value):
        raise AttributeError(f"Matrix is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Matrix is immutable, cannot delete {name!r}")

    # ------------------------------------------------------------
    # Access
    # ------------------------------------------------------------

    @property
    def rows(self):
        return self._rows

    @property
    def cols(self):
        return self._cols

    @property
    def shape(self):
        return (self._rows, self._cols)

    @property
    def size(self):
        """Number of elements, rows * cols."""
        return self._cells.shape[0]

    @property
    def is_square(self):
        return self._rows == self._cols

    def element(self, index, col=None):
        """
        Element by linear index, or by (row, col) when `col` is given.

        Raises
        ------
        IndexOutOfRange
            Negative index, index >= rows * cols, row >= rows or col >= cols.
        """
        if col is None:
            if not 0 <= index < self.size:
                raise IndexOutOfRange(
                    f"index {index} out of range for {self.size} elements")
            return float(self._cells[index])
        row = index
        if not 0 <= row < self._rows:
            raise IndexOutOfRange(f"row {row} out of range for {self._rows} rows")
        if not 0 <= col < self._cols:
            raise IndexOutOfRange(f"col {col} out of range for {self._cols} cols")
        return float(self._cells[row * self._cols + col])

    def __getitem__(self, key):
        if isinstance(key, tuple):
            return self.element(*key)
        return self.element(key)

    def __iter__(self):
        return (float(x) for x in self._cells)

    def __len__(self):
        return self.size

    def tolist(self):
        """Nested list of rows."""
        return self._cells.reshape(self._rows, self._cols).tolist()

    def to_numpy(self):
        """Writable 2-D copy of the elements."""
        return self._cells.reshape(self._rows, self._cols).copy()

    # ------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------

    def add(self, other):
        """
        Element-wise sum.

        Raises
        ------
        DimensionMismatch
            If the shapes differ.
        """
        if self.shape != other.shape:
            raise DimensionMismatch(
                f"the sizes of matrices have to be equal, got "
                f"{self._rows} x {self._cols} and {other.rows} x {other.cols}")
        return Matrix._wrap(self._rows, self._cols, self._cells + other._cells)

    def scalar_multiply(self, constant):
        """Multiply every element by `constant` (IEEE-754 semantics)."""
        return Matrix._wrap(self._rows, self._cols, self._cells * float(constant))

    def multiply(self, other):
        """
        Matrix product self x other, shape self.rows x other.cols.

        Each result element sums over the inner dimension in increasing
        order.

        Raises
        ------
        DimensionMismatch
            If self.cols != other.rows.
        """
        if self._cols != other.rows:
            raise DimensionMismatch(
                f"the number of columns of the first matrix ({self._cols}) "
                f"should be equal to the number of rows of the second "
                f"matrix ({other.rows})")
        buf = _fast.matmul_jit(
            self._cells, other._cells, self._rows, self._cols, other.cols)
        return Matrix._wrap(self._rows, other.cols, buf)

    def transpose(self, mode=Transposition.MAIN_DIAGONAL):
        """
        Reflect a square matrix across the axis selected by `mode`.

        Raises
        ------
        NotSquare
            If rows != cols.
        """
        self._require_square("only a square matrix can be transposed")
        n = self._rows
        if n == 0:
            return self
        source = mode.source_index(np.arange(n * n), n)
        return Matrix._wrap(n, n, self._cells[source])

    def determinant(self):
        """
        Determinant by first-row cofactor expansion.

        Sizes 1 and 2 are computed directly. Cost grows as O(n!), so this
        is practical only for small matrices. The empty 0 x 0 matrix has
        determinant 1.0.

        Raises
        ------
        NotSquare
            If rows != cols.
        """
        self._require_square("the determinant is defined only for a square matrix")
        c = self._cells
        if self._rows == 0:
            return 1.0
        if self._rows == 1:
            return float(c[0])
        if self._rows == 2:
            return float(c[0] * c[3] - c[1] * c[2])
        det = 0.0
        for col in range(self._cols):
            det += float(c[col]) * self.cofactor(col)
        return det

    def minor(self, index):
        """Determinant of the submatrix without the row and column of `index`."""
        self._require_square("a minor is defined only for a square matrix")
        if not 0 <= index < self.size:
            raise IndexOutOfRange(
                f"index {index} out of range for {self.size} elements")
        n = self._rows
        buf = _fast.minor_cells_jit(self._cells, n, index)
        return Matrix._wrap(n - 1, n - 1, buf).determinant()

    def cofactor(self, index):
        """Signed minor: + when index // n + index % n is even."""
        minor = self.minor(index)
        n = self._rows
        return minor if (index // n + index % n) % 2 == 0 else -minor

    def cofactor_matrix(self):
        """Matrix of the cofactors of every element."""
        self._require_square("cofactors are defined only for a square matrix")
        return Matrix.create(self._rows, self._cols, self.cofactor)

    def adjugate(self):
        """Transpose of the cofactor matrix."""
        return self.cofactor_matrix().transpose()

    def inverse(self):
        """
        Inverse by the adjugate method.

        Returns
        -------
        Matrix or None
            None when the determinant is exactly 0.0 (singular matrix).

        Raises
        ------
        NotSquare
            If rows != cols.
        """
        det = self.determinant()
        if det == 0.0:
            return None
        return self.adjugate().scalar_multiply(1 / det)

    def _require_square(self, message):
        if self._rows != self._cols:
            raise NotSquare(f"{message}, got {self._rows} x {self._cols}")

    # ------------------------------------------------------------
    # Operators & value semantics
    # ------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if isinstance(other, (int, float, np.number)):
            return self.scalar_multiply(other)
        return NotImplemented

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __hash__(self):
        # tuple of floats: 0.0 and -0.0 compare and hash equal
        return hash((self._rows, self._cols, tuple(self._cells.tolist())))

    def __repr__(self):
        return f"Matrix({self._rows}, {self._cols}, {self.tolist()})"

    def __str__(self):
        from nmp.console import format_matrix
        return format_matrix(self)


def create(rows, cols, source):
    """Build a matrix from a flat buffer or an index generator. See Matrix.create."""
    return Matrix.create(rows, cols, source)


def identity(size):
    """size x size identity matrix."""
    return Matrix.identity(size)
