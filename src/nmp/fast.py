"""
NMP Fast: Numba JIT-compiled kernels for the engine's hot loops.

Both kernels work on flat row-major float64 buffers and return a new
buffer; inputs are never written.

Install: pip install numba
"""

import numpy as np
from numba import njit


# ============================================================
# Matrix product (triple loop, increasing k)
# ============================================================

@njit(cache=True)
def matmul_jit(a, b, rows, inner, cols):
    """Row-major product of a (rows x inner) and b (inner x cols).

    Parameters
    ----------
    a : 1D numpy array of float64
        Left operand, length rows * inner.
    b : 1D numpy array of float64
        Right operand, length inner * cols.
    rows, inner, cols : int
        Operand dimensions.

    Returns
    -------
    1D numpy array of float64
        Product buffer, length rows * cols.
    """
    out = np.empty(rows * cols, dtype=np.float64)
    for i in range(rows * cols):
        r = i // cols
        c = i % cols
        acc = 0.0
        for k in range(inner):
            acc += a[r * inner + k] * b[k * cols + c]
        out[i] = acc
    return out


# ============================================================
# Minor gather: drop one row and one column
# ============================================================

@njit(cache=True)
def minor_cells_jit(cells, n, cell):
    """Gather the (n-1) x (n-1) submatrix without the row and column of `cell`.

    Parameters
    ----------
    cells : 1D numpy array of float64
        Square source buffer, length n * n.
    n : int
        Source size.
    cell : int
        Linear index whose row (cell // n) and column (cell % n) are removed.

    Returns
    -------
    1D numpy array of float64
        Submatrix buffer, length (n-1) * (n-1).
    """
    size = n - 1
    out = np.empty(size * size, dtype=np.float64)
    skip_row = cell // n
    skip_col = cell % n
    for i in range(size * size):
        row = i // size
        col = i % size
        if row >= skip_row:
            row += 1
        if col >= skip_col:
            col += 1
        out[i] = cells[row * n + col]
    return out


def warmup():
    """Trigger JIT compilation on tiny inputs (compiled once, cached)."""
    a = np.ones(4, dtype=np.float64)
    matmul_jit(a, a, 2, 2, 2)
    minor_cells_jit(a, 2, 0)
