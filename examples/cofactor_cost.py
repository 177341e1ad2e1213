"""
Cofactor determinant/inverse — cost growth by matrix size
=========================================================

Times determinant() and inverse() on random well-conditioned matrices
and checks the inverse against A @ A^-1 == I.

Usage:
  pip install -e .
  python examples/cofactor_cost.py [max_size]
"""

import sys
import time

import numpy as np

import nmp
from nmp import fast


def main():
    max_size = int(sys.argv[1]) if len(sys.argv) > 1 else 7
    rng = np.random.default_rng(0)
    fast.warmup()

    print(f"  {'n':>3} {'det':>14} {'t_det':>10} {'t_inv':>10} {'max|AA^-1 - I|':>16}")
    for n in range(1, max_size + 1):
        arr = rng.standard_normal((n, n)) + n * np.eye(n)
        a = nmp.create(n, n, arr.ravel())

        t0 = time.time()
        det = a.determinant()
        t_det = time.time() - t0

        t0 = time.time()
        inv = a.inverse()
        t_inv = time.time() - t0

        err = np.abs((a @ inv).to_numpy() - np.eye(n)).max()
        print(f"  {n:>3} {det:>14.4e} {t_det:>9.3f}s {t_inv:>9.3f}s {err:>16.2e}")


if __name__ == "__main__":
    main()
