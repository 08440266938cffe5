"""2D DCT-II over the working grid."""

import math

import numpy as np
from scipy.fft import dctn

from utils.constants import WORKING_SIZE


def init_coefficients(size: int = WORKING_SIZE) -> np.ndarray:
    """Scaling constants c[0] = 1/sqrt(2), c[k>0] = 1. Read-only."""
    c = np.ones(size, dtype=np.float64)
    c[0] = 1 / math.sqrt(2.0)
    c.setflags(write=False)
    return c


def cosine_table(size: int = WORKING_SIZE) -> np.ndarray:
    """table[k, i] = cos(((2i + 1) / 2N) * k * pi). Read-only."""
    table = np.empty((size, size), dtype=np.float64)
    for k in range(size):
        for i in range(size):
            table[k, i] = math.cos(((2 * i + 1) / (2.0 * size)) * k * math.pi)
    table.setflags(write=False)
    return table


def apply_dct(f: np.ndarray, c: np.ndarray = None, cosines: np.ndarray = None) -> np.ndarray:
    """
    Direct double-sum DCT-II.

    F(u, v) = c[u] * c[v] / 4 * sum_i sum_j f(i, j) * cos_u(i) * cos_v(j)

    Each output coefficient is a sequential sum over the grid in row-major
    order, no pairwise or fast factorisation: on flat images the non-DC
    coefficients are pure rounding residue, so the order fixes the bits.
    """
    n = f.shape[0]
    if f.shape != (n, n):
        raise ValueError(f"DCT input must be square, got {f.shape}")
    if c is None:
        c = init_coefficients(n)
    if cosines is None:
        cosines = cosine_table(n)

    F = np.empty((n, n), dtype=np.float64)
    for u in range(n):
        for v in range(n):
            # Running sum in row-major (i, j) order, one term at a time
            total = np.cumsum((np.outer(cosines[u], cosines[v]) * f).ravel())[-1]
            F[u, v] = total * ((c[u] * c[v]) / 4.0)
    return F


def dct2_fast(f: np.ndarray) -> np.ndarray:
    """Orthonormal scipy DCT-II rescaled to match apply_dct."""
    n = f.shape[0]
    # ortho scaling is 2/N * c[u] * c[v]; apply_dct uses c[u] * c[v] / 4
    return dctn(f, type=2, norm='ortho') * (n / 8.0)
