import logging

import numpy as np

from shared_lib.matrix_multiplication import DTYPE, as_matrix, row_column_product
from shared_lib.utils import validate_dimensions

logger = logging.getLogger(__name__)


def next_even(n: int) -> int:
    return n + (n & 1)


def pad_to_even(A: np.ndarray, B: np.ndarray):
    """Zero-pad A (m x n) and B (n x k) so that m, n and k are all even.

    Padded rows/columns only ever meet zeros in a dot product, so the
    top-left (m x k) block of the padded product is the original product.
    """
    m, n = A.shape
    k = B.shape[1]
    pm, pn, pk = next_even(m), next_even(n), next_even(k)
    if (pm, pn, pk) == (m, n, k):
        return A, B
    Ap = np.zeros((pm, pn), dtype=DTYPE)
    Bp = np.zeros((pn, pk), dtype=DTYPE)
    Ap[:m, :n] = A
    Bp[:n, :k] = B
    return Ap, Bp


def split_quadrants(M: np.ndarray):
    h, w = M.shape[0] // 2, M.shape[1] // 2
    return M[:h, :w], M[:h, w:], M[h:, :w], M[h:, w:]


def combine_quadrants(C11, C12, C21, C22) -> np.ndarray:
    h, w = C11.shape
    C = np.empty((h * 2, w * 2), dtype=C11.dtype)
    C[:h, :w] = C11;  C[:h, w:] = C12
    C[h:, :w] = C21;  C[h:, w:] = C22
    return C


def strassen_even(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """One Strassen level; every dimension of A and B must be even."""
    A11, A12, A21, A22 = split_quadrants(A)
    B11, B12, B21, B22 = split_quadrants(B)

    P1 = strassen(A11,       B12 - B22)
    P2 = strassen(A11 + A12, B22)
    P3 = strassen(A21 + A22, B11)
    P4 = strassen(A22,       B21 - B11)
    P5 = strassen(A11 + A22, B11 + B22)
    P6 = strassen(A12 - A22, B21 + B22)
    P7 = strassen(A11 - A21, B11 + B12)

    C11 = P5 + P4 - P2 + P6
    C12 = P1 + P2
    C21 = P3 + P4
    C22 = P5 + P1 - P3 - P7
    return combine_quadrants(C11, C12, C21, C22)


def strassen(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """Strassen product of 2-D int arrays; pads odd sizes and trims the result."""
    m, n = A.shape
    k = B.shape[1]
    if m == 1 or n == 1 or k == 1:
        return row_column_product(A, B)
    Ap, Bp = pad_to_even(A, B)
    C = strassen_even(Ap, Bp)
    return C[:m, :k]


def multiply_matrices_strassen(m, n, k, a, b):
    """(m x n) @ (n x k) on flattened row-major buffers via Strassen.

    Produces exactly what multiply_matrices_naive produces. All of m, n, k
    must be >= 1.
    """
    m, n, k = validate_dimensions(m, n, k, a, b, allow_empty=False)
    logger.debug("strassen m=%d n=%d k=%d", m, n, k)
    C = strassen(as_matrix(a, m, n), as_matrix(b, n, k))
    return C.ravel().tolist()
