import numpy as np

from shared_lib.utils import validate_dimensions

# int64 wraps modulo 2**64 on overflow; both kernels share that arithmetic, so
# Strassen's intermediate sums may wrap and still land on the naive result.
DTYPE = np.int64
INT64_MIN, INT64_MAX = int(np.iinfo(DTYPE).min), int(np.iinfo(DTYPE).max)


def as_matrix(buf, rows: int, cols: int) -> np.ndarray:
    """Copy a flattened row-major buffer into a fresh (rows x cols) array."""
    return np.array(buf, dtype=DTYPE).reshape(rows, cols)


def row_column_product(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    m = A.shape[0]
    k = B.shape[1]
    C = np.zeros((m, k), dtype=DTYPE)
    for i in range(m):
        for j in range(k):
            C[i, j] = A[i, :].dot(B[:, j])
    return C


def multiply_matrices_naive(m, n, k, a, b):
    """(m x n) @ (n x k) on flattened row-major buffers, row by column.

    C[i, j] = sum_x A[i, x] * B[x, j] in int64. Returns a new flattened list of ints.
    """
    m, n, k = validate_dimensions(m, n, k, a, b)
    C = row_column_product(as_matrix(a, m, n), as_matrix(b, n, k))
    return C.ravel().tolist()
