# Copyright 2023-2025 ETH Zurich. All rights reserved.

import numpy as np

from lanelu import ArrayLike


def make_dense_matrix_diagonally_dominante(
    A: ArrayLike,
) -> ArrayLike:
    """Make the leading square part of a dense matrix diagonally dominant.

    Parameters
    ----------
    A : ArrayLike
        Input matrix, shape (m, n).

    Returns
    -------
    A : ArrayLike
        Matrix whose leading min(m, n) square part is diagonally dominant.
    """
    k = min(A.shape)
    A = A.copy()
    A[:k, :k] += np.diag(np.sum(np.abs(A[:k, :k]), axis=1))

    return A


def generate_dense_matrix(
    m: int,
    n: int,
    diagonal_dominant: bool = False,
    seed: int = None,
    dtype=np.float64,
) -> np.ndarray:
    """Generate a random dense matrix.

    Parameters
    ----------
    m : int
        Number of rows.
    n : int
        Number of columns.
    diagonal_dominant : bool, optional, default=False
        If True, the leading square part of the matrix will be diagonally
        dominant, so that it can be factorized without pivoting.
    seed : int, optional
        Seed for the random number generator.
    dtype : dtype, optional, default=np.float64
        Element type of the matrix.

    Returns
    -------
    A : np.ndarray
        Dense matrix of shape (m, n).
    """
    rng = np.random.default_rng(seed)

    A = rng.random((m, n))
    if np.issubdtype(np.dtype(dtype), np.complexfloating):
        A = A + 1j * rng.random((m, n))

    if diagonal_dominant:
        A = make_dense_matrix_diagonally_dominante(A)

    return A.astype(dtype)
