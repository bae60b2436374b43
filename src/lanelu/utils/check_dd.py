# Copyright 2023-2025 ETH Zurich. All rights reserved.

from lanelu import ArrayLike, _get_module_from_array


def check_dd(
    A: ArrayLike,
) -> ArrayLike:
    """Check which rows of a dense matrix are strictly diagonally dominant.

    Note:
    -----
    - Only the leading square part of a wide matrix is considered.
    - If device array is given, the check will be performed on the GPU.

    Parameters
    ----------
    A : ArrayLike
        Dense matrix of shape (m, n) with m <= n.

    Returns
    -------
    ArrayLike
        Array of booleans, one per row, indicating if |a_ii| > sum_{j != i} |a_ij|.
    """
    xp, _ = _get_module_from_array(A)

    m = A.shape[0]
    A_square = xp.abs(A[:, :m])
    diagonal = xp.diag(A_square)

    return diagonal > xp.sum(A_square, axis=1) - diagonal
