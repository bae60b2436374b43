# Copyright 2023-2025 ETH Zurich. All rights reserved.

from lanelu import ArrayLike, _get_module_from_array


def unpack_lu(
    LU: ArrayLike,
) -> tuple[ArrayLike, ArrayLike]:
    """Split combined LU factors into their lower and upper factors.

    Parameters
    ----------
    LU : ArrayLike
        Combined factors of shape (m, n), m <= n, as produced by
        ``getrf_nopivot``. The strict lower triangle holds L, the upper
        triangle (diagonal included) holds U.

    Returns
    -------
    L : ArrayLike
        Unit lower triangular factor, shape (m, m).
    U : ArrayLike
        Upper triangular factor, shape (m, n).
    """
    xp, _ = _get_module_from_array(LU)

    m = LU.shape[0]
    L = xp.tril(LU[:, :m], k=-1) + xp.eye(m, dtype=LU.dtype)
    U = xp.triu(LU)

    return L, U
