# Copyright 2023-2025 ETH Zurich. All rights reserved.

from lanelu import ArrayLike, _get_module_from_array


def getrs_nopivot(
    LU: ArrayLike,
    B: ArrayLike,
) -> ArrayLike:
    """Solve A X = B using the combined LU factors computed by ``getrf_nopivot``.

    Note:
    -----
    - The factors are only read, ``B`` is not overwritten.
    - If device arrays are given, the solve will run on the GPU.

    Parameters
    ----------
    LU : ArrayLike
        Combined factors of a square matrix, shape (n, n).
    B : ArrayLike
        Right-hand side, shape (n,) or (n, k).

    Returns
    -------
    X : ArrayLike
        Solution of the system, same shape as ``B``.
    """
    _, la = _get_module_from_array(LU)

    if LU.ndim != 2 or LU.shape[0] != LU.shape[1]:
        raise ValueError(f"expected square factors, got shape {LU.shape}.")
    if B.shape[0] != LU.shape[0]:
        raise ValueError(
            f"shapes of LU {LU.shape} and B {B.shape} are incompatible."
        )

    # L Y = B
    Y = la.solve_triangular(LU, B, lower=True, unit_diagonal=True)

    # U X = Y
    X = la.solve_triangular(LU, Y, lower=False)

    return X
