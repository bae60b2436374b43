# Copyright 2023-2025 ETH Zurich. All rights reserved.

from lanelu import ArrayLike, _get_module_from_array, _get_module_from_str
from lanelu.utils.partition import lane_row_count, rows_per_lane


def allocate_lane_buffer(
    m: int,
    n: int,
    lane_count: int,
    dtype,
    array_module: str = "numpy",
) -> ArrayLike:
    """Allocate the partitioned working buffer of an m x n matrix.

    Parameters
    ----------
    m : int
        Number of rows of the matrix.
    n : int
        Number of columns of the matrix.
    lane_count : int
        Number of lanes the rows are distributed over.
    dtype : dtype
        Element type of the buffer.
    array_module : str, optional, default="numpy"
        Array module the buffer is allocated with. ("numpy" or "cupy")

    Returns
    -------
    buffer : ArrayLike
        Zeroed buffer of shape (lane_count, ceil(m / lane_count), n).
    """
    xp, _ = _get_module_from_str(array_module)

    return xp.zeros((lane_count, rows_per_lane(m, lane_count), n), dtype=dtype)


def _row_indices(xp, lane: int, m: int, n: int, lda: int, lane_count: int):
    """Flat indices of the elements of the rows owned by ``lane``."""
    n_local = lane_row_count(lane, m, lane_count)
    rows = lane + lane_count * xp.arange(n_local)
    return rows[:, None] * lda + xp.arange(n)[None, :]


def load_lanes(
    A: ArrayLike,
    m: int,
    n: int,
    lda: int,
    lane_count: int,
) -> ArrayLike:
    """Copy a row-major matrix into its lane-partitioned layout.

    Note:
    -----
    - ``A`` is only read. The buffer lives on the same device as ``A``.
    - Size preconditions are checked by the caller.

    Parameters
    ----------
    A : ArrayLike
        Row-major matrix, flat or 2-D and C-contiguous.
    m : int
        Number of rows to load.
    n : int
        Number of columns to load.
    lda : int
        Leading dimension (row stride) of ``A``.
    lane_count : int
        Number of lanes.

    Returns
    -------
    buffer : ArrayLike
        buffer[lane, local_row, col] == A[row, col] with
        row = lane + local_row * lane_count.
    """
    xp, _ = _get_module_from_array(A)

    A_flat = A.reshape(-1)
    buffer = allocate_lane_buffer(m, n, lane_count, A.dtype, xp.__name__)

    for lane in range(min(lane_count, m)):
        idx = _row_indices(xp, lane, m, n, lda, lane_count)
        buffer[lane, : idx.shape[0], :] = A_flat[idx]

    return buffer


def store_lanes(
    buffer: ArrayLike,
    A: ArrayLike,
    m: int,
    n: int,
    lda: int,
):
    """Copy a lane-partitioned buffer back into the row-major matrix ``A``.

    Inverse of :func:`load_lanes`. Elements of ``A`` outside the m x n
    window (row padding up to ``lda``) are left untouched.
    """
    xp, _ = _get_module_from_array(A)

    lane_count = buffer.shape[0]
    A_flat = A.reshape(-1)

    for lane in range(min(lane_count, m)):
        idx = _row_indices(xp, lane, m, n, lda, lane_count)
        A_flat[idx] = buffer[lane, : idx.shape[0], :]
