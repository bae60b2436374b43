# Copyright 2023-2025 ETH Zurich. All rights reserved.

import logging
from typing import Optional
from warnings import warn

from lanelu import ArrayLike, _get_module_from_array
from lanelu.block_primitive import rank1_update
from lanelu.lanelu_config import FactorizeConfig
from lanelu.utils.check_dd import check_dd
from lanelu.utils.lane_buffer import load_lanes, store_lanes
from lanelu.utils.lanes import LaneScheduler
from lanelu.utils.partition import (
    first_active_local_row,
    lane_of,
    lane_row_count,
    local_row_of,
)

logger = logging.getLogger(__name__)

_SUPPORTED_DTYPES = ("float32", "float64", "complex64", "complex128")


def getrf_nopivot(
    m: int,
    n: int,
    A: ArrayLike,
    lda: int,
    lane_count: Optional[int] = None,
    config: Optional[FactorizeConfig] = None,
) -> int:
    """Perform the LU factorization, without pivoting, of a dense m x n matrix.

    A = L U, where L is lower triangular with unit diagonal and U is upper
    triangular. The rows of the matrix are distributed cyclically over
    ``lane_count`` lanes; each elimination sweep broadcasts the pivot row to
    every lane, scales the pivot column and applies the rank-1 update of the
    trailing submatrix, lane by lane.

    Note:
    -----
    - The given matrix will be overwritten by the combined factors: L in the
      strict lower triangle (its unit diagonal is not stored), U in the upper
      triangle.
    - No pivoting is performed. The leading principal minors of the matrix
      must be non-zero (e.g. diagonally dominant matrices). A zero pivot is
      not detected and yields inf/NaN entries.
    - If a device array is given, the algorithm will run on the GPU.

    Parameters
    ----------
    m : int
        Number of rows of the matrix.
    n : int
        Number of columns of the matrix, n >= m.
    A : ArrayLike
        Row-major matrix, either flat of length >= (m - 1) * lda + n or
        2-D and C-contiguous.
    lda : int
        Leading dimension of A, lda >= n.
    lane_count : int, optional
        Number of lanes. Overrides ``config.lane_count``.
    config : FactorizeConfig, optional
        Factorization settings.

    Returns
    -------
    info : int
        0 on success.
    """
    if config is None:
        config = FactorizeConfig()
    if lane_count is None:
        lane_count = config.lane_count

    _check_arguments(m, n, A, lda, lane_count, config)

    xp, _ = _get_module_from_array(A)

    logger.debug(
        "getrf_nopivot: m=%d, n=%d, lda=%d, lane_count=%d, parallel=%s",
        m,
        n,
        lda,
        lane_count,
        config.parallel,
    )

    buffer = load_lanes(A, m, n, lda, lane_count)

    if config.check_dd:
        A_logical = buffer.transpose(1, 0, 2).reshape(-1, n)[:m]
        if not bool(xp.all(check_dd(A_logical))):
            warn(
                "The matrix is not diagonally dominant, the factorization "
                "without pivoting may be unstable."
            )

    pivot = xp.zeros((lane_count, n), dtype=buffer.dtype)

    with LaneScheduler(
        lane_count, parallel=config.parallel, max_workers=config.max_workers
    ) as scheduler:
        for s in range(m - 1):
            scheduler.run_phase(broadcast_pivot, buffer, pivot, s)
            scheduler.run_phase(scale_column, buffer, pivot, s, m)
            scheduler.run_phase(update_trailing, buffer, pivot, s, m)

    store_lanes(buffer, A, m, n, lda)

    return 0


def broadcast_pivot(
    lane: int,
    buffer: ArrayLike,
    pivot: ArrayLike,
    s: int,
):
    """Copy the pivot row of sweep ``s`` into the pivot row of ``lane``."""
    lane_count = buffer.shape[0]
    pivot[lane, s:] = buffer[lane_of(s, lane_count), local_row_of(s, lane_count), s:]


def scale_column(
    lane: int,
    buffer: ArrayLike,
    pivot: ArrayLike,
    s: int,
    m: int,
):
    """Divide the entries of column ``s`` below the pivot by the pivot.

    The quotients are the entries of L produced by sweep ``s``.
    """
    lane_count = buffer.shape[0]
    rs = first_active_local_row(lane, s, lane_count)
    re = lane_row_count(lane, m, lane_count)

    if rs < re:
        buffer[lane, rs:re, s] /= pivot[lane, s]


def update_trailing(
    lane: int,
    buffer: ArrayLike,
    pivot: ArrayLike,
    s: int,
    m: int,
):
    """Rank-1 update of the trailing submatrix rows owned by ``lane``."""
    lane_count = buffer.shape[0]
    rs = first_active_local_row(lane, s, lane_count)
    re = lane_row_count(lane, m, lane_count)

    if rs < re:
        rank1_update(buffer[lane, rs:re, :], pivot[lane], s)


def _check_arguments(
    m: int,
    n: int,
    A: ArrayLike,
    lda: int,
    lane_count: int,
    config: FactorizeConfig,
):
    if m < 1:
        raise ValueError(f"m must be > 0, got {m}.")
    if n < 1:
        raise ValueError(f"n must be > 0, got {n}.")
    if m > n:
        raise ValueError(
            f"m must be <= n for a factorization without pivoting, got m={m}, n={n}."
        )
    if lda < n:
        raise ValueError(f"lda must be >= n, got lda={lda}, n={n}.")
    if lane_count < 1:
        raise ValueError(f"lane_count must be >= 1, got {lane_count}.")
    if config.max_rows is not None and m > config.max_rows:
        raise ValueError(f"m={m} exceeds the maximum number of rows {config.max_rows}.")
    if config.max_cols is not None and n > config.max_cols:
        raise ValueError(
            f"n={n} exceeds the maximum number of columns {config.max_cols}."
        )

    if A.ndim not in (1, 2):
        raise ValueError(f"A must be a flat or 2-D array, got {A.ndim} dimensions.")
    if A.ndim == 2:
        if not A.flags.c_contiguous:
            raise ValueError("A must be C-contiguous.")
        if A.shape[1] != lda:
            raise ValueError(
                f"lda must match the row length of a 2-D A, got lda={lda} "
                f"for A of shape {A.shape}."
            )
        if A.shape[0] < m:
            raise ValueError(f"A has {A.shape[0]} rows, m={m} are required.")
    if A.dtype.name not in _SUPPORTED_DTYPES:
        raise ValueError(
            f"A must hold float32, float64, complex64 or complex128 values, "
            f"got dtype {A.dtype}."
        )
    if A.size < (m - 1) * lda + n:
        raise ValueError(
            f"A holds {A.size} elements, at least {(m - 1) * lda + n} are "
            f"required for m={m}, n={n}, lda={lda}."
        )
