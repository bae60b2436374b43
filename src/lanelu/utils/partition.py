# Copyright 2023-2025 ETH Zurich. All rights reserved.

"""Cyclic distribution of matrix rows over compute lanes.

Global row ``r`` is owned by lane ``r % lane_count`` and stored there at
local row ``r // lane_count``. The mapping is fixed for a whole
factorization.
"""


def lane_of(row: int, lane_count: int) -> int:
    """Lane owning the global row."""
    return row % lane_count


def local_row_of(row: int, lane_count: int) -> int:
    """Position of the global row inside its lane."""
    return row // lane_count


def global_row(lane: int, local_row: int, lane_count: int) -> int:
    """Global row stored at ``(lane, local_row)``."""
    return lane + local_row * lane_count


def rows_per_lane(n_rows: int, lane_count: int) -> int:
    """Number of local rows needed so that every lane can hold its share of
    ``n_rows`` rows."""
    return (n_rows + lane_count - 1) // lane_count


def lane_row_count(lane: int, n_rows: int, lane_count: int) -> int:
    """Number of rows out of ``n_rows`` actually owned by ``lane``."""
    if lane >= n_rows:
        return 0
    return (n_rows - lane + lane_count - 1) // lane_count


def first_active_local_row(lane: int, sweep: int, lane_count: int) -> int:
    """First local row of ``lane`` whose global row lies below ``sweep``.

    Lanes up to and including the pivot owner have already consumed the
    local row of the pivot, the others have not reached it yet.
    """
    if lane <= sweep % lane_count:
        return sweep // lane_count + 1
    return sweep // lane_count
