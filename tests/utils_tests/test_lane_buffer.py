# Copyright 2023-2025 ETH Zurich. All rights reserved.

import numpy as np
import pytest

from lanelu import _get_module_from_array
from lanelu.utils import allocate_lane_buffer, load_lanes, store_lanes
from lanelu.utils.partition import global_row, lane_row_count
from testing_utils import dd_dense


@pytest.mark.parametrize("shape", [(1, 3), (4, 4), (7, 10)])
def test_load_lanes_layout(array_type: str, lane_count: int, shape: tuple):
    m, n = shape
    A = dd_dense(m, n, device_array=array_type == "device")

    buffer = load_lanes(A, m, n, n, lane_count)

    assert buffer.shape == (lane_count, (m + lane_count - 1) // lane_count, n)
    for lane in range(lane_count):
        for local_row in range(lane_row_count(lane, m, lane_count)):
            row = global_row(lane, local_row, lane_count)
            assert (buffer[lane, local_row] == A[row]).all()


@pytest.mark.parametrize("lane_count", [1, 2, 3, 5, 8])
def test_store_load_round_trip(array_type: str, dtype: np.dtype, lane_count: int):
    m, n, lda = 5, 6, 8
    A = dd_dense(m, lda, device_array=array_type == "device", dtype=dtype)
    A_ref = A.copy()
    xp, _ = _get_module_from_array(A)

    buffer = load_lanes(A, m, n, lda, lane_count)
    store_lanes(buffer, A, m, n, lda)

    assert xp.array_equal(A, A_ref)


def test_store_lanes_leaves_padding(array_type: str, lane_count: int):
    m, n, lda = 3, 4, 6
    A = dd_dense(m, lda, device_array=array_type == "device")
    xp, _ = _get_module_from_array(A)

    buffer = load_lanes(A, m, n, lda, lane_count)
    buffer[:] = 0.0

    padding = A[:, n:].copy()
    store_lanes(buffer, A, m, n, lda)

    assert xp.all(A[:, :n] == 0.0)
    assert xp.array_equal(A[:, n:], padding)


def test_allocate_lane_buffer(array_type: str):
    array_module = "cupy" if array_type == "device" else "numpy"

    buffer = allocate_lane_buffer(7, 5, 3, np.float32, array_module)
    xp, _ = _get_module_from_array(buffer)

    assert xp.__name__ == array_module
    assert buffer.shape == (3, 3, 5)
    assert buffer.dtype == np.float32
    assert not bool(buffer.any())


def test_allocate_lane_buffer_unknown_module():
    with pytest.raises(ValueError):
        allocate_lane_buffer(2, 2, 1, np.float64, "torch")
