# Copyright 2023-2025 ETH Zurich. All rights reserved.

from lanelu.utils.check_dd import check_dd
from lanelu.utils.lane_buffer import allocate_lane_buffer, load_lanes, store_lanes
from lanelu.utils.lanes import LaneScheduler
from lanelu.utils.lu_unpack import unpack_lu
from lanelu.utils.matrix_generation_dense import generate_dense_matrix

__all__ = [
    "check_dd",
    "allocate_lane_buffer",
    "load_lanes",
    "store_lanes",
    "LaneScheduler",
    "unpack_lu",
    "generate_dense_matrix",
]
