# Copyright 2023-2025 ETH Zurich. All rights reserved.
# Global pytest fixtures for the lanelu tests.

import os
import pytest

from lanelu import backend_flags

ARRAY_TYPE = [
    pytest.param("host", id="host"),
]
if backend_flags["cupy_avail"]:
    ARRAY_TYPE.extend(
        [
            pytest.param("device", id="device"),
        ]
    )


DTYPE = [
    pytest.param("float64", id="float64"),
    pytest.param("float32", id="float32"),
    pytest.param("complex128", id="complex128"),
]

LANE_COUNT = [
    pytest.param(1, id="lane_count=1"),
    pytest.param(2, id="lane_count=2"),
    pytest.param(3, id="lane_count=3"),
    pytest.param(4, id="lane_count=4"),
]

if os.environ.get("LARGE_TESTS", "0") == "1":
    LANE_COUNT.extend(
        [
            pytest.param(8, id="lane_count=8"),
            pytest.param(16, id="lane_count=16"),
        ]
    )


@pytest.fixture(params=ARRAY_TYPE, autouse=True)
def array_type(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture(params=DTYPE)
def dtype(request: pytest.FixtureRequest) -> str:
    return request.param


@pytest.fixture(params=LANE_COUNT)
def lane_count(request: pytest.FixtureRequest) -> int:
    return request.param
