# Copyright 2023-2025 ETH Zurich. All rights reserved.

from typing import Optional

from pydantic import BaseModel, Field


class FactorizeConfig(BaseModel):
    """Settings of a lane-partitioned LU factorization.

    ``max_rows`` and ``max_cols`` bound the accepted problem size. ``None``
    leaves the dimension unbounded.
    """

    lane_count: int = Field(default=1, ge=1)
    max_rows: Optional[int] = Field(default=None, ge=1)
    max_cols: Optional[int] = Field(default=None, ge=1)
    parallel: bool = False
    max_workers: Optional[int] = Field(default=None, ge=1)
    check_dd: bool = False
