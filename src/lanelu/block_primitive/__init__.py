# Copyright 2023-2025 ETH Zurich. All rights reserved.

from lanelu.block_primitive.rank1 import rank1_update

__all__ = [
    "rank1_update",
]
