# Copyright 2023-2025 ETH Zurich. All rights reserved.
# isort:skip_file

from lanelu.algs.getrf_nopivot import getrf_nopivot
from lanelu.algs.getrs_nopivot import getrs_nopivot

factorize = getrf_nopivot

__all__ = [
    "getrf_nopivot",
    "getrs_nopivot",
    "factorize",
]
