# Copyright 2023-2025 ETH Zurich. All rights reserved.

import logging
from warnings import warn

import numpy as np
import scipy.linalg as np_la

from numpy.typing import ArrayLike

from lanelu.__about__ import __version__

backend_flags = {
    "cupy_avail": False,
}

try:
    import cupy as cp
    import cupyx.scipy.linalg as cu_la

    # Check if cupy is actually working. This could still raise
    # a cudaErrorInsufficientDriver error or something.
    cp.abs(1)

    backend_flags["cupy_avail"] = True
except (ImportError, ImportWarning, ModuleNotFoundError) as w:
    warn(f"'CuPy' is unavailable. ({w})")

logging.getLogger(__name__).addHandler(logging.NullHandler())


def _get_module_from_array(arr: ArrayLike):
    """Return the array module of the input array.

    Parameters
    ----------
    arr : ArrayLike
        Input array.

    Returns
    -------
    module : module
        The array module of the input array. (numpy or cupy)
    la : module
        The linear algebra module of the array module. (scipy.linalg or cupyx.scipy.linalg)
    """
    if backend_flags["cupy_avail"]:
        xp = cp.get_array_module(arr)

        if xp == cp:
            return cp, cu_la

    return np, np_la


def _get_module_from_str(module_str: str):
    """Return the array module of the input string.

    Parameters
    ----------
    module_str : str
        The array module string. ("numpy" or "cupy")

    Returns
    -------
    module : module
        The array module of the input string. (numpy or cupy)
    la : module
        The linear algebra module of the array module. (scipy.linalg or cupyx.scipy.linalg)
    """
    if module_str == "numpy":
        return np, np_la
    elif module_str == "cupy":
        if backend_flags["cupy_avail"]:
            return cp, cu_la
        else:
            raise ImportError(
                "CuPy module have been requested but CuPy is not available."
            )
    else:
        raise ValueError(f"Unknown module '{module_str}'.")


__all__ = [
    "__version__",
    "ArrayLike",
    "backend_flags",
    "_get_module_from_array",
    "_get_module_from_str",
]
