# Copyright 2023-2025 ETH Zurich. All rights reserved.

import logging

import numpy as np
import pytest
import scipy.linalg

from lanelu import __version__, backend_flags, _get_module_from_array, _get_module_from_str
from lanelu.algs import getrf_nopivot
from lanelu.lanelu_config import FactorizeConfig


def test_version():
    assert isinstance(__version__, str)


def test_get_module_from_array():
    xp, la = _get_module_from_array(np.ones(2))

    assert xp is np
    assert la is scipy.linalg


def test_get_module_from_str():
    xp, la = _get_module_from_str("numpy")
    assert xp is np
    assert la is scipy.linalg

    with pytest.raises(ValueError):
        _get_module_from_str("torch")


@pytest.mark.skipif(backend_flags["cupy_avail"], reason="CuPy is available.")
def test_get_module_from_str_without_cupy():
    with pytest.raises(ImportError):
        _get_module_from_str("cupy")


def test_config_defaults():
    config = FactorizeConfig()

    assert config.lane_count == 1
    assert config.max_rows is None
    assert config.max_cols is None
    assert not config.parallel
    assert not config.check_dd


def test_debug_logging(caplog: pytest.LogCaptureFixture):
    A = np.array([[4.0, 3.0], [6.0, 3.0]])

    with caplog.at_level(logging.DEBUG, logger="lanelu"):
        getrf_nopivot(2, 2, A, 2, 2)

    assert "lane_count=2" in caplog.text
