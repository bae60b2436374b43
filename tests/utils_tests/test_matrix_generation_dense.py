# Copyright 2023-2025 ETH Zurich. All rights reserved.

import numpy as np
import pytest

from lanelu.utils import generate_dense_matrix
from lanelu.utils.matrix_generation_dense import make_dense_matrix_diagonally_dominante


@pytest.mark.parametrize("shape", [(5, 5), (4, 7)])
def test_generate_dense_matrix(dtype: np.dtype, shape: tuple):
    m, n = shape
    A = generate_dense_matrix(m, n, diagonal_dominant=True, seed=3, dtype=dtype)

    assert A.shape == (m, n)
    assert A.dtype == np.dtype(dtype)
    for i in range(m):
        row_sum = 0.0
        for j in range(m):
            if i != j:
                row_sum += abs(A[i, j])
        assert abs(A[i, i]) > row_sum


def test_generate_dense_matrix_seed():
    A = generate_dense_matrix(4, 4, seed=11)
    B = generate_dense_matrix(4, 4, seed=11)

    assert np.array_equal(A, B)


def test_make_dense_matrix_diagonally_dominante():
    A = np.random.default_rng(5).random((4, 6))

    A_dominante = make_dense_matrix_diagonally_dominante(A)

    assert np.array_equal(A_dominante[:, 4:], A[:, 4:])
    assert not np.array_equal(A_dominante, A)
