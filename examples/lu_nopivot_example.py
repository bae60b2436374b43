"""
Example for the lane-partitioned LU factorization (without pivoting) of a
dense matrix, followed by a solve against a random right-hand side.

Copyright 2023-2025 ETH Zurich. All rights reserved.
"""

import matplotlib.pyplot as plt
import numpy as np

from lanelu.algs import getrf_nopivot, getrs_nopivot
from lanelu.lanelu_config import FactorizeConfig
from lanelu.utils import generate_dense_matrix, unpack_lu

if __name__ == "__main__":
    m = 12
    n = 12
    lane_count = 4
    seed = 63
    n_rhs = 2

    A = generate_dense_matrix(m, n, diagonal_dominant=True, seed=seed)

    # --- Factorization LU ---
    LU = A.copy()
    info = getrf_nopivot(
        m, n, LU, n, config=FactorizeConfig(lane_count=lane_count, parallel=True)
    )
    L, U = unpack_lu(LU)

    print("info:", info)
    print("||LU - A|| / ||A|| =", np.linalg.norm(L @ U - A) / np.linalg.norm(A))

    # --- Solving ---
    B = np.random.default_rng(seed).standard_normal((n, n_rhs))
    X_ref = np.linalg.solve(A, B)
    X_lanelu = getrs_nopivot(LU, B)

    fig, ax = plt.subplots(1, 3)
    ax[0].set_title("L")
    ax[0].matshow(L)
    ax[1].set_title("U")
    ax[1].matshow(U)
    ax[2].set_title("X_ref - X_lanelu")
    ax[2].matshow(X_ref - X_lanelu)
    plt.show()
