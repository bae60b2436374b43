# Copyright 2023-2025 ETH Zurich. All rights reserved.

from lanelu import ArrayLike, _get_module_from_array


def rank1_update(
    rows: ArrayLike,
    pivot: ArrayLike,
    col: int,
):
    """Apply the rank-1 update of the trailing columns of a block of rows.

    ``rows[:, c] -= rows[:, col] * pivot[c]`` for every ``c > col``.

    Note:
    -----
    - ``rows`` is updated in place and must be a view into the working
      buffer.
    - Every element is computed independently (one multiply, one
      subtract), so the result does not depend on how the rows are split.

    Parameters
    ----------
    rows : ArrayLike
        Block of rows, shape (k, n). Column ``col`` holds the multipliers.
    pivot : ArrayLike
        Pivot row, shape (n,).
    col : int
        Pivot column of the current sweep.
    """
    if rows.shape[0] == 0 or col + 1 >= rows.shape[1]:
        return

    xp, _ = _get_module_from_array(rows)

    rows[:, col + 1 :] -= xp.outer(rows[:, col], pivot[col + 1 :])
