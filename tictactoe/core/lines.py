"""Winning lines (rows, columns and the two main diagonals) of an N x N board."""

from functools import lru_cache
from typing import Tuple

import numpy as np

Line = Tuple[int, ...]


@lru_cache(maxsize=None)
def lines(size: int) -> Tuple[Line, ...]:
    """
    All 2 * size + 2 winning lines for a board of `size`.

    Order: row 0, column 0, row 1, column 1, ..., then the main
    diagonal and the anti-diagonal. Cells are row-major indices.
    """
    if not isinstance(size, int) or size <= 0:
        raise ValueError("size must be a positive integer")

    grid = np.arange(size * size).reshape(size, size)
    result = []
    for i in range(size):
        result.append(tuple(int(v) for v in grid[i, :]))
        result.append(tuple(int(v) for v in grid[:, i]))
    result.append(tuple(int(v) for v in np.diagonal(grid)))
    result.append(tuple(int(v) for v in np.diagonal(np.fliplr(grid))))
    return tuple(result)
