from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from .tiles import neighbors

if TYPE_CHECKING:
    from .board import Board

REACHABLE = 1


def reachable_matrix(board: "Board") -> np.ndarray:
    """Width x height matrix (indexed [x, y]) of what the player can reach without moving a box.

    Box cells keep their composite kind value, reachable cells are 1, everything else 0.
    Two boards with the same boxes and the same player component give the same matrix.
    """
    matrix = np.zeros((board.width, board.height), dtype=np.uint8)
    for b in board.boxes:
        matrix[b.x, b.y] = int(board.tile_at(b))

    if board.player is None:
        return matrix

    stack = [board.player]
    while stack:
        cur = stack.pop()
        if not board.contains(cur):
            continue
        if matrix[cur.x, cur.y] == REACHABLE:
            continue
        if board.tile_at(cur).can_move:
            matrix[cur.x, cur.y] = REACHABLE
            stack.extend(neighbors(cur))
    return matrix


def state_hash(matrix: np.ndarray) -> int:
    return hash(matrix.tobytes())
