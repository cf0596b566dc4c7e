from __future__ import annotations
from collections import deque
from typing import Dict, List, Optional

import numpy as np
from scipy.optimize import linear_sum_assignment

from sokoban_core.board import Board
from sokoban_core.tiles import Position, TileKind, neighbors

Heuristics = Dict[int, Dict[Position, int]]


def wall_distances(board: Board, seed: Position) -> Dict[Position, int]:
    """Steps from `seed` to every cell, taking into account walls but not boxes or the player.

     ######
     #12#6#
     #x1#5#
     #1234#
     ######
    """
    distance: Dict[Position, int] = {seed: 0}
    seen = {seed}
    q = deque([seed])

    while q:
        cur = q.popleft()
        for nb in neighbors(cur):
            if nb in seen:
                continue
            seen.add(nb)
            if board.tile_at(nb) != TileKind.WALL:
                distance[nb] = distance[cur] + 1
                q.append(nb)
    return distance


def build_heuristics(board: Board) -> Heuristics:
    """One wall-only distance table per box, seeded at the box's position."""
    return {i: wall_distances(board, b) for i, b in enumerate(board.boxes)}


def lookup(heuristics: Heuristics, goal: Position, box_index: int) -> Optional[int]:
    """Lower bound for box `box_index` against `goal`; None if walls separate them."""
    return heuristics[box_index].get(goal)


def assignment_bound(heuristics: Heuristics, goals: List[Position]) -> int:
    """Largest pair bound in the optimal goal -> box assignment over the table.

    Unavailable pairs are priced above any real distance so they are only used when unavoidable.
    """
    n = len(goals)
    if n == 0:
        return 0
    known = [d for table in heuristics.values() for d in table.values()]
    missing = (max(known) if known else 0) * n + 1

    C = np.full((n, n), missing, dtype=np.int64)
    for i, g in enumerate(goals):
        for j in range(n):
            d = lookup(heuristics, g, j)
            if d is not None:
                C[i, j] = d
    r, c = linear_sum_assignment(C)
    used = C[r, c]
    available = used[used < missing]
    return int(available.max()) if available.size else 0
