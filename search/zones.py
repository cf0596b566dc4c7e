from __future__ import annotations
import logging
from collections import deque
from typing import Deque, Dict, List, Optional

from sokoban_core.board import Board
from sokoban_core.tiles import Position, TileKind, neighbors

logger = logging.getLogger(__name__)


def player_zones(board: Board) -> List[Position]:
    """One player start per floor region that touches a box.

     # # # # # #
     #  @  # @ #   two zones where the player could start
     #     $   #
     # # # # # #

    Boxes block the flood. Regions without a box are skipped: a player there can never
    affect the puzzle.
    """
    zones: List[Position] = []
    # dict as an insertion-ordered set: row-major scan order
    unvisited: Dict[Position, None] = dict.fromkeys(board.static_map)
    q: Deque[Position] = deque()
    for pos in board.static_map:
        if board.tile_at(pos) == TileKind.EMPTY:
            q.append(pos)
            break

    while True:
        has_box = False
        last: Optional[Position] = None
        while q:
            cur = q.popleft()
            unvisited.pop(cur, None)
            for nb in neighbors(cur):
                kind = board.tile_at(nb)
                if kind.is_box:
                    has_box = True
                if nb not in unvisited:
                    continue
                del unvisited[nb]
                if kind.can_move:
                    q.append(nb)
            last = cur

        if has_box and last is not None:
            logger.debug("Found player zone %s", last)
            zones.append(last)

        if not unvisited:
            break

        for pos in unvisited:
            if board.tile_at(pos).can_move:
                q.append(pos)
                break

        if not q:
            break

    return zones
