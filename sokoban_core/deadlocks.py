from __future__ import annotations
from typing import TYPE_CHECKING

from .tiles import Direction, TileKind

if TYPE_CHECKING:
    from .board import Board


def is_wall_locked(board: "Board", box_index: int) -> bool:
    """Box (not on goal) that walls alone keep from ever being pulled.

    A direction blocked only by another box does not count: that box may move away later.
    """
    box_pos = board.boxes[box_index]
    if board.tile_at(box_pos) == TileKind.BOX_ON_GOAL:
        return False

    for direction in Direction.UP.ring():
        future = board.future_positions(box_pos, direction)
        if future is None:
            continue
        box_to, player_to = future
        if board.tile_at(box_to) == TileKind.WALL or board.tile_at(player_to) == TileKind.WALL:
            continue
        return False
    return True
