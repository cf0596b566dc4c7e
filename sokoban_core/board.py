from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from .reachability import REACHABLE, reachable_matrix, state_hash
from .render import render_board
from .tiles import Direction, Position, TileKind

__all__ = ["Board"]

logger = logging.getLogger(__name__)


class Board:
    """
    Mutable Sokoban board.

    The static map only ever holds floor kinds (EMPTY, WALL, GOAL); boxes and the
    player are layered on top and the composite kind is recomputed on every query.
    Box indices are stable: index i names the same box for the whole search.
    """

    def __init__(
        self,
        width: int,
        height: int,
        static_map: Dict[Position, TileKind],
        player: Optional[Position],
        boxes: List[Position],
    ) -> None:
        self.width = width
        self.height = height
        self.static_map = static_map
        self.boxes = boxes
        self.goals: List[Position] = [p for p, kind in static_map.items() if kind == TileKind.GOAL]
        self._player = player
        self._reachable: Optional[np.ndarray] = None

    @property
    def player(self) -> Optional[Position]:
        return self._player

    @player.setter
    def player(self, pos: Optional[Position]) -> None:
        self._player = pos
        self._reachable = None

    # ---- queries
    def contains(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def tile_at(self, pos: Position) -> TileKind:
        """Composite kind of a cell; anything outside the map is a wall."""
        kind = self.static_map.get(pos)
        if kind is None:
            return TileKind.WALL
        if pos in self.boxes:
            kind = kind.with_box()
        if pos == self._player:
            kind = kind.with_player()
        return kind

    def is_resolved(self) -> bool:
        return set(self.boxes) == set(self.goals)

    def compute_hash(self) -> int:
        """Hash of (box cells, player-reachable region); refreshes the reachable cache."""
        self._reachable = reachable_matrix(self)
        return state_hash(self._reachable)

    def can_reach(self, pos: Position) -> bool:
        self.compute_hash()
        if not self.contains(pos):
            return False
        return bool(self._reachable[pos.x, pos.y] == REACHABLE)

    def future_positions(self, box_pos: Position, direction: Direction) -> Optional[Tuple[Position, Position]]:
        """(box destination, player destination) for pulling a box, or None on underflow."""
        box_to = box_pos.shifted(direction)
        player_to = box_pos.shifted(direction, 2)
        if player_to.is_negative():
            return None
        return box_to, player_to

    # ---- transitions
    def move_box(self, box_index: int, direction: Direction) -> bool:
        """Pull box `box_index` one cell towards `direction`; the player steps back behind it.

        The player must be able to walk to the destination cell first. Returns False and
        leaves the board untouched when the move is not possible.
        """
        future = self.future_positions(self.boxes[box_index], direction)
        if future is None:
            return False
        box_to, player_to = future
        if not (self.tile_at(box_to).can_move and self.tile_at(player_to).can_move):
            return False
        if not self.can_reach(box_to):
            return False

        self.boxes[box_index] = box_to
        self.player = player_to
        logger.debug("moved box: %s player: %s, %s %s%s", box_to, player_to, direction.name, self.boxes, self)
        return True

    def undo_move_box(self, box_index: int, direction: Direction) -> None:
        """Exact inverse of a successful move_box; the player ends on the box's cell."""
        box_pos = self.boxes[box_index]
        self.player = box_pos
        self.boxes[box_index] = Position(box_pos.x - direction.dx, box_pos.y - direction.dy)

    # ---- encoding
    def to_level_code(self) -> str:
        digits = "".join(
            str(int(self.tile_at(Position(x, y))))
            for y in range(self.height)
            for x in range(self.width)
        )
        return f"{self.height:02d}{self.width:02d}{digits}"

    def __str__(self) -> str:
        return "\n" + render_board(self)
