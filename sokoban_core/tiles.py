from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterator, List

__all__ = [
    "Position",
    "TileKind",
    "Direction",
    "FORWARD_DIGITS",
    "REVERSE_DIGITS",
    "neighbors",
]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def next(self) -> "Direction":
        """Up -> Down -> Left -> Right -> Up."""
        return _RING[(_RING.index(self) + 1) % 4]

    def ring(self) -> Iterator["Direction"]:
        """All four directions, starting with this one."""
        start = _RING.index(self)
        for i in range(4):
            yield _RING[(start + i) % 4]


_RING: List[Direction] = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


@dataclass(frozen=True, slots=True, order=True)
class Position:
    x: int
    y: int

    def shifted(self, direction: Direction, steps: int = 1) -> "Position":
        return Position(self.x + direction.dx * steps, self.y + direction.dy * steps)

    def is_negative(self) -> bool:
        return self.x < 0 or self.y < 0

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class TileKind(IntEnum):
    EMPTY = 0
    WALL = 1
    GOAL = 2
    BOX = 3
    PLAYER = 4
    BOX_ON_GOAL = 5
    PLAYER_ON_GOAL = 6

    @property
    def is_player(self) -> bool:
        return self in (TileKind.PLAYER, TileKind.PLAYER_ON_GOAL)

    @property
    def is_box(self) -> bool:
        return self in (TileKind.BOX, TileKind.BOX_ON_GOAL)

    @property
    def is_goal(self) -> bool:
        return self in (TileKind.GOAL, TileKind.BOX_ON_GOAL, TileKind.PLAYER_ON_GOAL)

    @property
    def can_move(self) -> bool:
        """A player or a box may occupy this cell."""
        return self not in (TileKind.WALL, TileKind.BOX, TileKind.BOX_ON_GOAL)

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    def with_box(self) -> "TileKind":
        return TileKind.BOX_ON_GOAL if self == TileKind.GOAL else TileKind.BOX

    def with_player(self) -> "TileKind":
        return TileKind.PLAYER_ON_GOAL if self == TileKind.GOAL else TileKind.PLAYER

    def floor(self) -> "TileKind":
        """Static kind left behind once a box or player is lifted off the cell."""
        if self == TileKind.WALL:
            return TileKind.WALL
        return TileKind.GOAL if self.is_goal else TileKind.EMPTY


_GLYPHS: Dict[TileKind, str] = {
    TileKind.EMPTY: " ",
    TileKind.WALL: "#",
    TileKind.GOAL: ".",
    TileKind.BOX: "$",
    TileKind.PLAYER: "@",
    TileKind.BOX_ON_GOAL: "*",
    TileKind.PLAYER_ON_GOAL: "+",
}

FORWARD_DIGITS: Dict[int, TileKind] = {kind.value: kind for kind in TileKind}

# Goal and box markers swap roles: boxes start on the goals and have to be
# pulled back to where the boxes were. A player standing on a goal becomes a box.
REVERSE_DIGITS: Dict[int, TileKind] = {
    0: TileKind.EMPTY,
    1: TileKind.WALL,
    2: TileKind.BOX,
    3: TileKind.GOAL,
    4: TileKind.PLAYER,
    5: TileKind.BOX_ON_GOAL,
    6: TileKind.BOX,
}


def neighbors(pos: Position) -> List[Position]:
    """4-neighborhood. Only the low edge is checked; cells past the high edge read as walls."""
    out: List[Position] = []
    if pos.x > 0:
        out.append(Position(pos.x - 1, pos.y))
    out.append(Position(pos.x + 1, pos.y))
    if pos.y > 0:
        out.append(Position(pos.x, pos.y - 1))
    out.append(Position(pos.x, pos.y + 1))
    return out
