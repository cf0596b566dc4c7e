from __future__ import annotations
from typing import Dict, List, Optional

from .board import Board
from .tiles import FORWARD_DIGITS, REVERSE_DIGITS, Position, TileKind

__all__ = [
    "LevelFormatError",
    "parse_level_code",
    "encode_level",
    "level_code_from_ascii",
]

TOK_WALL = "#"
TOK_GOAL = "."
TOK_BOX = "$"
TOK_BOX_ON_GOAL = "*"
TOK_PLAYER = "@"
TOK_PLAYER_ON_GOAL = "+"
FLOOR_TOKENS = " -_"
DIGITS = "0123456789"

_ASCII_TO_KIND: Dict[str, TileKind] = {
    TOK_WALL: TileKind.WALL,
    TOK_GOAL: TileKind.GOAL,
    TOK_BOX: TileKind.BOX,
    TOK_BOX_ON_GOAL: TileKind.BOX_ON_GOAL,
    TOK_PLAYER: TileKind.PLAYER,
    TOK_PLAYER_ON_GOAL: TileKind.PLAYER_ON_GOAL,
}


class LevelFormatError(ValueError):
    """The level code cannot describe a board."""


def _parse_header(code: str):
    if len(code) < 4:
        raise LevelFormatError(f"level code too short: {code!r}")
    head_h, head_w = code[0:2], code[2:4]
    if not all(ch in DIGITS for ch in head_h + head_w):
        raise LevelFormatError(f"bad height/width header: {code[:4]!r}")
    return int(head_h), int(head_w), code[4:]


def parse_level_code(code: str, reverse: bool = False) -> Board:
    """Decodes "HHWW" + H*W digits (row-major) into a Board.

    With reverse=True the goal and box markers swap roles, giving the board on
    which pulling boxes replays pushes on the original level backwards.
    """
    code = code.strip()
    height, width, body = _parse_header(code)
    if len(body) != height * width:
        raise LevelFormatError(
            f"expected {height * width} cells for {height}x{width}, got {len(body)}"
        )
    table = REVERSE_DIGITS if reverse else FORWARD_DIGITS

    static_map: Dict[Position, TileKind] = {}
    player: Optional[Position] = None
    boxes: List[Position] = []
    cells = iter(body)
    for y in range(height):
        for x in range(width):
            ch = next(cells)
            kind = table.get(int(ch)) if ch in DIGITS else None
            if kind is None:
                raise LevelFormatError(f"bad cell {ch!r} at ({x}, {y})")
            pos = Position(x, y)
            if kind.is_player:
                if player is not None:
                    raise LevelFormatError(f"second player at {pos}, first at {player}")
                player = pos
            if kind.is_box:
                boxes.append(pos)
            static_map[pos] = kind.floor()

    return Board(width=width, height=height, static_map=static_map, player=player, boxes=boxes)


def encode_level(board: Board) -> str:
    return board.to_level_code()


def level_code_from_ascii(level_str: str) -> str:
    """Converts an ASCII level into a level code.

    Supported characters:
      '#': wall
      '.': goal
      '$': box
      '*': box on goal
      '@': player
      '+': player on goal
      ' ', '-', '_': floor
    Short lines are padded with floor on the right.
    """
    lines = [line.rstrip("\n") for line in level_str.splitlines() if line.strip() != ""]
    if not lines:
        raise LevelFormatError("Empty level")
    height = len(lines)
    width = max(len(line) for line in lines)
    if height > 99 or width > 99:
        raise LevelFormatError(f"level too large for a level code: {height}x{width}")

    digits = []
    for r, line in enumerate(lines):
        for c, ch in enumerate(line.ljust(width)):
            if ch in FLOOR_TOKENS:
                digits.append(str(int(TileKind.EMPTY)))
            elif ch in _ASCII_TO_KIND:
                digits.append(str(int(_ASCII_TO_KIND[ch])))
            else:
                raise LevelFormatError(f"unknown character {ch!r} at row {r}, column {c}")
    return f"{height:02d}{width:02d}{''.join(digits)}"
