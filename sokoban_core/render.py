from __future__ import annotations
from typing import TYPE_CHECKING

from .tiles import Position

if TYPE_CHECKING:
    from .board import Board


def render_board(board: "Board", row_index: bool = True) -> str:
    """ASCII visualization of the board, optionally prefixed with the row number (mod 10)."""
    out_lines = []
    for y in range(board.height):
        row_chars = [str(y % 10)] if row_index else []
        for x in range(board.width):
            row_chars.append(board.tile_at(Position(x, y)).glyph)
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)
