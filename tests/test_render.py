"""Tests for the render module."""

from sokoban_core.parser import parse_level_code
from sokoban_core.render import render_board

LVL = "0506111111120101100101140301111111"


def test_render_with_row_index():
    b = parse_level_code(LVL)
    assert render_board(b).splitlines() == [
        "0######",
        "1#. # #",
        "2#  # #",
        "3#@ $ #",
        "4######",
    ]


def test_render_plain():
    b = parse_level_code("0506111111155101100101160001111111")
    rendered = render_board(b, row_index=False)
    assert rendered.splitlines()[1] == "#**# #"
    assert '+' in rendered
    assert str(b).startswith("\n0")
