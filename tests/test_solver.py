import pytest
from search.config import SolverConfig
from search.dfs import UNBOUNDED, Solver
from sokoban_core.parser import LevelFormatError
from sokoban_core.tiles import Direction, Position

LVL = "0706111100102100100111154001100301100111111100"
SOLVED = "0506111111155101100101140001111111"
WALLED = "0407" + "1111111" + "1321321" + "1401001" + "1111111"


def test_sokoban_solver():
    s = Solver(LVL)
    assert s.solve() is True
    assert s.counter > 0
    assert s.board.boxes == [Position(2, 1), Position(1, 3)]


def test_solver_keeps_heuristics_from_forward_board():
    s = Solver(LVL)
    assert s.original_player == Position(2, 3)
    assert s.forward.boxes == [Position(1, 3), Position(3, 4)]
    assert s.board.boxes == [Position(2, 1), Position(1, 3)]
    assert sorted(s.heuristics) == [0, 1]


def test_already_solved_needs_no_moves():
    s = Solver(SOLVED)
    assert s.solve() is True
    assert s.counter == 0


def test_walled_boxes_not_solved():
    s = Solver(WALLED)
    assert s.solve() is False


def test_deepening_gives_same_answer():
    s = Solver(LVL, SolverConfig(deepening=True))
    assert s.solve() is True
    s = Solver(WALLED, SolverConfig(deepening=True, deepening_max=5))
    assert s.solve() is False


def test_search_restores_boxes_after_failure():
    s = Solver(WALLED)
    before = list(s.board.boxes)
    s.solve()
    assert s.board.boxes == before


def test_been_here_keeps_shallowest_depth():
    s = Solver(LVL)
    s.board.player = s.player_zones()[0]
    assert s.been_here(3) is False
    assert s.been_here(3) is True
    assert s.been_here(5) is True
    assert s.been_here(2) is False


def test_should_cut_tree_walls():
    # reversed box in the top-left corner, walls behind every pull
    s = Solver("0505" + "11111" + "12011" + "10301" + "11401" + "11111")
    assert s.should_cut_tree(0) is True


def test_should_not_cut_tree_when_a_box_blocks():
    s = Solver("0505" + "11111" + "12021" + "10301" + "11431" + "11111")
    assert s.board.boxes == [Position(1, 1), Position(3, 1)]
    assert s.should_cut_tree(0) is False


def test_should_not_cut_tree_on_goal():
    s = Solver(SOLVED)
    assert s.should_cut_tree(0) is False
    assert s.should_cut_tree(1) is False


def test_level_without_player():
    with pytest.raises(LevelFormatError):
        Solver("0505" + "11111" + "12301" + "10001" + "10001" + "11111")


def test_box_goal_mismatch():
    s = Solver("080711111111200601110020101011011001101113230101020100111110")
    with pytest.raises(LevelFormatError):
        s.solve()


# reversed board:
# ########
# #$ #   #   box 0 shut in by walls
# # @#   #
# ##.#.$ #   box 1 free, but in a room the player cannot reach
# #  #   #
# #  #   #
# ########
TWO_ROOMS = "0708" + "11111111" + "12010001" + "10410001" + "11313201" + "10010001" + "10010001" + "11111111"


def test_cut_tree_checks_the_box_that_failed_to_move():
    s = Solver(TWO_ROOMS)
    assert s.board.boxes == [Position(1, 1), Position(5, 3)]
    checked = []
    cut = s.should_cut_tree

    def record(box_index):
        checked.append(box_index)
        return cut(box_index)

    s.should_cut_tree = record
    # start the rotation on box 1: it is blocked but not wall-locked, then box 0 ends the branch
    assert s._search(0, 0, 1, Direction.UP, UNBOUNDED, 0) is False
    assert checked == [1, 0]
    assert s.counter == 0


def test_is_solved_returns_plain_bool():
    s = Solver(SOLVED)
    s.board.player = s.player_zones()[0]
    assert s.is_solved() is True
