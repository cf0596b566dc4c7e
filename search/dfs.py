from __future__ import annotations
import logging
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional

from heuristics.distance import Heuristics, assignment_bound, build_heuristics, lookup
from sokoban_core.board import Board
from sokoban_core.deadlocks import is_wall_locked
from sokoban_core.parser import LevelFormatError, parse_level_code
from sokoban_core.tiles import Direction, Position
from .config import SolverConfig
from .transposition import DepthTransposition
from .zones import player_zones

logger = logging.getLogger(__name__)

UNBOUNDED = sys.maxsize


@contextmanager
def _recursion_limit(limit: int) -> Iterator[None]:
    previous = sys.getrecursionlimit()
    if limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Solver:
    """Depth-first Sokoban solver working on the reversed (pulling) board.

    Heuristics come from the forward board; the search itself pulls boxes from the
    goals back to their start cells. A pull sequence that ends with the player able to
    reach its original start is a push solution read backwards.
    """

    def __init__(self, level: str, config: Optional[SolverConfig] = None) -> None:
        self.config = config or SolverConfig()
        self.level = level
        self.forward = parse_level_code(level)
        if self.forward.player is None:
            raise LevelFormatError("level has no player")
        self.original_player: Position = self.forward.player
        self.heuristics: Heuristics = build_heuristics(self.forward)
        self.board: Board = parse_level_code(level, reverse=True)
        self.memo = DepthTransposition()
        self.counter = 0

    def get_heuristic(self, goal_index: int, box_index: int) -> Optional[int]:
        return lookup(self.heuristics, self.board.goals[goal_index], box_index)

    def been_here(self, depth: int) -> bool:
        return self.memo.seen_better(self.board.compute_hash(), depth)

    def player_zones(self) -> List[Position]:
        return player_zones(self.board)

    def is_solved(self) -> bool:
        return self.board.is_resolved() and self.board.can_reach(self.original_player)

    def should_cut_tree(self, box_index: int) -> bool:
        return is_wall_locked(self.board, box_index)

    def solve(self) -> bool:
        if len(self.board.boxes) != len(self.board.goals):
            raise LevelFormatError(
                f"{len(self.board.boxes)} boxes for {len(self.board.goals)} goals"
            )
        with _recursion_limit(self.config.recursion_limit):
            if self.config.deepening:
                for limit in self._cost_limits():
                    logger.info("Trying cost limit %d", limit)
                    if self._solve_zones(limit):
                        return True
            return self._solve_zones(UNBOUNDED)

    def _cost_limits(self) -> Iterator[int]:
        top = self.config.deepening_max
        if top is None:
            top = self.board.width * self.board.height
        start = assignment_bound(self.heuristics, self.board.goals)
        return iter(range(start, top + 1, self.config.deepening_step))

    def _solve_zones(self, cost_limit: int) -> bool:
        self.memo.clear()
        logger.debug("%s", self.board)
        for player in self.player_zones():
            logger.info("Trying player %s", player)
            self.board.player = player
            if self._search(0, 0, 0, Direction.UP, cost_limit, 0):
                return True
        return False

    def _search(
        self,
        start_cost: int,
        goal_index: int,
        box_index: int,
        previous_direction: Direction,
        cost_limit: int,
        depth: int,
    ) -> bool:
        if self.is_solved():
            return True
        if self.been_here(depth):
            return False

        # boxes and goals have the same length
        n = len(self.board.boxes)
        for j in range(n):
            current_box = (box_index + j) % n
            for i in range(n):
                current_goal = (goal_index + i) % n
                blocked = True
                bound = self.get_heuristic(current_goal, current_box)
                if bound is not None and start_cost + bound <= cost_limit:
                    for direction in previous_direction.ring():
                        if not self.board.move_box(current_box, direction):
                            continue
                        blocked = False
                        self.counter += 1
                        solved = self._search(
                            start_cost + 1,
                            current_goal,
                            current_box,
                            direction,
                            cost_limit,
                            depth + 1,
                        )
                        self.board.undo_move_box(current_box, direction)
                        if solved:
                            return True

                if blocked:
                    # walls: nothing can free this box, drop the branch.
                    # boxes: they may move later, try the next box.
                    if self.should_cut_tree(current_box):
                        return False
                    break

        return False
