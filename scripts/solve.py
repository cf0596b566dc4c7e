"""
Solve one level and print "<level>::<elapsed>" or "<level>::notsolved".

Usage:
  python -m scripts.solve 0706111100102100100111154001100301100111111100
  python -m scripts.solve --ascii levels/first.txt --config configs/solver.yaml -v
"""
from __future__ import annotations
import argparse
import logging
import time

from sokoban_core.parser import LevelFormatError, level_code_from_ascii
from search.config import DEFAULT_LOGGING, SolverConfig, load_config
from search.dfs import Solver

logger = logging.getLogger("scripts.solve")


def main(argv=None):
    p = argparse.ArgumentParser(description="Reverse-search Sokoban solver")
    p.add_argument("level", nargs="?", default=None, help="level code: HHWW + H*W digits")
    p.add_argument("--ascii", type=str, default=None, help="path to an ASCII (.txt) level instead of a code")
    p.add_argument("--config", type=str, default=None, help="YAML config, e.g. configs/solver.yaml")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = p.parse_args(argv)

    if args.config is not None:
        conf, log_cfg = load_config(args.config)
    else:
        conf, log_cfg = SolverConfig(), dict(DEFAULT_LOGGING)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else log_cfg["level"],
        format=log_cfg["format"],
    )

    if (args.level is None) == (args.ascii is None):
        p.error("give exactly one of LEVEL or --ascii")
    try:
        if args.ascii is not None:
            with open(args.ascii, "r", encoding="utf-8") as f:
                level = level_code_from_ascii(f.read())
        else:
            level = args.level.strip()
        solver = Solver(level, conf)
        logger.info("%s", solver.board)
        started = time.perf_counter()
        was_solved = solver.solve()
    except LevelFormatError as e:
        p.error(str(e))
    elapsed = time.perf_counter() - started

    logger.info("Was solved? %s - steps: %d", was_solved, solver.counter)
    logger.info("Time elapsed solving sokoban is: %.6fs", elapsed)
    if was_solved:
        print(f"{level}::{elapsed:.6f}s")
    else:
        print(f"{level}::notsolved")
    return was_solved


if __name__ == "__main__":
    main()
