from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

import yaml

DEFAULT_LOGGING: Dict[str, Any] = {
    "level": "WARNING",
    "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
}


@dataclass
class SolverConfig:
    recursion_limit: int = 20000
    deepening: bool = False  # finite cost-limit passes before the unbounded one
    deepening_step: int = 1
    deepening_max: Optional[int] = None  # None -> width * height


def config_from_dict(cfg: Dict[str, Any]) -> SolverConfig:
    known = {f.name for f in fields(SolverConfig)}
    unknown = set(cfg) - known
    if unknown:
        raise ValueError(f"unknown search options: {sorted(unknown)}")
    conf = SolverConfig(**cfg)
    if conf.deepening_step < 1:
        raise ValueError(f"deepening_step must be >= 1, got {conf.deepening_step}")
    return conf


def load_config(path: str) -> Tuple[SolverConfig, Dict[str, Any]]:
    """Reads the `search` and `logging` sections of a YAML config file."""
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    log_cfg = dict(DEFAULT_LOGGING)
    log_cfg.update(cfg.get("logging") or {})
    return config_from_dict(cfg.get("search") or {}), log_cfg
