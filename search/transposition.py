from __future__ import annotations
from typing import Dict


class DepthTransposition:
    """Store the shallowest depth each canonical state hash was expanded at."""
    def __init__(self) -> None:
        self.best_depth: Dict[int, int] = {}

    def seen_better(self, key: int, depth: int) -> bool:
        old = self.best_depth.get(key)
        if old is None or depth < old:
            self.best_depth[key] = depth
            return False
        return True

    def clear(self) -> None:
        self.best_depth.clear()

    def __len__(self) -> int:
        return len(self.best_depth)
