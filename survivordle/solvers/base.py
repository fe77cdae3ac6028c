from __future__ import annotations
import random
from typing import Dict, List, Type

from survivordle.engine import Appearance, Evaluator

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.pool: List[Appearance] = []
        self.evaluator = Evaluator()
        self.rng = random.Random()

    def reset(self, *, pool: List[Appearance], evaluator: Evaluator | None = None,
              seed: int | None = None) -> None:
        self.pool = list(pool)
        if evaluator is not None:
            self.evaluator = evaluator
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> Appearance:
        raise NotImplementedError("Override in subclass")
