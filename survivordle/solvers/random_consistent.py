"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (appearances
    still consistent with all feedback so far).
  - If (unexpectedly) the candidate set is empty, fall back to any pool
    entry not guessed yet.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - A baseline for the harness; it makes no attempt to split candidates.
"""

from __future__ import annotations

from typing import List
from survivordle.engine import Appearance
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Appearance:
        """
        Args:
            state: dict with keys:
                - "candidates": appearances consistent with the history
                - "history":    list of (guess, cells)

        Returns:
            The appearance to guess next.
        """
        candidates: List[Appearance] = state["candidates"]
        if candidates:
            return candidates[self.rng.randrange(len(candidates))]

        guessed = {g.id for g, _ in state["history"]}
        pool = [a for a in self.pool if a.id not in guessed]
        if not pool:
            raise ValueError("no appearance left to guess")
        return pool[self.rng.randrange(len(pool))]
