"""
Max Pattern Diversity (MPD).

Idea:
  For each probe guess g, count how many DISTINCT feedback keys it produces
  against the CURRENT candidates. Pick the guess with the MOST unique keys.
  Tie-break: smaller worst bucket, then RNG.

Probes are drawn from the candidates themselves, so every guess can still
win. Large candidate sets are probed with a seeded sample.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Tuple
from survivordle.engine import Appearance, Evaluator, feedback_key
from .base import BaseSolver, register


def _pattern_stats(guess: Appearance, candidates: List[Appearance],
                   evaluator: Evaluator) -> Tuple[int, int]:
    """
    Return (num_distinct_keys, worst_bucket_size) for guess.
    """
    buckets: Dict[tuple, int] = defaultdict(int)
    for target in candidates:
        buckets[feedback_key(evaluator.evaluate(guess, target))] += 1
    if not buckets:
        return 0, 0
    return len(buckets), max(buckets.values())


@register
class MaxPatternsSolver(BaseSolver):
    id = "max_patterns"
    name = "Max Pattern Diversity"
    version = "1.0.0"

    PROBE_CAP = 60       # probes per turn when candidates are plentiful

    def _select_probes(self, candidates: List[Appearance]) -> List[Appearance]:
        if len(candidates) <= self.PROBE_CAP:
            return candidates
        return self.rng.sample(candidates, self.PROBE_CAP)

    def next_guess(self, state: dict) -> Appearance:
        candidates: List[Appearance] = state["candidates"]
        if len(candidates) <= 2:
            if not candidates:
                raise ValueError("no consistent candidate left to guess")
            return candidates[0]

        best_m = None
        best_worst = None
        best: List[Appearance] = []

        for g in self._select_probes(candidates):
            m, worst = _pattern_stats(g, candidates, self.evaluator)
            if (best_m is None) or (m > best_m) or (m == best_m and worst < best_worst):
                best_m, best_worst, best = m, worst, [g]
            elif m == best_m and worst == best_worst:
                best.append(g)

        return best[self.rng.randrange(len(best))]
