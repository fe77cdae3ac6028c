"""
Candidate filtering given game history.

Given:
  - a pool of appearances (usually the full pool)
  - a history of (guess, cells) pairs produced by the evaluator

Return:
  - appearances that would have produced exactly the same feedback for
    every past guess, i.e. the ones that could still be today's target.

Solvers use this to keep proposing guesses that are consistent with the past.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .records import Appearance
from .scoring import Cell, Evaluator, feedback_key

# History is a sequence of (guess, cells) tuples produced by the evaluator.
History = Iterable[Tuple[Appearance, Sequence[Cell]]]


def filter_candidates(candidates: Iterable[Appearance], history: History,
                      evaluator: Evaluator) -> List[Appearance]:
    """
    Keep candidates consistent with ALL recorded feedback.

    Appearances already guessed are dropped: two records may share every
    scored field, and a guess that was not a win cannot be the target.
    Order is preserved as in `candidates`.
    """
    checks = [(g, feedback_key(cells)) for g, cells in history]
    guessed = {g.id for g, _ in checks}

    out: List[Appearance] = []
    for c in candidates:
        if c.id in guessed:
            continue
        # Scoring the old guess against this candidate must reproduce the
        # recorded feedback, otherwise it cannot be the target.
        if all(feedback_key(evaluator.evaluate(g, c)) == key for g, key in checks):
            out.append(c)
    return out
