"""
Simulation harness core primitives.

- run_case:  play one daily target with a given solver.
- run_batch: play many targets in sequence (optionally a sample prefix).
- summarize: win rate and guess distribution over a batch.

The guess budget is enforced here, the same way GameSession enforces it for
a human player. These functions are UI-agnostic so they can be reused by the
CLI, a notebook, or a service without changes.
"""

from __future__ import annotations
import time
from typing import Dict, List, Sequence, Tuple

import numpy as np

from survivordle.engine import Appearance, Cell, Evaluator, filter_candidates, is_win
from .session import MAX_GUESSES


def _assert_turn_budget(max_turns: int) -> None:
    """Guardrail: a game needs at least one guess."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def run_case(
        solver,
        target: Appearance,
        *,
        pool: Sequence[Appearance],
        evaluator: Evaluator | None = None,
        max_turns: int = MAX_GUESSES,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the guess budget is exhausted.

    Args:
        solver:     an object implementing BaseSolver with next_guess(state)
        target:     the hidden appearance for this case
        pool:       every appearance the solver may guess
        evaluator:  scoring configuration (default thresholds if None)
        max_turns:  guess budget
        seed:       RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, cells)]), answer (target id)
    """
    _assert_turn_budget(max_turns)
    evaluator = evaluator or Evaluator()

    solver.reset(pool=pool, evaluator=evaluator, seed=seed)

    history: List[Tuple[Appearance, List[Cell]]] = []
    candidates = list(pool)

    t0 = time.time()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
        }

        guess = solver.next_guess(state)
        cells = evaluator.evaluate(guess, target)
        history.append((guess, cells))

        if is_win(cells):
            dt = (time.time() - t0) * 1000.0
            return {
                "success": True, "guesses": turn, "time_ms": dt,
                "history": history, "answer": target.id
            }

        # Narrow candidate set using the new feedback before next turn
        candidates = filter_candidates(candidates, [(guess, cells)], evaluator)

    dt = (time.time() - t0) * 1000.0
    return {
        "success": False, "guesses": max_turns, "time_ms": dt,
        "history": history, "answer": target.id
    }


def run_batch(
        solver,
        targets: Sequence[Appearance],
        *,
        pool: Sequence[Appearance],
        evaluator: Evaluator | None = None,
        max_turns: int = MAX_GUESSES,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    targets are played.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    _assert_turn_budget(max_turns)

    cases = list(targets)
    if sample is not None:
        cases = cases[:sample]

    out: List[Dict] = []
    for idx, target in enumerate(cases, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, target, pool=pool, evaluator=evaluator,
                            max_turns=max_turns, seed=case_seed))
    return out


def summarize(results: Sequence[Dict], max_turns: int = MAX_GUESSES) -> Dict:
    """
    Batch summary:
      games, wins, win_rate, mean_guesses (wins only, None without wins),
      distribution: list where index k-1 counts wins in k guesses.
    """
    games = len(results)
    won = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    dist = np.bincount(won, minlength=max_turns + 1)[1:max_turns + 1] if won.size else np.zeros(max_turns, dtype=int)
    return {
        "games": games,
        "wins": int(won.size),
        "win_rate": float(won.size / games) if games else 0.0,
        "mean_guesses": float(won.mean()) if won.size else None,
        "distribution": [int(x) for x in dist],
    }
