"""
Per-attribute comparators.

Each comparator returns a (status, hint) pair:
  - status : 'correct' | 'close' | 'wrong'
  - hint   : 'up'   = the target value is higher than the guess
             'down' = the target value is lower than the guess
             None   = no direction (exact match, text, or unknown values)

Rules shared by all comparators:
  - an unknown (None) value on either side is 'wrong' with no hint, even when
    both sides are unknown; absence is not equality
  - closeness thresholds are inclusive (<=)
  - hints come from the signed difference and are None whenever the status
    is 'correct'
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional, Tuple

from .records import JURY_TIER_RANK

Status = Literal["correct", "close", "wrong", "reveal"]
Hint = Optional[Literal["up", "down"]]
Verdict = Tuple[Status, Hint]

CORRECT: Status = "correct"
CLOSE: Status = "close"
WRONG: Status = "wrong"
REVEAL: Status = "reveal"


def _direction(guess_val, target_val) -> Hint:
    return "up" if guess_val < target_val else "down"


def compare_numeric(guess_val: Optional[int], target_val: Optional[int], threshold: int) -> Verdict:
    """
    Examples:
      compare_numeric(12, 10, 2)   -> ('close', 'down')
      compare_numeric(10, 14, 3)   -> ('wrong', 'up')
      compare_numeric(None, 30, 5) -> ('wrong', None)
    """
    if guess_val is None or target_val is None:
        return WRONG, None
    if guess_val == target_val:
        return CORRECT, None
    status = CLOSE if abs(guess_val - target_val) <= threshold else WRONG
    return status, _direction(guess_val, target_val)


def compare_text(guess_val: Any, target_val: Any) -> Verdict:
    """Exact, case-sensitive equality. Text never carries a direction."""
    if guess_val is None or target_val is None:
        return WRONG, None
    return (CORRECT if guess_val == target_val else WRONG), None


def compare_jury_tier(
        guess_val: Optional[str],
        target_val: Optional[str],
        tier_rank: Mapping[str, int] = JURY_TIER_RANK,
        threshold: int = 1,
) -> Verdict:
    """
    Compare two jury tiers by rank (Non-Jury < Jury < Finalist < Winner).

    Adjacent tiers count as close with the default threshold. A tier that is
    not in `tier_rank` fails closed: ('wrong', None), never an exception.
    """
    g_rank = tier_rank.get(guess_val) if guess_val is not None else None
    t_rank = tier_rank.get(target_val) if target_val is not None else None
    if g_rank is None or t_rank is None:
        return WRONG, None
    if g_rank == t_rank:
        return CORRECT, None
    status = CLOSE if abs(g_rank - t_rank) <= threshold else WRONG
    return status, _direction(g_rank, t_rank)
