"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it is an Appearance
  - its id exists in the pool
  - it has not been guessed already this game

Search input is matched with `normalize`, which lowercases and drops periods
so that "M.C." and "mc" find the same contestant.
"""

from __future__ import annotations

from typing import Iterable, List

from .records import Appearance


def normalize(text: str | None) -> str:
    return (text or "").lower().replace(".", "")


def validate_guess(guess: object, pool_ids: Iterable[str], previous_ids: Iterable[str] = ()) -> bool:
    """
    Return True if `guess` is a valid guess per the rules above.

    Args:
      guess        : proposed appearance
      pool_ids     : ids of every appearance in the pool
      previous_ids : ids already guessed this game
    """
    if not isinstance(guess, Appearance):
        return False
    if guess.id in set(previous_ids):
        return False
    return guess.id in set(pool_ids)


def search(pool: Iterable[Appearance], query: str, limit: int = 10) -> List[Appearance]:
    """Appearances whose name contains `query` (normalized), pool order, at most `limit`."""
    q = normalize(query.strip())
    if not q:
        return []
    return [a for a in pool if q in normalize(a.name)][:limit]
