# apps/cli/play.py
"""
Play today's Survivordle in the terminal.

Type part of a castaway's name; if several appearances match, pick one by
number. Commands: ":hint" reveals the answer's elimination neighbours,
":giveup" ends the game, ":quit" leaves without a result.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone

from survivordle.daily import DailySelector
from survivordle.datasets import load_pool
from survivordle.engine import Cell, search
from survivordle.engine.scoring import reveal_text
from survivordle.harness import GameSession, MAX_GUESSES, share_text
from survivordle.harness.io import STATUS_EMOJI

HINT_ARROW = {"up": "↑", "down": "↓", None: ""}


def _render(cells: list[Cell]) -> str:
    parts = []
    for c in cells:
        if c.status == "reveal":
            continue
        parts.append(f"{STATUS_EMOJI[c.status]} {c.label}: {c.display}{HINT_ARROW[c.hint]}")
    return " | ".join(parts)


def _pick(matches):
    if len(matches) == 1:
        return matches[0]
    for i, a in enumerate(matches, 1):
        print(f"  {i}. {a.name} — {a.season_name} (S{a.season})")
    choice = input("which one? ").strip()
    if choice.isdigit() and 1 <= int(choice) <= len(matches):
        return matches[int(choice) - 1]
    return None


def main():
    ap = argparse.ArgumentParser(description="survivordle — play today's puzzle")
    ap.add_argument("--pool", default="public/contestants.json", help="path to the JSON pool")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        pool = load_pool(args.pool)
        now = datetime.now(timezone.utc)
        selector = DailySelector()
        target = selector.daily_target(pool, now)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    puzzle_no = selector.puzzle_number(now)
    session = GameSession(target)
    hints = []
    print(f"Survivordle #{puzzle_no} — {MAX_GUESSES} guesses")

    while not session.over:
        try:
            query = input(f"[{session.remaining} left] guess> ").strip()
        except EOFError:
            return
        if query == ":quit":
            return
        if query == ":giveup":
            session.give_up()
            break
        if query == ":hint":
            if "Neighbors" not in hints:
                hints.append("Neighbors")
            print(f"Voted out between: {reveal_text(target)}")
            continue

        guess = _pick(search(pool, query))
        if guess is None:
            print("no matching castaway")
            continue
        try:
            cells = session.submit(guess)
        except ValueError as e:
            print(e)
            continue
        print(_render(cells))

    if session.won:
        print(f"🔥 got it in {len(session.guesses)}!")
    else:
        print(f"The tribe has spoken. It was {target.name} ({target.season_name}).")
    if not session.gave_up:
        print()
        print(share_text(puzzle_no, session.results, session.won, hints_used=hints))


if __name__ == "__main__":
    main()
