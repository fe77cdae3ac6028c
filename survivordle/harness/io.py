"""
Output utilities for games and simulation runs.

Responsibilities:
- share_text:     the spoiler-free digest a player pastes after a game.
- pattern:        compact letter row for one guess ('G' correct, 'Y' close, '-' wrong).
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Reveal cells are never part of a digest or pattern; they carry no score.
- Patterns are prefixed with an apostrophe in CSV output to keep Excel from
  interpreting strings like "-GYY-" as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Sequence
import csv
import datetime as dt
import json
import subprocess

from survivordle.engine import Cell
from .session import MAX_GUESSES

STATUS_EMOJI = {"correct": "🟩", "close": "🟧", "wrong": "⬛"}
STATUS_LETTER = {"correct": "G", "close": "Y", "wrong": "-"}


def pattern(cells: Iterable[Cell]) -> str:
    return "".join(STATUS_LETTER[c.status] for c in cells if c.status != "reveal")


def emoji_row(cells: Iterable[Cell]) -> str:
    return "".join(STATUS_EMOJI[c.status] for c in cells if c.status != "reveal")


def share_text(
        puzzle_no: int,
        results: Sequence[Sequence[Cell]],
        won: bool,
        *,
        max_guesses: int = MAX_GUESSES,
        hints_used: Iterable[str] = (),
) -> str:
    """
    Example:
        Survivordle #12 — 3/8 🔥
        💡 Neighbors hint used
        ⬛🟧⬛🟩⬛⬛🟧⬛🟧
        🟩🟧🟩🟩⬛🟩🟧🟧🟩
        🟩🟩🟩🟩🟩🟩🟩🟩🟩
    """
    score = str(len(results)) if won else "X"
    lines = [f"Survivordle #{puzzle_no} — {score}/{max_guesses} 🔥"]
    lines += [f"💡 {h} hint used" for h in hints_used]
    lines += [emoji_row(row) for row in results]
    return "\n".join(lines)


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int = MAX_GUESSES) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, success, guesses, time_ms,
      guess_1, patt_1, ..., guess_<max_turns>, patt_<max_turns>

    guess_i holds the guessed appearance id.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    guess, cells = hist[i - 1]
                    row[f"guess_{i}"] = guess.id
                    row[f"patt_{i}"] = _excel_safe_pattern(pattern(cells))
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and pool validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - pool: output of datasets.validate_pool(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Compact UTC timestamp suitable for filenames, e.g. 20260823T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
