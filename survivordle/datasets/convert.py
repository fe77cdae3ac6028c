"""
Spreadsheet -> contestants.json conversion.

Input is the "Contestants" tab exported as CSV (first row is the header).
Columns are read by position, matching the master sheet layout in COL.

Rules:
  - rows without a name, season or placement are skipped (and counted)
  - the "Survivor: " prefix is dropped from season names
  - "N/A" neighbour cells become null
  - jury tier is derived: winner > finalist > jury > non-jury
  - returnee is true if the sheet says so, or if the same castaway id
    appears in more than one season
"""

from __future__ import annotations

import csv
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from survivordle.engine.records import to_bool

from .io import write_records

logger = logging.getLogger(__name__)

# Column index map (0-based) for the master sheet.
COL = {
    "full_name": 7,
    "season_num": 6,
    "season_name": 2,
    "age": 8,
    "gender": 9,
    "place": 10,
    "tribe": 11,
    "returnee": 12,
    "before": 13,
    "after": 14,
    "castaway_id": 15,
    "episode": 19,
    "day": 20,
    "jury": 24,
    "finalist": 25,
    "winner": 26,
}

SEASON_PREFIX = "Survivor: "


def jury_tier(jury: bool, finalist: bool, winner: bool) -> str:
    if winner:
        return "Winner"
    if finalist:
        return "Finalist"
    if jury:
        return "Jury"
    return "Non-Jury"


def to_int(val: Any) -> Optional[int]:
    """'12' -> 12, '12.0' -> 12; blanks and junk -> None."""
    if val is None:
        return None
    s = str(val).strip()
    if not s:
        return None
    try:
        return int(float(s))
    except ValueError:
        return None


def _cell(row: Sequence[Any], key: str) -> Any:
    i = COL[key]
    if i >= len(row):
        return None
    val = row[i]
    if isinstance(val, str):
        val = val.strip()
        return val or None
    return val


def _neighbour(val: Any) -> Optional[str]:
    return val if val and val != "N/A" else None


def row_to_record(row: Sequence[Any]) -> Optional[Dict[str, Any]]:
    """One sheet row -> record dict, or None for a blank row."""
    name = _cell(row, "full_name")
    season = to_int(_cell(row, "season_num"))
    place = to_int(_cell(row, "place"))
    if not name or not season or not place:
        return None

    castaway_id = _cell(row, "castaway_id")
    season_full = _cell(row, "season_name") or ""
    return {
        "id": f"{castaway_id}_{season}",
        "personId": castaway_id,
        "name": str(name).strip(),
        "season": season,
        "seasonName": season_full.replace(SEASON_PREFIX, ""),
        "seasonNameFull": season_full,
        "placement": place,
        "gender": _cell(row, "gender"),
        "startingTribe": _cell(row, "tribe"),
        "returnee": to_bool(_cell(row, "returnee")),
        "age": to_int(_cell(row, "age")),
        "episodeOut": to_int(_cell(row, "episode")),
        "day": to_int(_cell(row, "day")),
        "juryTier": jury_tier(
            to_bool(_cell(row, "jury")),
            to_bool(_cell(row, "finalist")),
            to_bool(_cell(row, "winner")),
        ),
        "placedBefore": _neighbour(_cell(row, "before")),
        "placedAfter": _neighbour(_cell(row, "after")),
    }


def mark_returnees(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Set returnee=True for every person with more than one appearance."""
    counts = Counter(r["personId"] for r in records if r.get("personId"))
    for r in records:
        if counts.get(r.get("personId"), 0) > 1:
            r["returnee"] = True
    return records


def convert_rows(rows: Iterable[Sequence[Any]]) -> Tuple[List[Dict[str, Any]], int]:
    """
    Convert data rows (header already removed).

    Returns:
      (records, skipped_blank_rows)
    """
    records: List[Dict[str, Any]] = []
    skipped = 0
    for row in rows:
        rec = row_to_record(row)
        if rec is None:
            skipped += 1
            continue
        records.append(rec)
    return mark_returnees(records), skipped


def convert_csv(in_path: Path | str, out_path: Path | str) -> Tuple[int, int]:
    """
    Read the exported sheet and write the JSON pool.
    Returns (records_written, skipped_blank_rows).
    """
    p = Path(in_path)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        next(reader, None)  # header
        records, skipped = convert_rows(reader)
    write_records(records, out_path)
    logger.debug("converted %s -> %s (%d records, %d skipped)", p, out_path, len(records), skipped)
    return len(records), skipped
