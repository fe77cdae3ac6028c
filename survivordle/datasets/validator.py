"""
Pool validator for Survivordle.

What this module does:
- Validate a contestants.json pool (a JSON array of appearance records).
- Count records that fail to load (missing id/season/placement, bad ints).
- Detect duplicate ids, unknown jury tiers and placements repeated within a season.
- Compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from survivordle.datasets import validate_pool, pretty_summary
    rep = validate_pool("public/contestants.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
import json
from collections import Counter
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List

from survivordle.engine.records import JURY_TIER_RANK, Appearance


@dataclass
class PoolReport:
    """Validation result for one pool file."""
    path: str
    exists: bool
    count: int                    # records that loaded
    sha256: str                   # empty string if missing
    unique_ids: int
    invalid_records: int
    duplicate_ids: List[str] = field(default_factory=list)
    unknown_tiers: List[str] = field(default_factory=list)
    placement_clashes: List[str] = field(default_factory=list)   # "S<season>#<placement>"
    seasons: int = 0
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_pool(path: str) -> Dict:
    """
    Validate a pool file.

    Returns
    -------
    Dict
        JSON-serializable PoolReport. `passed` is strict: the file exists and
        parses, at least one record loads, and there are no invalid records,
        duplicate ids, unknown jury tiers or placement clashes.
    """
    p = Path(path)
    if not p.exists():
        return asdict(PoolReport(path, False, 0, "", 0, 0,
                                 issues=[f"pool file not found: {path}"]))

    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return asdict(PoolReport(str(p), True, 0, _sha256_file(p), 0, 0,
                                 issues=[f"pool file is not valid JSON: {e}"]))
    if not isinstance(raw, list):
        return asdict(PoolReport(str(p), True, 0, _sha256_file(p), 0, 0,
                                 issues=["pool file must hold a JSON array"]))

    pool: List[Appearance] = []
    invalid = 0
    for rec in raw:
        try:
            pool.append(Appearance.from_dict(rec))
        except (TypeError, ValueError, AttributeError):
            invalid += 1

    ids = Counter(a.id for a in pool)
    dupes = sorted(i for i, n in ids.items() if n > 1)
    tiers = sorted({a.jury_tier for a in pool if a.jury_tier not in JURY_TIER_RANK},
                   key=lambda t: (t is None, t or ""))
    slots = Counter((a.season, a.placement) for a in pool)
    clashes = [f"S{s}#{pl}" for (s, pl), n in sorted(slots.items()) if n > 1]

    rep = PoolReport(
        path=str(p),
        exists=True,
        count=len(pool),
        sha256=_sha256_file(p),
        unique_ids=len(ids),
        invalid_records=invalid,
        duplicate_ids=dupes,
        unknown_tiers=[str(t) for t in tiers],
        placement_clashes=clashes,
        seasons=len({a.season for a in pool}),
    )

    if rep.count == 0:
        rep.issues.append("pool contains 0 valid records")
    if invalid:
        rep.issues.append(f"pool has {invalid} invalid record(s)")
    if dupes:
        rep.issues.append(f"duplicate ids (e.g., {dupes[:5]})")
    if rep.unknown_tiers:
        rep.issues.append(f"unknown jury tiers: {rep.unknown_tiers}")
    if clashes:
        rep.issues.append(f"placement repeated within a season (e.g., {clashes[:5]})")

    rep.passed = not rep.issues
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console/docs.

    Example:
        pool=912 (uniq=912, seasons=47, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"pool={report['count']} (uniq={report['unique_ids']}, seasons={report['seasons']}, sha={sha}) "
        f"| invalid={report['invalid_records']} | {status}"
    )
