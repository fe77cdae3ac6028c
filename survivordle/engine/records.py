"""
Appearance records: one contestant in one season.

The JSON pool (see survivordle.datasets) stores records with camelCase keys;
in Python they are frozen dataclasses with snake_case attributes.

Required identity fields:
  - id         (or personId/castaway_id, from which `{personId}_{season}` is derived)
  - season
  - placement

Everything else is optional and becomes None when missing or blank, which the
comparators treat as "unknown".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Total order, lowest to highest.
JURY_TIERS = ("Non-Jury", "Jury", "Finalist", "Winner")
JURY_TIER_RANK: Dict[str, int] = {tier: rank for rank, tier in enumerate(JURY_TIERS)}


def _opt_int(val: Any) -> Optional[int]:
    if val is None or val == "":
        return None
    return int(val)


def to_bool(val: Any) -> bool:
    """True, "true", "Yes", "1" -> True; "false", "no", blanks, None -> False."""
    if isinstance(val, bool):
        return val
    if val is None:
        return False
    return str(val).strip().lower() in ("true", "yes", "1")


def _opt_str(val: Any) -> Optional[str]:
    if val is None:
        return None
    s = str(val).strip()
    if not s or s == "N/A":
        return None
    return s


@dataclass(frozen=True)
class Appearance:
    id: str
    person_id: str
    name: str
    season: int
    season_name: str
    placement: int
    gender: Optional[str] = None
    starting_tribe: Optional[str] = None
    returnee: bool = False
    age: Optional[int] = None
    episode_out: Optional[int] = None
    day: Optional[int] = None
    jury_tier: Optional[str] = None
    placed_before: Optional[str] = None
    placed_after: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Appearance":
        """
        Build a record from its JSON form.

        Raises ValueError if a required identity field is missing, since a
        record without id/season/placement cannot be scored or selected.
        """
        season = _opt_int(d.get("season"))
        placement = _opt_int(d.get("placement"))
        person_id = _opt_str(d.get("personId", d.get("castaway_id")))
        rid = _opt_str(d.get("id"))

        if season is None:
            raise ValueError(f"record {rid or person_id or '?'} has no season")
        if placement is None:
            raise ValueError(f"record {rid or person_id or '?'} has no placement")
        if rid is None:
            if person_id is None:
                raise ValueError("record has neither id nor personId")
            rid = f"{person_id}_{season}"
        if person_id is None:
            # ids look like "<personId>_<season>"
            person_id = rid.rsplit("_", 1)[0]

        return cls(
            id=rid,
            person_id=person_id,
            name=_opt_str(d.get("name")) or rid,
            season=season,
            season_name=_opt_str(d.get("seasonName")) or "",
            placement=placement,
            gender=_opt_str(d.get("gender")),
            starting_tribe=_opt_str(d.get("startingTribe")),
            returnee=to_bool(d.get("returnee")),
            age=_opt_int(d.get("age")),
            episode_out=_opt_int(d.get("episodeOut")),
            day=_opt_int(d.get("day")),
            jury_tier=_opt_str(d.get("juryTier")),
            placed_before=_opt_str(d.get("placedBefore")),
            placed_after=_opt_str(d.get("placedAfter")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """camelCase dict, the inverse of from_dict."""
        return {
            "id": self.id,
            "personId": self.person_id,
            "name": self.name,
            "season": self.season,
            "seasonName": self.season_name,
            "placement": self.placement,
            "gender": self.gender,
            "startingTribe": self.starting_tribe,
            "returnee": self.returnee,
            "age": self.age,
            "episodeOut": self.episode_out,
            "day": self.day,
            "juryTier": self.jury_tier,
            "placedBefore": self.placed_before,
            "placedAfter": self.placed_after,
        }
