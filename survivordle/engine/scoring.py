"""
Guess evaluation for a single (guess, target) pair of appearances.

Output is one Cell per scored attribute, in a fixed declared order, followed
by an optional reveal cell:

  Season | Season Name | Placement | Gender | Tribe | Returnee | Age |
  Episode Out | Finish | Voted Out Between (reveal)

The attribute list and the closeness thresholds are data (EvaluatorConfig),
so the reduced "classic" board is the same evaluator with fewer attributes.

This implementation is:
  - pure (no state kept between calls, cells are frozen)
  - deterministic (same inputs -> same outputs)
  - total over unknown values (see comparators.py for the rules)

Guessing the target record itself (equal on every field) scores every
attribute as correct. Any other pair goes through the comparators, where an
unknown value is never a match.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Callable, Iterable, List, Mapping, Optional, Tuple

from .comparators import (
    CORRECT,
    REVEAL,
    Hint,
    Status,
    Verdict,
    compare_jury_tier,
    compare_numeric,
    compare_text,
)
from .records import JURY_TIER_RANK, Appearance

KINDS = ("numeric", "text", "jury_tier")


@dataclass(frozen=True)
class Thresholds:
    """Inclusive closeness thresholds (numeric distance, or tier-rank distance)."""
    season: int = 2
    placement: int = 3
    age: int = 5
    episode_out: int = 1
    jury_tier: int = 1

    def __post_init__(self):
        for f in fields(self):
            val = getattr(self, f.name)
            if not isinstance(val, int) or val < 0:
                raise ValueError(f"threshold {f.name} must be a non-negative int; got {val!r}")


@dataclass(frozen=True)
class Attribute:
    key: str                                 # Appearance attribute name
    label: str                               # column label shown to the player
    kind: str                                # one of KINDS
    display: Callable[[Appearance], str]     # guess value as shown in the cell
    threshold: Optional[str] = None          # Thresholds field name (numeric / jury_tier)


@dataclass(frozen=True)
class Cell:
    key: str
    label: str
    display: str
    status: Status
    hint: Hint = None


def _or_unknown(val) -> str:
    return "?" if val is None else str(val)


FULL_ATTRIBUTES: Tuple[Attribute, ...] = (
    Attribute("season", "Season", "numeric", lambda a: f"S{a.season}", "season"),
    Attribute("season_name", "Season Name", "text", lambda a: a.season_name),
    Attribute("placement", "Placement", "numeric", lambda a: f"#{a.placement}", "placement"),
    Attribute("gender", "Gender", "text", lambda a: _or_unknown(a.gender)),
    Attribute("starting_tribe", "Tribe", "text", lambda a: _or_unknown(a.starting_tribe)),
    Attribute("returnee", "Returnee", "text", lambda a: "Yes" if a.returnee else "No"),
    Attribute("age", "Age", "numeric", lambda a: _or_unknown(a.age), "age"),
    Attribute("episode_out", "Episode Out", "numeric",
              lambda a: f"Ep {a.episode_out}" if a.episode_out else "?", "episode_out"),
    Attribute("jury_tier", "Finish", "jury_tier", lambda a: _or_unknown(a.jury_tier), "jury_tier"),
)

# Reduced projection used by the simplified board.
CLASSIC_ATTRIBUTES: Tuple[Attribute, ...] = tuple(
    a for a in FULL_ATTRIBUTES
    if a.key in ("season", "placement", "gender", "starting_tribe", "returnee", "age")
)

REVEAL_LABEL = "Voted Out Between"


@dataclass(frozen=True)
class EvaluatorConfig:
    """
    Everything the evaluator needs besides the two records.

    Attributes:
        thresholds: closeness thresholds per attribute
        attributes: scored attributes, in output order
        tier_rank : jury tier -> rank (total order)
        reveal    : append the non-scored "Voted Out Between" cell
    """
    thresholds: Thresholds = field(default_factory=Thresholds)
    attributes: Tuple[Attribute, ...] = FULL_ATTRIBUTES
    tier_rank: Mapping[str, int] = field(default_factory=lambda: dict(JURY_TIER_RANK))
    reveal: bool = True

    def __post_init__(self):
        names = {f.name for f in fields(Thresholds)}
        for attr in self.attributes:
            if attr.kind not in KINDS:
                raise ValueError(f"attribute {attr.key}: unknown kind {attr.kind!r}")
            if attr.kind != "text" and attr.threshold not in names:
                raise ValueError(f"attribute {attr.key}: needs a threshold (one of {sorted(names)})")


def reveal_text(target: Appearance) -> str:
    """Target's elimination neighbours, e.g. 'Kenzie → Maryanne'."""
    parts = [p for p in (target.placed_after, target.placed_before) if p]
    return " → ".join(parts) or "—"


class Evaluator:
    def __init__(self, config: Optional[EvaluatorConfig] = None):
        self.config = config or EvaluatorConfig()

    def _compare(self, attr: Attribute, guess: Appearance, target: Appearance) -> Verdict:
        g = getattr(guess, attr.key)
        t = getattr(target, attr.key)
        if attr.kind == "text":
            return compare_text(g, t)
        threshold = getattr(self.config.thresholds, attr.threshold)
        if attr.kind == "numeric":
            return compare_numeric(g, t, threshold)
        return compare_jury_tier(g, t, self.config.tier_rank, threshold)

    def evaluate(self, guess: Appearance, target: Appearance) -> List[Cell]:
        """
        Score `guess` against `target`, one cell per configured attribute.

        Raises ValueError if either record is missing.

        Example:
          guess season 12, target season 10 -> Cell(label='Season', display='S12',
                                                    status='close', hint='down')
        """
        if guess is None or target is None:
            raise ValueError("evaluate() needs both a guess and a target record")

        # The target record itself always wins, even where both sides are unknown.
        same = guess == target

        cells: List[Cell] = []
        for attr in self.config.attributes:
            status, hint = (CORRECT, None) if same else self._compare(attr, guess, target)
            cells.append(Cell(attr.key, attr.label, attr.display(guess), status, hint))

        if self.config.reveal:
            cells.append(Cell("reveal", REVEAL_LABEL, reveal_text(target), REVEAL, None))
        return cells


_DEFAULT = Evaluator()


def evaluate(guess: Appearance, target: Appearance,
             config: Optional[EvaluatorConfig] = None) -> List[Cell]:
    """Convenience wrapper; uses the default configuration unless one is given."""
    ev = _DEFAULT if config is None else Evaluator(config)
    return ev.evaluate(guess, target)


def is_win(cells: Iterable[Cell]) -> bool:
    """True iff every scored (non-reveal) cell is correct."""
    return all(c.status == CORRECT for c in cells if c.status != REVEAL)


def feedback_key(cells: Iterable[Cell]) -> Tuple[Tuple[str, str, Hint], ...]:
    """
    Comparable signature of a guess outcome: (key, status, hint) per scored
    cell. Display strings and the reveal cell are left out, so two targets
    that give the same feedback for a guess share a key.
    """
    return tuple((c.key, c.status, c.hint) for c in cells if c.status != REVEAL)
