"""
Daily selection settings.

epoch and shuffle_seed are part of the game's identity: changing either one
re-randomizes the answer for every future day, so treat a change as a
breaking release and announce it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

STRATEGIES = ("shuffled", "direct")

DEFAULT_EPOCH = date(2026, 2, 23)      # puzzle #1
DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_SHUFFLE_SEED = 20260223


@dataclass(frozen=True)
class DailyConfig:
    """
    Attributes:
        epoch        : calendar date of puzzle #1 in the reference timezone
        timezone     : IANA name of the reference timezone
        shuffle_seed : Mulberry32 seed for the pool permutation
        strategy     : 'shuffled' (permuted pool indexed by puzzle number) or
                       'direct' (pool indexed by the YYYYMMDD date seed)
    """
    epoch: date = DEFAULT_EPOCH
    timezone: str = DEFAULT_TIMEZONE
    shuffle_seed: int = DEFAULT_SHUFFLE_SEED
    strategy: str = "shuffled"

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(f"strategy must be one of {STRATEGIES}; got {self.strategy!r}")
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {self.timezone!r}") from e

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)
