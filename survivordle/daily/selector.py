"""
Daily target selection.

Two strategies (DailyConfig.strategy):
  - 'shuffled': permute the whole pool once with Mulberry32(shuffle_seed),
                then take index (puzzle_number - 1) % len(pool). Answer order
                is decorrelated from dataset order. Default.
  - 'direct'  : take index YYYYMMDD % len(pool) for today's date in the
                reference zone. Simple, but follows the pool's natural order.

For a fixed pool, epoch and seed, every call whose `now` falls on the same
calendar day in the reference timezone returns the same record.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence, TypeVar

from .config import DailyConfig
from .puzzle import date_seed, puzzle_date, puzzle_number, seconds_until_rollover
from .rng import seeded_shuffle

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EmptyPoolError(ValueError):
    """Raised when a daily target is requested from an empty pool."""


class DailySelector:
    def __init__(self, config: Optional[DailyConfig] = None):
        self.config = config or DailyConfig()

    def puzzle_number(self, now: datetime) -> int:
        return puzzle_number(now, self.config)

    def seconds_until_rollover(self, now: datetime) -> float:
        return seconds_until_rollover(now, self.config)

    def shuffled_pool(self, pool: Sequence[T]) -> List[T]:
        return seeded_shuffle(pool, self.config.shuffle_seed)

    def daily_index(self, pool_size: int, now: datetime) -> int:
        """Index into the (shuffled or natural) pool for the day of `now`."""
        if pool_size <= 0:
            raise EmptyPoolError("cannot pick a daily target from an empty pool")
        if self.config.strategy == "direct":
            return date_seed(puzzle_date(now, self.config)) % pool_size
        return (self.puzzle_number(now) - 1) % pool_size

    def daily_target(self, pool: Sequence[T], now: datetime) -> T:
        """Today's target. Raises EmptyPoolError if `pool` is empty."""
        idx = self.daily_index(len(pool), now)
        ordered = pool if self.config.strategy == "direct" else self.shuffled_pool(pool)
        logger.debug("%s: index %d of %d (%s strategy)",
                     puzzle_date(now, self.config), idx, len(pool), self.config.strategy)
        return ordered[idx]


def daily_target(pool: Sequence[T], now: datetime, config: Optional[DailyConfig] = None) -> T:
    return DailySelector(config).daily_target(pool, now)
