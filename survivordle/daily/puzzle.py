"""
Puzzle numbering anchored to a reference timezone.

All arithmetic is on civil dates (year/month/day) in the reference zone, never
on elapsed seconds, so daylight-saving transitions cannot move the boundary
between two puzzles.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone

from .config import DailyConfig

logger = logging.getLogger(__name__)


def _aware(now: datetime) -> datetime:
    # Naive instants are taken to be UTC.
    return now if now.tzinfo is not None else now.replace(tzinfo=timezone.utc)


def puzzle_date(now: datetime, config: DailyConfig) -> date:
    """Calendar date of `now` in the reference timezone."""
    return _aware(now).astimezone(config.tz).date()


def puzzle_number(now: datetime, config: DailyConfig) -> int:
    """
    1-based puzzle number: whole days between the epoch and today's date in
    the reference zone, plus one. Instants before the epoch clamp to 1.
    """
    n = (puzzle_date(now, config) - config.epoch).days + 1
    if n < 1:
        logger.debug("instant %s precedes epoch %s; clamping puzzle number to 1",
                     now.isoformat(), config.epoch.isoformat())
        return 1
    return n


def date_seed(d: date) -> int:
    """YYYYMMDD as an integer, e.g. date(2026, 2, 23) -> 20260223."""
    return d.year * 10000 + d.month * 100 + d.day


def seconds_until_rollover(now: datetime, config: DailyConfig) -> float:
    """Seconds from `now` until the next midnight in the reference zone."""
    local = _aware(now).astimezone(config.tz)
    midnight = datetime.combine(local.date() + timedelta(days=1), time(0), tzinfo=config.tz)
    # Compare in UTC; subtracting two datetimes sharing a tzinfo ignores DST.
    return (midnight.astimezone(timezone.utc) - local.astimezone(timezone.utc)).total_seconds()
