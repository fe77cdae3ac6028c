from .config import DailyConfig, STRATEGIES
from .rng import Mulberry32, seeded_shuffle
from .puzzle import date_seed, puzzle_date, puzzle_number, seconds_until_rollover
from .selector import DailySelector, EmptyPoolError, daily_target

__all__ = [
    "DailyConfig", "STRATEGIES", "Mulberry32", "seeded_shuffle",
    "date_seed", "puzzle_date", "puzzle_number", "seconds_until_rollover",
    "DailySelector", "EmptyPoolError", "daily_target",
]
