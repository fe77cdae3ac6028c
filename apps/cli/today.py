# apps/cli/today.py
"""
Print today's puzzle number (and, with --reveal, the answer).

Useful for checking what players see right now, or on any other instant:
    python -m apps.cli.today --at 2026-03-08T06:30:00+00:00 --reveal
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime, timezone

from survivordle.daily import DailyConfig, DailySelector, STRATEGIES
from survivordle.daily.config import DEFAULT_EPOCH, DEFAULT_SHUFFLE_SEED, DEFAULT_TIMEZONE
from survivordle.daily.puzzle import puzzle_date
from survivordle.datasets import load_pool


def main():
    ap = argparse.ArgumentParser(description="survivordle — today's puzzle")
    ap.add_argument("--pool", default="public/contestants.json", help="path to the JSON pool")
    ap.add_argument("--at", help="ISO instant to evaluate instead of now (naive = UTC)")
    ap.add_argument("--timezone", default=DEFAULT_TIMEZONE, help="reference timezone")
    ap.add_argument("--epoch", default=DEFAULT_EPOCH.isoformat(), help="date of puzzle #1 (YYYY-MM-DD)")
    ap.add_argument("--seed", type=int, default=DEFAULT_SHUFFLE_SEED, help="shuffle seed")
    ap.add_argument("--strategy", choices=STRATEGIES, default="shuffled")
    ap.add_argument("--reveal", action="store_true", help="also print the answer")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = DailyConfig(epoch=date.fromisoformat(args.epoch), timezone=args.timezone,
                             shuffle_seed=args.seed, strategy=args.strategy)
        now = datetime.fromisoformat(args.at) if args.at else datetime.now(timezone.utc)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    selector = DailySelector(config)
    mins = int(selector.seconds_until_rollover(now) // 60)
    print(f"Survivordle #{selector.puzzle_number(now)} "
          f"({puzzle_date(now, config).isoformat()} {config.timezone}) | next in {mins // 60}h{mins % 60:02d}m")

    if args.reveal:
        try:
            target = selector.daily_target(load_pool(args.pool), now)
        except (FileNotFoundError, ValueError) as e:
            print(f"error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Answer: {target.name} — {target.season_name} (S{target.season}, #{target.placement})")


if __name__ == "__main__":
    main()
