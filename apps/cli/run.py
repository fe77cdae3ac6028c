# apps/cli/run.py
"""
CLI entry point for Survivordle solver simulations.

This script:
  1) Validates the pool (prints counts + SHA, flags duplicate ids etc.).
  2) Loads the pool and instantiates the requested solver.
  3) Plays a batch of games against the first N days of the daily order (or a
     seeded sample of the pool) with a live progress indicator and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, pool hash, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from survivordle.daily import DailyConfig, DailySelector
from survivordle.datasets import load_pool, pretty_summary, validate_pool
from survivordle.engine import Evaluator
from survivordle.harness import MAX_GUESSES, run_case, summarize
from survivordle.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from survivordle.solvers import create_solver, get_solver_ids


def main():
    """
    Parse CLI args, validate the pool, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="survivordle — run solver simulations")
    ap.add_argument("--solver", default="random_consistent",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--pool", default="public/contestants.json", help="path to the JSON pool")
    ap.add_argument("--order", choices=["daily", "random"], default="daily",
                    help="daily = targets in puzzle order; random = seeded shuffle of the pool")
    ap.add_argument("--sample", type=int, help="play only the first K targets")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-guesses", type=int, default=MAX_GUESSES, help="guess budget per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["bar", "plain", "off"],
        default="bar",
        help="Show run progress (bar = tqdm, plain = one status line).",
    )
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the pool and print a one-liner summary
    rep = validate_pool(args.pool)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    # 2) Load (fails fast on records missing identity fields)
    try:
        pool = load_pool(args.pool)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    if not pool:
        print("error: pool is empty", file=sys.stderr)
        sys.exit(1)

    solver = create_solver(args.solver)
    evaluator = Evaluator()

    # 3) Choose cases
    if args.order == "daily":
        cases = DailySelector(DailyConfig()).shuffled_pool(pool)
    else:
        cases = list(pool)
        random.Random(args.seed).shuffle(cases)
    if args.sample:
        cases = cases[: args.sample]
    total = len(cases)

    # 4) Run batch with live progress
    results = []
    start = time.time()
    last_print = 0.0
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if args.progress == "bar" else cases

    for idx, target in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        r = run_case(solver, target, pool=pool, evaluator=evaluator,
                     max_turns=args.max_guesses, seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if args.progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if args.progress == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results, max_turns=args.max_guesses)
    mean = summary["mean_guesses"]
    print(f"games={summary['games']} | win_rate={summary['win_rate']:.3f} | "
          f"mean_guesses={'-' if mean is None else f'{mean:.2f}'} | dist={summary['distribution']}")

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_guesses)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "pool": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
