"""
Download a published contestants.json and keep it only if it validates.

What it does:
- Fetches the JSON pool served next to the web client (e.g. https://<host>/contestants.json).
- Writes it to a temporary file beside --out and runs the pool validator.
- Replaces --out only when validation passes (use --force to keep it anyway).

Usage:
    python -m script.fetch_pool --url https://example.org/contestants.json --out public/contestants.json
"""

import argparse
import sys
from pathlib import Path

import requests

from survivordle.datasets import pretty_summary, validate_pool


def fetch_pool(url: str) -> bytes:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.content


def main():
    ap = argparse.ArgumentParser(description="Download and validate a Survivordle pool")
    ap.add_argument("--url", required=True, help="URL of contestants.json")
    ap.add_argument("--out", default="public/contestants.json")
    ap.add_argument("--force", action="store_true", help="keep the file even if validation fails")
    args = ap.parse_args()

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    tmp = out.with_suffix(out.suffix + ".part")

    try:
        tmp.write_bytes(fetch_pool(args.url))
    except requests.RequestException as e:
        print(f"download failed: {e}", file=sys.stderr)
        sys.exit(1)

    rep = validate_pool(str(tmp))
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    if not rep["passed"] and not args.force:
        tmp.unlink()
        print("Validation failed — keeping the existing pool.", file=sys.stderr)
        sys.exit(1)

    tmp.replace(out)
    print(f"Wrote {rep['count']} appearances -> {out}")


if __name__ == "__main__":
    main()
