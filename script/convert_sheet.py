"""
Convert the master spreadsheet into the JSON pool.

Run this whenever the sheet is updated: export the "Contestants" tab as CSV,
then

    python -m script.convert_sheet --in Survivordle_Master.csv --out public/contestants.json

The column layout is fixed (see survivordle.datasets.convert.COL). After
writing, the pool is validated and a one-line summary is printed.
"""

import argparse

from survivordle.datasets import convert_csv, pretty_summary, validate_pool


def main():
    ap = argparse.ArgumentParser(description="Convert the Contestants sheet (CSV) to contestants.json")
    ap.add_argument("--in", dest="inp", default="Survivordle_Master.csv", help="exported CSV")
    ap.add_argument("--out", default="public/contestants.json", help="JSON pool to write")
    args = ap.parse_args()

    written, skipped = convert_csv(args.inp, args.out)
    print(f"Wrote {written} contestants to {args.out} (skipped {skipped} blank rows)")

    rep = validate_pool(args.out)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")


if __name__ == "__main__":
    main()
