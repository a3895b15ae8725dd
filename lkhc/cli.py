from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_WEEKS, DEFAULT_YEAR, default_archive_root, describe_year_ranges, is_supported_year
from .errors import NoResultsError
from .export import result_rows, write_csv, write_xlsx
from .ingest import results_for_year


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="python -m lkhc", description="Low-Key Hillclimbs results archive -> CSV")
    parser.add_argument("--year", type=int, default=DEFAULT_YEAR, help="Year to parse results for")
    parser.add_argument("--archive", type=Path, default=default_archive_root(), help="Root of the local results archive")
    parser.add_argument(
        "--weeks",
        nargs="+",
        type=int,
        default=list(DEFAULT_WEEKS),
        help="Weeks to read, e.g. 1 2 3 (default: 1-10)",
    )
    parser.add_argument("--out", type=Path, default=None, help="Output file (default: stdout)")
    parser.add_argument("--format", choices=["csv", "xlsx"], default="csv", help="Output format")

    args = parser.parse_args(argv)

    if not is_supported_year(args.year):
        print(
            f"year must be in the range {describe_year_ranges()} but was {args.year}",
            file=sys.stderr,
        )
        parser.print_help(sys.stderr)
        return 1
    if args.format == "xlsx" and args.out is None:
        print("--format xlsx requires --out", file=sys.stderr)
        return 1

    try:
        summary = results_for_year(archive_root=args.archive, year=args.year, weeks=args.weeks)
    except NoResultsError as exc:
        print(exc, file=sys.stderr)
        return 1

    rows = result_rows(year=summary.year, results=summary.results)
    if args.format == "xlsx":
        count = write_xlsx(rows, args.out, sheet_title=str(summary.year))
    else:
        count = write_csv(rows, args.out if args.out is not None else sys.stdout)

    if args.out is None:
        print(
            "Done:",
            f"year={summary.year}",
            f"weeks={len(summary.results)}",
            f"failed={len(summary.failures)}",
            f"rows={count}",
            sep=" ",
            file=sys.stderr,
        )
    return 0
