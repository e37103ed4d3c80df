#!/usr/bin/env python3
# scripts/pulse_report.py
from __future__ import annotations

import argparse
import csv
import logging
import sys
from typing import Any, List

from sc2pulse.reports import DEFAULT_SORT, ladder, summary_1v1, summary_1v1_clan


def write_rows(rows: List[List[Any]]) -> None:
    writer = csv.writer(sys.stdout, delimiter="\t", lineterminator="\n")
    writer.writerows(rows)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Print SC2 Pulse reports as tab-separated rows.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every API request.")
    sub = ap.add_subparsers(dest="report", required=True)

    summary = sub.add_parser("summary", help="1v1 summary for character ids.")
    summary.add_argument("ids", type=int, nargs="+", help="Character ids.")
    summary.add_argument("--depth", type=int, default=30, help="Summary depth in days (default 30).")
    summary.add_argument("--sort-by", default=DEFAULT_SORT, help=f"Sort field (default {DEFAULT_SORT}).")

    clan = sub.add_parser("clan", help="1v1 summary for every clan member in a region.")
    clan.add_argument("tag", help="Clan tag, without brackets.")
    clan.add_argument("region", help="Region: us, eu, kr, cn.")
    clan.add_argument("--depth", type=int, default=30, help="Summary depth in days (default 30).")
    clan.add_argument("--sort-by", default=DEFAULT_SORT, help=f"Sort field (default {DEFAULT_SORT}).")

    top = sub.add_parser("ladder", help="Top of the 1v1 ladder.")
    top.add_argument("count", type=int, help="Number of teams.")
    top.add_argument("--region", action="append", default=None, help="Repeatable. Default: all regions.")
    top.add_argument("--league", action="append", default=None, help="Repeatable. Default: all leagues.")
    top.add_argument("--rating-start", type=int, default=None, help="Highest rating to include (default 10000).")
    top.add_argument("--reveal", action="store_true", help="Show pro nicknames.")
    top.add_argument("--season", type=int, default=None, help="Battle.net season id. Default: current.")
    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.report == "summary":
            rows = summary_1v1(args.ids, args.depth, args.sort_by)
        elif args.report == "clan":
            rows = summary_1v1_clan(args.tag, args.region, args.depth, args.sort_by)
        else:
            rows = ladder(
                args.count,
                regions=args.region,
                leagues=args.league,
                rating_start=args.rating_start,
                reveal=args.reveal,
                season=args.season,
            )
    except (RuntimeError, LookupError) as e:
        print(f"[PULSE] FAIL: {e}", file=sys.stderr)
        return 1

    write_rows(rows)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
