#!/usr/bin/env python3
"""
mbstats_report.py -- MusicBrainz editor statistics from read-mbdump output

Reads:
  - <INPUT_DIR>/editors-<year>.json  (written by read-mbdump)
Writes:
  - report lines on stdout
"""

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional, TextIO

from mbstats import config
from mbstats.edit_types import UnknownEditTypeError, edit_type_name, named_edit_type
from mbstats.errors import SummaryReadError
from mbstats.stats import (
    edit_type_correlations,
    edit_type_counts,
    editor_histogram,
    editors_with_type,
    yearly_average_age,
    yearly_editors,
    yearly_edits,
)
from mbstats.summaries import EditorStats, read_all_editor_stats, read_editor_stats, summary_path

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    last_year = datetime.now().year - 1
    parser = argparse.ArgumentParser(
        prog="mbstats-report",
        description="Generate MusicBrainz stats using JSON data written by read-mbdump.",
    )
    parser.add_argument("input_dir", metavar="INPUT_DIR", help="Directory containing editors-<year>.json files.")
    parser.add_argument("--year", type=int, default=last_year, help="Year to display stats from (for applicable actions).")
    parser.add_argument(
        "--min-year",
        type=int,
        default=config.DEFAULT_MIN_YEAR,
        help="Minimum year to display stats from (for applicable actions).",
    )
    parser.add_argument(
        "--max-year", type=int, default=last_year, help="Maximum year to display stats from (for applicable actions)."
    )
    parser.add_argument("--editor", default="", help="Print edit type counts for the named editor.")
    parser.add_argument(
        "--editor-histogram", default="", metavar="TYPE", help="Print editor edit-count histogram for specified edit type."
    )
    parser.add_argument("--editor-list", default="", metavar="TYPE", help="Print editor names and edits for specified edit type.")
    parser.add_argument("--edit-types", action="store_true", help="Print edit types by descending number of editors.")
    parser.add_argument("--correlations", action="store_true", help="Print strongly correlated pairs of edit types.")
    parser.add_argument("--histogram-min", type=int, default=config.HISTOGRAM_MIN, help="Minimum value for histograms.")
    parser.add_argument("--histogram-max", type=int, default=config.HISTOGRAM_MAX, help="Maximum value for histograms.")
    parser.add_argument("--histogram-buckets", type=int, default=config.HISTOGRAM_BUCKETS, help="Buckets to use for histograms.")
    parser.add_argument(
        "--histogram-width", type=int, default=config.HISTOGRAM_BAR_WIDTH, help="Width of the longest histogram bar."
    )
    parser.add_argument(
        "--yearly-age",
        default="",
        metavar="TYPE",
        help="Print yearly average account age in years of editors with specified edit type.",
    )
    parser.add_argument("--yearly-editors", default="", metavar="TYPE", help="Print yearly editors for specified edit type.")
    parser.add_argument("--yearly-edits", default="", metavar="TYPE", help="Print yearly edits of specified type.")
    args = parser.parse_args(argv)

    if args.histogram_buckets < 1:
        parser.error("--histogram-buckets must be at least 1")
    if args.histogram_max < args.histogram_min:
        parser.error("--histogram-max must not be below --histogram-min")
    return args


def _read_year(input_dir: str, year: int) -> List[EditorStats]:
    return read_editor_stats(summary_path(input_dir, year))


def write_editor_breakdown(out: TextIO, stats: List[EditorStats], name: str) -> bool:
    for es in stats:
        if es.name == name:
            for et in sorted(es.edits):
                out.write(f"{edit_type_name(et):<37}  {es.edits[et]:5d}\n")
            return True
    return False


def run_report(args, out: TextIO) -> int:
    """Write the report selected by args to out and return the exit code."""
    if args.editor:
        stats = _read_year(args.input_dir, args.year)
        if not write_editor_breakdown(out, stats, args.editor):
            logger.warning("[!] Editor %r not found in %d", args.editor, args.year)
        return 0

    if args.editor_histogram:
        et = named_edit_type(args.editor_histogram)
        stats = _read_year(args.input_dir, args.year)
        hist = editor_histogram(stats, et, args.histogram_min, args.histogram_max, args.histogram_buckets)
        hist.write(out, 0, args.histogram_width)
        return 0

    if args.editor_list:
        et = named_edit_type(args.editor_list)
        for cnt, name in editors_with_type(_read_year(args.input_dir, args.year), et):
            out.write(f"{cnt:5d}  {name}\n")
        return 0

    if args.edit_types:
        for t in edit_type_counts(_read_year(args.input_dir, args.year)):
            out.write(f"{t.editors:5d} editors  {edit_type_name(t.edit_type)} ({t.total} edits)\n")
        return 0

    if args.correlations:
        for et1, et2, coeff in edit_type_correlations(_read_year(args.input_dir, args.year)):
            out.write(f"({edit_type_name(et1)}, {edit_type_name(et2)}) = {coeff:0.3f}\n")
        return 0

    if args.yearly_age:
        et = named_edit_type(args.yearly_age)
        for year, avg in yearly_average_age(read_all_editor_stats(args.input_dir, args.min_year, args.max_year), et):
            out.write(f"{year:4d}  {avg:0.1f}\n")
        return 0

    if args.yearly_editors:
        et = named_edit_type(args.yearly_editors)
        for year, cnt in yearly_editors(read_all_editor_stats(args.input_dir, args.min_year, args.max_year), et):
            out.write(f"{year:4d}  {cnt:5d}\n")
        return 0

    if args.yearly_edits:
        et = named_edit_type(args.yearly_edits)
        for year, cnt in yearly_edits(read_all_editor_stats(args.input_dir, args.min_year, args.max_year), et):
            out.write(f"{year:4d}  {cnt:6d}\n")
        return 0

    print("No action specified (e.g. --editor-histogram ARTIST_CREATE)", file=sys.stderr)
    return 2


def main(argv=None, out: Optional[TextIO] = None) -> int:
    args = parse_args(argv)
    try:
        return run_report(args, out or sys.stdout)
    except UnknownEditTypeError as exc:
        print(f"Failed looking up edit type: {exc}", file=sys.stderr)
        return 2
    except SummaryReadError as exc:
        print(f"Failed reading editor stats: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
