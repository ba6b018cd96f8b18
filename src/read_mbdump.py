#!/usr/bin/env python3
"""
read_mbdump.py -- summarize MusicBrainz database dumps for mbstats-report

Reads:
  - <DUMP_DIR>/mbdump-editor.tar.bz2  (mbdump/editor_sanitised)
  - <DUMP_DIR>/mbdump-edit.tar.bz2    (mbdump/edit)
Writes:
  - <OUT_DIR>/editors-<year>.json     (one JSON object per editor per line)
"""

import argparse
import logging
import time

from mbstats import config
from mbstats.errors import ArchiveError, RowParseError, WriteError
from mbstats.extract import extract_dump
from mbstats.summaries import write_editor_stats
from mbstats.utils import format_elapsed

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="read-mbdump",
        description="Process MusicBrainz database dumps and write JSON data for mbstats-report.",
    )
    parser.add_argument("dump_dir", metavar="DUMP_DIR", help="Directory containing mbdump-*.tar.bz2 archives.")
    parser.add_argument("out_dir", metavar="OUT_DIR", help="Directory to write editors-<year>.json files to.")
    parser.add_argument(
        "--log-every",
        type=float,
        default=config.PROGRESS_LOG_SECONDS,
        help="Seconds between progress log lines while reading archives.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    start = time.monotonic()

    try:
        editors, stats = extract_dump(args.dump_dir, log_every=args.log_every)
    except (ArchiveError, RowParseError) as exc:
        logger.error("[!] Failed reading dumps: %s", exc)
        return 1
    try:
        written = write_editor_stats(args.out_dir, stats, editors)
    except WriteError as exc:
        logger.error("[!] Failed writing stats: %s", exc)
        return 1

    logger.info("[+] Wrote %d summary files in %s", len(written), format_elapsed(time.monotonic() - start))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
