"""Per-editor data extraction from the editor and edit table dumps.

The musicbrainz-server schema (admin/sql/CreateTables.sql) defines the two
tables read here:

    editor: id, name, privs, email, website, bio, member_since,
            email_confirm_date, last_login_date, last_updated, birth_date,
            gender, area, password, ha1, deleted

    edit:   id, editor, type, status, autoedit, open_time, close_time,
            expire_time, language, quality

Only the handful of columns needed for the yearly summaries are kept.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Dict, Optional, Tuple

from . import config
from .dump import LineParser, read_archive

logger = logging.getLogger(__name__)

EditStats = Dict[int, int]  # edit type -> count
EditorStatsMap = Dict[int, EditStats]  # editor id -> counts
YearlyStats = Dict[int, EditorStatsMap]  # year -> editor id -> counts


@dataclass
class EditorInfo:
    """Subset of a row from the editor table."""

    name: str
    created: Optional[datetime] = None  # member_since
    active: Optional[datetime] = None  # last_login_date


def read_editor_archive(path, **kwargs) -> Dict[int, EditorInfo]:
    """Read an mbdump-editor.tar.bz2 archive and return editor info keyed by id."""
    editors: Dict[int, EditorInfo] = {}

    def handle_row(p: LineParser) -> None:
        editor_id = p.get_int(config.EDITOR_COL_ID, required=True)
        info = EditorInfo(
            name=p.get_string(config.EDITOR_COL_NAME),
            # Some accounts are missing a member_since value.
            created=p.get_time(config.EDITOR_COL_MEMBER_SINCE),
            active=p.get_time(config.EDITOR_COL_LAST_LOGIN),
        )
        if p.err is None:
            editors[editor_id] = info

    read_archive(path, config.EDITOR_ENTRY, handle_row, **kwargs)
    logger.info("[+] Loaded %d editors from %s", len(editors), path)
    return editors


def read_edit_archive(path, **kwargs) -> YearlyStats:
    """Read an mbdump-edit.tar.bz2 archive and return applied-edit counts.

    The result maps year -> editor id -> edit type -> count, where the year is
    the UTC calendar year of the edit's open time.
    """
    stats: YearlyStats = {}
    skipped = 0

    def handle_row(p: LineParser) -> None:
        nonlocal skipped
        if p.get_int(config.EDIT_COL_STATUS, required=True) != config.STATUS_APPLIED:
            skipped += 1
            return
        opened = p.get_time(config.EDIT_COL_OPEN_TIME, required=True)
        editor_id = p.get_int(config.EDIT_COL_EDITOR, required=True)
        edit_type = p.get_int(config.EDIT_COL_TYPE, required=True)
        if p.err is not None:
            return

        year = opened.astimezone(UTC).year
        editors = stats.get(year)
        if editors is None:
            editors = stats[year] = {}
        counts = editors.get(editor_id)
        if counts is None:
            counts = editors[editor_id] = {}
        counts[edit_type] = counts.get(edit_type, 0) + 1

    read_archive(path, config.EDIT_ENTRY, handle_row, **kwargs)
    logger.info(
        "[+] Counted applied edits for %d years from %s (%d non-applied rows skipped)",
        len(stats),
        path,
        skipped,
    )
    return stats


def extract_dump(dump_dir, **kwargs) -> Tuple[Dict[int, EditorInfo], YearlyStats]:
    """Read both dump archives in dump_dir, editors first."""
    dump_dir = Path(dump_dir)
    editors = read_editor_archive(dump_dir / config.EDITOR_ARCHIVE, **kwargs)
    stats = read_edit_archive(dump_dir / config.EDIT_ARCHIVE, **kwargs)
    return editors, stats
