"""Per-year editor summary files (editors-<year>.json).

Each file holds one JSON object per line, one per editor with at least one
applied edit in that year:

    {"id": 1, "name": "alice", "created": "2010-01-01T00:00:00Z",
     "active": "2020-01-01T00:00:00Z", "edits": {"5": 3}}

Unset timestamps are written as the zero time 0001-01-01T00:00:00Z.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, NamedTuple, Optional

import ijson
import jsonschema

from . import config
from .errors import SummaryReadError, WriteError
from .extract import EditorInfo, EditStats, YearlyStats
from .utils import format_iso8601, parse_iso8601

logger = logging.getLogger(__name__)

EDITOR_STATS_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["id", "name", "created", "active", "edits"],
    "properties": {
        "id": {"type": "integer"},
        "name": {"type": "string"},
        "created": {"type": "string"},
        "active": {"type": "string"},
        "edits": {
            "type": "object",
            "propertyNames": {"pattern": "^-?[0-9]+$"},
            "additionalProperties": {"type": "integer", "minimum": 0},
        },
    },
}
_VALIDATOR = jsonschema.Draft202012Validator(EDITOR_STATS_SCHEMA)
BLANK_CHECK_CHUNK = 64 * 1024


@dataclass(frozen=True)
class EditorStats:
    """A single editor and their edit counts within one year."""

    id: int
    name: str = ""
    created: Optional[datetime] = None
    active: Optional[datetime] = None
    edits: Dict[int, int] = field(default_factory=dict)

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "created": format_iso8601(self.created),
            "active": format_iso8601(self.active),
            "edits": {str(et): cnt for et, cnt in self.edits.items() if cnt},
        }

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "EditorStats":
        return cls(
            id=obj["id"],
            name=obj["name"],
            created=parse_iso8601(obj["created"]),
            active=parse_iso8601(obj["active"]),
            edits={int(et): cnt for et, cnt in obj["edits"].items()},
        )


class YearSummary(NamedTuple):
    year: int
    stats: List[EditorStats]


def summary_path(directory, year: int) -> Path:
    return Path(directory) / config.SUMMARY_FILE_TEMPLATE.format(year=year)


def merge_editor_stats(editor_id: int, edits: EditStats, editors: Mapping[int, EditorInfo]) -> EditorStats:
    """Combine an editor's counts with whatever metadata is known for them."""
    info = editors.get(editor_id)
    if info is None:
        # Edits can reference editors that are absent from the editor dump.
        return EditorStats(id=editor_id, edits=edits)
    return EditorStats(id=editor_id, name=info.name, created=info.created, active=info.active, edits=edits)


def write_editor_stats(out_dir, stats: YearlyStats, editors: Mapping[int, EditorInfo]) -> List[Path]:
    """Write one editors-<year>.json file per year into out_dir and return their paths."""
    out_dir = Path(out_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError("WRITE_FAILED", f"failed creating {out_dir}: {exc}", {"path": str(out_dir)}) from exc

    written = []
    for year, editor_counts in stats.items():
        path = summary_path(out_dir, year)
        logger.info("[*] Writing %s", path)
        try:
            with open(path, "w", encoding="utf-8") as fh:
                for editor_id, edits in editor_counts.items():
                    record = merge_editor_stats(editor_id, edits, editors)
                    fh.write(json.dumps(record.to_json(), ensure_ascii=False))
                    fh.write("\n")
        except OSError as exc:
            raise WriteError("WRITE_FAILED", f"failed writing {path}: {exc}", {"path": str(path)}) from exc
        written.append(path)
    return written


def _validate_record(obj: Any, path: Path, index: int) -> None:
    errors = sorted(_VALIDATOR.iter_errors(obj), key=lambda e: len(list(e.absolute_path)))
    if errors:
        error = errors[0]
        raise SummaryReadError(
            "BAD_SUMMARY",
            f"record #{index} in {path} is invalid: {error.message}",
            {"path": str(path), "index": index, "field": list(error.absolute_path)},
        )


def _is_blank(fh) -> bool:
    """Return True if the rest of fh is only whitespace, rewinding it otherwise."""
    while True:
        chunk = fh.read(BLANK_CHECK_CHUNK)
        if not chunk:
            return True
        if chunk.strip():
            fh.seek(0)
            return False


def read_editor_stats(path) -> List[EditorStats]:
    """Read an editors-<year>.json file written by write_editor_stats.

    An empty (or whitespace-only) file holds no records.
    """
    path = Path(path)
    stats: List[EditorStats] = []
    try:
        with open(path, "rb") as fh:
            if _is_blank(fh):
                return stats
            for index, obj in enumerate(ijson.items(fh, "", multiple_values=True)):
                _validate_record(obj, path, index)
                stats.append(EditorStats.from_json(obj))
    except OSError as exc:
        raise SummaryReadError("BAD_SUMMARY", f"failed reading {path}: {exc}", {"path": str(path)}) from exc
    except ijson.JSONError as exc:
        raise SummaryReadError(
            "BAD_SUMMARY",
            f"failed decoding {path} after {len(stats)} records: {exc}",
            {"path": str(path), "records": len(stats)},
        ) from exc
    except ValueError as exc:
        raise SummaryReadError(
            "BAD_SUMMARY",
            f"bad timestamp in record #{len(stats)} of {path}: {exc}",
            {"path": str(path), "index": len(stats)},
        ) from exc
    return stats


def _year_from_path(path: Path) -> Optional[int]:
    name = path.name
    if not (name.startswith(config.SUMMARY_FILE_PREFIX) and name.endswith(config.SUMMARY_FILE_SUFFIX)):
        return None
    raw = name[len(config.SUMMARY_FILE_PREFIX) : -len(config.SUMMARY_FILE_SUFFIX)]
    if not raw.isascii() or not raw.isdigit():
        return None
    return int(raw)


def read_all_editor_stats(directory, min_year: int, max_year: int) -> List[YearSummary]:
    """Read every editors-<year>.json file in directory with min_year <= year <= max_year.

    The result is sorted by ascending year.
    """
    directory = Path(directory)
    summaries: List[YearSummary] = []
    for path in directory.glob(config.SUMMARY_FILE_GLOB):
        year = _year_from_path(path)
        if year is None:
            continue
        if year < min_year or year > max_year:
            continue
        summaries.append(YearSummary(year, read_editor_stats(path)))
    summaries.sort(key=lambda ys: ys.year)
    logger.info("[+] Loaded %d year summaries from %s", len(summaries), directory)
    return summaries
