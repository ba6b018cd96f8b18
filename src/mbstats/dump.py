"""Streaming access to MusicBrainz PostgreSQL dump archives.

The dumps are tar containers (normally bzip2-compressed) holding one file per
table. Table files are newline-delimited rows of tab-separated columns, with
``\\N`` standing in for SQL NULL.
"""

import bz2
import io
import logging
import tarfile
import time
from contextlib import ExitStack, contextmanager
from datetime import UTC, datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Iterator, Optional, Tuple

import zstandard as zstd
from tqdm import tqdm

from . import config
from .errors import ArchiveError, RowParseError
from .utils import format_elapsed, progress_disabled

logger = logging.getLogger(__name__)

BZ2_SUFFIXES = {".bz2", ".tbz", ".tbz2"}
ZSTD_SUFFIXES = {".zst", ".tzst"}
READ_BUFFER_SIZE = 1024 * 1024
STREAM_ERRORS = (OSError, EOFError, tarfile.TarError, zstd.ZstdError)


def parse_dump_time(text: str) -> datetime:
    """Parse a PostgreSQL dump timestamp like '2020-01-01 12:34:56.789+00'."""
    match = config.DUMP_TIME_PATTERN.match(text)
    if not match:
        raise ValueError(f"cannot parse {text!r} as a timestamp")
    year, month, day, hour, minute, second, fraction, sign, off_hours, off_minutes = match.groups()
    micros = int((fraction or "0")[:6].ljust(6, "0"))
    tz = UTC
    if sign:
        offset = timedelta(hours=int(off_hours), minutes=int(off_minutes or 0))
        if offset:
            tz = timezone(-offset if sign == "-" else offset)
    return datetime(int(year), int(month), int(day), int(hour), int(minute), int(second), micros, tzinfo=tz)


class LineParser:
    """Extracts tab-separated values from a single line.

    The first failed access is recorded in ``err``. Every later access is a
    no-op returning a zero value, so callers read all the columns they need
    and check ``err`` once at the end.
    """

    __slots__ = ("line", "cols", "err")

    def __init__(self, line: str) -> None:
        self.line = line
        self.cols = line.split("\t")
        self.err: Optional[str] = None

    def fail(self, message: str) -> None:
        if self.err is None:
            self.err = message

    def check(self) -> None:
        if self.err is not None:
            raise RowParseError(self.line, self.err)

    def get_string(self, i: int) -> str:
        if self.err is not None:
            return ""
        if i < 0 or i >= len(self.cols):
            self.fail(f"column {i} requested but only have {len(self.cols)}")
            return ""
        return self.cols[i]

    def get_int(self, i: int, required: bool = False) -> Optional[int]:
        """Return column i as a 32-bit integer, or None if it is NULL."""
        s = self.get_string(i)
        if self.err is not None:
            return 0
        if s == config.NULL_COLUMN:
            if required:
                self.fail(f"column {i} is NULL")
                return 0
            return None
        if not config.INT_PATTERN.match(s):
            self.fail(f"cannot parse {s!r} as an integer")
            return 0
        value = int(s)
        if value < config.INT32_MIN or value > config.INT32_MAX:
            self.fail(f"value {s!r} out of 32-bit range")
            return 0
        return value

    def get_time(self, i: int, required: bool = False) -> Optional[datetime]:
        """Return column i as an aware datetime, or None if it is NULL."""
        s = self.get_string(i)
        if self.err is not None:
            return None
        if s == config.NULL_COLUMN:
            if required:
                self.fail(f"column {i} is NULL")
            return None
        try:
            return parse_dump_time(s)
        except ValueError as exc:
            self.fail(str(exc))
            return None


class CountingReader(io.RawIOBase):
    """Wraps a binary stream and counts the number of bytes read through it."""

    def __init__(self, raw) -> None:
        super().__init__()
        self.raw = raw
        self.nbytes = 0

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        n = self.raw.readinto(buffer)
        if n:
            self.nbytes += n
        return n


def _find_member(tar: tarfile.TarFile, path: Path, entry_name: str) -> tarfile.TarInfo:
    # Stream mode only allows a forward scan through the members.
    for member in tar:
        if member.name == entry_name and member.isfile():
            return member
    raise ArchiveError(
        "ENTRY_NOT_FOUND",
        f"file {entry_name!r} not found in archive {path}",
        {"path": str(path), "entry": entry_name},
    )


@contextmanager
def open_archive_entry(path, entry_name: str) -> Iterator[Tuple[io.BufferedIOBase, int]]:
    """Yield (stream, size) for the named file inside a compressed tar archive."""
    path = Path(path)
    with ExitStack() as stack:
        try:
            fh = stack.enter_context(open(path, "rb"))
            if path.suffix in BZ2_SUFFIXES:
                # pbzip2 and lbzip2 write concatenated bz2 streams; BZ2File reads all of them.
                fh = stack.enter_context(bz2.open(fh, "rb"))
                tar = stack.enter_context(tarfile.open(fileobj=fh, mode="r|"))
            elif path.suffix in ZSTD_SUFFIXES:
                fh = stack.enter_context(zstd.ZstdDecompressor().stream_reader(fh))
                tar = stack.enter_context(tarfile.open(fileobj=fh, mode="r|"))
            else:
                tar = stack.enter_context(tarfile.open(fileobj=fh, mode="r|*"))
            member = _find_member(tar, path, entry_name)
            stream = tar.extractfile(member)
        except STREAM_ERRORS as exc:
            raise ArchiveError(
                "ARCHIVE_UNREADABLE", f"failed reading {path}: {exc}", {"path": str(path)}
            ) from exc
        yield stream, member.size


def _decode_line(raw: bytes) -> str:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RowParseError(raw.decode("utf-8", errors="backslashreplace"), str(exc)) from exc


def _iter_raw_lines(reader, path, entry_name: str) -> Iterator[bytes]:
    """Yield raw lines from reader, turning stream failures into ArchiveError."""
    nlines = 0
    try:
        for raw in reader:
            yield raw
            nlines += 1
    except STREAM_ERRORS as exc:
        raise ArchiveError(
            "ARCHIVE_UNREADABLE",
            f"failed reading {entry_name} from {path} after {nlines} rows: {exc}",
            {"path": str(path), "entry": entry_name, "rows": nlines},
        ) from exc


def _percent(nbytes: int, size: int) -> float:
    if size <= 0:
        return 100.0
    return nbytes / size * 100


def read_archive(
    path,
    entry_name: str,
    handle_row: Callable[[LineParser], None],
    *,
    log_every: float = config.PROGRESS_LOG_SECONDS,
) -> int:
    """Stream the named file in the archive at path, calling handle_row once per line.

    Rows are never buffered beyond the current line. If handle_row leaves the
    parser in an error state, RowParseError is raised and reading stops.
    Returns the number of rows read.
    """
    nrows = 0
    with open_archive_entry(path, entry_name) as (stream, size):
        logger.info("[*] Processing %s (%0.1f MB)", entry_name, size / config.MB)
        counter = CountingReader(stream)
        reader = io.BufferedReader(counter, buffer_size=READ_BUFFER_SIZE)
        start_time = time.monotonic()
        last_log = start_time
        for raw in tqdm(
            _iter_raw_lines(reader, path, entry_name),
            desc=f"Reading {entry_name}",
            unit=" rows",
            miniters=config.TQDM_MINITERS,
            disable=progress_disabled(),
        ):
            parser = LineParser(_decode_line(raw))
            handle_row(parser)
            parser.check()

            nrows += 1
            now = time.monotonic()
            if now - last_log > log_every:
                logger.info(
                    "[*] Read %4.1f%% (%d rows, %0.1f MB)",
                    _percent(counter.nbytes, size),
                    nrows,
                    counter.nbytes / config.MB,
                )
                last_log = now
    logger.info(
        "[+] Read %d rows from %s in %s", nrows, entry_name, format_elapsed(time.monotonic() - start_time)
    )
    return nrows
