import re
from datetime import UTC, datetime

# Dump archives and the table files inside them
EDITOR_ARCHIVE = "mbdump-editor.tar.bz2"
EDIT_ARCHIVE = "mbdump-edit.tar.bz2"
EDITOR_ENTRY = "mbdump/editor_sanitised"
EDIT_ENTRY = "mbdump/edit"

# PostgreSQL dump conventions
NULL_COLUMN = r"\N"  # empty column value in PostgreSQL dumps
DUMP_TIME_PATTERN = re.compile(
    r"^([0-9]{4})-([0-9]{2})-([0-9]{2}) ([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?(?:([+-])([0-9]{2})(?::?([0-9]{2}))?)?$"
)
INT_PATTERN = re.compile(r"^[+-]?[0-9]+$")
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# editor table columns
EDITOR_COL_ID = 0
EDITOR_COL_NAME = 1
EDITOR_COL_MEMBER_SINCE = 6
EDITOR_COL_LAST_LOGIN = 8

# edit table columns
EDIT_COL_EDITOR = 1
EDIT_COL_TYPE = 2
EDIT_COL_STATUS = 3
EDIT_COL_OPEN_TIME = 5

# Edit statuses (root/types/edit.js in musicbrainz-server):
# 1 OPEN, 2 APPLIED, 3 FAILEDVOTE, 4 FAILEDDEP, 5 ERROR, 6 FAILEDPREREQ, 7 NOVOTES, 9 DELETED
STATUS_APPLIED = 2

# Progress reporting while streaming archives
PROGRESS_LOG_SECONDS = 5
MB = 1024 * 1024
TQDM_MINITERS = 10000

# Per-year summary files
SUMMARY_FILE_TEMPLATE = "editors-{year}.json"
SUMMARY_FILE_GLOB = "editors-????.json"
SUMMARY_FILE_PREFIX = "editors-"
SUMMARY_FILE_SUFFIX = ".json"
ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)
ZERO_TIME_TEXT = "0001-01-01T00:00:00Z"

# Report defaults
DEFAULT_MIN_YEAR = 2000
HISTOGRAM_MIN = 1
HISTOGRAM_MAX = 100
HISTOGRAM_BUCKETS = 10
HISTOGRAM_BAR_WIDTH = 60
CORRELATION_THRESHOLD = 0.5
SECONDS_PER_YEAR = 86400 * 365

# Edit type table generation
CONSTANTS_URL = (
    "https://raw.githubusercontent.com/metabrainz/musicbrainz-server/master/lib/MusicBrainz/Server/Constants.pm"
)
HEADERS = {"User-Agent": "mbstats/1.0 (edit type table generator)"}
API_TIMEOUT = 30  # Seconds per HTTP request
