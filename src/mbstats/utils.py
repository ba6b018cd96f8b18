import sys
from datetime import UTC, datetime

from . import config


def format_elapsed(seconds):
    """Return compact HH:MM:SS elapsed display."""
    total = max(0, int(seconds))
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def progress_disabled():
    """Progress bars only make sense on an interactive terminal."""
    return not sys.stderr.isatty()


def format_iso8601(dt):
    """Return an ISO 8601 string, using the zero time for unset values and 'Z' for UTC."""
    if dt is None:
        return config.ZERO_TIME_TEXT
    text = dt.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def parse_iso8601(raw_ts):
    """Parse a timestamp written by format_iso8601. The zero time maps back to None."""
    if not isinstance(raw_ts, str):
        raise ValueError(f"timestamp must be a string, got {type(raw_ts).__name__}")
    normalized = raw_ts[:-1] + "+00:00" if raw_ts.endswith("Z") else raw_ts
    dt = datetime.fromisoformat(normalized)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    if dt == config.ZERO_TIME:
        return None
    return dt
