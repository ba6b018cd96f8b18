from typing import Any, Optional


class StatsError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ArchiveError(StatsError):
    """The archive could not be read or does not contain the requested entry."""


class RowParseError(StatsError):
    """A dump row could not be parsed. The raw line is kept for diagnostics."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__("BAD_ROW", f"bad row {line!r}: {reason}", {"line": line, "reason": reason})
        self.line = line
        self.reason = reason


class WriteError(StatsError):
    """A summary file or its directory could not be written."""


class SummaryReadError(StatsError):
    """A summary file could not be read or decoded."""
