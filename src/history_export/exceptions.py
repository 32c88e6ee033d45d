"""Unified exception hierarchy for history-export."""


class HistoryExportError(Exception):
    """Base exception for all history-export errors."""


class ConfigurationError(HistoryExportError):
    """Profile locations could not be resolved (e.g. no home directory)."""


class EpochOverflowError(HistoryExportError):
    """A raw browser timestamp does not fit the datetime range.

    Fatal: never downgraded to a per-row or per-file skip.
    """


# Sources
class HistoryReadError(HistoryExportError):
    """Failed to read one browser history database."""


class HistoryPermissionError(HistoryReadError):
    """The history database exists but the OS denied access to it."""


# Report
class ExportError(HistoryExportError):
    """Failed to write or load a CSV report."""
