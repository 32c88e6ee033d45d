"""Browser history data access (Chrome, Firefox, Safari; macOS layout)."""

from history_export.browser.discovery import list_candidate_paths
from history_export.browser.epochs import chrome_to_utc, firefox_to_utc, safari_to_utc
from history_export.browser.models import Browser, VisitRecord
from history_export.browser.reader import read_history
from history_export.browser.sources import SOURCES, BrowserSource

__all__ = [
    "Browser",
    "BrowserSource",
    "SOURCES",
    "VisitRecord",
    "chrome_to_utc",
    "firefox_to_utc",
    "list_candidate_paths",
    "read_history",
    "safari_to_utc",
]
