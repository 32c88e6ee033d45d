"""Per-browser history database layouts.

A single reader handles all three browsers; everything that differs
between them (tables, epoch, title fallback, url filter) lives here.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from history_export.browser.epochs import chrome_to_utc, firefox_to_utc, safari_to_utc
from history_export.browser.models import Browser

FULL_DISK_ACCESS_HINT = (
    "Reading Safari history requires Full Disk Access. "
    "Go to System Settings > Privacy & Security > Full Disk Access "
    "and enable it for your terminal application."
)


class TitleDefault(Enum):
    """What to do with a visit whose page title is NULL."""

    REQUIRED = "required"  # NULL title is a malformed row
    URL = "url"
    EMPTY = "empty"


@dataclass(frozen=True)
class BrowserSource:
    """How to find and read one browser's history database."""

    browser: Browser
    history_filename: str
    pages_table: str
    visits_table: str
    url_column: str
    title_column: str
    time_column: str
    join_condition: str
    to_utc: Callable[[int | float], datetime]
    accepts_float_time: bool = False
    title_default: TitleDefault = TitleDefault.REQUIRED
    excluded_prefixes: tuple[str, ...] = ()
    walk: bool = True
    access_hint: str | None = None

    def build_query(self) -> tuple[str, tuple[str, ...]]:
        """Return the visit query and its LIKE parameters."""
        where = ""
        params: tuple[str, ...] = ()
        if self.excluded_prefixes:
            clauses = [f"{self.url_column} NOT LIKE ?" for _ in self.excluded_prefixes]
            where = "WHERE " + " AND ".join(clauses)
            params = tuple(f"{prefix}%" for prefix in self.excluded_prefixes)
        query = f"""
            SELECT
                {self.url_column} AS url,
                {self.title_column} AS title,
                {self.time_column} AS visit_time
            FROM {self.pages_table}
            JOIN {self.visits_table} ON {self.join_condition}
            {where}
            ORDER BY {self.time_column} DESC
        """
        return query, params


CHROME = BrowserSource(
    browser=Browser.CHROME,
    history_filename="History",
    pages_table="urls",
    visits_table="visits",
    url_column="urls.url",
    title_column="urls.title",
    time_column="visits.visit_time",
    join_condition="urls.id = visits.url",
    to_utc=chrome_to_utc,
)

FIREFOX = BrowserSource(
    browser=Browser.FIREFOX,
    history_filename="places.sqlite",
    pages_table="moz_places",
    visits_table="moz_historyvisits",
    url_column="moz_places.url",
    title_column="moz_places.title",
    time_column="moz_historyvisits.visit_date",
    join_condition="moz_places.id = moz_historyvisits.place_id",
    to_utc=firefox_to_utc,
    title_default=TitleDefault.URL,
    excluded_prefixes=("about:", "place:"),
)

SAFARI = BrowserSource(
    browser=Browser.SAFARI,
    history_filename="History.db",
    pages_table="history_items",
    visits_table="history_visits",
    url_column="history_items.url",
    title_column="history_visits.title",
    time_column="history_visits.visit_time",
    join_condition="history_items.id = history_visits.history_item",
    to_utc=safari_to_utc,
    accepts_float_time=True,
    title_default=TitleDefault.EMPTY,
    walk=False,
    access_hint=FULL_DISK_ACCESS_HINT,
)

# Read order for a run.
SOURCES: tuple[BrowserSource, ...] = (CHROME, FIREFOX, SAFARI)
