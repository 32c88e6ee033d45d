"""CSV report of merged browser history."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

import dateutil.parser as parser

from history_export.browser.models import Browser, VisitRecord
from history_export.exceptions import ExportError

logger = logging.getLogger(__name__)

COLUMNS = ["Timestamp", "URL", "Title", "History File", "Browser"]


def report_filename(now: datetime | None = None) -> str:
    """Name for a new report, stamped with the local time of the run."""
    now = now or datetime.now()
    return f"browser_history_{now.strftime('%Y-%m-%d_%H-%M-%S')}.csv"


def format_timestamp(dt: datetime) -> str:
    """RFC 3339 in UTC, e.g. ``2024-06-01T12:00:00+00:00``."""
    return dt.astimezone(timezone.utc).isoformat()


def export_csv(records: Iterable[VisitRecord], destination: Path) -> Path:
    """Write `records` to `destination`, one row per visit."""
    destination = Path(destination)
    count = 0
    try:
        with destination.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(COLUMNS)
            for visit in records:
                writer.writerow([
                    format_timestamp(visit.visit_time),
                    visit.url,
                    visit.title,
                    visit.source_path,
                    visit.browser.value,
                ])
                count += 1
    except OSError as e:
        raise ExportError(f"Failed to write report {destination}: {e}") from e

    logger.debug("Wrote %d rows to %s", count, destination)
    return destination


def read_report(path: Path) -> list[VisitRecord]:
    """Load a report written by `export_csv` back into visit records."""
    path = Path(path)
    try:
        with path.open("r", newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = [c for c in COLUMNS if c not in (reader.fieldnames or [])]
            if missing:
                raise ExportError(f"Report {path} is missing columns: {', '.join(missing)}")
            rows = list(reader)
    except OSError as e:
        raise ExportError(f"Failed to read report {path}: {e}") from e

    visits: list[VisitRecord] = []
    for row in rows:
        try:
            visit_time = parser.isoparse(row["Timestamp"])
            browser = Browser(row["Browser"])
            visits.append(
                VisitRecord(
                    url=row["URL"],
                    title=row["Title"],
                    visit_time=visit_time,
                    source_path=row["History File"],
                    browser=browser,
                )
            )
        except ValueError as e:
            raise ExportError(f"Malformed row in report {path}: {e}") from e
    return visits
