"""Read-only access to Chrome, Firefox and Safari history databases."""

from __future__ import annotations

import logging
import shutil
import sqlite3
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from urllib.parse import quote

from history_export.browser.models import VisitRecord
from history_export.browser.sources import BrowserSource, TitleDefault
from history_export.exceptions import HistoryPermissionError, HistoryReadError

logger = logging.getLogger(__name__)

# Files SQLite may create beside the scratch copy while it is open.
_SIDECAR_SUFFIXES = ("-wal", "-shm", "-journal")


@contextmanager
def scratch_copy(
    path: Path, source: BrowserSource, scratch_dir: Path | None = None
) -> Iterator[Path]:
    """Copy a (possibly locked) history DB to a temp file and remove it afterwards."""
    label = source.browser.value.lower()
    try:
        with tempfile.NamedTemporaryFile(
            prefix=f"{label}-history-", suffix=".db", dir=scratch_dir, delete=False
        ) as tmp:
            tmp_path = Path(tmp.name)
    except OSError as e:
        raise HistoryReadError(f"Cannot create scratch copy for {path}: {e}") from e
    try:
        try:
            shutil.copy2(path, tmp_path)
        except FileNotFoundError as e:
            raise HistoryReadError(
                f"{source.browser} history database not found at {path}"
            ) from e
        except PermissionError as e:
            message = f"Permission denied reading {source.browser} history at {path}"
            if source.access_hint:
                message = f"{message}. {source.access_hint}"
            raise HistoryPermissionError(message) from e
        except OSError as e:
            raise HistoryReadError(
                f"Failed to copy {source.browser} history database {path}: {e}"
            ) from e
        yield tmp_path
    finally:
        for candidate in [tmp_path, *(Path(f"{tmp_path}{s}") for s in _SIDECAR_SUFFIXES)]:
            try:
                candidate.unlink(missing_ok=True)
            except OSError as e:
                logger.warning("Failed to remove scratch file %s: %s", candidate, e)


def read_history(
    path: Path, source: BrowserSource, scratch_dir: Path | None = None
) -> list[VisitRecord]:
    """Return every visit stored in one history database.

    The database is read from a scratch copy so a running browser holding a
    lock on the original does not get in the way. Any malformed row fails
    the whole file.
    """
    path = Path(path)
    query, params = source.build_query()
    with scratch_copy(path, source, scratch_dir) as db_copy:
        conn: sqlite3.Connection | None = None
        try:
            conn = sqlite3.connect(f"file:{quote(str(db_copy))}?mode=ro", uri=True)
            conn.row_factory = sqlite3.Row
            rows = conn.execute(query, params).fetchall()
        except sqlite3.Error as e:
            raise HistoryReadError(
                f"Failed querying {source.browser} history at {path}: {e}"
            ) from e
        finally:
            if conn is not None:
                conn.close()

    source_path = str(path)
    visits: list[VisitRecord] = []
    for index, row in enumerate(rows):
        try:
            visits.append(_row_to_visit(row, source, source_path))
        except (TypeError, ValueError) as e:
            raise HistoryReadError(
                f"Failed to read {source.browser} history entries from {path} "
                f"(row {index}): {e}"
            ) from e

    logger.debug("Read %d %s visits from %s", len(visits), source.browser, path)
    return visits


def _row_to_visit(row: sqlite3.Row, source: BrowserSource, source_path: str) -> VisitRecord:
    url = row["url"]
    if not isinstance(url, str):
        raise TypeError(f"url must be text, got {type(url).__name__}")

    title = row["title"]
    if title is None:
        if source.title_default is TitleDefault.URL:
            title = url
        elif source.title_default is TitleDefault.EMPTY:
            title = ""
        else:
            raise ValueError(f"missing title for {url}")
    elif not isinstance(title, str):
        raise TypeError(f"title must be text, got {type(title).__name__}")

    raw_time = row["visit_time"]
    allowed = (int, float) if source.accepts_float_time else (int,)
    if not isinstance(raw_time, allowed):
        raise TypeError(f"visit time has unexpected type {type(raw_time).__name__}")

    return VisitRecord(
        url=url,
        title=title,
        visit_time=source.to_utc(raw_time),
        source_path=source_path,
        browser=source.browser,
    )
