"""Merge visits from every discovered history database into one timeline."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from history_export.browser.discovery import list_candidate_paths
from history_export.browser.models import VisitRecord
from history_export.browser.reader import read_history
from history_export.browser.sources import SOURCES, BrowserSource
from history_export.config import HistoryPaths
from history_export.exceptions import HistoryReadError

logger = logging.getLogger(__name__)

Reader = Callable[..., list[VisitRecord]]


def sort_visits(records: Iterable[VisitRecord]) -> list[VisitRecord]:
    """Newest first. Equal timestamps keep their arrival order."""
    return sorted(records, key=lambda v: v.visit_time, reverse=True)


class HistoryAggregator:
    """Read every history database found for the configured profiles."""

    def __init__(
        self,
        paths: HistoryPaths,
        sources: Iterable[BrowserSource] = SOURCES,
        reader: Reader = read_history,
        scratch_dir: Path | None = None,
    ) -> None:
        self.paths = paths
        self.sources = tuple(sources)
        self.reader = reader
        self.scratch_dir = scratch_dir
        self.last_errors: dict[str, str] = {}

    def collect(self) -> list[VisitRecord]:
        """Read all sources; a failing file is logged and skipped."""
        self.last_errors = {}
        visits: list[VisitRecord] = []

        for source in self.sources:
            for history_file in list_candidate_paths(source, self.paths):
                logger.info("Reading %s history from: %s", source.browser, history_file)
                try:
                    found = self.reader(history_file, source, self.scratch_dir)
                except HistoryReadError as e:
                    self.last_errors[str(history_file)] = str(e)
                    logger.error("Error reading %s history: %s", source.browser, e)
                    if source.access_hint and source.access_hint not in str(e):
                        logger.error("Note: %s", source.access_hint)
                    continue
                logger.info("Found %d %s visits", len(found), source.browser)
                visits.extend(found)

        return sort_visits(visits)
