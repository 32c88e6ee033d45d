"""Command-line entry point: export all local browser history to CSV."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from history_export.aggregator import HistoryAggregator
from history_export.config import HistoryPaths
from history_export.exceptions import ConfigurationError, EpochOverflowError, ExportError
from history_export.report import export_csv, report_filename

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="history-export",
        description=(
            "Export Chrome, Firefox and Safari history to "
            "browser_history_<timestamp>.csv in the current directory."
        ),
    )


def main(argv: list[str] | None = None) -> int:
    build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        paths = HistoryPaths.from_home()
        visits = HistoryAggregator(paths).collect()
    except (ConfigurationError, EpochOverflowError) as e:
        logger.critical("%s", e)
        return 1

    if not visits:
        print("No browser history found!")
        return 0

    output_path = Path(report_filename())
    try:
        export_csv(visits, output_path)
    except ExportError as e:
        logger.error("%s", e)
        return 1

    print(f"Exported {len(visits)} visits to {output_path}")
    return 0
