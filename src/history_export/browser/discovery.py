"""Locate history databases under the browsers' profile directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from history_export.browser.sources import BrowserSource

if TYPE_CHECKING:
    from history_export.config import HistoryPaths

logger = logging.getLogger(__name__)


def list_candidate_paths(source: BrowserSource, paths: HistoryPaths) -> list[Path]:
    """Return the history databases to read for one browser (possibly none)."""
    root = paths.root_for(source.browser)
    if not source.walk:
        return _check_single_file(root, source)
    return _walk_for(root, source.history_filename)


def _walk_for(root: Path, filename: str) -> list[Path]:
    """Recursively collect files named `filename`, following symlinks."""
    if not root.is_dir():
        logger.info("Profile directory not found at %s", root)
        return []

    found: list[Path] = []
    seen: set[str] = set()
    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        real = os.path.realpath(dirpath)
        if real in seen:
            # Symlink loop; don't descend again.
            dirnames[:] = []
            continue
        seen.add(real)
        if filename in filenames:
            found.append(Path(dirpath) / filename)

    found.sort()
    return found


def _check_single_file(path: Path, source: BrowserSource) -> list[Path]:
    try:
        path.stat()
        readable = os.access(path, os.R_OK)
    except FileNotFoundError:
        logger.info("%s history file not found at %s. Skipping.", source.browser, path)
        return []
    except OSError:
        # macOS privacy protection can refuse even a stat of the file.
        readable = False
    if not readable:
        logger.warning(
            "%s history file at %s is not accessible. Skipping.", source.browser, path
        )
        if source.access_hint:
            logger.warning("%s", source.access_hint)
        return []
    return [path]
