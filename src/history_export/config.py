"""Profile locations for the supported browsers (macOS layout).

The home directory is resolved once and the derived paths are passed
explicitly to discovery, so tests can point everything at a temp dir.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from history_export.browser.models import Browser
from history_export.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CHROME_PROFILE_ROOT = Path("Library") / "Application Support" / "Google" / "Chrome"
FIREFOX_PROFILE_ROOT = Path("Library") / "Application Support" / "Firefox" / "Profiles"
SAFARI_HISTORY_FILE = Path("Library") / "Safari" / "History.db"


@dataclass(frozen=True)
class HistoryPaths:
    """Where each browser keeps its history on this machine."""

    chrome_root: Path
    firefox_root: Path
    safari_history: Path

    @classmethod
    def from_home(cls, home: Path | None = None) -> HistoryPaths:
        """Derive the macOS profile layout from the user's home directory."""
        if home is None:
            try:
                home = Path.home()
            except RuntimeError as e:
                raise ConfigurationError(f"Could not resolve home directory: {e}") from e
        logger.debug("Resolving browser profiles under %s", home)
        return cls(
            chrome_root=home / CHROME_PROFILE_ROOT,
            firefox_root=home / FIREFOX_PROFILE_ROOT,
            safari_history=home / SAFARI_HISTORY_FILE,
        )

    def root_for(self, browser: Browser) -> Path:
        """Directory (Chrome, Firefox) or file (Safari) that discovery inspects."""
        if browser is Browser.CHROME:
            return self.chrome_root
        if browser is Browser.FIREFOX:
            return self.firefox_root
        return self.safari_history
