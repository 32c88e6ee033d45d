"""Data models for the browser history module."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Browser(str, Enum):
    """Which browser (and therefore which query and epoch) produced a record."""

    CHROME = "Chrome"
    FIREFOX = "Firefox"
    SAFARI = "Safari"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VisitRecord:
    """One visit read from a browser history database."""

    url: str
    title: str
    visit_time: datetime  # timezone-aware UTC
    source_path: str
    browser: Browser

    def __post_init__(self) -> None:
        if self.visit_time.tzinfo is None:
            raise ValueError("visit_time must be timezone-aware")
        if not self.source_path:
            raise ValueError("source_path must not be empty")
