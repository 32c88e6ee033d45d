"""Tests for profile path configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest

from history_export.browser.models import Browser
from history_export.config import HistoryPaths
from history_export.exceptions import ConfigurationError


def test_from_home_macos_layout(tmp_path):
    paths = HistoryPaths.from_home(tmp_path)
    assert paths.chrome_root == tmp_path / "Library/Application Support/Google/Chrome"
    assert paths.firefox_root == tmp_path / "Library/Application Support/Firefox/Profiles"
    assert paths.safari_history == tmp_path / "Library/Safari/History.db"


def test_from_home_defaults_to_user_home(tmp_path):
    with patch.object(Path, "home", return_value=tmp_path):
        assert HistoryPaths.from_home() == HistoryPaths.from_home(tmp_path)


def test_unresolvable_home_is_fatal():
    with patch.object(Path, "home", side_effect=RuntimeError("no home")):
        with pytest.raises(ConfigurationError, match="home directory"):
            HistoryPaths.from_home()


def test_root_for(tmp_path):
    paths = HistoryPaths.from_home(tmp_path)
    assert paths.root_for(Browser.CHROME) == paths.chrome_root
    assert paths.root_for(Browser.FIREFOX) == paths.firefox_root
    assert paths.root_for(Browser.SAFARI) == paths.safari_history
