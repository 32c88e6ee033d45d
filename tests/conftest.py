"""Builders for minimal Chrome, Firefox and Safari history databases."""

import sqlite3
from pathlib import Path

import pytest


def _build(path: Path, schema: str, inserts: list[tuple[str, tuple]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.executescript(schema)
    for sql, params in inserts:
        conn.execute(sql, params)
    conn.commit()
    conn.close()
    return path


CHROME_SCHEMA = """
    CREATE TABLE urls (id INTEGER PRIMARY KEY, url TEXT, title TEXT);
    CREATE TABLE visits (id INTEGER PRIMARY KEY, url INTEGER, visit_time INTEGER);
"""

FIREFOX_SCHEMA = """
    CREATE TABLE moz_places (id INTEGER PRIMARY KEY, url TEXT, title TEXT);
    CREATE TABLE moz_historyvisits (id INTEGER PRIMARY KEY, place_id INTEGER, visit_date INTEGER);
"""

SAFARI_SCHEMA = """
    CREATE TABLE history_items (id INTEGER PRIMARY KEY, url TEXT);
    CREATE TABLE history_visits (
        id INTEGER PRIMARY KEY, history_item INTEGER, visit_time REAL, title TEXT
    );
"""


@pytest.fixture
def make_chrome_db():
    """make_chrome_db(path, [(url, title, visit_time), ...])"""

    def _make(path: Path, visits: list[tuple]) -> Path:
        inserts = []
        for i, (url, title, visit_time) in enumerate(visits, start=1):
            inserts.append(("INSERT INTO urls VALUES (?, ?, ?)", (i, url, title)))
            inserts.append(("INSERT INTO visits VALUES (?, ?, ?)", (i, i, visit_time)))
        return _build(path, CHROME_SCHEMA, inserts)

    return _make


@pytest.fixture
def make_firefox_db():
    def _make(path: Path, visits: list[tuple]) -> Path:
        inserts = []
        for i, (url, title, visit_date) in enumerate(visits, start=1):
            inserts.append(("INSERT INTO moz_places VALUES (?, ?, ?)", (i, url, title)))
            inserts.append(
                ("INSERT INTO moz_historyvisits VALUES (?, ?, ?)", (i, i, visit_date))
            )
        return _build(path, FIREFOX_SCHEMA, inserts)

    return _make


@pytest.fixture
def make_safari_db():
    def _make(path: Path, visits: list[tuple]) -> Path:
        inserts = []
        for i, (url, title, visit_time) in enumerate(visits, start=1):
            inserts.append(("INSERT INTO history_items VALUES (?, ?)", (i, url)))
            inserts.append(
                ("INSERT INTO history_visits VALUES (?, ?, ?, ?)", (i, i, visit_time, title))
            )
        return _build(path, SAFARI_SCHEMA, inserts)

    return _make
