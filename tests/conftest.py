# Rev 0.1.0

"""Pytest fixtures for dailies (Rev 0.1.0)"""
from __future__ import annotations
import os
import pytest
from pathlib import Path
from dailies.repositories.db import Database
from dailies.repositories.sqlite_slot_repository import SQLiteSlotRepository
from dailies.services.entry_store import EntryStore




@pytest.fixture()
def db(tmp_path: Path):
    db = Database(path=str(tmp_path / "test.db"))
    try:
        db.run_migrations()
        yield db
    finally:
        db.close()


@pytest.fixture()
def slots(db):
    return SQLiteSlotRepository(db)


@pytest.fixture()
def store(slots):
    s = EntryStore(slots)
    s.load()
    return s


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication
    return QApplication.instance() or QApplication([])
