# dailies application context
# Rev 0.1.0

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from .utils.logging_setup import get_logger
from .repositories.db import Database
from .repositories.sqlite_slot_repository import SQLiteSlotRepository
from .services.entry_store import EntryStore, DEFAULT_SLOT_KEY

@dataclass
class AppContext:
    """Central container for shared app resources."""
    db_path: Path
    db: Database
    slots: SQLiteSlotRepository
    store: EntryStore

    @classmethod
    def create(cls, db_path: Path | str, *, key: str = DEFAULT_SLOT_KEY) -> "AppContext":
        """Open and migrate the DB, then load the entry store once."""
        log = get_logger("AppContext")
        db = Database(db_path)
        db.run_migrations()
        slots = SQLiteSlotRepository(db)
        store = EntryStore(slots, key=key)
        store.load()
        log.info("AppContext initialized with DB=%s", db_path)
        return cls(db_path=Path(db_path), db=db, slots=slots, store=store)

    def close(self) -> None:
        self.db.close()
