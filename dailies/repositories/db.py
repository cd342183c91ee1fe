# Rev 0.1.0

"""SQLite connection & migration runner (Rev 0.1.0)
- WAL mode, foreign_keys=ON
- Applies SQL files in dailies/data/migrations in lexical order
- Tracks applied files in schema_migrations(filename TEXT PRIMARY KEY, applied_at UTC)
"""
from __future__ import annotations
import logging
import sqlite3
from pathlib import Path
from datetime import datetime, timezone


from dailies.utils.paths import DB_PATH, MIGRATIONS_DIR


log = logging.getLogger(__name__)


class Database:
    def __init__(self, path: Path | str = DB_PATH) -> None:
        self.path = Path(path)
        if str(self.path) != ":memory:":
            self.path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(self.path), isolation_level=None, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA journal_mode=WAL;")
        self.conn.execute("PRAGMA foreign_keys=ON;")
        self.conn.execute(
            "CREATE TABLE IF NOT EXISTS schema_migrations (filename TEXT PRIMARY KEY, applied_at TEXT NOT NULL)"
        )
        log.info("SQLite open %s", self.path)


    def close(self) -> None:
        self.conn.close()


    def applied(self) -> set[str]:
        rows = self.conn.execute("SELECT filename FROM schema_migrations").fetchall()
        return {r[0] for r in rows}


    def pending(self, migrations_dir: Path = MIGRATIONS_DIR) -> list[str]:
        applied = self.applied()
        return [p.name for p in sorted(Path(migrations_dir).glob("*.sql")) if p.name not in applied]


    def run_migrations(self, migrations_dir: Path = MIGRATIONS_DIR) -> list[str]:
        to_apply = self.pending(migrations_dir)
        for name in to_apply:
            sql = (Path(migrations_dir) / name).read_text(encoding="utf-8")
            self.conn.executescript(sql)
            self.conn.execute(
                "INSERT INTO schema_migrations(filename, applied_at) VALUES(?, ?)",
                (name, datetime.now(timezone.utc).isoformat()),
            )
            log.info("Applied migration %s", name)
        return to_apply
