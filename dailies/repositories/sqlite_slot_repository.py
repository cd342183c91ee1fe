# Rev 0.1.0
from __future__ import annotations

import sqlite3
from typing import Any, List, Optional, Union


class SQLiteSlotRepository:
    """
    Named durable slots (key -> text document) in the kv_store table.
    Each put() overwrites the slot in full; there are no partial writes.
    """

    def __init__(self, db_or_conn: Union[sqlite3.Connection, Any]):
        self._db_or_conn = db_or_conn

    # -------------------------
    # Connection handling
    # -------------------------
    def _conn(self) -> sqlite3.Connection:
        if isinstance(self._db_or_conn, sqlite3.Connection):
            return self._db_or_conn
        c = getattr(self._db_or_conn, "conn", None)
        if isinstance(c, sqlite3.Connection):
            return c
        raise RuntimeError(
            "SQLiteSlotRepository: could not obtain sqlite3.Connection "
            "(expected .conn on wrapper, or a raw Connection)."
        )

    # -------------------------
    # Slots
    # -------------------------
    def get(self, key: str) -> Optional[str]:
        row = self._conn().execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def put(self, key: str, value: str) -> None:
        con = self._conn()
        con.execute(
            """
            INSERT INTO kv_store(key, value, updated_at_utc)
            VALUES (?, ?, strftime('%Y-%m-%dT%H:%M:%SZ', 'now'))
            ON CONFLICT(key) DO UPDATE SET
                value = excluded.value,
                updated_at_utc = excluded.updated_at_utc
            """,
            (key, value),
        )
        if con.in_transaction:
            con.commit()

    def delete(self, key: str) -> bool:
        con = self._conn()
        cur = con.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        if con.in_transaction:
            con.commit()
        return cur.rowcount > 0

    def keys(self) -> List[str]:
        rows = self._conn().execute("SELECT key FROM kv_store ORDER BY key").fetchall()
        return [r[0] for r in rows]
