# Rev 0.1.0

"""Entry store service (Rev 0.1.0)
Single owner of the entry list. Keeps it sorted by date ascending and
writes the whole list back to its durable slot after every mutation.
"""
from __future__ import annotations
import json
import logging
import uuid
from typing import Any, Callable, List, Optional, Protocol

from dailies.models.entities import Entry


log = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "jobDailiesEntries"


class SlotRepository(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def put(self, key: str, value: str) -> None: ...


def _new_id() -> str:
    return uuid.uuid4().hex


def _by_date(entries: List[Entry]) -> List[Entry]:
    # ISO dates sort lexically; sorted() is stable for ties
    return sorted(entries, key=lambda e: e.date)


class EntryStore:
    def __init__(
        self,
        slots: SlotRepository,
        *,
        key: str = DEFAULT_SLOT_KEY,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._slots = slots
        self._key = key
        self._id_factory = id_factory
        self._entries: List[Entry] = []

    # ---- reads
    @property
    def entries(self) -> List[Entry]:
        return list(self._entries)

    def get(self, entry_id: str) -> Optional[Entry]:
        for e in self._entries:
            if e.id == entry_id:
                return e
        return None

    def export_rows(self) -> List[Entry]:
        return list(self._entries)

    # ---- lifecycle
    def load(self) -> List[Entry]:
        payload = self._slots.get(self._key)
        if payload is None:
            self._entries = []
            return self.entries
        try:
            raw = json.loads(payload)
            if not isinstance(raw, list):
                raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
            loaded = [Entry.from_dict(item) for item in raw]
        except ValueError:
            log.exception("Error parsing saved entries in slot %r; starting empty", self._key)
            self._entries = []
            return self.entries
        self._entries = _by_date(loaded)
        log.info("Loaded %d entries from slot %r", len(self._entries), self._key)
        return self.entries

    # ---- mutations
    def create(
        self,
        *,
        date: Any,
        task: Any,
        hours: Any = None,
        units: Any = None,
        change_orders: Any = None,
        notes: Optional[str] = None,
    ) -> List[Entry]:
        entry = Entry.from_form(
            self._mint_id(),
            date=date, task=task, hours=hours, units=units,
            change_orders=change_orders, notes=notes,
        )
        self._commit(self._entries + [entry])
        log.debug("Created entry %s (%s, %s)", entry.id, entry.date, entry.task)
        return self.entries

    def update(
        self,
        entry_id: str,
        *,
        date: Any,
        task: Any,
        hours: Any = None,
        units: Any = None,
        change_orders: Any = None,
        notes: Optional[str] = None,
    ) -> List[Entry]:
        replacement = Entry.from_form(
            entry_id,
            date=date, task=task, hours=hours, units=units,
            change_orders=change_orders, notes=notes,
        )
        if self.get(entry_id) is None:
            log.warning("update: no entry with id %s; nothing changed", entry_id)
        updated = [replacement if e.id == entry_id else e for e in self._entries]
        self._commit(updated)
        return self.entries

    def delete(self, entry_id: str) -> List[Entry]:
        remaining = [e for e in self._entries if e.id != entry_id]
        if len(remaining) == len(self._entries):
            log.warning("delete: no entry with id %s; nothing changed", entry_id)
        self._commit(remaining)
        return self.entries

    # ---- internals
    def _mint_id(self) -> str:
        taken = {e.id for e in self._entries}
        while True:
            candidate = self._id_factory()
            if candidate not in taken:
                return candidate

    def _commit(self, entries: List[Entry]) -> None:
        ordered = _by_date(entries)
        self._slots.put(self._key, json.dumps([e.to_dict() for e in ordered]))
        self._entries = ordered
