# Rev 0.1.0 — Form submit toggles between create and edit-and-resubmit
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from PySide6.QtCore import QObject, Signal

from dailies.models.entities import Entry, EntryValidationError
from dailies.services import csv_exporter
from dailies.services.entry_store import EntryStore


log = logging.getLogger(__name__)


class EntriesViewModel(QObject):
    entriesReloaded = Signal(list)
    editingChanged = Signal(str)      # "" when not editing

    def __init__(self, store: EntryStore):
        super().__init__()
        self._store = store
        self._editing_id: str = ""

    # ---- state
    @property
    def editing_id(self) -> str:
        return self._editing_id

    @property
    def entries(self) -> List[Entry]:
        return self._store.entries

    def submit_label(self) -> str:
        return "Update Entry" if self._editing_id else "Add Entry"

    # ---- queries
    def reload(self) -> None:
        self.entriesReloaded.emit(self._store.entries)

    # ---- commands
    def submit(self, form: Dict[str, str]) -> bool:
        """Create a new entry, or replace the one being edited. Returns False on a rejected form."""
        fields = dict(
            date=form.get("date"),
            task=form.get("task"),
            hours=form.get("hours"),
            units=form.get("units"),
            change_orders=form.get("change_orders"),
            notes=form.get("notes") or "",
        )
        try:
            if self._editing_id:
                self._store.update(self._editing_id, **fields)
                self._set_editing("")
            else:
                self._store.create(**fields)
        except EntryValidationError as e:
            log.warning("Entry form rejected: %s", e)
            self.reload()
            return False
        self.reload()
        return True

    def begin_edit(self, entry_id: str) -> Optional[Dict[str, str]]:
        entry = self._store.get(entry_id)
        if entry is None:
            return None
        self._set_editing(entry_id)
        return entry.to_form()

    def cancel_edit(self) -> None:
        self._set_editing("")

    def delete_entry(self, entry_id: str) -> None:
        self._store.delete(entry_id)
        if entry_id == self._editing_id:
            self._set_editing("")
        self.reload()

    def export_csv(self, target: Path | str) -> Path:
        return csv_exporter.write_csv(self._store.export_rows(), target)

    def default_export_name(self) -> str:
        return csv_exporter.export_filename()

    # ---- internals
    def _set_editing(self, entry_id: str) -> None:
        if entry_id != self._editing_id:
            self._editing_id = entry_id
            self.editingChanged.emit(entry_id)
