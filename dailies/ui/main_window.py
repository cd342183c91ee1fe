# Rev 0.1.0
# dailies — Main Window: entry form on top, entries table below
# Columns: Date | Task | Hours | Units Completed | Notes | Change Orders | (actions)

from __future__ import annotations
import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel,
    QTableWidget, QTableWidgetItem, QHeaderView, QFileDialog, QMessageBox
)

from dailies.models.entities import Entry, format_number
from dailies.ui.diagnostics_dock import DiagnosticsDock
from dailies.ui.entry_form import EntryForm
from dailies.ui.window_mode import apply_window_settings, window_state
from dailies.utils.config import save_settings
from dailies.viewmodels.entries_viewmodel import EntriesViewModel


log = logging.getLogger(__name__)

_COLUMNS = ["Date", "Task", "Hours", "Units Completed", "Notes", "Change Orders", ""]


class MainWindow(QMainWindow):
    def __init__(
        self,
        *,
        viewmodel: EntriesViewModel,
        settings: dict,
        logfile: Path | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self._vm = viewmodel
        self._settings = settings

        self.setWindowTitle("Dailies Tracker")

        # ---- central ----
        central = QWidget(self)
        v = QVBoxLayout(central)

        v.addWidget(QLabel("<h2>Dailies Tracker</h2>Enter daily job details."))

        self._form = EntryForm(self)
        self._form.submitted.connect(self._on_submitted)
        self._form.exportRequested.connect(self._export_csv)
        self._form.cancelRequested.connect(self._cancel_edit)
        v.addWidget(self._form)

        self._tbl = QTableWidget(0, len(_COLUMNS), self)
        self._tbl.setSelectionBehavior(QTableWidget.SelectRows)
        self._tbl.setSelectionMode(QTableWidget.SingleSelection)
        self._tbl.setEditTriggers(QTableWidget.NoEditTriggers)
        self._tbl.setAlternatingRowColors(True)
        self._tbl.verticalHeader().setVisible(False)
        self._tbl.setHorizontalHeaderLabels(_COLUMNS)
        h = self._tbl.horizontalHeader()
        for col in range(len(_COLUMNS)):
            h.setSectionResizeMode(col, QHeaderView.ResizeToContents)
        h.setSectionResizeMode(4, QHeaderView.Stretch)            # Notes
        v.addWidget(self._tbl, 1)

        self.setCentralWidget(central)

        # ---- diagnostics dock ----
        if logfile is not None:
            self._dock = DiagnosticsDock(logfile, self)
            self.addDockWidget(Qt.BottomDockWidgetArea, self._dock)
            self._dock.setVisible(bool(settings.get("ui", {}).get("diagnostics_dock_visible", True)))
        else:
            self._dock = None

        # ---- viewmodel wiring ----
        self._vm.entriesReloaded.connect(self._render)
        self._vm.editingChanged.connect(lambda eid: self._form.set_editing(bool(eid)))

        apply_window_settings(self, settings)

        # initial render
        self._vm.reload()

    # -------------------- rendering --------------------

    def _render(self, entries: list):
        self._tbl.setRowCount(0)
        for e in entries:
            self._append_row(e)

    def _append_row(self, e: Entry):
        r = self._tbl.rowCount()
        self._tbl.insertRow(r)
        cells = [
            e.date,
            e.task,
            format_number(e.hours),
            format_number(e.units_completed),
            e.notes,
            format_number(e.change_orders),
        ]
        for c, text in enumerate(cells):
            item = QTableWidgetItem(text)
            if c in (2, 3, 5):
                item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self._tbl.setItem(r, c, item)

        actions = QWidget()
        lay = QHBoxLayout(actions)
        lay.setContentsMargins(0, 0, 0, 0)
        btn_edit = QPushButton("Edit")
        btn_delete = QPushButton("Delete")
        btn_edit.clicked.connect(lambda _=False, eid=e.id: self._begin_edit(eid))
        btn_delete.clicked.connect(lambda _=False, eid=e.id: self._vm.delete_entry(eid))
        lay.addWidget(btn_edit)
        lay.addWidget(btn_delete)
        self._tbl.setCellWidget(r, len(_COLUMNS) - 1, actions)

    # -------------------- actions --------------------

    def _on_submitted(self, form: dict):
        if self._vm.submit(form):
            self._form.reset()
        else:
            self._form.show_error("Entry needs a valid date and task.")

    def _begin_edit(self, entry_id: str):
        values = self._vm.begin_edit(entry_id)
        if values is not None:
            self._form.set_values(values)

    def _cancel_edit(self):
        self._vm.cancel_edit()
        self._form.reset()

    def _export_csv(self):
        start_dir = self._settings.get("export", {}).get("last_dir") or str(Path.home())
        path, _ = QFileDialog.getSaveFileName(
            self, "Export as CSV",
            str(Path(start_dir) / self._vm.default_export_name()),
            "CSV files (*.csv)",
        )
        if not path:
            return
        try:
            written = self._vm.export_csv(path)
        except OSError as e:
            log.exception("CSV export failed")
            QMessageBox.warning(self, "Export failed", str(e))
            return
        self._settings.setdefault("export", {})["last_dir"] = str(written.parent)

    def closeEvent(self, event):
        self._settings["main_window"] = window_state(self)
        if self._dock is not None:
            self._settings.setdefault("ui", {})["diagnostics_dock_visible"] = self._dock.isVisible()
            self._dock.detach()
        try:
            save_settings(self._settings)
        except OSError:
            log.exception("Could not save settings")
        super().closeEvent(event)
