# dailies/ui/entry_form.py
# Rev 0.1.1 — Inline entry form; same widget for add and edit
from __future__ import annotations
from typing import Dict

from PySide6.QtCore import Qt, QDate, QLocale, Signal
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import (
    QWidget, QGridLayout, QVBoxLayout, QHBoxLayout, QLineEdit, QTextEdit,
    QComboBox, QLabel, QPushButton, QDateEdit
)

from dailies.models.types import TASKS


class EntryForm(QWidget):
    """
    Values returned (see values()) are raw strings, keyed:
      date, task, hours, units, change_orders, notes

    Numeric coercion happens in the store, not here.
    """

    submitted = Signal(dict)
    exportRequested = Signal()
    cancelRequested = Signal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)

        self._date = QDateEdit()
        self._date.setCalendarPopup(True)
        self._date.setDisplayFormat("yyyy-MM-dd")
        self._date.setDate(QDate.currentDate())

        self._task = QComboBox()
        self._task.addItem("Select a Task", "")
        for label in TASKS:
            self._task.addItem(label, label)

        non_negative = QDoubleValidator(0.0, 1e9, 2, self)
        non_negative.setNotation(QDoubleValidator.StandardNotation)
        # Stored values go through float(); accept only its "7.5" syntax
        c_numbers = QLocale.c()
        c_numbers.setNumberOptions(QLocale.RejectGroupSeparator)
        non_negative.setLocale(c_numbers)

        self._hours = QLineEdit()
        self._hours.setValidator(non_negative)
        self._units = QLineEdit()
        self._units.setValidator(non_negative)
        self._change_orders = QLineEdit()
        self._change_orders.setValidator(non_negative)
        self._change_orders.setPlaceholderText("Optional")

        self._notes = QTextEdit()
        self._notes.setAcceptRichText(False)
        self._notes.setFixedHeight(self._hours.sizeHint().height() * 2)

        self._error = QLabel("")
        self._error.setStyleSheet("color: #b00020;")

        grid = QGridLayout()
        for col, (label, widget) in enumerate((
            ("Date", self._date),
            ("Task", self._task),
            ("Hours", self._hours),
        )):
            grid.addWidget(QLabel(label), 0, col)
            grid.addWidget(widget, 1, col)
        for col, (label, widget) in enumerate((
            ("Units Completed", self._units),
            ("Change Orders (Hours)", self._change_orders),
            ("Notes", self._notes),
        )):
            grid.addWidget(QLabel(label), 2, col)
            grid.addWidget(widget, 3, col)

        self._btn_export = QPushButton("Export as CSV")
        self._btn_cancel = QPushButton("Cancel Edit")
        self._btn_cancel.setVisible(False)
        self._btn_submit = QPushButton("Add Entry")
        self._btn_submit.setDefault(True)

        self._btn_export.clicked.connect(lambda: self.exportRequested.emit())
        self._btn_cancel.clicked.connect(lambda: self.cancelRequested.emit())
        self._btn_submit.clicked.connect(self._on_submit)

        buttons = QHBoxLayout()
        buttons.addWidget(self._error, 1)
        buttons.addWidget(self._btn_export)
        buttons.addWidget(self._btn_cancel)
        buttons.addWidget(self._btn_submit)

        root = QVBoxLayout(self)
        root.addLayout(grid)
        root.addLayout(buttons)

        self._date.setFocus(Qt.OtherFocusReason)

    # ---- values
    def values(self) -> Dict[str, str]:
        return {
            "date": self._date.date().toString("yyyy-MM-dd"),
            "task": self._task.currentData() or "",
            "hours": self._hours.text().strip(),
            "units": self._units.text().strip(),
            "change_orders": self._change_orders.text().strip(),
            "notes": self._notes.toPlainText(),
        }

    def set_values(self, form: Dict[str, str]) -> None:
        d = QDate.fromString(form.get("date", ""), "yyyy-MM-dd")
        if d.isValid():
            self._date.setDate(d)
        ix = self._task.findData(form.get("task", ""))
        self._task.setCurrentIndex(ix if ix >= 0 else 0)
        self._hours.setText(form.get("hours", ""))
        self._units.setText(form.get("units", ""))
        self._change_orders.setText(form.get("change_orders", ""))
        self._notes.setPlainText(form.get("notes", ""))
        self._error.clear()

    def reset(self) -> None:
        self.set_values({"date": QDate.currentDate().toString("yyyy-MM-dd")})

    def set_editing(self, editing: bool) -> None:
        self._btn_submit.setText("Update Entry" if editing else "Add Entry")
        self._btn_cancel.setVisible(editing)

    def show_error(self, message: str) -> None:
        self._error.setText(message)

    # ---- internals
    def _on_submit(self):
        form = self.values()
        # Date and task are required fields; the numeric ones are lenient
        if not form["task"]:
            self.show_error("Select a task.")
            return
        self._error.clear()
        self.submitted.emit(form)
