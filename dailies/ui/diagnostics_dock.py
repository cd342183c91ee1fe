# dailies/ui/diagnostics_dock.py
# Rev 0.1.1 — Live app diagnostics (store load failures, unknown-id warnings)
import logging
from pathlib import Path

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import (
    QComboBox, QDockWidget, QHBoxLayout, QLabel, QPlainTextEdit, QPushButton, QVBoxLayout, QWidget
)

from dailies.utils.logging_setup import record_buffer

_LEVELS = [("Info", logging.INFO), ("Warnings", logging.WARNING), ("Errors", logging.ERROR)]
_FMT = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s", "%H:%M:%S")


class _RecordBridge(QObject):
    record = Signal(object)


class DiagnosticsDock(QDockWidget):
    def __init__(self, log_file: Path, parent=None):
        super().__init__("Diagnostics", parent)
        self.setObjectName("DiagnosticsDock")
        self.setAllowedAreas(Qt.BottomDockWidgetArea | Qt.TopDockWidgetArea)

        self._min_level = logging.INFO

        w = QWidget()
        lay = QVBoxLayout(w)
        top = QHBoxLayout()
        top.addWidget(QLabel(f"Full log: {log_file}"), 1)
        self.cmb_level = QComboBox()
        for label, level in _LEVELS:
            self.cmb_level.addItem(label, level)
        self.btn_clear = QPushButton("Clear")
        top.addWidget(self.cmb_level)
        top.addWidget(self.btn_clear)

        self.view = QPlainTextEdit()
        self.view.setReadOnly(True)
        self.view.setMaximumBlockCount(1000)

        lay.addLayout(top)
        lay.addWidget(self.view, 1)
        self.setWidget(w)

        self.cmb_level.currentIndexChanged.connect(self._on_level_changed)
        self.btn_clear.clicked.connect(self._clear)

        # Records arrive on the logging call's thread; the bridge queues them to the GUI thread
        self._bridge = _RecordBridge(self)
        self._bridge.record.connect(self._append)
        self._buffer = record_buffer()
        self._listener = self._bridge.record.emit
        self._buffer.subscribe(self._listener)
        self._cleared_at = 0

        self._replay()

    def detach(self) -> None:
        self._buffer.unsubscribe(self._listener)

    # ---- internals
    def _replay(self):
        self.view.clear()
        for rec in list(self._buffer.records):
            self._append(rec)

    def _append(self, rec: logging.LogRecord):
        if rec.levelno < self._min_level or getattr(rec, "seq", 0) <= self._cleared_at:
            return
        self.view.appendPlainText(_FMT.format(rec))
        self.view.moveCursor(QTextCursor.End)

    def _on_level_changed(self, _index: int):
        self._min_level = int(self.cmb_level.currentData())
        self._replay()

    def _clear(self):
        self._cleared_at = self._buffer.seq
        self.view.clear()
