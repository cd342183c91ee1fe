# Rev 0.1.1

# dailies – logging setup (Rev 0.1.1)
from __future__ import annotations
import logging, os, sys
from collections import deque
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .paths import APP_NAME, LOGS_DIR

try:
    # Optional: pipe Qt messages into Python logging if Qt exists
    from PySide6.QtCore import qInstallMessageHandler, QtMsgType
    def _qt_handler(msg_type, context, message):
        lvl = {
            QtMsgType.QtDebugMsg: logging.DEBUG,
            QtMsgType.QtInfoMsg: logging.INFO,
            QtMsgType.QtWarningMsg: logging.WARNING,
            QtMsgType.QtCriticalMsg: logging.ERROR,
            QtMsgType.QtFatalMsg: logging.CRITICAL,
        }.get(msg_type, logging.INFO)
        logging.getLogger("qt").log(lvl, message)
except ImportError:
    qInstallMessageHandler = None  # PySide6 not available at import time

LOG_FILE = LOGS_DIR / "dailies.log"

_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_installed: Path | None = None


def get_logger(name: str) -> logging.Logger:
    """Logger under the app namespace, e.g. get_logger("EntryStore") -> dailies.EntryStore."""
    if name == APP_NAME or name.startswith(APP_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_NAME}.{name}")


def setup_logging(log_dir: Path | None = None) -> Path:
    global _installed
    if _installed is not None:
        return _installed

    # Level via env (DEBUG/INFO/WARNING/ERROR), default INFO
    level_name = os.environ.get("DAILIES_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    log_dir = Path(log_dir) if log_dir is not None else LOGS_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    logfile = log_dir / LOG_FILE.name

    root = logging.getLogger()
    root.setLevel(level)

    # File: rotate at 5MB, keep 7 backups
    fh = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=7, encoding="utf-8")
    fh.setFormatter(logging.Formatter(_FMT, _DATEFMT))
    fh.setLevel(level)
    root.addHandler(fh)

    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter(_FMT, _DATEFMT))
    ch.setLevel(level)
    root.addHandler(ch)

    # Uncaught exceptions → log as ERROR
    def _excepthook(exctype, value, tb):
        logging.getLogger("unhandled").error("Uncaught exception", exc_info=(exctype, value, tb))
        sys.__excepthook__(exctype, value, tb)
    sys.excepthook = _excepthook

    if qInstallMessageHandler is not None:
        qInstallMessageHandler(_qt_handler)

    record_buffer()
    _installed = logfile
    get_logger(__name__).info("Logging initialized at %s; file: %s", level_name, logfile)
    return logfile


class RecordBuffer(logging.Handler):
    """Keeps the latest app records in memory and fans them out to listeners.

    Attached to the app logger before the store loads, so a viewer opened
    later can still show startup diagnostics.
    """

    def __init__(self, capacity: int = 500):
        super().__init__(logging.INFO)
        self.records: deque[logging.LogRecord] = deque(maxlen=capacity)
        self._listeners: list = []
        self.seq = 0

    def emit(self, record: logging.LogRecord) -> None:
        self.seq += 1
        record.seq = self.seq
        self.records.append(record)
        for listener in list(self._listeners):
            listener(record)

    def subscribe(self, listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)


_buffer: RecordBuffer | None = None


def record_buffer() -> RecordBuffer:
    global _buffer
    if _buffer is None:
        _buffer = RecordBuffer()
        get_logger(APP_NAME).addHandler(_buffer)
    return _buffer
