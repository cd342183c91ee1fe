# Rev 0.1.0

# dailies/main.py  (Rev 0.1.0)
import sys
from PySide6.QtGui import QGuiApplication, QFont
from PySide6.QtCore import Qt, QCoreApplication
from PySide6.QtWidgets import QApplication

from dailies.app_context import AppContext
from dailies.ui.main_window import MainWindow
from dailies.utils.config import load_settings
from dailies.utils.logging_setup import setup_logging
from dailies.utils.paths import DB_PATH, ensure_dirs
from dailies.viewmodels.entries_viewmodel import EntriesViewModel


def main():
    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(sys.argv)
    QCoreApplication.setApplicationName("dailies")

    ensure_dirs()
    logfile = setup_logging()
    settings = load_settings()

    # --- DI wiring ---
    ctx = AppContext.create(
        DB_PATH,
        key=settings["storage"]["key"],
    )
    vm = EntriesViewModel(ctx.store)

    # --- UI ---
    win = MainWindow(viewmodel=vm, settings=settings, logfile=logfile)
    app.setProperty("mainWindow", win)
    app.setFont(QFont("Sans Serif", 10))

    try:
        return app.exec()
    finally:
        ctx.close()


if __name__ == "__main__":
    sys.exit(main())
