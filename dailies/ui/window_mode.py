# Rev 0.1.1

# ui/window_mode.py
from PySide6.QtCore import Qt, QRect
from PySide6.QtGui import QGuiApplication


def apply_window_settings(win, settings: dict):
    """
    Size the main window from settings["main_window"], clamped to the
    available screen area. Maximizes when is_maximized is set.
    """
    screen = QGuiApplication.screenAt(win.frameGeometry().center()) or QGuiApplication.primaryScreen()
    rect: QRect = screen.availableGeometry()
    cfg = settings.get("main_window", {})

    win.setWindowFlag(Qt.FramelessWindowHint, False)
    win.setWindowFlag(Qt.WindowMaximizeButtonHint, True)

    w = min(int(cfg.get("width", 1100)), rect.width())
    h = min(int(cfg.get("height", 720)), rect.height())
    win.resize(w, h)

    if cfg.get("is_maximized"):
        win.showMaximized()
    else:
        win.show()


def window_state(win) -> dict:
    """Inverse of apply_window_settings, for saving on close."""
    maximized = win.isMaximized()
    # Maximized size is the screen; keep the restore size instead
    size = win.normalGeometry().size() if maximized else win.size()
    return {
        "width": size.width(),
        "height": size.height(),
        "is_maximized": maximized,
    }
