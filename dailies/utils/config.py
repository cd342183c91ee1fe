# dailies/utils/config.py
import json
import logging
from pathlib import Path
from typing import Any, Dict
from .paths import config_dir

log = logging.getLogger(__name__)

SETTINGS_FILE = config_dir() / "settings.json"

_DEFAULTS: Dict[str, Any] = {
    "main_window": {
        "width": 1100,
        "height": 720,
        "is_maximized": False,
    },
    "ui": {
        "diagnostics_dock_visible": True
    },
    "storage": {
        "key": "jobDailiesEntries",
    },
    "export": {
        "last_dir": "",
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def load_settings(path: Path = SETTINGS_FILE) -> Dict[str, Any]:
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            log.warning("Unreadable settings file %s; using defaults", path, exc_info=True)
            return json.loads(json.dumps(_DEFAULTS))
        if isinstance(data, dict):
            return _merge(_DEFAULTS, data)
    return json.loads(json.dumps(_DEFAULTS))


def save_settings(data: Dict[str, Any], path: Path = SETTINGS_FILE) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
