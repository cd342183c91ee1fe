# Rev 0.1.0

"""CSV export for the entry list (Rev 0.1.0)

Only Notes is quoted (with embedded quotes doubled). The other fields come
from a closed vocabulary, ISO dates or numbers and are written as-is.
"""
from __future__ import annotations
import logging
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from dailies.models.entities import Entry, format_number


log = logging.getLogger(__name__)

CSV_MIME_TYPE = "text/csv"
HEADERS = ("Date", "Task", "Hours", "Units Completed", "Notes", "Change Orders")


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def to_csv(entries: Iterable[Entry]) -> str:
    lines = [",".join(HEADERS)]
    for e in entries:
        lines.append(",".join([
            e.date,
            e.task,
            format_number(e.hours),
            format_number(e.units_completed),
            _quote(e.notes),
            format_number(e.change_orders),
        ]))
    return "\n".join(lines)


def export_filename(today: Optional[date] = None) -> str:
    return f"job-dailies-{(today or date.today()).isoformat()}.csv"


def write_csv(entries: Iterable[Entry], target: Path | str, *, today: Optional[date] = None) -> Path:
    """Write the CSV to `target`; a directory gets the dated default file name."""
    path = Path(target)
    if path.is_dir():
        path = path / export_filename(today)
    text = to_csv(entries)
    path.write_text(text, encoding="utf-8", newline="")
    log.info("Exported %d bytes of CSV to %s", len(text.encode("utf-8")), path)
    return path
