# Rev 0.1.0
"""Entry entity and the field coercion rules applied at submission time.

The persisted shape is a JSON object per entry with camelCase keys:
id, date, task, hours, unitsCompleted, notes, changeOrders.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import date as _date
from typing import Any, Dict, Mapping, Optional

from .types import TASKS


class EntryValidationError(ValueError):
    """Raised when a required field (date, task) is missing or not allowed."""


def coerce_number(raw: Any) -> float:
    """Parse as decimal; absent, unparsable, non-finite or negative → 0."""
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def format_number(value: float) -> str:
    """Plain decimal text: 4.0 → "4", 1.5 → "1.5", never exponent notation."""
    if float(value).is_integer():
        return str(int(value))
    text = repr(float(value))
    if "e" in text or "E" in text:
        # shortest repr is exact; expand it positionally
        mantissa, _, exp = text.lower().partition("e")
        digits = mantissa.replace(".", "")
        point = (mantissa.index(".") if "." in mantissa else len(mantissa)) + int(exp)
        if point <= 0:
            text = "0." + "0" * (-point) + digits
        else:
            text = digits[:point].ljust(point, "0") + ("." + digits[point:] if digits[point:] else "")
    return text


def validate_date(raw: Any) -> str:
    if isinstance(raw, _date):
        return _date(raw.year, raw.month, raw.day).isoformat()
    text = raw.strip() if isinstance(raw, str) else ""
    if not text:
        raise EntryValidationError("date is required")
    try:
        return _date.fromisoformat(text).isoformat()
    except ValueError as e:
        raise EntryValidationError(f"date must be YYYY-MM-DD, got {text!r}") from e


def validate_task(raw: Any) -> str:
    if raw not in TASKS:
        raise EntryValidationError(f"unknown task {raw!r}; expected one of {', '.join(TASKS)}")
    return raw


@dataclass(frozen=True)
class Entry:
    id: str
    date: str
    task: str
    hours: float = 0.0
    units_completed: float = 0.0
    change_orders: float = 0.0
    notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "task": self.task,
            "hours": self.hours,
            "unitsCompleted": self.units_completed,
            "notes": self.notes,
            "changeOrders": self.change_orders,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entry":
        """Build from the persisted shape. Numeric fields are coerced, text fields kept as stored."""
        if not isinstance(data, Mapping) or not data.get("id"):
            raise ValueError(f"not an entry object: {data!r}")
        return cls(
            id=str(data["id"]),
            date=str(data.get("date") or ""),
            task=str(data.get("task") or ""),
            hours=coerce_number(data.get("hours")),
            units_completed=coerce_number(data.get("unitsCompleted")),
            change_orders=coerce_number(data.get("changeOrders")),
            notes=str(data.get("notes") or ""),
        )

    @classmethod
    def from_form(
        cls,
        entry_id: str,
        *,
        date: Any,
        task: Any,
        hours: Any = None,
        units: Any = None,
        change_orders: Any = None,
        notes: Optional[str] = None,
    ) -> "Entry":
        return cls(
            id=entry_id,
            date=validate_date(date),
            task=validate_task(task),
            hours=coerce_number(hours),
            units_completed=coerce_number(units),
            change_orders=coerce_number(change_orders),
            notes=notes or "",
        )

    def to_form(self) -> Dict[str, str]:
        """Field values as the edit form shows them."""
        return {
            "date": self.date,
            "task": self.task,
            "hours": format_number(self.hours),
            "units": format_number(self.units_completed),
            "change_orders": format_number(self.change_orders),
            "notes": self.notes,
        }
