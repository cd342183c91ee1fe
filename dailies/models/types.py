# dailies type definitions
# Rev 0.1.0

from __future__ import annotations

# Closed task vocabulary, in form display order
TASKS: tuple[str, ...] = (
    "Subrough",
    "Water",
    "Drainage",
    "Fire & Nail",
    "Tubs",
    "Gas",
    "Heaters",
    "Water Main",
    "Finishs",
)
