# File: dailies/tools/export_csv.py
# Usage examples:
#   python -m dailies.tools.export_csv
#   python -m dailies.tools.export_csv --out ~/exports/
#   python -m dailies.tools.export_csv --db /path/to/dailies.db --out dailies.csv

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from dailies.app_context import AppContext
from dailies.services import csv_exporter
from dailies.services.entry_store import DEFAULT_SLOT_KEY
from dailies.utils.logging_setup import setup_logging
from dailies.utils.paths import DB_PATH


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dailies-export", description="Export dailies entries as CSV.")
    p.add_argument("--db", type=Path, default=DB_PATH, help="SQLite database path")
    p.add_argument("--out", type=Path, default=Path.cwd(),
                   help="output file, or a directory for job-dailies-<date>.csv (default: cwd)")
    p.add_argument("--key", default=DEFAULT_SLOT_KEY, help="storage slot key")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    ctx = AppContext.create(args.db, key=args.key)
    try:
        rows = ctx.store.export_rows()
        path = csv_exporter.write_csv(rows, args.out)
    finally:
        ctx.close()
    print(f"wrote {len(rows)} entries to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
