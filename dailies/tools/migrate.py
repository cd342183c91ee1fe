# File: dailies/tools/migrate.py
# Usage examples:
#   python -m dailies.tools.migrate up
#   python -m dailies.tools.migrate status
#   python -m dailies.tools.migrate up --db /path/to/dailies.db
#
# Notes:
# - DB path defaults to env DAILIES_DB or the XDG data dir
# - Applies dailies/data/migrations/*.sql in lexicographic order

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from dailies.repositories.db import Database
from dailies.utils.logging_setup import setup_logging
from dailies.utils.paths import DB_PATH


def cmd_up(db: Database) -> int:
    applied = db.run_migrations()
    if applied:
        for name in applied:
            print(f"applied  {name}")
    else:
        print("up to date")
    return 0


def cmd_status(db: Database) -> int:
    done = db.applied()
    pending = set(db.pending())
    for name in sorted(done | pending):
        print(f"{'pending ' if name in pending else 'applied '} {name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dailies-migrate", description="Apply dailies SQLite migrations.")
    p.add_argument("--db", type=Path, default=DB_PATH, help="SQLite database path")
    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("up", help="apply pending migrations")
    sub.add_parser("status", help="list applied and pending migrations")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    db = Database(args.db)
    try:
        return {"up": cmd_up, "status": cmd_status}[args.command](db)
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
