# scripts/init_db.py
"""
Create or drop every table.

Usage:
    python scripts/init_db.py create
    python scripts/init_db.py drop
"""

import argparse
import logging
import sys
from pathlib import Path

# Make the repo root importable when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from config.database import Base, build_engine, create_tables, drop_tables
from config.logs import configure_logging
from config.settings import load_settings

log = logging.getLogger("init_db")


def init_db() -> None:
    settings = load_settings()
    engine = build_engine(settings)
    create_tables(engine)
    log.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables.keys())))
    engine.dispose()


def drop_db(assume_yes: bool = False) -> None:
    """Development only."""
    if not assume_yes:
        answer = input("Drop ALL tables? (y/n): ")
        if answer.strip().lower() != "y":
            log.info("Cancelled")
            return

    settings = load_settings()
    engine = build_engine(settings)
    drop_tables(engine)
    log.info("Tables dropped")
    engine.dispose()


if __name__ == "__main__":
    configure_logging("INFO")
    parser = argparse.ArgumentParser(description="Database management")
    parser.add_argument("action", choices=["create", "drop"])
    parser.add_argument("--yes", action="store_true", help="do not ask for confirmation")
    args = parser.parse_args()

    if args.action == "create":
        init_db()
    elif args.action == "drop":
        drop_db(assume_yes=args.yes)
