"""Check (and optionally create) the study-partner tables on a target database.

SQLite dev/test databases are created on app startup; MySQL deployments run this
once with ``--create --i-understand``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy import create_engine, inspect  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402

from app.config import build_sqlalchemy_db_url, settings  # noqa: E402
from app.database import Base, mask_db_url  # noqa: E402
import app.models  # noqa: F401,E402  # registers users, user_topics, connections


EXPECTED_TABLES = ("users", "user_topics", "connections")


def missing_tables(engine: Engine) -> list[str]:
    present = set(inspect(engine).get_table_names())
    return [name for name in EXPECTED_TABLES if name not in present]


def _engine_for(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, pool_pre_ping=True, future=True, connect_args=connect_args)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Report which study-partner tables are missing; with --create, create them."
    )
    parser.add_argument("--db-url", default=None, help="Target DB URL (defaults to the configured ORM URL).")
    parser.add_argument("--create", action="store_true", help="Create the missing tables.")
    parser.add_argument(
        "--i-understand",
        action="store_true",
        help="Required together with --create before any DDL is issued.",
    )
    args = parser.parse_args(argv)

    url = args.db_url or build_sqlalchemy_db_url(settings)
    engine = _engine_for(str(url))
    print("database:", mask_db_url(str(url)))

    missing = missing_tables(engine)
    if not missing:
        print("all tables present:", ", ".join(EXPECTED_TABLES))
        return 0

    print("missing tables:", ", ".join(missing))
    if not args.create:
        return 1
    if not args.i_understand:
        print("Refusing to create tables without --i-understand.")
        return 2

    Base.metadata.create_all(bind=engine, tables=[Base.metadata.tables[name] for name in missing])
    still_missing = missing_tables(engine)
    if still_missing:
        print("could not create:", ", ".join(still_missing))
        return 1
    print("created:", ", ".join(missing))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
