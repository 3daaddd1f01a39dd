from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy import create_engine  # noqa: E402

from jobly.config import build_sqlalchemy_db_url, settings  # noqa: E402
from jobly.database import create_tables, mask_db_url  # noqa: E402


def run(db_url: str) -> None:
    """Create the Jobly schema on ``db_url``; existing tables are left alone."""
    connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}
    target = create_engine(db_url, future=True, connect_args=connect_args)
    try:
        create_tables(target)
    finally:
        target.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the users/companies/jobs tables.")
    parser.add_argument("--db-url", default=None, help="Target DB URL (defaults to the configured ORM URL).")
    parser.add_argument(
        "--i-understand",
        action="store_true",
        help="Required for anything but sqlite; guards shared MySQL schemas.",
    )
    args = parser.parse_args(argv)

    db_url = args.db_url or build_sqlalchemy_db_url(settings)
    if not db_url.startswith("sqlite") and not args.i_understand:
        print(f"refusing DDL on {mask_db_url(db_url)} without --i-understand")
        return 2

    run(db_url)
    print(f"schema ready on {mask_db_url(db_url)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
