"""Bring the schema to head and seed the default frameworks.

Usage: ``python migrate.py`` from the ``backend`` directory. Exits 1 when
seeding fails so deploy hooks stop.
"""

from __future__ import annotations

from pathlib import Path
import sys

from alembic import command
from alembic.config import Config

from frameworks_api.db import check_db_connection
from frameworks_api.logging_utils import configure_logging
from frameworks_api.services.framework_seeder import FrameworkSeeder, SeedFailure
from frameworks_api.store import SqlAlchemyFrameworkStore

BACKEND_DIR = Path(__file__).resolve().parent


def run_migrations() -> None:
    alembic_cfg = Config(str(BACKEND_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    alembic_cfg.attributes["configure_logger"] = False
    command.upgrade(alembic_cfg, "head")


def main() -> int:
    configure_logging()
    run_migrations()
    check_db_connection()

    outcome = FrameworkSeeder(SqlAlchemyFrameworkStore()).seed()
    if isinstance(outcome, SeedFailure):
        print(f"{outcome.error}: {outcome.details}", file=sys.stderr)
        return 1

    if outcome.inserted:
        print(f"Migrations complete. Seeded {outcome.count} frameworks.")
    else:
        print(f"Migrations complete. {outcome.message} (count: {outcome.count}), nothing inserted.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
