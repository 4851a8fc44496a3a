#!/usr/bin/env python3
"""Apply Alembic migrations up to a revision (``head`` by default).

Run before the API starts; a failure exits non-zero so a deploy never
serves against a half-migrated schema.
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from eventflow.config import Settings
from eventflow.util.logging import setup_logging
from eventflow.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("revision", nargs="?", default="head")
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(ALEMBIC_INI.parent / "migrations"))

    with logfire.span("migrations.upgrade", revision=args.revision):
        try:
            command.upgrade(config, args.revision)
        except Exception:
            logfire.exception("Database migration failed", revision=args.revision)
            raise
    logfire.info("Database migrated", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
