"""Command-line entry point for managing the booking database.

Usage:
    rentaldb create-db
    rentaldb seed
    rentaldb reset
    rentaldb check --json
    rentaldb export-sql --output-dir build/sql --dialect mysql
    rentaldb --database-url sqlite:///rental.db status
"""

import argparse
import json
import logging
import sys

from sqlalchemy import Engine

from rentaldb.config import settings
from rentaldb.core.exceptions import (
    ExportError,
    SchemaNotInitializedError,
    SeedError,
    ValidationError,
)
from rentaldb.database import create_db_engine, get_db_context
from rentaldb.services.integrity_service import HealthStatus, integrity_service
from rentaldb.services.schema_service import DIALECTS, schema_service
from rentaldb.services.seed_service import seed_service

logger = logging.getLogger(__name__)


def print_header(title: str):
    print(f"\n{'='*60}")
    print(title)
    print("="*60)


def cmd_create_db(args, engine: Engine) -> int:
    schema_service.recreate_database(url=args.database_url)
    # Reconnect: the old pool may point at the dropped database
    engine.dispose()
    tables = schema_service.create_tables(engine)
    print(f"Database recreated with {len(tables)} tables")
    return 0


def cmd_create_tables(args, engine: Engine) -> int:
    tables = schema_service.create_tables(engine)
    print(f"Created tables: {', '.join(tables)}")
    return 0


def cmd_drop_tables(args, engine: Engine) -> int:
    schema_service.drop_tables(engine)
    print("All tables dropped")
    return 0


def cmd_seed(args, engine: Engine) -> int:
    try:
        with get_db_context(engine) as db:
            counts = seed_service.load(db)
    except SchemaNotInitializedError as e:
        print(f"ERROR: {e.detail}")
        print("Hint: run `rentaldb create-tables` (or `rentaldb create-db`) first.")
        return 1
    except SeedError as e:
        print(f"ERROR: {e.detail}")
        if e.errors:
            print(json.dumps(e.errors, indent=2, default=str))
        return 1

    with get_db_context(engine) as db:
        mismatches = seed_service.verify_counts(db)

    print_header("Seed complete")
    for table_name, count in counts.items():
        print(f"  {table_name:<20} {count:>4}")
    print(f"  {'Total':<20} {sum(counts.values()):>4}")

    if mismatches:
        print(f"ERROR: Row counts do not match the seed data: {json.dumps(mismatches)}")
        return 1
    return 0


def cmd_reset(args, engine: Engine) -> int:
    cmd_create_db(args, engine)
    return cmd_seed(args, engine)


def cmd_check(args, engine: Engine) -> int:
    missing = schema_service.table_status(engine)["missing"]
    if missing:
        print(f"ERROR: Missing tables: {', '.join(missing)}")
        return 1

    with get_db_context(engine) as db:
        report = integrity_service.run_all_checks(db)

    if args.json:
        print(json.dumps(report, indent=2, default=str))
    else:
        print_header(f"Integrity report: {report['status'].value}")
        for check in report["checks"]:
            print(f"  [{check['status'].value:<7}] {check['name']}: {check['message']}")

    return 1 if report["status"] == HealthStatus.ERROR else 0


def cmd_export_sql(args, engine: Engine) -> int:
    try:
        paths = schema_service.export_sql(
            args.output_dir, dialect_name=args.dialect, database_name=args.database_name
        )
    except ExportError as e:
        print(f"ERROR: {e.detail}")
        print("Hint: verify the output directory exists and is writable.")
        return 1

    for path in paths:
        print(f"Wrote {path}")
    return 0


def cmd_status(args, engine: Engine) -> int:
    status = schema_service.table_status(engine)
    print(f"Database: {engine.url.render_as_string(hide_password=True)}")
    print(f"Present ({len(status['present'])}): {', '.join(status['present']) or '-'}")
    print(f"Missing ({len(status['missing'])}): {', '.join(status['missing']) or '-'}")
    return 0


COMMANDS = {
    "create-db": cmd_create_db,
    "create-tables": cmd_create_tables,
    "drop-tables": cmd_drop_tables,
    "seed": cmd_seed,
    "reset": cmd_reset,
    "check": cmd_check,
    "export-sql": cmd_export_sql,
    "status": cmd_status,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rentaldb", description="Manage the vacation-rental booking database"
    )
    parser.add_argument(
        "--version", action="version", version=f"{settings.app_name} {settings.app_version}"
    )
    parser.add_argument(
        "--database-url", default=None, help="SQLAlchemy URL (default: from settings)"
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("create-db", help="Drop and recreate the database with all tables")
    subparsers.add_parser("create-tables", help="Create missing tables")
    subparsers.add_parser("drop-tables", help="Drop all tables")
    subparsers.add_parser("seed", help="Load the sample data")
    subparsers.add_parser("reset", help="Recreate the database and load the sample data")

    check = subparsers.add_parser("check", help="Run the data-quality checks")
    check.add_argument("--json", action="store_true", help="Print the report as JSON")

    export = subparsers.add_parser("export-sql", help="Write schema.sql and data.sql")
    export.add_argument("--output-dir", required=True, help="Existing directory for the scripts")
    export.add_argument("--dialect", choices=list(DIALECTS), default="mysql", help="SQL dialect")
    export.add_argument(
        "--database-name", default=settings.mysql_db, help="Database created by schema.sql"
    )

    subparsers.add_parser("status", help="List present and missing tables")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = create_db_engine(args.database_url)
    logger.info(f"Running {args.command} against {engine.url.render_as_string(hide_password=True)}")
    try:
        return COMMANDS[args.command](args, engine)
    except ValidationError as e:
        print(f"ERROR: {e.detail}")
        return 1
    finally:
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
