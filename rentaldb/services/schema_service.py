"""Schema management and SQL script rendering."""

import logging
from datetime import UTC, datetime
from pathlib import Path

from sqlalchemy import Engine, Enum as SAEnum, create_engine, insert, inspect, text
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.engine import Dialect, make_url
from sqlalchemy.schema import CreateTable, Table

import rentaldb.models  # noqa: F401
from rentaldb.config import Settings, settings
from rentaldb.core.exceptions import ExportError, ValidationError
from rentaldb.database import Base, drop_db, init_db
from rentaldb.models.enums import ENUM_DOMAINS
from rentaldb.services.seed_service import seed_service

logger = logging.getLogger(__name__)

DIALECTS = {
    "mysql": mysql.dialect,
    "postgresql": postgresql.dialect,
    "sqlite": sqlite.dialect,
}

# Database to connect to while dropping/creating the target database
MAINTENANCE_DATABASES = {
    "postgresql": "postgres",
}

SCHEMA_FILENAME = "schema.sql"
DATA_FILENAME = "data.sql"


def get_dialect(name: str) -> Dialect:
    """Instantiate a SQLAlchemy dialect by name."""
    try:
        return DIALECTS[name]()
    except KeyError:
        raise ValidationError(
            f"Unsupported dialect '{name}'. Choose one of: {', '.join(DIALECTS)}"
        ) from None


def sequence_reset_sql(table: Table, dialect: Dialect) -> str:
    """Move a PostgreSQL SERIAL sequence past rows inserted with explicit keys."""
    preparer = dialect.identifier_preparer
    pk = list(table.primary_key.columns)[0].name
    quoted_table = preparer.quote(table.name)
    quoted_pk = preparer.quote(pk)
    return (
        f"SELECT setval(pg_get_serial_sequence('{quoted_table}', '{pk}'), "
        f"(SELECT MAX({quoted_pk}) FROM {quoted_table}))"
    )


class SchemaService:
    """Creates, drops and renders the booking schema."""

    def sorted_table_names(self) -> list[str]:
        """Table names with referenced tables first."""
        return [table.name for table in Base.metadata.sorted_tables]

    def recreate_database(self, config: Settings | None = None, url: str | None = None) -> None:
        """Drop the target database if it exists and create it empty.

        SQLite files are deleted instead; in-memory databases need nothing.
        """
        config = config or settings
        target = make_url(url or config.database_url)
        backend = target.get_backend_name()

        if backend == "sqlite":
            if target.database and target.database != ":memory:":
                path = Path(target.database)
                if path.exists():
                    path.unlink()
                    logger.info(f"Removed SQLite database {path}")
            return

        database = target.database
        if not database:
            raise ValidationError("Database URL does not name a database")

        server_url = target.set(database=MAINTENANCE_DATABASES.get(backend))
        server_engine = create_engine(server_url, isolation_level="AUTOCOMMIT")
        try:
            with server_engine.connect() as connection:
                quoted = connection.dialect.identifier_preparer.quote(database)
                connection.execute(text(f"DROP DATABASE IF EXISTS {quoted}"))
                connection.execute(text(f"CREATE DATABASE {quoted}"))
        finally:
            server_engine.dispose()
        logger.info(f"Recreated database {database}")

    def create_tables(self, engine: Engine) -> list[str]:
        """Create every table that does not exist yet."""
        init_db(engine)
        logger.info("Tables created")
        return self.sorted_table_names()

    def drop_tables(self, engine: Engine) -> None:
        drop_db(engine)
        logger.info("Tables dropped")

    def table_status(self, engine: Engine) -> dict[str, list[str]]:
        """Which schema tables exist in the database and which are missing."""
        existing = set(inspect(engine).get_table_names())
        names = self.sorted_table_names()
        return {
            "present": [name for name in names if name in existing],
            "missing": [name for name in names if name not in existing],
        }

    def render_schema_sql(self, dialect_name: str = "mysql", database_name: str | None = None) -> str:
        """Render the schema file: database statements and CREATE TABLE in dependency order."""
        dialect = get_dialect(dialect_name)
        lines = [
            "-- Vacation-rental booking schema",
            f"-- Generated {datetime.now(UTC).isoformat()} for {dialect.name}",
            "--",
            "-- ENUM domains:",
        ]
        for domain, enum_cls in ENUM_DOMAINS.items():
            values = ", ".join(f"'{member.value}'" for member in enum_cls)
            lines.append(f"-- {domain}: {values}")
        lines.append("")

        if database_name and dialect.name == "mysql":
            quoted = dialect.identifier_preparer.quote(database_name)
            lines.append(f"DROP DATABASE IF EXISTS {quoted};")
            lines.append(f"CREATE DATABASE {quoted};")
            lines.append(f"USE {quoted};")
            lines.append("")

        if dialect.name == "postgresql":
            for name, values in self._named_enum_types().items():
                rendered = ", ".join(f"'{value}'" for value in values)
                lines.append(f"CREATE TYPE {name} AS ENUM ({rendered});")
            lines.append("")

        for table in Base.metadata.sorted_tables:
            ddl = str(CreateTable(table).compile(dialect=dialect)).strip()
            lines.append(f"{ddl};")
            lines.append("")

        return "\n".join(lines)

    def render_data_sql(self, dialect_name: str = "mysql") -> str:
        """Render the data file: one multi-row INSERT per table in dependency order."""
        dialect = get_dialect(dialect_name)
        lines = ["-- Seed data for the vacation-rental booking schema", ""]
        for table, rows in seed_service.build_seed_rows():
            statement = insert(table).values(rows)
            compiled = statement.compile(dialect=dialect, compile_kwargs={"literal_binds": True})
            lines.append(f"-- {table.name}: {len(rows)} rows")
            lines.append(f"{str(compiled).strip()};")
            if dialect.name == "postgresql":
                lines.append(f"{sequence_reset_sql(table, dialect)};")
            lines.append("")
        return "\n".join(lines)

    def export_sql(
        self,
        output_dir: str | Path,
        dialect_name: str = "mysql",
        database_name: str | None = None,
    ) -> list[Path]:
        """Write schema.sql and data.sql into an existing directory.

        Raises:
            ExportError: If the directory does not exist or cannot be written
        """
        directory = Path(output_dir)
        if not directory.is_dir():
            raise ExportError(str(directory), "directory does not exist")

        schema_sql = self.render_schema_sql(dialect_name, database_name)
        data_sql = self.render_data_sql(dialect_name)

        written = []
        for filename, content in ((SCHEMA_FILENAME, schema_sql), (DATA_FILENAME, data_sql)):
            path = directory / filename
            try:
                path.write_text(content, encoding="utf-8")
            except OSError as e:
                raise ExportError(str(path), str(e)) from e
            written.append(path)
            logger.info(f"Wrote {path}")
        return written

    def _named_enum_types(self) -> dict[str, list[str]]:
        types = {}
        for table in Base.metadata.sorted_tables:
            for column in table.columns:
                if isinstance(column.type, SAEnum) and column.type.name:
                    types.setdefault(column.type.name, list(column.type.enums))
        return types


schema_service = SchemaService()
