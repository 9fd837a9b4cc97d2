from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import func, inspect, select

from rentaldb.database import Base, create_db_engine

ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


def make_config(url: str) -> Config:
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    config.set_main_option("sqlalchemy.url", url)
    return config


def test_upgrade_creates_and_seeds_schema(sqlite_url):
    config = make_config(sqlite_url)
    command.upgrade(config, "head")

    engine = create_db_engine(sqlite_url, echo=False)
    try:
        tables = set(inspect(engine).get_table_names())
        assert set(Base.metadata.tables) <= tables
        with engine.connect() as connection:
            guests = connection.execute(select(func.count()).select_from(Base.metadata.tables["Guest"]))
            assert guests.scalar() == 26
    finally:
        engine.dispose()


def test_downgrade_removes_schema(sqlite_url):
    config = make_config(sqlite_url)
    command.upgrade(config, "head")
    command.downgrade(config, "001_initial")

    engine = create_db_engine(sqlite_url, echo=False)
    try:
        with engine.connect() as connection:
            bookings = connection.execute(select(func.count()).select_from(Base.metadata.tables["Booking"]))
            assert bookings.scalar() == 0
    finally:
        engine.dispose()

    command.downgrade(config, "base")

    engine = create_db_engine(sqlite_url, echo=False)
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()
