import pytest
from sqlalchemy import inspect

from rentaldb.core.exceptions import ExportError, ValidationError
from rentaldb.database import create_db_engine
from rentaldb.services.schema_service import schema_service


def test_sorted_table_names_put_parents_first():
    order = schema_service.sorted_table_names()

    assert len(order) == 20
    assert order.index("Guest") < order.index("Booking")
    assert order.index("Host") < order.index("Property") < order.index("Booking")
    assert order.index("Payment") < order.index("Transaction")


def test_render_mysql_schema():
    sql = schema_service.render_schema_sql("mysql", "airbnbSystem")

    assert "-- Gender: 'Female', 'Male'" in sql
    assert "DROP DATABASE IF EXISTS `airbnbSystem`;" in sql
    assert "USE `airbnbSystem`;" in sql
    assert sql.count("CREATE TABLE") == 20
    assert "ENUM('Female','Male')" in sql
    assert "CHECK (`Rating` BETWEEN 1 AND 5)" in sql
    assert sql.index("CREATE TABLE `Guest`") < sql.index("CREATE TABLE `Booking`")


def test_render_postgresql_schema_declares_enum_types():
    sql = schema_service.render_schema_sql("postgresql")

    assert "CREATE TYPE payment_method AS ENUM ('Bank Transfer', 'Credit Card', 'Debit Card', 'PayPal');" in sql
    assert "CREATE DATABASE" not in sql


def test_render_postgresql_schema_quotes_rating_check():
    sql = schema_service.render_schema_sql("postgresql")

    assert 'CONSTRAINT ck_review_rating_range CHECK ("Rating" BETWEEN 1 AND 5)' in sql
    assert "CHECK (Rating" not in sql


def test_render_data_sql():
    sql = schema_service.render_data_sql("mysql")

    assert sql.count("INSERT INTO") == 20
    assert "-- Guest: 26 rows" in sql
    assert "'john.doe@example.com'" in sql
    assert sql.index("INSERT INTO `Guest`") < sql.index("INSERT INTO `Booking`")
    assert "setval" not in sql


def test_render_postgresql_data_resets_sequences():
    sql = schema_service.render_data_sql("postgresql")

    reset = (
        "SELECT setval(pg_get_serial_sequence('\"Guest\"', 'GuestID'), "
        "(SELECT MAX(\"GuestID\") FROM \"Guest\"));"
    )
    assert reset in sql
    assert sql.count("SELECT setval(") == 20
    assert sql.index('INSERT INTO "Guest"') < sql.index(reset) < sql.index('INSERT INTO "Host"')


def test_unknown_dialect_rejected():
    with pytest.raises(ValidationError, match="Unsupported dialect"):
        schema_service.render_schema_sql("oracle")


def test_export_sql(tmp_path):
    paths = schema_service.export_sql(tmp_path, "sqlite")

    assert [path.name for path in paths] == ["schema.sql", "data.sql"]
    assert "CREATE TABLE" in (tmp_path / "schema.sql").read_text(encoding="utf-8")
    assert "INSERT INTO" in (tmp_path / "data.sql").read_text(encoding="utf-8")


def test_export_to_missing_directory_rejected(tmp_path):
    with pytest.raises(ExportError, match="directory does not exist"):
        schema_service.export_sql(tmp_path / "missing")


def test_create_and_drop_tables(sqlite_url):
    engine = create_db_engine(sqlite_url, echo=False)
    try:
        assert len(schema_service.table_status(engine)["missing"]) == 20

        schema_service.create_tables(engine)
        status = schema_service.table_status(engine)
        assert status["missing"] == []
        assert "Calendar" in inspect(engine).get_table_names()

        schema_service.drop_tables(engine)
        assert schema_service.table_status(engine)["present"] == []
    finally:
        engine.dispose()


def test_recreate_sqlite_database_removes_file(tmp_path, sqlite_url):
    engine = create_db_engine(sqlite_url, echo=False)
    schema_service.create_tables(engine)
    engine.dispose()
    assert (tmp_path / "rental.db").exists()

    schema_service.recreate_database(url=sqlite_url)

    assert not (tmp_path / "rental.db").exists()
