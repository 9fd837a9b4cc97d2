import pytest
from sqlalchemy import select

from rentaldb.core.exceptions import SchemaNotInitializedError, SeedError
from rentaldb.database import create_db_engine, get_session_factory
from rentaldb.models import Booking, Guest, Role, User
from rentaldb.seed.data import SEED_TABLES
from rentaldb.services.schema_service import schema_service
from rentaldb.services.seed_service import seed_service

EXPECTED_COUNTS = {
    "Guest": 26,
    "Host": 26,
    "Location": 25,
    "Property": 25,
    "Booking": 25,
    "Payment": 25,
    "Review": 25,
    "Referral": 25,
    "Message": 25,
    "Promotion": 25,
    "MaintenanceRequest": 25,
    "Amenity": 25,
    "Type": 26,
    "Calendar": 26,
    "LoyaltyProgram": 25,
    "Rules": 24,
    "Transaction": 25,
    "ReviewFlag": 25,
    "User": 25,
    "ReferralReward": 25,
}


def test_expected_counts():
    assert seed_service.expected_counts() == EXPECTED_COUNTS


def test_seed_tables_follow_dependency_order():
    order = schema_service.sorted_table_names()
    positions = {name: order.index(name) for name, _, _ in SEED_TABLES}

    assert positions["Guest"] < positions["Booking"] < positions["Payment"] < positions["Transaction"]
    assert positions["Review"] < positions["ReviewFlag"]


def test_build_seed_rows_uses_column_names():
    seed_rows = dict((table.name, rows) for table, rows in seed_service.build_seed_rows())

    first_guest = seed_rows["Guest"][0]
    assert first_guest["GuestID"] == 1
    assert set(first_guest) >= {"Name", "Email", "Gender", "ReferralInfo"}
    assert seed_rows["Rules"][-1]["RuleID"] == 24


def test_load_inserts_all_rows(db_session):
    counts = seed_service.load(db_session)

    assert counts == EXPECTED_COUNTS
    assert seed_service.verify_counts(db_session) == {}


def test_loaded_rows_keep_references(seeded_session):
    booking = seeded_session.get(Booking, 1)
    assert booking.guest_id == 16
    assert booking.property_id == 9
    assert booking.guest.id == 16

    user = seeded_session.execute(select(User).where(User.email == "john.doe@example.com")).scalar_one()
    assert user.role == Role.GUEST
    assert isinstance(user.account, Guest)


def test_second_load_rejected(seeded_session):
    with pytest.raises(SeedError, match="already contain rows"):
        seed_service.load(seeded_session)


def test_verify_counts_reports_mismatch(db_session):
    assert seed_service.verify_counts(db_session)["Guest"] == {"expected": 26, "actual": 0}


def test_load_without_tables_rejected():
    engine = create_db_engine("sqlite:///:memory:", echo=False)
    db = get_session_factory(engine)()
    try:
        with pytest.raises(SchemaNotInitializedError) as exc_info:
            seed_service.load(db)
    finally:
        db.close()
        engine.dispose()

    assert "Guest" in exc_info.value.missing
    assert "Create the tables before inserting data" in exc_info.value.detail
