from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from rentaldb.database import Base, create_db_engine
from rentaldb.models import (
    Booking,
    CalendarEntry,
    Guest,
    LoyaltyProgram,
    PaymentStatus,
    Promotion,
    Referral,
)
from rentaldb.services.integrity_service import DETAIL_LIMIT, HealthStatus, integrity_service


def check_by_name(report, name):
    return next(check for check in report["checks"] if check["name"] == name)


def test_seeded_data_passes_all_checks(seeded_session):
    report = integrity_service.run_all_checks(seeded_session)

    assert report["status"] == HealthStatus.OK
    assert all(check["status"] == HealthStatus.OK for check in report["checks"])
    assert report["counts"]["Guest"] == 26
    assert report["counts"]["Rules"] == 24
    assert "timestamp" in report


def test_empty_database_passes(db_session):
    report = integrity_service.run_all_checks(db_session)

    assert report["status"] == HealthStatus.OK
    assert set(report["counts"].values()) == {0}


def test_overlapping_bookings_warn(seeded_session):
    # Booking 1: property 9, 2025-02-10 to 2025-02-14
    seeded_session.add(
        Booking(
            guest_id=2,
            property_id=9,
            check_in_date=date(2025, 2, 12),
            check_out_date=date(2025, 2, 15),
            booking_date=date(2025, 1, 30),
            payment_status=PaymentStatus.PENDING,
        )
    )
    seeded_session.flush()

    report = integrity_service.run_all_checks(seeded_session)
    overlaps = check_by_name(report, "booking_overlaps")

    assert report["status"] == HealthStatus.WARNING
    assert overlaps["status"] == HealthStatus.WARNING
    assert overlaps["details"]["pairs"][0]["booking_ids"] == [1, 26]


def test_declined_bookings_do_not_overlap(seeded_session):
    # Booking 4: property 1, declined
    seeded_session.add(
        Booking(
            guest_id=2,
            property_id=1,
            check_in_date=date(2025, 2, 18),
            check_out_date=date(2025, 2, 22),
            booking_date=date(2025, 1, 30),
            payment_status=PaymentStatus.SUCCESSFUL,
        )
    )
    seeded_session.flush()

    report = integrity_service.run_all_checks(seeded_session)
    assert check_by_name(report, "booking_overlaps")["status"] == HealthStatus.OK


def test_warning_checks(seeded_session):
    seeded_session.add_all([
        CalendarEntry(property_id=1, calendar_date=date(2025, 1, 1), availability=False),
        LoyaltyProgram(guest_id=1, points_earned=10, points_redeemed=50),
        Referral(referrer_id=3, referred_user_id=3, referral_date=date(2025, 1, 5)),
        Booking(
            guest_id=2,
            property_id=25,
            check_in_date=date(2025, 6, 5),
            check_out_date=date(2025, 6, 1),
            booking_date=date(2025, 5, 1),
        ),
    ])
    seeded_session.flush()

    report = integrity_service.run_all_checks(seeded_session)

    assert report["status"] == HealthStatus.WARNING
    for name in ("calendar_duplicates", "loyalty_balances", "self_referrals", "booking_date_ranges"):
        assert check_by_name(report, name)["status"] == HealthStatus.WARNING
    duplicates = check_by_name(report, "calendar_duplicates")["details"]["entries"]
    assert duplicates == [{"property_id": 1, "date": "2025-01-01", "count": 2}]


def test_orphans_and_invalid_values_are_errors(loose_engine):
    Session = sessionmaker(bind=loose_engine)
    with Session() as db:
        db.execute(text("PRAGMA ignore_check_constraints = ON"))
        db.execute(text(
            'INSERT INTO "Booking" ("GuestID", "PropertyID", "CheckInDate", "CheckOutDate", "BookingDate") '
            "VALUES (999, 998, '2025-02-01', '2025-02-03', '2025-01-20')"
        ))
        db.execute(text(
            'INSERT INTO "Guest" ("Name", "Email", "Gender") '
            "VALUES ('Alex', 'alex@example.com', 'Other')"
        ))
        db.execute(text(
            'INSERT INTO "Review" ("GuestID", "Rating", "ReviewDate") VALUES (1, 9, \'2025-02-05\')'
        ))
        db.execute(text(
            'INSERT INTO "User" ("Name", "Email", "GuestID", "Role") '
            "VALUES ('Alex', 'alex@example.com', NULL, 'Guest')"
        ))

        report = integrity_service.run_all_checks(db)

    assert report["status"] == HealthStatus.ERROR

    references = check_by_name(report, "foreign_key_references")
    assert references["status"] == HealthStatus.ERROR
    dangling = {(issue["table"], issue["column"]) for issue in references["details"]["issues"]}
    assert dangling == {("Booking", "GuestID"), ("Booking", "PropertyID")}

    enums = check_by_name(report, "enum_domains")
    assert enums["details"]["issues"] == [{"table": "Guest", "column": "Gender", "values": ["Other"]}]

    assert check_by_name(report, "review_rating_range")["details"]["review_ids"] == [1]
    assert check_by_name(report, "user_role_consistency")["details"]["user_ids"] == [1]


def test_promotion_date_ranges_warn(seeded_session):
    promotion = Promotion(
        host_id=1,
        property_id=1,
        discount_rate=Decimal("10.00"),
        start_date=date(2025, 3, 10),
        end_date=date(2025, 3, 1),
    )
    seeded_session.add(promotion)
    seeded_session.flush()

    check = check_by_name(integrity_service.run_all_checks(seeded_session), "promotion_date_ranges")

    assert check["status"] == HealthStatus.WARNING
    assert check["details"]["promotion_ids"] == [promotion.id]


def test_self_referral_details_are_capped(seeded_session):
    referrals = [
        Referral(referrer_id=guest_id, referred_user_id=guest_id, referral_date=date(2025, 1, 5))
        for guest_id in range(1, DETAIL_LIMIT + 3)
    ]
    seeded_session.add_all(referrals)
    seeded_session.flush()

    check = check_by_name(integrity_service.run_all_checks(seeded_session), "self_referrals")

    assert check["status"] == HealthStatus.WARNING
    assert check["message"] == f"{DETAIL_LIMIT + 2} guest(s) referred themselves"
    assert len(check["details"]["referral_ids"]) == DETAIL_LIMIT
    assert set(check["details"]["referral_ids"]) <= {referral.id for referral in referrals}


# ---------- DUPLICATE EMAILS ----------


@pytest.fixture
def engine_without_email_index():
    """Schema whose Guest table lacks the unique email index."""
    engine = create_db_engine("sqlite:///:memory:", echo=False, enforce_foreign_keys=False)
    with engine.begin() as connection:
        connection.execute(text(
            'CREATE TABLE "Guest" ('
            '"GuestID" INTEGER PRIMARY KEY, "Name" VARCHAR(255) NOT NULL, '
            '"Email" VARCHAR(255) NOT NULL, "Phone" VARCHAR(20), "Age" INTEGER, '
            '"Gender" VARCHAR(6), "LoyaltyPoints" INTEGER DEFAULT 0, "ReferralInfo" VARCHAR(12))'
        ))
    # Existing tables are skipped
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


def test_duplicate_emails_are_errors(engine_without_email_index):
    Session = sessionmaker(bind=engine_without_email_index)
    with Session() as db:
        db.add_all([
            Guest(name="Alice", email="alice@example.com"),
            Guest(name="Alice Again", email="alice@example.com"),
            Guest(name="Bob", email="bob@example.com"),
        ])
        db.flush()

        report = integrity_service.run_all_checks(db)

    emails = check_by_name(report, "unique_emails")

    assert report["status"] == HealthStatus.ERROR
    assert emails["status"] == HealthStatus.ERROR
    assert emails["details"]["duplicates"] == {"Guest": ["alice@example.com"]}
    assert emails["message"] == "Duplicate emails in Guest"
