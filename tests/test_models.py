from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError, StatementError

from rentaldb.models import (
    Booking,
    Gender,
    Guest,
    Host,
    PaymentStatus,
    Property,
    Review,
    Role,
    User,
)

# IntegrityError rollbacks must leave the outer test transaction usable
pytestmark = pytest.mark.filterwarnings("error::sqlalchemy.exc.SAWarning")

# ---------- TEST DATA HELPERS ----------


def make_guest(name="Alice", email="alice@example.com", **kwargs):
    return Guest(name=name, email=email, **kwargs)


def make_host(name="Henry", email="henry@example.com", **kwargs):
    return Host(name=name, email=email, **kwargs)


# ---------- CONSTRAINT TESTS ----------


def test_guest_defaults(db_session):
    guest = make_guest(gender=Gender.FEMALE)
    db_session.add(guest)
    db_session.flush()
    db_session.refresh(guest)

    assert guest.id is not None
    assert guest.loyalty_points == 0
    assert guest.gender == Gender.FEMALE


def test_duplicate_guest_email_rejected(db_session):
    db_session.add(make_guest())
    db_session.add(make_guest(name="Alice Again"))
    with pytest.raises(IntegrityError):
        db_session.flush()


def test_rating_out_of_range_rejected(db_session):
    guest = make_guest()
    db_session.add(guest)
    db_session.flush()

    db_session.add(Review(guest_id=guest.id, rating=6, review_date=date(2025, 2, 1)))
    with pytest.raises(IntegrityError):
        db_session.flush()


def test_value_outside_enum_rejected(db_session):
    db_session.add(make_guest(gender="Other"))
    with pytest.raises(StatementError):
        db_session.flush()


def test_enum_stores_values(db_session):
    guest = make_guest(referral_info="Not-Referred")
    db_session.add(guest)
    db_session.flush()
    db_session.refresh(guest)

    assert guest.referral_info.value == "Not-Referred"


def test_dangling_foreign_key_rejected(db_session):
    db_session.add(
        Booking(
            guest_id=999,
            check_in_date=date(2025, 2, 1),
            check_out_date=date(2025, 2, 3),
            booking_date=date(2025, 1, 20),
        )
    )
    with pytest.raises(IntegrityError):
        db_session.flush()


def test_missing_required_column_rejected(db_session):
    db_session.add(Guest(name="No Email"))
    with pytest.raises(IntegrityError):
        db_session.flush()


# ---------- RELATIONSHIP TESTS ----------


def test_booking_nights_and_relationships(db_session):
    guest = make_guest()
    host = make_host()
    listing = Property(host=host, price=Decimal("120.00"))
    booking = Booking(
        guest=guest,
        property=listing,
        check_in_date=date(2025, 2, 1),
        check_out_date=date(2025, 2, 5),
        booking_date=date(2025, 1, 20),
        payment_status=PaymentStatus.PENDING,
    )
    db_session.add(booking)
    db_session.flush()

    assert booking.nights == 4
    assert listing.availability is True
    assert guest.bookings == [booking]
    assert host.properties == [listing]


def test_user_account_follows_role(db_session):
    guest = make_guest()
    host = make_host()
    guest_user = User(name="Alice", email="alice@example.com", guest=guest, role=Role.GUEST)
    host_user = User(name="Henry", email="henry@example.com", host=host, role=Role.HOST)
    db_session.add_all([guest_user, host_user])
    db_session.flush()

    assert guest_user.account is guest
    assert host_user.account is host
    assert User(name="Nobody", email="nobody@example.com").account is None
