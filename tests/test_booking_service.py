from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from rentaldb.core.exceptions import (
    DatesNotAvailable,
    InvalidPaymentStatus,
    NotFoundError,
    PropertyNotAvailable,
    ValidationError,
)
from rentaldb.models import PaymentMethod, PaymentStatus, Property
from rentaldb.schemas import BookingCreate, PaymentCreate, ReviewCreate
from rentaldb.services.booking_service import booking_service

# ---------- TEST DATA HELPERS ----------


def create_booking_data(guest_id=1, property_id=1, check_in=date(2025, 2, 1), check_out=date(2025, 2, 10)):
    return BookingCreate(
        guest_id=guest_id,
        property_id=property_id,
        check_in_date=check_in,
        check_out_date=check_out,
    )


# ---------- HAPPY PATH TESTS ----------


def test_full_guest_journey(seeded_session):
    db = seeded_session

    booking = booking_service.create_booking(db, create_booking_data())
    assert booking.id == 26
    assert booking.nights == 9
    assert booking.payment_status == PaymentStatus.PENDING
    assert booking.booking_date == date.today()

    payment = booking_service.record_payment(
        db, PaymentCreate(booking_id=booking.id, amount=Decimal("500.00"))
    )
    assert payment.payment_method == PaymentMethod.CREDIT_CARD
    assert payment.payment_date == date.today()

    booking_service.update_payment_status(db, booking.id, "Successful")
    assert booking.payment_status == PaymentStatus.SUCCESSFUL

    review = booking_service.leave_review(
        db, ReviewCreate(guest_id=1, property_id=1, rating=4, comment="Great stay")
    )

    summary = booking_service.summarize_booking(db, booking.id)
    assert summary["booking"] is booking
    assert [p.amount for p in summary["payments"]] == [Decimal("500.00")]
    assert review in summary["reviews"]


def test_record_transaction_and_flag_review(seeded_session):
    transaction = booking_service.record_transaction(seeded_session, 1, Decimal("75.50"))
    assert transaction.payment.id == 1

    flag = booking_service.flag_review(seeded_session, 1, 2, "Off-topic")
    assert flag.review.id == 1
    assert flag.flagger.id == 2


def test_declined_booking_frees_dates(seeded_session):
    # Booking 4 on property 1 is declined
    booking = booking_service.create_booking(
        seeded_session,
        create_booking_data(check_in=date(2025, 2, 18), check_out=date(2025, 2, 22)),
    )
    assert booking.property_id == 1


# ---------- ERROR TESTS ----------


def test_overlapping_dates_rejected(seeded_session):
    # Booking 1: property 9, 2025-02-10 to 2025-02-14
    with pytest.raises(DatesNotAvailable):
        booking_service.create_booking(
            seeded_session,
            create_booking_data(property_id=9, check_in=date(2025, 2, 13), check_out=date(2025, 2, 16)),
        )


def test_back_to_back_booking_allowed(seeded_session):
    booking = booking_service.create_booking(
        seeded_session,
        create_booking_data(property_id=9, check_in=date(2025, 2, 14), check_out=date(2025, 2, 16)),
    )
    assert booking.check_in_date == date(2025, 2, 14)


def test_blocked_calendar_night_rejected(seeded_session):
    # Property 1 is unavailable on 2025-01-02
    with pytest.raises(DatesNotAvailable):
        booking_service.create_booking(
            seeded_session,
            create_booking_data(check_in=date(2025, 1, 1), check_out=date(2025, 1, 3)),
        )

    assert booking_service.check_availability(seeded_session, 1, date(2025, 1, 3), date(2025, 1, 5))


def test_unavailable_property_rejected(seeded_session):
    seeded_session.get(Property, 2).availability = False
    seeded_session.flush()

    with pytest.raises(PropertyNotAvailable):
        booking_service.create_booking(seeded_session, create_booking_data(property_id=2))


def test_unknown_guest_or_property(seeded_session):
    with pytest.raises(NotFoundError, match="Guest with ID '999' not found"):
        booking_service.create_booking(seeded_session, create_booking_data(guest_id=999))
    with pytest.raises(NotFoundError, match="Property"):
        booking_service.create_booking(seeded_session, create_booking_data(property_id=999))
    with pytest.raises(NotFoundError, match="Booking"):
        booking_service.record_payment(
            seeded_session, PaymentCreate(booking_id=999, amount=Decimal("10.00"))
        )


def test_checkout_before_checkin_rejected():
    with pytest.raises(PydanticValidationError):
        create_booking_data(check_in=date(2025, 2, 10), check_out=date(2025, 2, 10))


def test_non_positive_payment_rejected():
    with pytest.raises(PydanticValidationError):
        PaymentCreate(booking_id=1, amount=Decimal("0"))


def test_payment_status_transitions(seeded_session):
    # Booking 1 is already Successful
    with pytest.raises(InvalidPaymentStatus):
        booking_service.update_payment_status(seeded_session, 1, PaymentStatus.PENDING)

    # Booking 4 is Declined and may be retried
    booking = booking_service.update_payment_status(seeded_session, 4, PaymentStatus.PENDING)
    assert booking.payment_status == PaymentStatus.PENDING

    with pytest.raises(ValidationError):
        booking_service.update_payment_status(seeded_session, 4, "Refunded")


def test_review_requires_booking(seeded_session):
    # Guest 26 has no bookings
    with pytest.raises(ValidationError):
        booking_service.leave_review(
            seeded_session, ReviewCreate(guest_id=26, property_id=1, rating=5)
        )


def test_review_rating_bounds():
    with pytest.raises(PydanticValidationError):
        ReviewCreate(guest_id=1, property_id=1, rating=0)
    with pytest.raises(PydanticValidationError):
        ReviewCreate(guest_id=1, property_id=1, rating=6)
