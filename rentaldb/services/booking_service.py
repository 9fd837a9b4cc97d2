"""Guest journey: book a property, pay, settle the status and review."""

import logging
from datetime import date
from decimal import Decimal
from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from rentaldb.core.exceptions import (
    DatesNotAvailable,
    NotFoundError,
    PropertyNotAvailable,
    ValidationError,
)
from rentaldb.domain.payment_state import assert_payment_status_transition
from rentaldb.models.booking import Booking
from rentaldb.models.enums import PaymentStatus
from rentaldb.models.listing import CalendarEntry, Property
from rentaldb.models.payment import Payment, Transaction
from rentaldb.models.review import Review, ReviewFlag
from rentaldb.models.user import Guest
from rentaldb.schemas.booking import BookingCreate
from rentaldb.schemas.payment import PaymentCreate, TransactionCreate
from rentaldb.schemas.review import ReviewCreate, ReviewFlagCreate

logger = logging.getLogger(__name__)


class BookingService:
    """Service for the booking, payment and review steps of a stay.

    Methods flush but never commit; the caller owns the transaction.
    """

    def check_availability(
        self,
        db: Session,
        property_id: int,
        check_in: date,
        check_out: date,
        exclude_booking_id: int | None = None,
    ) -> bool:
        """Check if the nights in [check_in, check_out) are free.

        A night is taken by a non-declined booking or by a calendar entry
        marked unavailable.
        """
        query = select(Booking.id).where(
            Booking.property_id == property_id,
            Booking.check_in_date < check_out,
            Booking.check_out_date > check_in,
            or_(
                Booking.payment_status.is_(None),
                Booking.payment_status != PaymentStatus.DECLINED,
            ),
        )
        if exclude_booking_id is not None:
            query = query.where(Booking.id != exclude_booking_id)
        if db.execute(query.limit(1)).first():
            return False

        blocked = db.execute(
            select(CalendarEntry.id)
            .where(
                CalendarEntry.property_id == property_id,
                CalendarEntry.calendar_date >= check_in,
                CalendarEntry.calendar_date < check_out,
                CalendarEntry.availability.is_(False),
            )
            .limit(1)
        ).first()
        return blocked is None

    def create_booking(self, db: Session, booking_data: BookingCreate) -> Booking:
        """Create a booking for a guest.

        Raises:
            NotFoundError: If the guest or property does not exist
            PropertyNotAvailable: If the property is not open for bookings
            DatesNotAvailable: If the dates overlap a booking or a blocked night
        """
        if db.get(Guest, booking_data.guest_id) is None:
            raise NotFoundError("Guest", str(booking_data.guest_id))

        listing = db.get(Property, booking_data.property_id)
        if listing is None:
            raise NotFoundError("Property", str(booking_data.property_id))
        if listing.availability is False:
            raise PropertyNotAvailable()

        if not self.check_availability(
            db, listing.id, booking_data.check_in_date, booking_data.check_out_date
        ):
            raise DatesNotAvailable()

        booking = Booking(
            guest_id=booking_data.guest_id,
            property_id=listing.id,
            check_in_date=booking_data.check_in_date,
            check_out_date=booking_data.check_out_date,
            booking_date=booking_data.booking_date,
            payment_status=booking_data.payment_status,
        )
        db.add(booking)
        db.flush()

        logger.info(
            f"Booking {booking.id} created: guest {booking.guest_id}, property {listing.id}, "
            f"{booking.check_in_date} to {booking.check_out_date}"
        )
        return booking

    def record_payment(self, db: Session, payment_data: PaymentCreate) -> Payment:
        """Record a payment against an existing booking."""
        booking = db.get(Booking, payment_data.booking_id)
        if booking is None:
            raise NotFoundError("Booking", str(payment_data.booking_id))

        payment = Payment(
            booking_id=booking.id,
            amount=payment_data.amount,
            payment_date=payment_data.payment_date,
            payment_method=payment_data.payment_method,
        )
        db.add(payment)
        db.flush()

        logger.info(f"Payment {payment.id} of {payment.amount} recorded for booking {booking.id}")
        return payment

    def record_transaction(self, db: Session, payment_id: int, amount: Decimal) -> Transaction:
        data = TransactionCreate(payment_id=payment_id, amount=amount)
        if db.get(Payment, data.payment_id) is None:
            raise NotFoundError("Payment", str(data.payment_id))

        transaction = Transaction(payment_id=data.payment_id, amount=data.amount)
        db.add(transaction)
        db.flush()
        return transaction

    def update_payment_status(
        self, db: Session, booking_id: int, status: PaymentStatus | str
    ) -> Booking:
        """Move a booking's payment status along the allowed transitions.

        Raises:
            NotFoundError: If the booking does not exist
            ValidationError: If the status is not a known payment status
            InvalidPaymentStatus: If the transition is not allowed
        """
        try:
            target = PaymentStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown payment status '{status}'") from None

        booking = db.get(Booking, booking_id)
        if booking is None:
            raise NotFoundError("Booking", str(booking_id))

        previous = booking.payment_status
        assert_payment_status_transition(previous, target)
        booking.payment_status = target
        db.flush()

        logger.info(
            f"Booking {booking.id} payment status: "
            f"{previous.value if previous else 'None'} → {target.value}"
        )
        return booking

    def leave_review(self, db: Session, review_data: ReviewCreate) -> Review:
        """Create a review of a property the guest has booked.

        Raises:
            NotFoundError: If the guest or property does not exist
            ValidationError: If the guest never booked the property
        """
        if db.get(Guest, review_data.guest_id) is None:
            raise NotFoundError("Guest", str(review_data.guest_id))
        if db.get(Property, review_data.property_id) is None:
            raise NotFoundError("Property", str(review_data.property_id))

        has_booking = db.execute(
            select(Booking.id)
            .where(
                Booking.guest_id == review_data.guest_id,
                Booking.property_id == review_data.property_id,
            )
            .limit(1)
        ).first()
        if not has_booking:
            raise ValidationError("You can only review properties you have booked")

        review = Review(
            guest_id=review_data.guest_id,
            property_id=review_data.property_id,
            rating=review_data.rating,
            comment=review_data.comment,
            review_date=review_data.review_date,
        )
        db.add(review)
        db.flush()

        logger.info(
            f"Review {review.id} ({review.rating}/5) left by guest {review.guest_id} "
            f"for property {review.property_id}"
        )
        return review

    def flag_review(
        self, db: Session, review_id: int, guest_id: int, reason: str | None = None
    ) -> ReviewFlag:
        data = ReviewFlagCreate(review_id=review_id, flagged_by=guest_id, reason=reason)
        if db.get(Review, data.review_id) is None:
            raise NotFoundError("Review", str(data.review_id))
        if db.get(Guest, data.flagged_by) is None:
            raise NotFoundError("Guest", str(data.flagged_by))

        flag = ReviewFlag(review_id=data.review_id, flagged_by=data.flagged_by, reason=data.reason)
        db.add(flag)
        db.flush()

        logger.info(f"Review {data.review_id} flagged by guest {data.flagged_by}")
        return flag

    def summarize_booking(self, db: Session, booking_id: int) -> dict[str, Any]:
        """Get a booking with its payments and the guest's reviews of the property."""
        booking = db.get(Booking, booking_id)
        if booking is None:
            raise NotFoundError("Booking", str(booking_id))

        payments = (
            db.execute(select(Payment).where(Payment.booking_id == booking.id).order_by(Payment.id))
            .scalars()
            .all()
        )
        reviews = (
            db.execute(
                select(Review)
                .where(
                    Review.guest_id == booking.guest_id,
                    Review.property_id == booking.property_id,
                )
                .order_by(Review.id)
            )
            .scalars()
            .all()
        )
        return {"booking": booking, "payments": list(payments), "reviews": list(reviews)}


booking_service = BookingService()
