#!/usr/bin/env python3
"""
Complete booking, payment and review flow.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates service calls.
All rules live in rentaldb.services.

Usage:
    python scripts/flow_book_and_review.py --guest-id 1 --property-id 1 --check-in 2025-02-01 --check-out 2025-02-10
    python scripts/flow_book_and_review.py --database-url sqlite:///rental.db --amount 500 --rating 4 --dry-run

Flow:
    1. Create booking
    2. Record payment
    3. Mark payment status as Successful
    4. Leave review
    5. Summarize booking
"""

import argparse
import json
import sys
from datetime import date
from decimal import Decimal

from pydantic import ValidationError as PydanticValidationError

from rentaldb.core.exceptions import AppException
from rentaldb.database import create_db_engine, get_session_factory
from rentaldb.models.enums import PaymentStatus
from rentaldb.schemas import BookingCreate, PaymentCreate, ReviewCreate
from rentaldb.services.booking_service import booking_service


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def print_result(data: dict):
    print(json.dumps(data, indent=2, default=str))


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Complete booking, payment and review flow")
    parser.add_argument("--database-url", default=None, help="SQLAlchemy URL (default: from settings)")
    parser.add_argument("--guest-id", type=int, default=1, help="Guest ID")
    parser.add_argument("--property-id", type=int, default=1, help="Property ID")
    parser.add_argument("--check-in", type=date.fromisoformat, default=date(2025, 2, 1), help="Check-in date (YYYY-MM-DD)")
    parser.add_argument("--check-out", type=date.fromisoformat, default=date(2025, 2, 10), help="Check-out date (YYYY-MM-DD)")
    parser.add_argument("--amount", type=Decimal, default=Decimal("500.00"), help="Payment amount")
    parser.add_argument("--rating", type=int, default=4, help="Review rating (1-5)")
    parser.add_argument("--comment", default="Lovely stay, would book again.", help="Review comment")
    parser.add_argument("--dry-run", action="store_true", help="Roll back instead of committing")
    args = parser.parse_args(argv)

    engine = create_db_engine(args.database_url)
    db = get_session_factory(engine)()

    try:
        # Step 1: Create booking
        print_step(1, "Create booking")
        booking = booking_service.create_booking(db, BookingCreate(
            guest_id=args.guest_id,
            property_id=args.property_id,
            check_in_date=args.check_in,
            check_out_date=args.check_out,
        ))
        print_result({
            "booking_id": booking.id,
            "check_in_date": booking.check_in_date,
            "check_out_date": booking.check_out_date,
            "nights": booking.nights,
            "payment_status": booking.payment_status.value,
        })

        # Step 2: Record payment
        print_step(2, "Record payment")
        payment = booking_service.record_payment(db, PaymentCreate(
            booking_id=booking.id,
            amount=args.amount,
        ))
        print_result({
            "payment_id": payment.id,
            "amount": payment.amount,
            "payment_method": payment.payment_method.value,
        })

        # Step 3: Mark payment as successful
        print_step(3, "Mark payment status as Successful")
        booking = booking_service.update_payment_status(db, booking.id, PaymentStatus.SUCCESSFUL)
        print(f"Booking {booking.id} payment status: {booking.payment_status.value}")

        # Step 4: Leave review
        print_step(4, "Leave review")
        review = booking_service.leave_review(db, ReviewCreate(
            guest_id=args.guest_id,
            property_id=args.property_id,
            rating=args.rating,
            comment=args.comment,
        ))
        print_result({"review_id": review.id, "rating": review.rating, "comment": review.comment})

        # Step 5: Summary
        print_step(5, "Summarize booking")
        summary = booking_service.summarize_booking(db, booking.id)
        print_result({
            "booking_id": summary["booking"].id,
            "payment_status": summary["booking"].payment_status.value,
            "payments": [{"id": p.id, "amount": p.amount} for p in summary["payments"]],
            "reviews": [{"id": r.id, "rating": r.rating} for r in summary["reviews"]],
        })

        if args.dry_run:
            db.rollback()
            print("\nDry run: changes rolled back")
        else:
            db.commit()
    except AppException as e:
        db.rollback()
        print(f"ERROR: {e.detail}")
        sys.exit(1)
    except PydanticValidationError as e:
        db.rollback()
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "input"
            print(f"ERROR: Invalid {field}: {error['msg']}")
        sys.exit(1)
    finally:
        db.close()
        engine.dispose()

    # Final summary
    print("\n" + "="*60)
    print("FULL FLOW COMPLETE")
    print("="*60)


if __name__ == "__main__":
    main()
