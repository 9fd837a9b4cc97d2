"""Data-quality check service (read-only validation)."""

import logging
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from sqlalchemy import Enum as SAEnum
from sqlalchemy import String, and_, exists, func, or_, select, type_coerce
from sqlalchemy.orm import Session, aliased

import rentaldb.models  # noqa: F401
from rentaldb.database import Base
from rentaldb.models.booking import Booking
from rentaldb.models.enums import PaymentStatus, Role
from rentaldb.models.listing import CalendarEntry, Promotion
from rentaldb.models.loyalty import LoyaltyProgram, Referral
from rentaldb.models.review import MAX_RATING, MIN_RATING, Review
from rentaldb.models.user import Guest, Host, User

logger = logging.getLogger(__name__)

# Offending ids reported per check
DETAIL_LIMIT = 10


class HealthStatus(str, Enum):
    OK = "OK"
    WARNING = "WARNING"
    ERROR = "ERROR"


class IntegrityService:
    """Read-only validator for the schema's data-quality properties."""

    def run_all_checks(self, db: Session) -> dict[str, Any]:
        """Run all data-quality checks."""
        checks = []
        overall_status = HealthStatus.OK

        check_methods = [
            self._check_foreign_key_references,
            self._check_review_rating_range,
            self._check_unique_emails,
            self._check_enum_domains,
            self._check_user_role_consistency,
            self._check_booking_date_ranges,
            self._check_booking_overlaps,
            self._check_calendar_duplicates,
            self._check_loyalty_balances,
            self._check_promotion_date_ranges,
            self._check_self_referrals,
        ]

        for check_method in check_methods:
            result = check_method(db)
            checks.append(result)

            if result["status"] == HealthStatus.ERROR:
                overall_status = HealthStatus.ERROR
            elif result["status"] == HealthStatus.WARNING and overall_status != HealthStatus.ERROR:
                overall_status = HealthStatus.WARNING

            if result["status"] != HealthStatus.OK:
                logger.warning(
                    f"Integrity check '{result['name']}': {result['status'].value} - {result['message']}"
                )

        return {
            "status": overall_status,
            "checks": checks,
            "counts": self._get_counts(db),
            "timestamp": datetime.now(UTC).isoformat(),
        }

    def _check_foreign_key_references(self, db: Session) -> dict:
        """Every non-null foreign key value must exist in its parent table."""
        issues = []
        for table in Base.metadata.sorted_tables:
            pk = list(table.primary_key.columns)[0]
            for fk in table.foreign_keys:
                child, parent = fk.parent, fk.column
                dangling = (
                    db.execute(
                        select(pk)
                        .where(
                            child.isnot(None),
                            ~exists(select(parent).where(parent == child)),
                        )
                        .order_by(pk)
                    )
                    .scalars()
                    .all()
                )
                if dangling:
                    issues.append({
                        "table": table.name,
                        "column": child.name,
                        "references": f"{parent.table.name}.{parent.name}",
                        "count": len(dangling),
                        "ids": dangling[:DETAIL_LIMIT],
                    })

        if issues:
            return {
                "name": "foreign_key_references",
                "status": HealthStatus.ERROR,
                "message": f"{sum(i['count'] for i in issues)} row(s) reference non-existent parents",
                "details": {"issues": issues},
            }

        return {
            "name": "foreign_key_references",
            "status": HealthStatus.OK,
            "message": "All foreign key references are valid",
            "details": {},
        }

    def _check_review_rating_range(self, db: Session) -> dict:
        """Review ratings must lie within the allowed range."""
        invalid = (
            db.execute(
                select(Review.id).where(
                    Review.rating.isnot(None),
                    or_(Review.rating < MIN_RATING, Review.rating > MAX_RATING),
                )
            )
            .scalars()
            .all()
        )

        if invalid:
            return {
                "name": "review_rating_range",
                "status": HealthStatus.ERROR,
                "message": f"{len(invalid)} review(s) rated outside {MIN_RATING}-{MAX_RATING}",
                "details": {"review_ids": invalid[:DETAIL_LIMIT]},
            }

        return {
            "name": "review_rating_range",
            "status": HealthStatus.OK,
            "message": f"All ratings within {MIN_RATING}-{MAX_RATING}",
            "details": {},
        }

    def _check_unique_emails(self, db: Session) -> dict:
        """Guest, host and user emails must be unique within their table."""
        duplicates = {}
        for model in (Guest, Host, User):
            rows = db.execute(
                select(model.email, func.count().label("cnt"))
                .group_by(model.email)
                .having(func.count() > 1)
            ).all()
            if rows:
                duplicates[model.__tablename__] = [row[0] for row in rows[:DETAIL_LIMIT]]

        if duplicates:
            return {
                "name": "unique_emails",
                "status": HealthStatus.ERROR,
                "message": f"Duplicate emails in {', '.join(duplicates)}",
                "details": {"duplicates": duplicates},
            }

        return {
            "name": "unique_emails",
            "status": HealthStatus.OK,
            "message": "All emails are unique",
            "details": {},
        }

    def _check_enum_domains(self, db: Session) -> dict:
        """Enum columns may only hold their fixed values."""
        issues = []
        for table in Base.metadata.sorted_tables:
            for column in table.columns:
                if not isinstance(column.type, SAEnum):
                    continue
                raw = type_coerce(column, String)
                invalid = (
                    db.execute(
                        select(raw).where(raw.isnot(None), raw.not_in(column.type.enums)).distinct()
                    )
                    .scalars()
                    .all()
                )
                if invalid:
                    issues.append({
                        "table": table.name,
                        "column": column.name,
                        "values": invalid[:DETAIL_LIMIT],
                    })

        if issues:
            return {
                "name": "enum_domains",
                "status": HealthStatus.ERROR,
                "message": f"{len(issues)} enum column(s) hold values outside their domain",
                "details": {"issues": issues},
            }

        return {
            "name": "enum_domains",
            "status": HealthStatus.OK,
            "message": "All enum columns hold valid values",
            "details": {},
        }

    def _check_user_role_consistency(self, db: Session) -> dict:
        """A user's role must match the profile it references."""
        invalid = (
            db.execute(
                select(User.id).where(
                    or_(
                        and_(
                            User.role == Role.GUEST,
                            or_(User.guest_id.is_(None), User.host_id.isnot(None)),
                        ),
                        and_(
                            User.role == Role.HOST,
                            or_(User.host_id.is_(None), User.guest_id.isnot(None)),
                        ),
                    )
                )
            )
            .scalars()
            .all()
        )

        if invalid:
            return {
                "name": "user_role_consistency",
                "status": HealthStatus.ERROR,
                "message": f"{len(invalid)} user(s) reference a profile that does not match their role",
                "details": {"user_ids": invalid[:DETAIL_LIMIT]},
            }

        return {
            "name": "user_role_consistency",
            "status": HealthStatus.OK,
            "message": "All user roles match their profile",
            "details": {},
        }

    def _check_booking_date_ranges(self, db: Session) -> dict:
        """Check-out must be after check-in."""
        invalid = (
            db.execute(select(Booking.id).where(Booking.check_out_date <= Booking.check_in_date))
            .scalars()
            .all()
        )

        if invalid:
            return {
                "name": "booking_date_ranges",
                "status": HealthStatus.WARNING,
                "message": f"{len(invalid)} booking(s) check out on or before check-in",
                "details": {"booking_ids": invalid[:DETAIL_LIMIT]},
            }

        return {
            "name": "booking_date_ranges",
            "status": HealthStatus.OK,
            "message": "All bookings have valid date ranges",
            "details": {},
        }

    def _check_booking_overlaps(self, db: Session) -> dict:
        """Non-declined bookings of one property must not overlap."""
        first = aliased(Booking)
        second = aliased(Booking)

        def active(booking):
            return or_(
                booking.payment_status.is_(None),
                booking.payment_status != PaymentStatus.DECLINED,
            )

        overlaps = db.execute(
            select(first.id, second.id, first.property_id).where(
                first.property_id == second.property_id,
                first.id < second.id,
                first.check_in_date < second.check_out_date,
                second.check_in_date < first.check_out_date,
                active(first),
                active(second),
            )
        ).all()

        if overlaps:
            return {
                "name": "booking_overlaps",
                "status": HealthStatus.WARNING,
                "message": f"{len(overlaps)} pair(s) of overlapping bookings",
                "details": {
                    "pairs": [
                        {"booking_ids": [a, b], "property_id": p} for a, b, p in overlaps[:DETAIL_LIMIT]
                    ]
                },
            }

        return {
            "name": "booking_overlaps",
            "status": HealthStatus.OK,
            "message": "No overlapping bookings",
            "details": {},
        }

    def _check_calendar_duplicates(self, db: Session) -> dict:
        """At most one calendar entry per property and date."""
        duplicates = db.execute(
            select(CalendarEntry.property_id, CalendarEntry.calendar_date, func.count().label("cnt"))
            .group_by(CalendarEntry.property_id, CalendarEntry.calendar_date)
            .having(func.count() > 1)
        ).all()

        if duplicates:
            return {
                "name": "calendar_duplicates",
                "status": HealthStatus.WARNING,
                "message": f"{len(duplicates)} property/date pair(s) have more than one calendar entry",
                "details": {
                    "entries": [
                        {"property_id": p, "date": d.isoformat(), "count": c}
                        for p, d, c in duplicates[:DETAIL_LIMIT]
                    ]
                },
            }

        return {
            "name": "calendar_duplicates",
            "status": HealthStatus.OK,
            "message": "No duplicate calendar entries",
            "details": {},
        }

    def _check_loyalty_balances(self, db: Session) -> dict:
        """Guests cannot redeem more points than they earned."""
        invalid = (
            db.execute(
                select(LoyaltyProgram.id).where(
                    LoyaltyProgram.points_redeemed > LoyaltyProgram.points_earned
                )
            )
            .scalars()
            .all()
        )

        if invalid:
            return {
                "name": "loyalty_balances",
                "status": HealthStatus.WARNING,
                "message": f"{len(invalid)} loyalty program(s) redeemed more than earned",
                "details": {"program_ids": invalid[:DETAIL_LIMIT]},
            }

        return {
            "name": "loyalty_balances",
            "status": HealthStatus.OK,
            "message": "All loyalty balances are non-negative",
            "details": {},
        }

    def _check_promotion_date_ranges(self, db: Session) -> dict:
        invalid = (
            db.execute(select(Promotion.id).where(Promotion.end_date < Promotion.start_date))
            .scalars()
            .all()
        )

        if invalid:
            return {
                "name": "promotion_date_ranges",
                "status": HealthStatus.WARNING,
                "message": f"{len(invalid)} promotion(s) end before they start",
                "details": {"promotion_ids": invalid[:DETAIL_LIMIT]},
            }

        return {
            "name": "promotion_date_ranges",
            "status": HealthStatus.OK,
            "message": "All promotions have valid date ranges",
            "details": {},
        }

    def _check_self_referrals(self, db: Session) -> dict:
        invalid = (
            db.execute(select(Referral.id).where(Referral.referrer_id == Referral.referred_user_id))
            .scalars()
            .all()
        )

        if invalid:
            return {
                "name": "self_referrals",
                "status": HealthStatus.WARNING,
                "message": f"{len(invalid)} guest(s) referred themselves",
                "details": {"referral_ids": invalid[:DETAIL_LIMIT]},
            }

        return {
            "name": "self_referrals",
            "status": HealthStatus.OK,
            "message": "No self-referrals",
            "details": {},
        }

    def _get_counts(self, db: Session) -> dict[str, int]:
        """Get row counts per table for reporting."""
        return {
            table.name: db.execute(select(func.count()).select_from(table)).scalar() or 0
            for table in Base.metadata.sorted_tables
        }


integrity_service = IntegrityService()
