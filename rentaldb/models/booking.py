"""Booking database model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentaldb.database import Base
from rentaldb.models.enums import PaymentStatus, enum_type

if TYPE_CHECKING:
    from rentaldb.models.listing import Property
    from rentaldb.models.payment import Payment
    from rentaldb.models.user import Guest


class Booking(Base):
    """Booking of a property by a guest."""

    __tablename__ = "Booking"

    id: Mapped[int] = mapped_column("BookingID", Integer, primary_key=True, autoincrement=True)
    guest_id: Mapped[int | None] = mapped_column("GuestID", Integer, ForeignKey("Guest.GuestID"))
    property_id: Mapped[int | None] = mapped_column(
        "PropertyID", Integer, ForeignKey("Property.PropertyID")
    )

    # Dates
    check_in_date: Mapped[date] = mapped_column("CheckInDate", Date, nullable=False)
    check_out_date: Mapped[date] = mapped_column("CheckOutDate", Date, nullable=False)
    booking_date: Mapped[date] = mapped_column("BookingDate", Date, nullable=False)

    payment_status: Mapped[PaymentStatus | None] = mapped_column(
        "PaymentStatus", enum_type(PaymentStatus, "payment_status")
    )

    @property
    def nights(self) -> int:
        """Calculate number of nights."""
        return (self.check_out_date - self.check_in_date).days

    # Relationships
    guest: Mapped["Guest | None"] = relationship("Guest", back_populates="bookings")
    property: Mapped["Property | None"] = relationship("Property", back_populates="bookings")
    payments: Mapped[list["Payment"]] = relationship("Payment", back_populates="booking")
