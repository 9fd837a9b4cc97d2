"""Payment-related database models."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from rentaldb.database import Base
from rentaldb.models.enums import PaymentMethod, enum_type

if TYPE_CHECKING:
    from rentaldb.models.booking import Booking


class Payment(Base):
    """Payment made for a booking."""

    __tablename__ = "Payment"

    id: Mapped[int] = mapped_column("PaymentID", Integer, primary_key=True, autoincrement=True)
    booking_id: Mapped[int | None] = mapped_column(
        "BookingID", Integer, ForeignKey("Booking.BookingID")
    )
    amount: Mapped[Decimal] = mapped_column("Amount", Numeric(10, 2), nullable=False)
    payment_date: Mapped[date] = mapped_column("PaymentDate", Date, nullable=False)
    payment_method: Mapped[PaymentMethod | None] = mapped_column(
        "PaymentMethod", enum_type(PaymentMethod, "payment_method")
    )

    # Relationships
    booking: Mapped["Booking | None"] = relationship("Booking", back_populates="payments")
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction", back_populates="payment"
    )


class Transaction(Base):
    """Individual money movement belonging to a payment."""

    __tablename__ = "Transaction"

    id: Mapped[int] = mapped_column("TransactionID", Integer, primary_key=True, autoincrement=True)
    payment_id: Mapped[int | None] = mapped_column(
        "PaymentID", Integer, ForeignKey("Payment.PaymentID")
    )
    amount: Mapped[Decimal] = mapped_column("Amount", Numeric(10, 2), nullable=False)
    timestamp: Mapped[datetime | None] = mapped_column(
        "Timestamp", DateTime, server_default=func.now()
    )

    payment: Mapped["Payment | None"] = relationship("Payment", back_populates="transactions")
