"""Payment-related Pydantic schemas."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from rentaldb.models.enums import PaymentMethod


class PaymentCreate(BaseModel):
    """Schema for recording a payment against a booking."""

    booking_id: int
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    payment_date: date = Field(default_factory=date.today)
    payment_method: PaymentMethod = PaymentMethod.CREDIT_CARD


class TransactionCreate(BaseModel):
    """Schema for recording a transaction against a payment."""

    payment_id: int
    amount: Decimal = Field(..., max_digits=10, decimal_places=2)
