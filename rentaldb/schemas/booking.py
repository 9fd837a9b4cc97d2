"""Booking-related Pydantic schemas."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from rentaldb.models.enums import PaymentStatus


class BookingCreate(BaseModel):
    """Schema for creating a booking."""

    guest_id: int
    property_id: int
    check_in_date: date
    check_out_date: date
    payment_status: PaymentStatus = PaymentStatus.PENDING
    booking_date: date = Field(default_factory=date.today)

    @field_validator("check_out_date")
    @classmethod
    def validate_checkout(cls, v: date, info) -> date:
        check_in = info.data.get("check_in_date")
        if check_in and v <= check_in:
            raise ValueError("check_out_date must be after check_in_date")
        return v
