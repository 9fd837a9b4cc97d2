"""Property-related Pydantic schemas."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class LocationCreate(BaseModel):
    """Schema for creating a location."""

    city: str = Field(..., min_length=1, max_length=100)
    state: str | None = Field(None, max_length=100)
    country: str = Field(..., min_length=1, max_length=100)


class PropertyCreate(BaseModel):
    """Schema for creating a property."""

    host_id: int | None = None
    location_id: int | None = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    property_type: str | None = Field(None, max_length=100)
    amenities: str | None = None
    rules: str | None = None
    availability: bool = True


class CalendarEntryCreate(BaseModel):
    """Schema for a per-date availability flag."""

    property_id: int | None = None
    calendar_date: date
    availability: bool = True


class MaintenanceRequestCreate(BaseModel):
    """Schema for creating a maintenance request."""

    property_id: int | None = None
    request_date: date
    status: str | None = Field(None, max_length=50)
    description: str | None = None


class PromotionCreate(BaseModel):
    """Schema for creating a promotion."""

    host_id: int | None = None
    property_id: int | None = None
    discount_rate: Decimal | None = Field(None, ge=0, max_digits=5, decimal_places=2)
    start_date: date
    end_date: date

    @field_validator("end_date")
    @classmethod
    def validate_end_date(cls, v: date, info) -> date:
        start_date = info.data.get("start_date")
        if start_date and v < start_date:
            raise ValueError("end_date must not be before start_date")
        return v


class DescriptionCreate(BaseModel):
    """Schema for lookup tables holding a single description (Amenity, Type, Rules)."""

    description: str = Field(..., min_length=1)
