"""Pydantic schemas for row validation."""

from rentaldb.schemas.booking import BookingCreate
from rentaldb.schemas.listing import (
    CalendarEntryCreate,
    DescriptionCreate,
    LocationCreate,
    MaintenanceRequestCreate,
    PromotionCreate,
    PropertyCreate,
)
from rentaldb.schemas.loyalty import LoyaltyProgramCreate, ReferralCreate, ReferralRewardCreate
from rentaldb.schemas.message import MessageCreate
from rentaldb.schemas.payment import PaymentCreate, TransactionCreate
from rentaldb.schemas.review import ReviewCreate, ReviewFlagCreate
from rentaldb.schemas.user import GuestCreate, HostCreate, UserCreate

__all__ = [
    # People
    "GuestCreate",
    "HostCreate",
    "UserCreate",
    # Property
    "LocationCreate",
    "PropertyCreate",
    "CalendarEntryCreate",
    "MaintenanceRequestCreate",
    "PromotionCreate",
    "DescriptionCreate",
    # Booking
    "BookingCreate",
    # Payment
    "PaymentCreate",
    "TransactionCreate",
    # Review
    "ReviewCreate",
    "ReviewFlagCreate",
    # Loyalty
    "LoyaltyProgramCreate",
    "ReferralCreate",
    "ReferralRewardCreate",
    # Message
    "MessageCreate",
]
