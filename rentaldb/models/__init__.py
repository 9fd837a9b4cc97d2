"""Database models."""

from rentaldb.models.booking import Booking
from rentaldb.models.enums import Gender, PaymentMethod, PaymentStatus, ReferralInfo, Role
from rentaldb.models.listing import (
    Amenity,
    CalendarEntry,
    Location,
    MaintenanceRequest,
    Promotion,
    Property,
    PropertyType,
    Rule,
)
from rentaldb.models.loyalty import LoyaltyProgram, Referral, ReferralReward
from rentaldb.models.message import Message
from rentaldb.models.payment import Payment, Transaction
from rentaldb.models.review import Review, ReviewFlag
from rentaldb.models.user import Guest, Host, User

__all__ = [
    # Enums
    "Gender",
    "PaymentMethod",
    "PaymentStatus",
    "ReferralInfo",
    "Role",
    # People
    "Guest",
    "Host",
    "User",
    # Property
    "Location",
    "Property",
    "CalendarEntry",
    "MaintenanceRequest",
    "Promotion",
    "Amenity",
    "PropertyType",
    "Rule",
    # Booking
    "Booking",
    # Payment
    "Payment",
    "Transaction",
    # Review
    "Review",
    "ReviewFlag",
    # Loyalty
    "LoyaltyProgram",
    "Referral",
    "ReferralReward",
    # Message
    "Message",
]
