"""Initial database schema.

Revision ID: 001_initial
Revises: None
Create Date: 2025-01-20

Creates all tables for the vacation-rental booking system:
- Guests, hosts and user accounts
- Locations, properties and lookups
- Bookings, payments and transactions
- Reviews and review flags
- Loyalty, referrals and messages
"""

from typing import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers
revision: str = "001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _enum(*values: str, name: str) -> sa.Enum:
    return sa.Enum(*values, name=name, create_constraint=True)


GENDER = _enum("Female", "Male", name="gender")
REFERRAL_INFO = _enum("Referred", "Not-Referred", name="referral_info")
PAYMENT_STATUS = _enum("Successful", "Pending", "Declined", name="payment_status")
PAYMENT_METHOD = _enum("Bank Transfer", "Credit Card", "Debit Card", "PayPal", name="payment_method")
ROLE = _enum("Host", "Guest", name="role")

# Reverse creation order
TABLES = [
    "ReferralReward",
    "User",
    "ReviewFlag",
    "Transaction",
    "Rules",
    "LoyaltyProgram",
    "Calendar",
    "Type",
    "Amenity",
    "MaintenanceRequest",
    "Promotion",
    "Message",
    "Referral",
    "Review",
    "Payment",
    "Booking",
    "Property",
    "Location",
    "Host",
    "Guest",
]


def upgrade() -> None:
    """Create all database tables."""

    # ==================== PEOPLE ====================
    op.create_table(
        "Guest",
        sa.Column("GuestID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Name", sa.String(255), nullable=False),
        sa.Column("Email", sa.String(255), unique=True, nullable=False),
        sa.Column("Phone", sa.String(20)),
        sa.Column("Age", sa.Integer),
        sa.Column("Gender", GENDER),
        sa.Column("LoyaltyPoints", sa.Integer, server_default=sa.text("0")),
        sa.Column("ReferralInfo", REFERRAL_INFO),
    )

    op.create_table(
        "Host",
        sa.Column("HostID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Name", sa.String(255), nullable=False),
        sa.Column("Email", sa.String(255), unique=True, nullable=False),
        sa.Column("Gender", GENDER),
        sa.Column("Phone", sa.String(20)),
        sa.Column("HostProfile", sa.Text),
        sa.Column("PropertiesListed", sa.Text),
    )

    # ==================== PROPERTIES ====================
    op.create_table(
        "Location",
        sa.Column("LocationID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("City", sa.String(100), nullable=False),
        sa.Column("State", sa.String(100)),
        sa.Column("Country", sa.String(100), nullable=False),
    )

    op.create_table(
        "Property",
        sa.Column("PropertyID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("HostID", sa.Integer, sa.ForeignKey("Host.HostID")),
        sa.Column("LocationID", sa.Integer, sa.ForeignKey("Location.LocationID")),
        sa.Column("Price", sa.Numeric(10, 2), nullable=False),
        sa.Column("Type", sa.String(100)),
        sa.Column("Amenities", sa.Text),
        sa.Column("Rules", sa.Text),
        sa.Column("Availability", sa.Boolean, server_default=sa.true()),
    )

    # ==================== BOOKINGS ====================
    op.create_table(
        "Booking",
        sa.Column("BookingID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("GuestID", sa.Integer, sa.ForeignKey("Guest.GuestID")),
        sa.Column("PropertyID", sa.Integer, sa.ForeignKey("Property.PropertyID")),
        sa.Column("CheckInDate", sa.Date, nullable=False),
        sa.Column("CheckOutDate", sa.Date, nullable=False),
        sa.Column("PaymentStatus", PAYMENT_STATUS),
        sa.Column("BookingDate", sa.Date, nullable=False),
    )

    # ==================== PAYMENTS ====================
    op.create_table(
        "Payment",
        sa.Column("PaymentID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("BookingID", sa.Integer, sa.ForeignKey("Booking.BookingID")),
        sa.Column("Amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("PaymentDate", sa.Date, nullable=False),
        sa.Column("PaymentMethod", PAYMENT_METHOD),
    )

    # ==================== REVIEWS ====================
    op.create_table(
        "Review",
        sa.Column("ReviewID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("GuestID", sa.Integer, sa.ForeignKey("Guest.GuestID")),
        sa.Column("PropertyID", sa.Integer, sa.ForeignKey("Property.PropertyID")),
        sa.Column("Rating", sa.Integer),
        sa.Column("Comment", sa.Text),
        sa.Column("ReviewDate", sa.Date, nullable=False),
        sa.CheckConstraint(sa.column("Rating").between(1, 5), name="ck_review_rating_range"),
    )

    # ==================== REFERRALS & MESSAGES ====================
    op.create_table(
        "Referral",
        sa.Column("ReferralID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("ReferrerID", sa.Integer, sa.ForeignKey("Guest.GuestID")),
        sa.Column("ReferredUserID", sa.Integer, sa.ForeignKey("Guest.GuestID")),
        sa.Column("ReferralDate", sa.Date),
        sa.Column("RewardEarned", sa.Numeric(10, 2)),
    )

    op.create_table(
        "Message",
        sa.Column("MessageID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("SenderID", sa.Integer, sa.ForeignKey("Guest.GuestID")),
        sa.Column("ReceiverID", sa.Integer, sa.ForeignKey("Guest.GuestID")),
        sa.Column("Content", sa.Text, nullable=False),
        sa.Column("Timestamp", sa.DateTime, server_default=sa.func.now()),
    )

    # ==================== HOST OPERATIONS ====================
    op.create_table(
        "Promotion",
        sa.Column("PromoID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("HostID", sa.Integer, sa.ForeignKey("Host.HostID")),
        sa.Column("PropertyID", sa.Integer, sa.ForeignKey("Property.PropertyID")),
        sa.Column("DiscountRate", sa.Numeric(5, 2)),
        sa.Column("StartDate", sa.Date, nullable=False),
        sa.Column("EndDate", sa.Date, nullable=False),
    )

    op.create_table(
        "MaintenanceRequest",
        sa.Column("RequestID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("PropertyID", sa.Integer, sa.ForeignKey("Property.PropertyID")),
        sa.Column("RequestDate", sa.Date, nullable=False),
        sa.Column("Status", sa.String(50)),
        sa.Column("Description", sa.Text),
    )

    # ==================== LOOKUPS ====================
    op.create_table(
        "Amenity",
        sa.Column("AmenityID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Description", sa.Text, nullable=False),
    )

    op.create_table(
        "Type",
        sa.Column("TypeID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Description", sa.Text, nullable=False),
    )

    # ==================== CALENDAR ====================
    op.create_table(
        "Calendar",
        sa.Column("CalendarID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("PropertyID", sa.Integer, sa.ForeignKey("Property.PropertyID")),
        sa.Column("Date", sa.Date, nullable=False),
        sa.Column("Availability", sa.Boolean, server_default=sa.true()),
    )

    # ==================== LOYALTY ====================
    op.create_table(
        "LoyaltyProgram",
        sa.Column("ProgramID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("GuestID", sa.Integer, sa.ForeignKey("Guest.GuestID")),
        sa.Column("PointsEarned", sa.Integer, server_default=sa.text("0")),
        sa.Column("PointsRedeemed", sa.Integer, server_default=sa.text("0")),
        sa.Column("ExpiryDate", sa.Date),
    )

    op.create_table(
        "Rules",
        sa.Column("RuleID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Description", sa.Text, nullable=False),
    )

    op.create_table(
        "Transaction",
        sa.Column("TransactionID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("PaymentID", sa.Integer, sa.ForeignKey("Payment.PaymentID")),
        sa.Column("Amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("Timestamp", sa.DateTime, server_default=sa.func.now()),
    )

    op.create_table(
        "ReviewFlag",
        sa.Column("FlagID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("ReviewID", sa.Integer, sa.ForeignKey("Review.ReviewID")),
        sa.Column("FlaggedBy", sa.Integer, sa.ForeignKey("Guest.GuestID")),
        sa.Column("Reason", sa.Text),
    )

    # ==================== ACCOUNTS ====================
    op.create_table(
        "User",
        sa.Column("UserID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Name", sa.String(255), nullable=False),
        sa.Column("Email", sa.String(255), unique=True, nullable=False),
        sa.Column("GuestID", sa.Integer, sa.ForeignKey("Guest.GuestID")),
        sa.Column("HostID", sa.Integer, sa.ForeignKey("Host.HostID")),
        sa.Column("Role", ROLE),
    )

    op.create_table(
        "ReferralReward",
        sa.Column("RewardID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("ReferrerID", sa.Integer, sa.ForeignKey("Guest.GuestID")),
        sa.Column("RewardDescription", sa.Text, nullable=False),
        sa.Column("RedemptionStatus", sa.String(50)),
    )


def downgrade() -> None:
    """Drop all database tables."""
    for table_name in TABLES:
        op.drop_table(table_name)

    # Native enum types (PostgreSQL) outlive their tables
    bind = op.get_bind()
    for enum_type in (GENDER, REFERRAL_INFO, PAYMENT_STATUS, PAYMENT_METHOD, ROLE):
        enum_type.drop(bind, checkfirst=True)
