"""Guest, host and user account models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentaldb.database import Base
from rentaldb.models.enums import Gender, ReferralInfo, Role, enum_type

if TYPE_CHECKING:
    from rentaldb.models.booking import Booking
    from rentaldb.models.listing import Promotion, Property
    from rentaldb.models.loyalty import LoyaltyProgram, Referral, ReferralReward
    from rentaldb.models.message import Message
    from rentaldb.models.review import Review


class Guest(Base):
    """Guests who book properties."""

    __tablename__ = "Guest"

    id: Mapped[int] = mapped_column("GuestID", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(255), nullable=False)
    email: Mapped[str] = mapped_column("Email", String(255), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column("Phone", String(20))
    age: Mapped[int | None] = mapped_column("Age", Integer)
    gender: Mapped[Gender | None] = mapped_column("Gender", enum_type(Gender, "gender"))
    loyalty_points: Mapped[int | None] = mapped_column(
        "LoyaltyPoints", Integer, default=0, server_default=text("0")
    )
    referral_info: Mapped[ReferralInfo | None] = mapped_column(
        "ReferralInfo", enum_type(ReferralInfo, "referral_info")
    )

    # Relationships
    bookings: Mapped[list["Booking"]] = relationship("Booking", back_populates="guest")
    reviews: Mapped[list["Review"]] = relationship("Review", back_populates="guest")
    loyalty_programs: Mapped[list["LoyaltyProgram"]] = relationship(
        "LoyaltyProgram", back_populates="guest"
    )
    referral_rewards: Mapped[list["ReferralReward"]] = relationship(
        "ReferralReward", back_populates="referrer"
    )
    referrals_made: Mapped[list["Referral"]] = relationship(
        "Referral", back_populates="referrer", foreign_keys="Referral.referrer_id"
    )
    referrals_received: Mapped[list["Referral"]] = relationship(
        "Referral", back_populates="referred_user", foreign_keys="Referral.referred_user_id"
    )
    messages_sent: Mapped[list["Message"]] = relationship(
        "Message", back_populates="sender", foreign_keys="Message.sender_id"
    )
    messages_received: Mapped[list["Message"]] = relationship(
        "Message", back_populates="receiver", foreign_keys="Message.receiver_id"
    )


class Host(Base):
    """Hosts who list properties."""

    __tablename__ = "Host"

    id: Mapped[int] = mapped_column("HostID", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(255), nullable=False)
    email: Mapped[str] = mapped_column("Email", String(255), unique=True, nullable=False)
    gender: Mapped[Gender | None] = mapped_column("Gender", enum_type(Gender, "gender"))
    phone: Mapped[str | None] = mapped_column("Phone", String(20))
    host_profile: Mapped[str | None] = mapped_column("HostProfile", Text)
    properties_listed: Mapped[str | None] = mapped_column("PropertiesListed", Text)

    # Relationships
    properties: Mapped[list["Property"]] = relationship("Property", back_populates="host")
    promotions: Mapped[list["Promotion"]] = relationship("Promotion", back_populates="host")


class User(Base):
    """Login account mapped to exactly one guest or host profile.

    ``role`` tags which of ``guest_id`` / ``host_id`` is populated.
    """

    __tablename__ = "User"

    id: Mapped[int] = mapped_column("UserID", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(255), nullable=False)
    email: Mapped[str] = mapped_column("Email", String(255), unique=True, nullable=False)
    guest_id: Mapped[int | None] = mapped_column("GuestID", Integer, ForeignKey("Guest.GuestID"))
    host_id: Mapped[int | None] = mapped_column("HostID", Integer, ForeignKey("Host.HostID"))
    role: Mapped[Role | None] = mapped_column("Role", enum_type(Role, "role"))

    # Relationships
    guest: Mapped["Guest | None"] = relationship("Guest")
    host: Mapped["Host | None"] = relationship("Host")

    @property
    def account(self) -> Guest | Host | None:
        """Profile selected by the role tag."""
        if self.role == Role.GUEST:
            return self.guest
        if self.role == Role.HOST:
            return self.host
        return None
