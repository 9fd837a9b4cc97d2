"""Loyalty and referral program models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentaldb.database import Base

if TYPE_CHECKING:
    from rentaldb.models.user import Guest


class LoyaltyProgram(Base):
    """Loyalty points earned and redeemed by a guest."""

    __tablename__ = "LoyaltyProgram"

    id: Mapped[int] = mapped_column("ProgramID", Integer, primary_key=True, autoincrement=True)
    guest_id: Mapped[int | None] = mapped_column("GuestID", Integer, ForeignKey("Guest.GuestID"))
    points_earned: Mapped[int | None] = mapped_column(
        "PointsEarned", Integer, default=0, server_default=text("0")
    )
    points_redeemed: Mapped[int | None] = mapped_column(
        "PointsRedeemed", Integer, default=0, server_default=text("0")
    )
    expiry_date: Mapped[date | None] = mapped_column("ExpiryDate", Date)

    guest: Mapped["Guest | None"] = relationship("Guest", back_populates="loyalty_programs")

    @property
    def points_balance(self) -> int:
        return (self.points_earned or 0) - (self.points_redeemed or 0)


class Referral(Base):
    """One guest referring another."""

    __tablename__ = "Referral"

    id: Mapped[int] = mapped_column("ReferralID", Integer, primary_key=True, autoincrement=True)
    referrer_id: Mapped[int | None] = mapped_column(
        "ReferrerID", Integer, ForeignKey("Guest.GuestID")
    )
    referred_user_id: Mapped[int | None] = mapped_column(
        "ReferredUserID", Integer, ForeignKey("Guest.GuestID")
    )
    referral_date: Mapped[date | None] = mapped_column("ReferralDate", Date)
    reward_earned: Mapped[Decimal | None] = mapped_column("RewardEarned", Numeric(10, 2))

    # Relationships
    referrer: Mapped["Guest | None"] = relationship(
        "Guest", back_populates="referrals_made", foreign_keys=[referrer_id]
    )
    referred_user: Mapped["Guest | None"] = relationship(
        "Guest", back_populates="referrals_received", foreign_keys=[referred_user_id]
    )


class ReferralReward(Base):
    """Reward granted to a referring guest."""

    __tablename__ = "ReferralReward"

    id: Mapped[int] = mapped_column("RewardID", Integer, primary_key=True, autoincrement=True)
    referrer_id: Mapped[int | None] = mapped_column(
        "ReferrerID", Integer, ForeignKey("Guest.GuestID")
    )
    reward_description: Mapped[str] = mapped_column("RewardDescription", Text, nullable=False)
    redemption_status: Mapped[str | None] = mapped_column(
        "RedemptionStatus", String(50)
    )  # Pending, Redeemed

    referrer: Mapped["Guest | None"] = relationship("Guest", back_populates="referral_rewards")
