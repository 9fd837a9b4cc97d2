"""Loyalty and referral Pydantic schemas."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


class LoyaltyProgramCreate(BaseModel):
    guest_id: int
    points_earned: int = Field(default=0, ge=0)
    points_redeemed: int = Field(default=0, ge=0)
    expiry_date: date | None = None


class ReferralCreate(BaseModel):
    referrer_id: int
    referred_user_id: int
    referral_date: date | None = None
    reward_earned: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)


class ReferralRewardCreate(BaseModel):
    referrer_id: int
    reward_description: str = Field(..., min_length=1)
    redemption_status: str | None = Field(None, max_length=50)
