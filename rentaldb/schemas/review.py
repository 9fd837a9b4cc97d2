"""Review-related Pydantic schemas."""

from datetime import date

from pydantic import BaseModel, Field

from rentaldb.models.review import MAX_RATING, MIN_RATING


class ReviewCreate(BaseModel):
    """Schema for creating a review."""

    guest_id: int
    property_id: int
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    comment: str | None = Field(None, max_length=2000)
    review_date: date = Field(default_factory=date.today)


class ReviewFlagCreate(BaseModel):
    """Schema for flagging a review for moderation."""

    review_id: int
    flagged_by: int
    reason: str | None = Field(None, max_length=1000)
