"""Review database models."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, Text, column
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentaldb.database import Base

if TYPE_CHECKING:
    from rentaldb.models.listing import Property
    from rentaldb.models.user import Guest

MIN_RATING = 1
MAX_RATING = 5


class Review(Base):
    """Review of a property written by a guest."""

    __tablename__ = "Review"
    __table_args__ = (
        CheckConstraint(
            column("Rating").between(MIN_RATING, MAX_RATING), name="ck_review_rating_range"
        ),
    )

    id: Mapped[int] = mapped_column("ReviewID", Integer, primary_key=True, autoincrement=True)
    guest_id: Mapped[int | None] = mapped_column("GuestID", Integer, ForeignKey("Guest.GuestID"))
    property_id: Mapped[int | None] = mapped_column(
        "PropertyID", Integer, ForeignKey("Property.PropertyID")
    )
    rating: Mapped[int | None] = mapped_column("Rating", Integer)  # 1-5
    comment: Mapped[str | None] = mapped_column("Comment", Text)
    review_date: Mapped[date] = mapped_column("ReviewDate", Date, nullable=False)

    # Relationships
    guest: Mapped["Guest | None"] = relationship("Guest", back_populates="reviews")
    property: Mapped["Property | None"] = relationship("Property", back_populates="reviews")
    flags: Mapped[list["ReviewFlag"]] = relationship("ReviewFlag", back_populates="review")


class ReviewFlag(Base):
    """Moderation flag raised on a review by a guest."""

    __tablename__ = "ReviewFlag"

    id: Mapped[int] = mapped_column("FlagID", Integer, primary_key=True, autoincrement=True)
    review_id: Mapped[int | None] = mapped_column(
        "ReviewID", Integer, ForeignKey("Review.ReviewID")
    )
    flagged_by: Mapped[int | None] = mapped_column(
        "FlaggedBy", Integer, ForeignKey("Guest.GuestID")
    )
    reason: Mapped[str | None] = mapped_column("Reason", Text)

    review: Mapped["Review | None"] = relationship("Review", back_populates="flags")
    flagger: Mapped["Guest | None"] = relationship("Guest")
