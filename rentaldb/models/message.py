"""Message database model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from rentaldb.database import Base

if TYPE_CHECKING:
    from rentaldb.models.user import Guest


class Message(Base):
    """Message exchanged between two guests."""

    __tablename__ = "Message"

    id: Mapped[int] = mapped_column("MessageID", Integer, primary_key=True, autoincrement=True)
    sender_id: Mapped[int | None] = mapped_column("SenderID", Integer, ForeignKey("Guest.GuestID"))
    receiver_id: Mapped[int | None] = mapped_column(
        "ReceiverID", Integer, ForeignKey("Guest.GuestID")
    )
    content: Mapped[str] = mapped_column("Content", Text, nullable=False)
    timestamp: Mapped[datetime | None] = mapped_column(
        "Timestamp", DateTime, server_default=func.now()
    )

    # Relationships
    sender: Mapped["Guest | None"] = relationship(
        "Guest", back_populates="messages_sent", foreign_keys=[sender_id]
    )
    receiver: Mapped["Guest | None"] = relationship(
        "Guest", back_populates="messages_received", foreign_keys=[receiver_id]
    )
