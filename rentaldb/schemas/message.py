"""Message Pydantic schemas."""

from pydantic import BaseModel, Field


class MessageCreate(BaseModel):
    """Schema for sending a message."""

    sender_id: int
    receiver_id: int
    content: str = Field(..., min_length=1)
