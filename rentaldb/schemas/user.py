"""Guest, host and user Pydantic schemas."""

from pydantic import BaseModel, EmailStr, Field, model_validator

from rentaldb.models.enums import Gender, ReferralInfo, Role


class GuestCreate(BaseModel):
    """Schema for creating a guest."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str | None = Field(None, max_length=20)
    age: int | None = Field(None, ge=0)
    gender: Gender | None = None
    loyalty_points: int = Field(default=0, ge=0)
    referral_info: ReferralInfo | None = None


class HostCreate(BaseModel):
    """Schema for creating a host."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    gender: Gender | None = None
    phone: str | None = Field(None, max_length=20)
    host_profile: str | None = None
    properties_listed: str | None = None


class UserCreate(BaseModel):
    """Schema for creating a user account bound to a guest or host."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    guest_id: int | None = None
    host_id: int | None = None
    role: Role

    @model_validator(mode="after")
    def validate_role_target(self) -> "UserCreate":
        if self.role == Role.GUEST and (self.guest_id is None or self.host_id is not None):
            raise ValueError("Guest users must reference a guest and no host")
        if self.role == Role.HOST and (self.host_id is None or self.guest_id is not None):
            raise ValueError("Host users must reference a host and no guest")
        return self
