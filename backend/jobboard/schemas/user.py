from datetime import datetime

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from jobboard.models import UserRole


def _check_password(v: str) -> str:
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters long")
    if len(v) > 128:
        raise ValueError("Password must be at most 128 characters long")
    return v


def _check_full_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Full name is required")
    if len(v) > 255:
        raise ValueError("Full name must be less than 255 characters")
    return v


class UserBase(BaseModel):
    email: EmailStr


class UserCreate(UserBase):
    password: str
    full_name: str = Field(validation_alias=AliasChoices("full_name", "fullName"))
    role: UserRole

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _check_password(v)

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        return _check_full_name(v)


class UserUpdate(BaseModel):
    """Fields a user may change on their own account. Role is not one of them."""
    full_name: str | None = Field(
        default=None, validation_alias=AliasChoices("full_name", "fullName", "name")
    )
    password: str | None = None

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_password(v)

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_full_name(v)


class UserResponse(UserBase):
    id: int
    full_name: str
    role: UserRole
    created_at: datetime | None = None

    class Config:
        from_attributes = True
