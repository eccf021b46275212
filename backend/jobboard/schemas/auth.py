from pydantic import BaseModel, EmailStr, field_validator

from jobboard.schemas.user import UserResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class AuthResponse(MessageResponse):
    user: UserResponse
    token: str


class UserEnvelope(MessageResponse):
    user: UserResponse


class UserListResponse(MessageResponse):
    users: list[UserResponse]
