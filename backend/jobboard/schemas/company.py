from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from jobboard.database import MAX_ID
from jobboard.schemas.auth import MessageResponse


class CompanyCreate(BaseModel):
    name: str
    logo: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Company name is required")
        if len(v) > 255:
            raise ValueError("Company name must be less than 255 characters")
        return v

    @field_validator("logo", mode="before")
    @classmethod
    def validate_logo(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        if len(v) > 1000:
            raise ValueError("Logo reference must be less than 1000 characters")
        return v


class CompanyLookup(BaseModel):
    id: int = Field(ge=1, le=MAX_ID)


class CompanyResponse(BaseModel):
    id: int
    name: str
    logo: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class CompanyEnvelope(MessageResponse):
    company: CompanyResponse


class CompanyListResponse(MessageResponse):
    companies: list[CompanyResponse]
