from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from jobboard.database import MAX_ID
from jobboard.schemas.auth import MessageResponse
from jobboard.schemas.company import CompanyResponse


class JobBase(BaseModel):
    title: str
    description: str | None = None
    location: str | None = None
    job_type: str | None = None
    requirements: str | None = None


class JobCreate(JobBase):
    company_id: int | None = Field(default=None, ge=1, le=MAX_ID)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        if len(v) > 500:
            raise ValueError("Title must be less than 500 characters")
        return v


class JobUpdate(BaseModel):
    """Partial update; only fields present in the request body are applied."""
    title: str | None = None
    description: str | None = None
    location: str | None = None
    job_type: str | None = None
    requirements: str | None = None
    is_open: bool | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Title cannot be empty")
        return v


class JobResponse(JobBase):
    id: int
    recruiter_id: int
    company_id: int | None = None
    is_open: bool
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class JobWithCompany(JobResponse):
    company: CompanyResponse | None = None


class JobEnvelope(MessageResponse):
    job: JobWithCompany


class JobListResponse(MessageResponse):
    jobs: list[JobWithCompany]
