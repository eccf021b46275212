from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator

from jobboard.database import MAX_ID
from jobboard.models import ApplicationStatus
from jobboard.schemas.auth import MessageResponse
from jobboard.schemas.job import JobResponse, JobWithCompany
from jobboard.schemas.user import UserResponse


class ApplicationCreate(BaseModel):
    education: str
    experience: str
    skills: str
    resume: str

    @field_validator("education", "experience", "skills", "resume")
    @classmethod
    def validate_not_blank(cls, v: str, info) -> str:
        v = v.strip()
        if not v:
            raise ValueError(f"{info.field_name} is required")
        return v

    @field_validator("resume")
    @classmethod
    def validate_resume(cls, v: str) -> str:
        if len(v) > 1000:
            raise ValueError("Resume reference must be less than 1000 characters")
        return v


class StatusUpdate(BaseModel):
    # applicationId is the key older clients send
    application_id: int = Field(
        ge=1, le=MAX_ID, validation_alias=AliasChoices("application_id", "applicationId")
    )
    status: ApplicationStatus


class ApplicationResponse(BaseModel):
    id: int
    applicant_id: int
    job_id: int | None = None
    status: ApplicationStatus
    is_applied: bool
    resume: str
    skills: str
    experience: str
    education: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class ApplicationWithJob(ApplicationResponse):
    job: JobWithCompany | None = None


class ApplicationWithApplicant(ApplicationResponse):
    applicant: UserResponse


class ApplicationDetail(ApplicationWithApplicant):
    job: JobResponse | None = None


class JobWithApplications(JobResponse):
    applications: list[ApplicationWithApplicant] = []


class ApplicationEnvelope(MessageResponse):
    application: ApplicationResponse


class ApplicationListResponse(MessageResponse):
    applications: list[ApplicationDetail]


class StatusUpdateResponse(MessageResponse):
    updated_status: ApplicationResponse
