from datetime import datetime

from pydantic import BaseModel

from jobboard.schemas.auth import MessageResponse
from jobboard.schemas.job import JobResponse


class SavedJobResponse(BaseModel):
    id: int
    job_id: int
    saved_at: datetime | None = None
    job: JobResponse

    class Config:
        from_attributes = True


class SavedJobListResponse(MessageResponse):
    saved_jobs: list[SavedJobResponse]


class SavedJobAction(MessageResponse):
    job_id: int
