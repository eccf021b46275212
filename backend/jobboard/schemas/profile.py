from jobboard.schemas.application import ApplicationWithJob, JobWithApplications
from jobboard.schemas.auth import MessageResponse
from jobboard.schemas.saved_job import SavedJobResponse
from jobboard.schemas.user import UserResponse


class ProfileResponse(UserResponse):
    """A user together with everything they own."""
    applications: list[ApplicationWithJob] = []
    created_jobs: list[JobWithApplications] = []
    saved_jobs: list[SavedJobResponse] = []


class ProfileEnvelope(MessageResponse):
    user: ProfileResponse
