from jobboard.models.user import User, UserRole
from jobboard.models.company import Company
from jobboard.models.job import Job
from jobboard.models.application import Application, ApplicationStatus, ALLOWED_TRANSITIONS
from jobboard.models.saved_job import SavedJob

__all__ = [
    "User",
    "UserRole",
    "Company",
    "Job",
    "Application",
    "ApplicationStatus",
    "ALLOWED_TRANSITIONS",
    "SavedJob",
]
