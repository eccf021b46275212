from jobboard.schemas.user import UserBase, UserCreate, UserUpdate, UserResponse
from jobboard.schemas.auth import (
    LoginRequest,
    MessageResponse,
    AuthResponse,
    UserEnvelope,
    UserListResponse,
)
from jobboard.schemas.company import (
    CompanyCreate,
    CompanyLookup,
    CompanyResponse,
    CompanyEnvelope,
    CompanyListResponse,
)
from jobboard.schemas.job import (
    JobBase,
    JobCreate,
    JobUpdate,
    JobResponse,
    JobWithCompany,
    JobEnvelope,
    JobListResponse,
)
from jobboard.schemas.application import (
    ApplicationCreate,
    StatusUpdate,
    ApplicationResponse,
    ApplicationWithJob,
    ApplicationWithApplicant,
    ApplicationDetail,
    JobWithApplications,
    ApplicationEnvelope,
    ApplicationListResponse,
    StatusUpdateResponse,
)
from jobboard.schemas.saved_job import SavedJobResponse, SavedJobListResponse, SavedJobAction
from jobboard.schemas.profile import ProfileResponse, ProfileEnvelope

__all__ = [
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "LoginRequest",
    "MessageResponse",
    "AuthResponse",
    "UserEnvelope",
    "UserListResponse",
    "CompanyCreate",
    "CompanyLookup",
    "CompanyResponse",
    "CompanyEnvelope",
    "CompanyListResponse",
    "JobBase",
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    "JobWithCompany",
    "JobEnvelope",
    "JobListResponse",
    "ApplicationCreate",
    "StatusUpdate",
    "ApplicationResponse",
    "ApplicationWithJob",
    "ApplicationWithApplicant",
    "ApplicationDetail",
    "JobWithApplications",
    "ApplicationEnvelope",
    "ApplicationListResponse",
    "StatusUpdateResponse",
    "SavedJobResponse",
    "SavedJobListResponse",
    "SavedJobAction",
    "ProfileResponse",
    "ProfileEnvelope",
]
