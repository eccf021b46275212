import logging

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jobboard.database import MAX_ID, get_db
from jobboard.dependencies import get_current_user, get_current_user_id
from jobboard.errors import Conflict, NotFound, Unauthorized, ValidationError, server_errors
from jobboard.models import Application, Job, SavedJob, User
from jobboard.schemas import (
    UserCreate,
    UserUpdate,
    UserResponse,
    LoginRequest,
    MessageResponse,
    AuthResponse,
    UserEnvelope,
    UserListResponse,
    ProfileEnvelope,
    ApplicationCreate,
    ApplicationEnvelope,
    ApplicationListResponse,
    StatusUpdate,
    StatusUpdateResponse,
)
from jobboard.services import hash_password, verify_password, create_user_token
from jobboard.services import applications as application_service

logger = logging.getLogger(__name__)
router = APIRouter()

# Signin reports an unknown email as 409, kept for existing clients
SIGNIN_USER_NOT_FOUND_STATUS = 409
DUPLICATE_USER = "User already exists"


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user and return their profile with a fresh token."""
    with server_errors(db, "Server error during user creation"):
        existing_user = db.query(User).filter(User.email == user_data.email).first()
        if existing_user:
            raise Conflict(DUPLICATE_USER)

        user = User(
            email=user_data.email,
            password_hash=hash_password(user_data.password),
            full_name=user_data.full_name,
            role=user_data.role,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Registered by a concurrent request since the check above
            db.rollback()
            raise Conflict(DUPLICATE_USER)
        db.refresh(user)
        token = create_user_token(user)

    logger.info("Registered %s user %d", user.role.value, user.id)
    return {
        "success": True,
        "message": "User created successfully",
        "user": user,
        "token": token,
    }


@router.post("/signin", response_model=AuthResponse)
def signin(login_data: LoginRequest, db: Session = Depends(get_db)):
    """Check credentials and return the user's profile with a fresh token."""
    with server_errors(db, "Server error during user signin"):
        user = db.query(User).filter(User.email == login_data.email).first()
        if not user:
            raise NotFound("User not found", status_code=SIGNIN_USER_NOT_FOUND_STATUS)

        if not verify_password(login_data.password, user.password_hash):
            raise Unauthorized("Password does not match")

        token = create_user_token(user)

    return {
        "success": True,
        "message": "User signed in successfully",
        "user": user,
        "token": token,
    }


@router.get("/bulk", response_model=UserListResponse)
def search_users(
    search: str = Query("", alias="filter", description="Substring of the user's name or email"),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Case-insensitive search over full name and email. An empty filter lists everyone."""
    with server_errors(db, "Server error during fetching users"):
        users = (
            db.query(User)
            .filter(
                or_(
                    User.full_name.icontains(search, autoescape=True),
                    User.email.icontains(search, autoescape=True),
                )
            )
            .order_by(User.id)
            .all()
        )

    return {"success": True, "message": "Users fetched successfully", "users": users}


@router.get("/me", response_model=ProfileEnvelope)
def get_profile(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """The caller's profile with their applications, posted jobs and bookmarks."""
    with server_errors(db, "Server error during fetching user"):
        applications = (
            db.query(Application)
            .options(joinedload(Application.job).joinedload(Job.company))
            .filter(Application.applicant_id == user.id)
            .order_by(Application.created_at.asc(), Application.id.asc())
            .all()
        )
        created_jobs = (
            db.query(Job)
            .options(joinedload(Job.applications).joinedload(Application.applicant))
            .filter(Job.recruiter_id == user.id)
            .order_by(Job.created_at.asc(), Job.id.asc())
            .all()
        )
        saved_jobs = (
            db.query(SavedJob)
            .options(joinedload(SavedJob.job))
            .filter(SavedJob.user_id == user.id)
            .order_by(SavedJob.saved_at.desc(), SavedJob.id.desc())
            .all()
        )

    profile = UserResponse.model_validate(user).model_dump()
    profile.update(
        applications=applications,
        created_jobs=created_jobs,
        saved_jobs=saved_jobs,
    )
    return {"success": True, "message": "User fetched successfully", "user": profile}


@router.post("/remove", response_model=MessageResponse)
def remove_self(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """Delete the caller's account along with their jobs, applications and bookmarks."""
    with server_errors(db, "Server error during deleting user"):
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise ValidationError("User does not exist")

        db.delete(user)
        db.commit()

    logger.info("Deleted user %d", user_id)
    return {"success": True, "message": "User deleted successfully"}


@router.put("/update", response_model=UserEnvelope)
def update_self(
    update_data: UserUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Change the caller's name and/or password. Omitted fields are left alone."""
    with server_errors(db, "Server error during updating user"):
        if update_data.full_name:
            user.full_name = update_data.full_name
        if update_data.password:
            user.password_hash = hash_password(update_data.password)

        db.commit()
        db.refresh(user)

    return {"success": True, "message": "User updated successfully", "user": user}


# Applications


@router.post(
    "/application/{job_id}",
    response_model=ApplicationEnvelope,
    status_code=status.HTTP_201_CREATED,
)
def submit_application(
    application_data: ApplicationCreate,
    job_id: int = Path(ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Apply to a job as the calling candidate."""
    with server_errors(db, "Server error during application creation"):
        application = application_service.submit_application(db, job_id, user_id, application_data)

    return {
        "success": True,
        "message": "Application created successfully",
        "application": application,
    }


@router.get("/allapplications/{job_id}", response_model=ApplicationListResponse)
def list_job_applications(
    job_id: int = Path(ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Every application to a job. Recruiters only."""
    with server_errors(db, "Server error during fetching applications"):
        applications = application_service.list_applications_for_job(db, job_id, user_id)

    return {
        "success": True,
        "message": "Fetched applications successfully",
        "applications": applications,
    }


@router.put("/status", response_model=StatusUpdateResponse)
def update_application_status(
    status_data: StatusUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Move an application to a new status. Recruiters only."""
    with server_errors(db, "Server error occurred while updating the status"):
        application = application_service.update_application_status(
            db, status_data.application_id, status_data.status, user_id
        )

    return {
        "success": True,
        "message": "Job application status updated successfully",
        "updated_status": application,
    }
