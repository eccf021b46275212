import logging

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from jobboard.database import MAX_ID, get_db
from jobboard.dependencies import get_current_user_id, get_user_with_role
from jobboard.errors import Forbidden, NotFound, server_errors
from jobboard.models import Company, Job, UserRole
from jobboard.schemas import JobCreate, JobUpdate, JobEnvelope, JobListResponse, MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(get_current_user_id)])

# Columns that must keep a value; an explicit null for them is ignored
REQUIRED_JOB_FIELDS = {"title", "is_open"}


def _get_job(db: Session, job_id: int) -> Job:
    job = (
        db.query(Job)
        .options(joinedload(Job.company))
        .filter(Job.id == job_id)
        .first()
    )
    if not job:
        raise NotFound("Job not found")
    return job


def _get_owned_job(db: Session, job_id: int, user_id: int) -> Job:
    job = _get_job(db, job_id)
    if job.recruiter_id != user_id:
        raise Forbidden("Only the recruiter who posted this job can change it")
    return job


@router.post("/create", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
def create_job(
    job_data: JobCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Post a job as the calling recruiter, optionally under a company."""
    with server_errors(db, "Server error during creating job"):
        recruiter = get_user_with_role(db, user_id, UserRole.RECRUITER)
        if not recruiter:
            raise Forbidden("Only Recruiters can post jobs")

        if job_data.company_id is not None:
            company = db.query(Company).filter(Company.id == job_data.company_id).first()
            if not company:
                raise NotFound("Company not found")

        job = Job(recruiter_id=recruiter.id, is_open=True, **job_data.model_dump())
        db.add(job)
        db.commit()
        db.refresh(job)

    logger.info("Recruiter %d posted job %d", recruiter.id, job.id)
    return {"success": True, "message": "Job created successfully", "job": job}


@router.get("/bulk", response_model=JobListResponse)
def list_jobs(
    search: str = Query("", alias="filter", description="Search title, location and description"),
    include_closed: bool = Query(False, description="Also list jobs no longer taking applications"),
    db: Session = Depends(get_db),
):
    """List jobs, newest first."""
    with server_errors(db, "Server error during fetching jobs"):
        query = db.query(Job).options(joinedload(Job.company))
        if not include_closed:
            query = query.filter(Job.is_open == True)
        if search:
            query = query.filter(
                or_(
                    Job.title.icontains(search, autoescape=True),
                    Job.location.icontains(search, autoescape=True),
                    Job.description.icontains(search, autoescape=True),
                )
            )
        jobs = query.order_by(Job.created_at.desc(), Job.id.desc()).all()

    return {"success": True, "message": "Jobs fetched successfully", "jobs": jobs}


@router.get("/{job_id}", response_model=JobEnvelope)
def find_job(job_id: int = Path(ge=1, le=MAX_ID), db: Session = Depends(get_db)):
    with server_errors(db, "Server error during fetching job"):
        job = _get_job(db, job_id)

    return {"success": True, "message": "Job fetched successfully", "job": job}


@router.put("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_data: JobUpdate,
    job_id: int = Path(ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Edit a posting or close it (``is_open: false``). Owner only."""
    with server_errors(db, "Server error during updating job"):
        job = _get_owned_job(db, job_id, user_id)

        for field, value in job_data.model_dump(exclude_unset=True).items():
            if value is None and field in REQUIRED_JOB_FIELDS:
                continue
            setattr(job, field, value)

        db.commit()
        db.refresh(job)

    return {"success": True, "message": "Job updated successfully", "job": job}


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: int = Path(ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Remove a posting with its applications and bookmarks. Owner only."""
    with server_errors(db, "Server error during deleting job"):
        job = _get_owned_job(db, job_id, user_id)
        db.delete(job)
        db.commit()

    logger.info("Recruiter %d deleted job %d", user_id, job_id)
    return {"success": True, "message": "Job deleted successfully"}
