import logging

from fastapi import APIRouter, Depends, Path
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jobboard.database import MAX_ID, get_db
from jobboard.dependencies import get_current_user
from jobboard.errors import NotFound, server_errors
from jobboard.models import Job, SavedJob, User
from jobboard.schemas import SavedJobListResponse, SavedJobAction

logger = logging.getLogger(__name__)
router = APIRouter()


def _find_saved(db: Session, user_id: int, job_id: int) -> SavedJob | None:
    return (
        db.query(SavedJob)
        .filter(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
        .first()
    )


@router.get("", response_model=SavedJobListResponse)
def list_saved_jobs(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List user's saved jobs."""
    with server_errors(db, "Server error during fetching saved jobs"):
        saved_jobs = (
            db.query(SavedJob)
            .options(joinedload(SavedJob.job))
            .filter(SavedJob.user_id == user.id)
            .order_by(SavedJob.saved_at.desc(), SavedJob.id.desc())
            .all()
        )

    return {"success": True, "message": "Saved jobs fetched successfully", "saved_jobs": saved_jobs}


@router.post("/{job_id}", response_model=SavedJobAction)
def save_job(
    job_id: int = Path(ge=1, le=MAX_ID),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Save a job for the current user."""
    with server_errors(db, "Unable to save job. Please try again."):
        job = db.query(Job).filter(Job.id == job_id).first()
        if not job:
            raise NotFound("Job not found")

        if _find_saved(db, user.id, job_id):
            return {"success": True, "message": "Job already saved", "job_id": job_id}

        db.add(SavedJob(user_id=user.id, job_id=job_id))
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            # Only a bookmark saved by a concurrent request counts as success
            if not _find_saved(db, user.id, job_id):
                raise
            return {"success": True, "message": "Job already saved", "job_id": job_id}

    logger.info("User %d saved job %d", user.id, job_id)
    return {"success": True, "message": "Job saved", "job_id": job_id}


@router.delete("/{job_id}", response_model=SavedJobAction)
def unsave_job(
    job_id: int = Path(ge=1, le=MAX_ID),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Remove a saved job for the current user."""
    with server_errors(db, "Unable to remove saved job. Please try again."):
        saved_job = _find_saved(db, user.id, job_id)
        if not saved_job:
            return {"success": True, "message": "Job was not saved", "job_id": job_id}

        db.delete(saved_job)
        db.commit()

    return {"success": True, "message": "Job unsaved", "job_id": job_id}
