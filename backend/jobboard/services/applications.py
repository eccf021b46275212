"""Job application lifecycle.

Candidates submit applications to jobs; recruiters list them per job and
move them through ``ApplicationStatus``. Each function takes the caller's
user id as resolved by the auth dependency and enforces the role rules
itself. All of them raise ``jobboard.errors`` exceptions and leave the
session rolled back on failure.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jobboard.config import get_settings
from jobboard.dependencies import get_user_with_role
from jobboard.errors import Conflict, Forbidden, InvalidTransition, NotFound
from jobboard.models import Application, ApplicationStatus, Job, UserRole
from jobboard.schemas import ApplicationCreate

logger = logging.getLogger(__name__)

ALREADY_APPLIED = "You have already applied for this job."

# Legacy status codes for submission failures
JOB_NOT_FOUND_STATUS = 401
NOT_CANDIDATE_STATUS = 404
ALREADY_APPLIED_STATUS = 402


def submit_application(db: Session, job_id: int, user_id: int, data: ApplicationCreate) -> Application:
    """Create a candidate's application to a job.

    A recruiter can never apply, a candidate can apply to a given job once,
    and closed jobs take no new applications.
    """
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFound("Job not found", status_code=JOB_NOT_FOUND_STATUS)

    candidate = get_user_with_role(db, user_id, UserRole.CANDIDATE)
    if not candidate:
        raise Forbidden(
            "Only Candidate can create Applications for Job",
            status_code=NOT_CANDIDATE_STATUS,
        )

    existing = (
        db.query(Application)
        .filter(Application.applicant_id == candidate.id, Application.job_id == job.id)
        .first()
    )
    if existing:
        raise Conflict(ALREADY_APPLIED, status_code=ALREADY_APPLIED_STATUS)

    if not job.is_open:
        raise Conflict("This job is no longer accepting applications")

    application = Application(
        applicant_id=candidate.id,
        job_id=job.id,
        status=ApplicationStatus.APPLIED,
        is_applied=True,
        education=data.education,
        experience=data.experience,
        skills=data.skills,
        resume=data.resume,
    )
    db.add(application)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent submission won the race on uq_application_applicant_job
        db.rollback()
        logger.info("Duplicate application by user %d for job %d rejected on insert", candidate.id, job.id)
        raise Conflict(ALREADY_APPLIED, status_code=ALREADY_APPLIED_STATUS)
    db.refresh(application)

    logger.info("User %d applied to job %d (application %d)", candidate.id, job.id, application.id)
    return application


def _require_recruiter(db: Session, user_id: int, message: str):
    recruiter = get_user_with_role(db, user_id, UserRole.RECRUITER)
    if not recruiter:
        raise Forbidden(message)
    return recruiter


def _check_job_owner(job: Job | None, recruiter) -> None:
    """Only the posting recruiter may act on a job, when ownership is enforced."""
    if not get_settings().enforce_job_ownership:
        return
    if job is None or job.recruiter_id != recruiter.id:
        raise Forbidden("Only the recruiter who posted this job can manage its applications")


def list_applications_for_job(db: Session, job_id: int, user_id: int) -> list[Application]:
    """All applications to a job, each with its applicant and job loaded."""
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFound("Job not found")

    recruiter = _require_recruiter(db, user_id, "Only Recruiters can view applications for this job")
    _check_job_owner(job, recruiter)

    return (
        db.query(Application)
        .options(joinedload(Application.applicant), joinedload(Application.job))
        .filter(Application.job_id == job.id)
        .order_by(Application.created_at.asc(), Application.id.asc())
        .all()
    )


def update_application_status(
    db: Session,
    application_id: int,
    new_status: ApplicationStatus,
    user_id: int,
) -> Application:
    """Set an application's status.

    By default any status may follow any other. With
    ``strict_status_transitions`` on, only the moves in
    ``ALLOWED_TRANSITIONS`` are accepted.
    """
    recruiter = _require_recruiter(db, user_id, "User not found or user is not a recruiter")

    application = db.query(Application).filter(Application.id == application_id).first()
    if not application:
        raise NotFound("Job application not found")

    _check_job_owner(application.job, recruiter)

    if get_settings().strict_status_transitions and not application.can_transition_to(new_status):
        raise InvalidTransition(
            f"Cannot move application from {application.status.value} to {new_status.value}"
        )

    previous = application.status
    application.status = new_status
    db.commit()
    db.refresh(application)

    logger.info(
        "Recruiter %d moved application %d from %s to %s",
        recruiter.id,
        application.id,
        previous.value,
        new_status.value,
    )
    return application
