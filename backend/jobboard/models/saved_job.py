from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.database import Base


class SavedJob(Base):
    """A user's bookmark on a job posting.

    Any user may bookmark any job, open or closed. A bookmark goes away with
    either its user or its job.
    """

    __tablename__ = "saved_jobs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    saved_at = Column(DateTime, server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="saved_jobs")
    job = relationship("Job", back_populates="saved_by")

    __table_args__ = (
        # Saving twice is a no-op, so one row per pair
        UniqueConstraint("user_id", "job_id", name="uq_user_job"),
        # Bookmarks are listed per user, newest first
        Index("ix_saved_jobs_user_saved_at", "user_id", "saved_at"),
    )
