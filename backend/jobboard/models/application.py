import enum

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.database import Base


class ApplicationStatus(str, enum.Enum):
    APPLIED = "Applied"
    INTERVIEWING = "Interviewing"
    HIRED = "Hired"
    REJECTED = "Rejected"


# Forward moves allowed when strict transitions are switched on.
# Hired and Rejected are terminal.
ALLOWED_TRANSITIONS = {
    ApplicationStatus.APPLIED: {ApplicationStatus.INTERVIEWING, ApplicationStatus.REJECTED},
    ApplicationStatus.INTERVIEWING: {ApplicationStatus.HIRED, ApplicationStatus.REJECTED},
    ApplicationStatus.HIRED: set(),
    ApplicationStatus.REJECTED: set(),
}


class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    applicant_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=True, index=True)
    status = Column(
        Enum(
            ApplicationStatus,
            name="application_status",
            native_enum=False,
            length=20,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=ApplicationStatus.APPLIED,
    )
    is_applied = Column(Boolean, default=True, nullable=False)
    resume = Column(String(1000), nullable=False)
    skills = Column(Text, nullable=False)
    experience = Column(Text, nullable=False)
    education = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    applicant = relationship("User", back_populates="applications")
    job = relationship("Job", back_populates="applications")

    def can_transition_to(self, new_status: ApplicationStatus) -> bool:
        """Whether ``new_status`` is a legal next step from the current status."""
        if new_status == self.status:
            return True
        return new_status in ALLOWED_TRANSITIONS[self.status]

    __table_args__ = (
        UniqueConstraint("applicant_id", "job_id", name="uq_application_applicant_job"),
    )
