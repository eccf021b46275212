import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql import func

from jobboard.database import Base


class UserRole(str, enum.Enum):
    RECRUITER = "Recruiter"
    CANDIDATE = "Candidate"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    role = Column(
        Enum(
            UserRole,
            name="user_role",
            native_enum=False,
            length=20,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
    )
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    created_jobs = relationship("Job", back_populates="recruiter", cascade="all, delete-orphan")
    applications = relationship("Application", back_populates="applicant", cascade="all, delete-orphan")
    saved_jobs = relationship("SavedJob", back_populates="user", cascade="all, delete-orphan")

    @validates("role")
    def validate_role(self, key, value):
        """Role is fixed once the user has been persisted."""
        if value is None:
            return value
        if self.id is not None and self.role is not None and UserRole(value) != self.role:
            raise ValueError("User role cannot be changed")
        return UserRole(value)
