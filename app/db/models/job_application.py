"""
JobApplication model for tracking a user's applications.
"""
import enum

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.db.base import Base


class ApplicationStatus(str, enum.Enum):
    APPLIED = "Applied"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    REJECTED = "Rejected"
    GHOSTED = "Ghosted"


class JobApplication(Base):
    """
    One application to one position at one company.

    Owned by exactly one user; every query filters on user_id.
    """
    __tablename__ = "job_applications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    company = Column(String, nullable=False, index=True)
    position = Column(String, nullable=False)
    location = Column(String, nullable=True)
    salary_range = Column(String, nullable=True)
    status = Column(String, nullable=False, default=ApplicationStatus.APPLIED.value)
    application_date = Column(Date, nullable=False)
    job_description_url = Column(String, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", backref="job_applications")

    __table_args__ = (
        Index("idx_job_applications_user_date", "user_id", "application_date"),
    )

    def __repr__(self):
        return f"<JobApplication(id={self.id}, company='{self.company}', status='{self.status}')>"
