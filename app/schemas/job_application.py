"""
Pydantic schemas for job application endpoints.
"""
from typing import Optional
from datetime import date, datetime
from pydantic import Field, field_validator

from app.db.models.job_application import ApplicationStatus
from app.schemas.base import CamelModel


class JobApplicationBase(CamelModel):
    """Base schema with the user-editable fields."""
    company: str = Field(..., description="Company name", min_length=1, max_length=255)
    position: str = Field(..., description="Position applied for", min_length=1, max_length=255)
    location: Optional[str] = Field(None, description="Job location", max_length=255)
    salary_range: Optional[str] = Field(None, description="Advertised salary range", max_length=100)
    status: ApplicationStatus = Field(default=ApplicationStatus.APPLIED, description="Application status")
    application_date: date = Field(..., description="Date applied (YYYY-MM-DD)")
    job_description_url: Optional[str] = Field(None, description="Job posting URL")
    notes: Optional[str] = Field(None, description="Notes about this application")


class JobApplicationCreate(JobApplicationBase):
    """Schema for creating a new application."""

    class Config:
        json_schema_extra = {
            "example": {
                "company": "Tech Corp",
                "position": "Backend Engineer",
                "location": "Remote",
                "salaryRange": "$120k - $140k",
                "status": "Applied",
                "applicationDate": "2026-01-15",
                "notes": "Referred by a former colleague."
            }
        }


class JobApplicationUpdate(CamelModel):
    """Schema for a partial update. Only fields present in the body are changed."""
    company: Optional[str] = Field(None, min_length=1, max_length=255)
    position: Optional[str] = Field(None, min_length=1, max_length=255)
    location: Optional[str] = Field(None, max_length=255)
    salary_range: Optional[str] = Field(None, max_length=100)
    status: Optional[ApplicationStatus] = None
    application_date: Optional[date] = None
    job_description_url: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("company", "position", "status", "application_date")
    @classmethod
    def reject_null(cls, v):
        # Runs only for fields sent in the body
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class JobApplicationResponse(JobApplicationBase):
    """Schema for application response."""
    id: int = Field(..., description="Application ID")
    user_id: int = Field(..., description="Owner user ID")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
