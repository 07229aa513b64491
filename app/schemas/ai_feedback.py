"""
Pydantic schemas for AI feedback endpoints.
"""
from typing import Optional
from datetime import datetime
from pydantic import Field

from app.schemas.base import CamelModel


class AIFeedbackRequest(CamelModel):
    """Request schema for a resume vs job description analysis."""
    job_description: Optional[str] = Field(None, description="Full job description text")
    resume: Optional[str] = Field(None, description="Resume / CV text")

    class Config:
        json_schema_extra = {
            "example": {
                "jobDescription": "We are looking for a backend engineer with Python experience...",
                "resume": "Software engineer with 5 years of experience building APIs..."
            }
        }


class AIFeedbackResponse(CamelModel):
    """Stored feedback record."""
    id: int
    user_id: int
    job_description: str
    resume: str
    match_score: Optional[str] = None
    strengths: Optional[str] = None
    improvements: Optional[str] = None
    recommendations: Optional[str] = None
    source: str = Field("ai", description="ai | fallback | rejected")
    created_at: Optional[datetime] = None
