"""
Pydantic schemas for the extended user profile.
"""
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel


class UserProfileBase(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None

    current_title: Optional[str] = None
    years_of_experience: Optional[str] = None
    target_salary: Optional[str] = None
    availability_date: Optional[str] = None
    work_location: Optional[str] = None

    highest_education: Optional[str] = None
    field_of_study: Optional[str] = None
    university: Optional[str] = None
    graduation_year: Optional[str] = None

    skills: Optional[str] = None
    bio: Optional[str] = None
    career_objective: Optional[str] = None


class UserProfileUpdate(UserProfileBase):
    """Full replacement of the profile. Omitted fields are cleared."""
    pass


class UserProfileResponse(UserProfileBase):
    id: Optional[int] = None
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
