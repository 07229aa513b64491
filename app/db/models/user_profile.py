from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.db.base import Base

# Free-form profile fields; a save replaces all of them
PROFILE_FIELDS = (
    # Personal
    "first_name",
    "last_name",
    "email",
    "phone",
    "location",
    "linkedin_url",
    "portfolio_url",
    # Professional
    "current_title",
    "years_of_experience",
    "target_salary",
    "availability_date",
    "work_location",
    # Education
    "highest_education",
    "field_of_study",
    "university",
    "graduation_year",
    # Skills & bio
    "skills",
    "bio",
    "career_objective",
)


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)

    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    location = Column(String, nullable=True)
    linkedin_url = Column(String, nullable=True)
    portfolio_url = Column(String, nullable=True)

    current_title = Column(String, nullable=True)
    years_of_experience = Column(String, nullable=True)
    target_salary = Column(String, nullable=True)
    availability_date = Column(String, nullable=True)
    work_location = Column(String, nullable=True)

    highest_education = Column(String, nullable=True)
    field_of_study = Column(String, nullable=True)
    university = Column(String, nullable=True)
    graduation_year = Column(String, nullable=True)

    skills = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    career_objective = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
