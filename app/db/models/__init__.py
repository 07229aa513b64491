"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in migrations and table creation.
"""
from app.db.models.user import User
from app.db.models.user_auth import UserAuth
from app.db.models.user_profile import UserProfile
from app.db.models.job_application import JobApplication, ApplicationStatus
from app.db.models.ai_feedback import AIFeedback

__all__ = [
    "User",
    "UserAuth",
    "UserProfile",
    "JobApplication",
    "ApplicationStatus",
    "AIFeedback",
]
