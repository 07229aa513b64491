"""
Analytics endpoint: aggregate counts over the user's applications.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from app.core.auth_dependency import get_db, get_current_user
from app.db.models.user import User
from app.db.models.job_application import JobApplication
from app.schemas.analytics import AnalyticsResponse
from app.services.analytics_service import compute_analytics

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("", response_model=AnalyticsResponse)
def get_analytics(
    time_range: str = Query("all", alias="timeRange", description="all | month | quarter"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    applications = (
        db.query(JobApplication)
        .filter(JobApplication.user_id == user.id)
        .order_by(JobApplication.id.asc())
        .all()
    )

    try:
        return compute_analytics(applications, time_range)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
