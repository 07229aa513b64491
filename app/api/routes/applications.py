"""
Job application endpoints.

CRUD over the authenticated user's applications. Records belonging to other
users are indistinguishable from records that do not exist.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from sqlalchemy import or_, and_

from app.core.auth_dependency import get_db, get_current_user
from app.db.models.user import User
from app.db.models.job_application import JobApplication, ApplicationStatus
from app.schemas.job_application import (
    JobApplicationCreate,
    JobApplicationUpdate,
    JobApplicationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applications", tags=["Applications"])


def get_owned_application(application_id: int, user: User, db: Session) -> JobApplication:
    """Fetch an application owned by user, or raise 404."""
    application = db.query(JobApplication).filter(
        and_(
            JobApplication.id == application_id,
            JobApplication.user_id == user.id
        )
    ).first()

    if not application:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Application not found"
        )
    return application


@router.get("", response_model=List[JobApplicationResponse])
def list_applications(
    status_filter: Optional[ApplicationStatus] = Query(None, alias="status", description="Filter by status"),
    search: Optional[str] = Query(None, description="Search in company, position and notes"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List the user's applications, most recent application date first."""
    query = db.query(JobApplication).filter(JobApplication.user_id == user.id)

    if status_filter:
        query = query.filter(JobApplication.status == status_filter.value)

    if search:
        search_term = f"%{search}%"
        query = query.filter(
            or_(
                JobApplication.company.ilike(search_term),
                JobApplication.position.ilike(search_term),
                JobApplication.notes.ilike(search_term)
            )
        )

    applications = query.order_by(
        JobApplication.application_date.desc(),
        JobApplication.id.desc()
    ).all()

    logger.debug(f"Applications listed: user_id={user.id}, total={len(applications)}")
    return applications


@router.get("/{application_id}", response_model=JobApplicationResponse)
def get_application(
    application_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_owned_application(application_id, user, db)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobApplicationResponse)
def create_application(
    payload: JobApplicationCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a new application for the authenticated user."""
    try:
        data = payload.model_dump()
        data["status"] = payload.status.value
        application = JobApplication(user_id=user.id, **data)

        db.add(application)
        db.commit()
        db.refresh(application)
    except Exception:
        db.rollback()
        logger.error("Failed to create application", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create application"
        )

    logger.info(f"Application created: id={application.id}, user_id={user.id}, company={application.company}")
    return application


@router.put("/{application_id}", response_model=JobApplicationResponse)
def update_application(
    application_id: int,
    payload: JobApplicationUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Update the fields present in the body.

    Concurrent updates are last-write-wins.
    """
    application = get_owned_application(application_id, user, db)

    try:
        updates = payload.model_dump(exclude_unset=True)
        if "status" in updates:
            updates["status"] = updates["status"].value
        for field, value in updates.items():
            setattr(application, field, value)

        db.commit()
        db.refresh(application)
    except Exception:
        db.rollback()
        logger.error("Failed to update application", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update application"
        )

    logger.info(f"Application updated: id={application.id}, fields={sorted(updates)}")
    return application


@router.delete("/{application_id}")
def delete_application(
    application_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    application = get_owned_application(application_id, user, db)

    try:
        db.delete(application)
        db.commit()
    except Exception:
        db.rollback()
        logger.error("Failed to delete application", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete application"
        )

    logger.info(f"Application deleted: id={application_id}, user_id={user.id}")
    return {"message": "Application deleted successfully"}
