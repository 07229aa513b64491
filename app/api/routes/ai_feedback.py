"""
AI feedback endpoints: request an analysis and list past ones.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.auth_dependency import get_db, get_current_user
from app.db.models.user import User
from app.db.models.ai_feedback import AIFeedback
from app.schemas.ai_feedback import AIFeedbackRequest, AIFeedbackResponse
from app.services.feedback_service import generate_feedback

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai-feedback", tags=["AI Feedback"])


@router.post("", response_model=AIFeedbackResponse)
def create_feedback(
    payload: AIFeedbackRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Analyze a resume against a job description and store the result.

    Upstream AI failures do not fail the request unless AI_FEEDBACK_FALLBACK
    is disabled; the stored record's source tells which path produced it.
    """
    job_description = (payload.job_description or "").strip()
    resume = (payload.resume or "").strip()
    if not job_description or not resume:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Job description and resume are required"
        )

    result = generate_feedback(job_description, resume)

    try:
        feedback = AIFeedback(
            user_id=user.id,
            job_description=job_description,
            resume=resume,
            match_score=result.match_score,
            strengths=result.strengths,
            improvements=result.improvements,
            recommendations=result.recommendations,
            source=result.source,
        )
        db.add(feedback)
        db.commit()
        db.refresh(feedback)
    except Exception:
        db.rollback()
        logger.error("Failed to store AI feedback", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate AI feedback"
        )

    logger.info(f"AI feedback stored: id={feedback.id}, user_id={user.id}, source={feedback.source}")
    return feedback


@router.get("", response_model=List[AIFeedbackResponse])
def list_feedback(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """The user's feedback history, newest first."""
    return (
        db.query(AIFeedback)
        .filter(AIFeedback.user_id == user.id)
        .order_by(AIFeedback.created_at.desc(), AIFeedback.id.desc())
        .all()
    )
