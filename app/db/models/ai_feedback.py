"""
AIFeedback model for storing resume vs job description analyses.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.db.base import Base


class AIFeedback(Base):
    """
    Result of one feedback request. Rows are never updated.

    source records where the text came from: "ai" (model output),
    "fallback" (canned text after an upstream failure) or "rejected"
    (input failed the length/keyword checks).
    """
    __tablename__ = "ai_feedback"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    job_description = Column(Text, nullable=False)
    resume = Column(Text, nullable=False)

    match_score = Column(String, nullable=True)  # e.g. "72%"
    strengths = Column(Text, nullable=True)
    improvements = Column(Text, nullable=True)
    recommendations = Column(Text, nullable=True)
    source = Column(String, nullable=False, default="ai")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    user = relationship("User", backref="ai_feedback")

    __table_args__ = (
        Index("idx_ai_feedback_user_created", "user_id", "created_at"),
    )

    def __repr__(self):
        return f"<AIFeedback(id={self.id}, user_id={self.user_id}, match_score='{self.match_score}')>"
