"""
Model routing: which model serves which feature, and whether one is available.
"""
import logging
from typing import Optional

from app.core import config
from app.llm.provider import LLMProvider

logger = logging.getLogger(__name__)

MODEL_ROUTING = {
    "ai_feedback": config.OPENAI_MODEL,
}


def get_model_for_feature(feature: str) -> str:
    """Model identifier for a feature, defaulting to the configured model."""
    return MODEL_ROUTING.get(feature, config.OPENAI_MODEL)


def is_model_available() -> bool:
    """Check if an LLM is configured."""
    return bool(config.OPENAI_API_KEY)


def get_llm_provider() -> Optional[LLMProvider]:
    """
    Build the configured provider.

    Returns None when no API key is configured so callers can fall back.
    """
    if not is_model_available():
        logger.info("OPENAI_API_KEY not configured - AI feedback will use fallback responses")
        return None

    from app.llm.openai_provider import OpenAIProvider
    return OpenAIProvider(api_key=config.OPENAI_API_KEY)
