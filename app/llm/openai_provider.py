"""
OpenAI provider implementation.
"""
import logging
from typing import Optional, Dict
from openai import OpenAI, APIError, APITimeoutError

from app.core.config import OPENAI_API_KEY, OPENAI_TIMEOUT
from app.llm.provider import LLMError, LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """OpenAI provider using official OpenAI SDK."""

    def __init__(self, api_key: Optional[str] = None, timeout: float = OPENAI_TIMEOUT):
        """Initialize OpenAI client. Retries are disabled; one request per call."""
        self.api_key = api_key or OPENAI_API_KEY
        if not self.api_key:
            raise ValueError("OPENAI_API_KEY not configured")
        self.client = OpenAI(api_key=self.api_key, timeout=timeout, max_retries=0)
        logger.info("OpenAI provider initialized")

    def chat(
        self,
        messages: list[Dict[str, str]],
        model: str = "gpt-4o",
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
        **kwargs
    ) -> LLMResponse:
        """Generate a chat completion."""
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens or 2000,
                **kwargs
            )
        except APITimeoutError as e:
            logger.error(f"OpenAI request timed out: {e}")
            raise LLMError("LLM request timed out") from e
        except APIError as e:
            logger.error(f"OpenAI API error: {e}", exc_info=True)
            raise LLMError(f"LLM API error: {type(e).__name__}") from e

        content = response.choices[0].message.content or ""
        usage = response.usage
        return LLMResponse(
            content=content,
            tokens_in=usage.prompt_tokens if usage else 0,
            tokens_out=usage.completion_tokens if usage else 0,
            model=model,
            metadata={
                "finish_reason": response.choices[0].finish_reason,
            }
        )
