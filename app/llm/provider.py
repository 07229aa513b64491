"""
LLM Provider interface for abstracting LLM implementations.
"""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
from dataclasses import dataclass


class LLMError(Exception):
    """Raised by providers when the upstream call fails for any reason."""


@dataclass
class LLMResponse:
    """Standardized LLM response."""
    content: str
    tokens_in: int = 0
    tokens_out: int = 0
    model: str = ""
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        if self.metadata is None:
            self.metadata = {}


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def chat(
        self,
        messages: list[Dict[str, str]],
        model: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
        **kwargs
    ) -> LLMResponse:
        """
        Generate a chat completion.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: Model identifier
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            json_mode: Ask the model for a single JSON object
            **kwargs: Additional provider-specific parameters

        Returns:
            LLMResponse with content and metadata

        Raises:
            LLMError: on transport or API failure
        """
        pass
