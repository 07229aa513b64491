"""
Unit tests for the feedback requester.
"""
import json
import random

import pytest
from fastapi import HTTPException

from app.llm.provider import LLMError, LLMProvider, LLMResponse
from app.services import feedback_service
from app.services.feedback_service import (
    FALLBACK_RESPONSES,
    REJECTED_RESPONSE,
    check_inputs,
    generate_feedback,
    normalize_match_score,
    parse_feedback,
)

JOB_DESCRIPTION = (
    "We are hiring a backend engineer. Requirements: 3+ years of experience with Python, "
    "REST APIs and PostgreSQL. Responsibilities include designing services with the team."
)
RESUME = (
    "Software engineer with 5 years of experience building Python APIs. Skills: FastAPI, "
    "SQLAlchemy, PostgreSQL, Docker. Education: BSc Computer Science."
)


class FakeProvider(LLMProvider):
    """Records calls and returns canned content or raises."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def chat(self, messages, model, temperature=0.7, max_tokens=None, json_mode=False, **kwargs):
        self.calls.append({"messages": messages, "model": model, "json_mode": json_mode})
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, model=model)


def ai_payload(**overrides):
    payload = {
        "matchScore": "82%",
        "strengths": "Strong Python background",
        "improvements": "Mention Kubernetes",
        "recommendations": "Prepare system design examples",
    }
    payload.update(overrides)
    return json.dumps(payload)


def test_short_input_is_rejected_without_calling_llm():
    provider = FakeProvider(content=ai_payload())

    result = generate_feedback("too short", RESUME, provider=provider)

    assert result == REJECTED_RESPONSE
    assert result.source == "rejected"
    assert provider.calls == []


def test_short_resume_is_rejected():
    provider = FakeProvider(content=ai_payload())

    result = generate_feedback(JOB_DESCRIPTION, "Python dev", provider=provider)

    assert result.source == "rejected"
    assert provider.calls == []


def test_input_without_keywords_is_rejected():
    provider = FakeProvider(content=ai_payload())
    filler = "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor."

    result = generate_feedback(filler, RESUME, provider=provider)

    assert result.source == "rejected"
    assert provider.calls == []


def test_whitespace_padding_does_not_pass_length_check():
    assert check_inputs(" " * 100 + "skills", RESUME) == "job description too short"


def test_valid_input_passes_checks():
    assert check_inputs(JOB_DESCRIPTION, RESUME) is None


def test_successful_call_is_parsed():
    provider = FakeProvider(content=ai_payload())

    result = generate_feedback(JOB_DESCRIPTION, RESUME, provider=provider)

    assert result.source == "ai"
    assert result.match_score == "82%"
    assert result.strengths == "Strong Python background"
    assert len(provider.calls) == 1
    call = provider.calls[0]
    assert call["json_mode"] is True
    assert call["messages"][0]["role"] == "system"
    assert JOB_DESCRIPTION in call["messages"][1]["content"]
    assert RESUME in call["messages"][1]["content"]


def test_transport_failure_uses_canned_response():
    provider = FakeProvider(error=LLMError("connection reset"))

    result = generate_feedback(JOB_DESCRIPTION, RESUME, provider=provider, allow_fallback=True, rng=random.Random(3))

    assert result.source == "fallback"
    assert result in FALLBACK_RESPONSES
    assert len(provider.calls) == 1


def test_unparsable_response_uses_canned_response():
    provider = FakeProvider(content="Sorry, I can't help with that.")

    result = generate_feedback(JOB_DESCRIPTION, RESUME, provider=provider, allow_fallback=True)

    assert result in FALLBACK_RESPONSES


def test_unexpected_error_uses_canned_response():
    provider = FakeProvider(error=RuntimeError("boom"))

    result = generate_feedback(JOB_DESCRIPTION, RESUME, provider=provider, allow_fallback=True)

    assert result.source == "fallback"


def test_failure_surfaces_as_502_when_fallback_disabled():
    provider = FakeProvider(error=LLMError("timeout"))

    with pytest.raises(HTTPException) as exc_info:
        generate_feedback(JOB_DESCRIPTION, RESUME, provider=provider, allow_fallback=False)

    assert exc_info.value.status_code == 502


def test_missing_provider_falls_back(monkeypatch):
    monkeypatch.setattr(feedback_service, "get_llm_provider", lambda: None)

    result = generate_feedback(JOB_DESCRIPTION, RESUME, allow_fallback=True)

    assert result.source == "fallback"


def test_rejection_ignores_fallback_setting():
    result = generate_feedback("", "", provider=FakeProvider(error=LLMError("x")), allow_fallback=False)

    assert result.source == "rejected"


@pytest.mark.parametrize("raw,expected", [
    (72, "72%"),
    ("72", "72%"),
    ("72%", "72%"),
    ("72.5%", "73%"),
    ("Match score: 64 percent", "64%"),
    (150, "100%"),
    ("-5%", "0%"),
    ("unknown", "0%"),
    (None, "0%"),
])
def test_normalize_match_score(raw, expected):
    assert normalize_match_score(raw) == expected


def test_parse_feedback_flattens_lists_and_fills_defaults():
    content = json.dumps({"matchScore": 55, "strengths": ["Python", "SQL"]})

    result = parse_feedback(content)

    assert result.match_score == "55%"
    assert result.strengths == "- Python\n- SQL"
    assert result.improvements == "No improvements identified"
    assert result.recommendations == "No recommendations available"


def test_parse_feedback_accepts_fenced_json():
    content = "```json\n" + ai_payload(matchScore="90%") + "\n```"

    assert parse_feedback(content).match_score == "90%"


def test_parse_feedback_rejects_non_object():
    with pytest.raises(ValueError):
        parse_feedback("[1, 2, 3]")
