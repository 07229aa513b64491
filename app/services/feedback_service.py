"""
AI feedback for a resume against a job description.

Screens the input with simple length/keyword checks, makes one chat
completion call asking for a JSON verdict, and substitutes canned output
when the call or the parse fails.
"""
import json
import logging
import random
import re
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel, Field

from app.core import config
from app.llm.provider import LLMError, LLMProvider
from app.llm.router import get_llm_provider, get_model_for_feature

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 50
MAX_PROMPT_CHARS = 8000

JOB_DESCRIPTION_KEYWORDS = (
    "experience", "skills", "requirements", "responsibilities",
    "qualifications", "role", "team",
)
RESUME_KEYWORDS = (
    "experience", "education", "skills", "project", "work", "employment",
)

SOURCE_AI = "ai"
SOURCE_FALLBACK = "fallback"
SOURCE_REJECTED = "rejected"

SYSTEM_PROMPT = (
    "You are an expert career counselor and resume reviewer. "
    "Provide detailed, actionable feedback in JSON format."
)

USER_PROMPT_TEMPLATE = """
You are an expert career counselor and resume reviewer. Analyze the following job description and resume to provide comprehensive feedback.

Job Description:
{job_description}

Resume/CV:
{resume}

Please provide your analysis in the following JSON format:
{{
  "matchScore": "A percentage from 0-100% indicating how well the resume matches the job requirements",
  "strengths": "A detailed list of strengths and positive aspects that align with the job requirements",
  "improvements": "Specific areas where the resume could be improved to better match the job requirements",
  "recommendations": "Actionable recommendations for improving the application and interview preparation"
}}

Focus on:
- Technical skills alignment
- Experience relevance
- Cultural fit indicators
- Missing qualifications
- Specific suggestions for improvement
"""


class FeedbackResult(BaseModel):
    """Feedback text ready to be stored."""
    match_score: str = Field(..., description="Match percentage, e.g. '72%'")
    strengths: str
    improvements: str
    recommendations: str
    source: str = SOURCE_AI


REJECTED_RESPONSE = FeedbackResult(
    match_score="0%",
    strengths="Not enough information was provided to identify strengths.",
    improvements=(
        "The job description or resume looks incomplete. Paste the full posting, including "
        "requirements and responsibilities, and a resume that lists your experience and skills."
    ),
    recommendations="Resubmit with the complete job description and resume for a meaningful analysis.",
    source=SOURCE_REJECTED,
)

FALLBACK_RESPONSES: List[FeedbackResult] = [
    FeedbackResult(
        match_score="65%",
        strengths=(
            "- Relevant professional experience for the role\n"
            "- Core technical skills overlap with the posting\n"
            "- Clear career progression"
        ),
        improvements=(
            "- Quantify achievements with metrics\n"
            "- Mirror the keywords used in the job description\n"
            "- Move the most relevant experience to the top"
        ),
        recommendations=(
            "- Tailor the summary to this specific role\n"
            "- Prepare STAR stories for the listed responsibilities\n"
            "- Research the company's products and recent news"
        ),
        source=SOURCE_FALLBACK,
    ),
    FeedbackResult(
        match_score="70%",
        strengths=(
            "- Solid foundation in the required skill areas\n"
            "- Experience working in team settings\n"
            "- Education aligned with the field"
        ),
        improvements=(
            "- Highlight tools and technologies named in the posting\n"
            "- Add outcomes to each role, not just duties\n"
            "- Trim unrelated experience"
        ),
        recommendations=(
            "- Write a cover letter that addresses the top three requirements\n"
            "- Practice explaining your most relevant project end to end\n"
            "- Reach out to someone on the hiring team"
        ),
        source=SOURCE_FALLBACK,
    ),
    FeedbackResult(
        match_score="60%",
        strengths=(
            "- Transferable skills that apply to the role\n"
            "- Demonstrated ability to learn new tools\n"
            "- Consistent work history"
        ),
        improvements=(
            "- Address the qualifications the resume does not mention\n"
            "- Add certifications or coursework that close skill gaps\n"
            "- Make the resume easier to scan with concise bullets"
        ),
        recommendations=(
            "- Build a small project that shows the missing skills\n"
            "- Prepare to discuss how your background maps to the role\n"
            "- Follow up one week after applying"
        ),
        source=SOURCE_FALLBACK,
    ),
]


def _contains_any(text: str, keywords) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def check_inputs(job_description: str, resume: str) -> Optional[str]:
    """
    Screen the input before spending an LLM call on it.

    Returns:
        A reason string when the input should be rejected, None when it is usable
    """
    job_description = (job_description or "").strip()
    resume = (resume or "").strip()

    if len(job_description) < MIN_TEXT_LENGTH:
        return "job description too short"
    if len(resume) < MIN_TEXT_LENGTH:
        return "resume too short"
    if not _contains_any(job_description, JOB_DESCRIPTION_KEYWORDS):
        return "job description has no recognizable requirements"
    if not _contains_any(resume, RESUME_KEYWORDS):
        return "resume has no recognizable experience or skills"
    return None


def build_messages(job_description: str, resume: str) -> List[Dict[str, str]]:
    prompt = USER_PROMPT_TEMPLATE.format(
        job_description=job_description.strip()[:MAX_PROMPT_CHARS],
        resume=resume.strip()[:MAX_PROMPT_CHARS],
    )
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]


def normalize_match_score(value: Any) -> str:
    """Turn 72, "72", "72.4%" or "Match: 72%" into "72%", clamped to 0..100."""
    if isinstance(value, bool) or value is None:
        return "0%"
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = re.search(r"-?\d+(?:\.\d+)?", str(value))
        if not match:
            return "0%"
        number = float(match.group(0))
    number = max(0.0, min(100.0, number))
    return f"{int(number + 0.5)}%"


def _as_text(value: Any, default: str) -> str:
    """Models sometimes answer with lists instead of prose; flatten them to bullets."""
    if value is None or value == "" or value == []:
        return default
    if isinstance(value, list):
        return "\n".join(f"- {item}" for item in value)
    if isinstance(value, dict):
        return "\n".join(f"- {key}: {item}" for key, item in value.items())
    return str(value)


def parse_feedback(content: str) -> FeedbackResult:
    """
    Parse the model's JSON answer.

    Raises:
        ValueError: when the content is not a JSON object
    """
    fenced = re.search(r"```(?:json)?\s*(\{.*?\})\s*```", content or "", re.DOTALL)
    raw = fenced.group(1) if fenced else content
    try:
        data = json.loads(raw or "")
    except json.JSONDecodeError as e:
        raise ValueError(f"AI response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("AI response is not a JSON object")

    return FeedbackResult(
        match_score=normalize_match_score(data.get("matchScore", data.get("match_score"))),
        strengths=_as_text(data.get("strengths"), "No strengths identified"),
        improvements=_as_text(data.get("improvements"), "No improvements identified"),
        recommendations=_as_text(data.get("recommendations"), "No recommendations available"),
        source=SOURCE_AI,
    )


def fallback_response(rng: Optional[random.Random] = None) -> FeedbackResult:
    """Pick one of the canned responses."""
    chooser = rng or random
    return chooser.choice(FALLBACK_RESPONSES).model_copy()


def generate_feedback(
    job_description: str,
    resume: str,
    provider: Optional[LLMProvider] = None,
    allow_fallback: Optional[bool] = None,
    rng: Optional[random.Random] = None,
) -> FeedbackResult:
    """
    Produce match feedback for a resume against a job description.

    Args:
        job_description: Job posting text
        resume: Resume text
        provider: LLM provider; the configured one is used when omitted
        allow_fallback: Mask upstream failures with canned output
            (defaults to AI_FEEDBACK_FALLBACK)
        rng: Random source for choosing a canned response

    Returns:
        FeedbackResult whose source is "ai", "fallback" or "rejected"

    Raises:
        HTTPException: 502 when the upstream call fails and fallback is disabled
    """
    if allow_fallback is None:
        allow_fallback = config.AI_FEEDBACK_FALLBACK

    reason = check_inputs(job_description, resume)
    if reason:
        logger.info(f"AI feedback input rejected: {reason}")
        return REJECTED_RESPONSE.model_copy()

    try:
        if provider is None:
            provider = get_llm_provider()
        if provider is None:
            raise LLMError("No LLM provider configured")

        response = provider.chat(
            messages=build_messages(job_description, resume),
            model=get_model_for_feature("ai_feedback"),
            temperature=0.7,
            json_mode=True,
        )
        result = parse_feedback(response.content)
        logger.info(f"AI feedback generated: model={response.model}, score={result.match_score}")
        return result
    except (LLMError, ValueError) as e:
        failure = e
    except Exception as e:
        logger.error(f"Unexpected error in AI feedback call: {type(e).__name__}: {e}", exc_info=True)
        failure = e

    if not allow_fallback:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="AI service temporarily unavailable. Please try again later."
        )

    logger.warning(f"AI feedback call failed, using canned response: {failure}")
    return fallback_response(rng)
