"""
Email Service — draft a personalised outreach email for one request.

Sequence: research company + recruiter → compose prompts → LLM (JSON mode)
→ validate. Any generation failure falls back to the deterministic template
email; the research gathered up front is returned either way.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from app.config import settings
from app.models.email_models import EmailGenerateResponse, EmailParams, GeneratedEmail
from app.models.research_models import ResearchResult
from app.services.fallback_email import generate_fallback_email
from app.services.llm_service import LLMResponseError, complete_json
from app.services.prompt_composer import build_messages
from app.services.research_service import BraveSearchService

logger = logging.getLogger(__name__)

PROVIDER = "groq"
PROMPT_NAME = "ai_email"


async def generate_email(
    *,
    params: EmailParams,
    api_key: str,
    research_service: BraveSearchService,
) -> EmailGenerateResponse:
    """
    Generate one email and the research it was based on.

    Args:
        params: Validated job/candidate/generation inputs
        api_key: Groq API key
        research_service: Research provider shared across requests
    """
    research = await _research(research_service, params.company_name, params.recruiter_name)

    messages = build_messages(params, research)
    try:
        email = await _generate_with_llm(messages, api_key=api_key)
        logger.info(f"Email generated by LLM: type={params.email_type} tone={params.tone}")
    except Exception as e:
        logger.warning(f"LLM generation failed ({type(e).__name__}: {e}); using fallback template")
        email = generate_fallback_email(params)

    return EmailGenerateResponse(
        subject=email.subject,
        body=email.body,
        suggested_actions=email.suggested_actions,
        research_data=research,
    )


# ── Helpers ──────────────────────────────────────────────────────────────────


async def _research(
    research_service: BraveSearchService, company_name: str, recruiter_name: str
) -> ResearchResult:
    """Best-effort research; a provider that raises or stalls yields empty research."""
    try:
        return await asyncio.wait_for(
            research_service.research_both(company_name, recruiter_name),
            timeout=settings.research_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning(f"Research timed out after {settings.research_timeout_seconds}s")
    except Exception as e:
        logger.error(f"Research provider raised: {e}")
    return ResearchResult.empty(company_name, recruiter_name)


async def _generate_with_llm(messages: list[dict[str, str]], *, api_key: str) -> GeneratedEmail:
    # Attempts share the overall budget equally.
    per_attempt = settings.llm_timeout_seconds / (settings.llm_max_retries + 1)
    data = await asyncio.wait_for(
        complete_json(
            provider=PROVIDER,
            model_key=settings.email_model_key,
            api_key=api_key,
            messages=messages,
            prompt_name=PROMPT_NAME,
            timeout=per_attempt,
            max_retries=settings.llm_max_retries,
        ),
        timeout=settings.llm_timeout_seconds,
    )
    return parse_generated_email(data)


def parse_generated_email(data: dict | list) -> GeneratedEmail:
    """Validate LLM JSON into a GeneratedEmail, raising LLMResponseError when unusable."""
    if not isinstance(data, dict):
        raise LLMResponseError(f"Expected a JSON object, got {type(data).__name__}")

    subject = _as_text(data.get("subject"))
    body = _as_text(data.get("body"))
    actions = data.get("suggestedActions")

    if not subject or not body or actions is None:
        raise LLMResponseError("Invalid response format: subject, body and suggestedActions are required")

    return GeneratedEmail(
        subject=subject,
        body=body,
        suggested_actions=_as_actions(actions),
    )


def _as_text(val: Any) -> str:
    if val is None:
        return ""
    return (val if isinstance(val, str) else str(val)).strip()


def _as_actions(val: Any) -> list[str]:
    if isinstance(val, list):
        return [str(a) for a in val if a is not None]
    if isinstance(val, str) and val.strip():
        return [val.strip()]
    return []
