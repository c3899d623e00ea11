"""
LLM Service — chat completions via LiteLLM.

Responsibilities:
  • Accept an API key + model key per call (header key or server default)
  • Resolve the model key to a LiteLLM model id (Groq)
  • Provide a structured completion helper (JSON mode)
  • Retry transient provider errors with exponential back-off, bounded by a timeout
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import litellm
from litellm import acompletion

from app.config import MODELS, PROMPT_CONFIG

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs in dev
litellm.suppress_debug_info = True

# Errors worth another attempt; anything else falls straight through to the caller.
RETRYABLE_ERRORS = (
    litellm.RateLimitError,
    litellm.Timeout,
    litellm.APIConnectionError,
    litellm.InternalServerError,
    litellm.ServiceUnavailableError,
)

_BACKOFF_BASE_SECONDS = 1.0
_BACKOFF_MAX_SECONDS = 8.0


class LLMResponseError(ValueError):
    """The provider answered, but the answer is unusable."""


# ── Helpers ──────────────────────────────────────────────────────────────────


def resolve_model_id(provider: str, model_key: str) -> str:
    """Look up the LiteLLM model_id from our registry."""
    provider_models = MODELS.get(provider)
    if not provider_models:
        raise ValueError(f"Unknown provider: {provider}")
    model_entry = provider_models.get(model_key)
    if not model_entry:
        raise ValueError(f"Unknown model: {model_key} for provider {provider}")
    return model_entry["model_id"]


def _backoff_delay(attempt: int) -> float:
    return min(_BACKOFF_BASE_SECONDS * (2 ** attempt), _BACKOFF_MAX_SECONDS)


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    provider: str,
    model_key: str,
    api_key: str,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
    json_mode: bool = False,
    timeout: float | None = None,
    max_retries: int = 0,
) -> str:
    """
    Send a chat completion request via LiteLLM.

    Args:
        provider:    "groq"
        model_key:   Key from MODELS registry (e.g. "llama-3.3-70b")
        api_key:     API key for the provider
        messages:    OpenAI-format message list
        prompt_name: Optional key into PROMPT_CONFIG for default temp/tokens
        temperature: Override temperature (takes precedence over prompt_name)
        max_tokens:  Override max_tokens (takes precedence over prompt_name)
        json_mode:   If True, request JSON output
        timeout:     Per-attempt request timeout in seconds
        max_retries: Extra attempts after a transient provider error

    Returns:
        The assistant's response text.
    """
    model_id = resolve_model_id(provider, model_key)

    # Merge prompt config defaults → explicit overrides
    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    temp = temperature if temperature is not None else config.get("temperature", 0.3)
    tokens = max_tokens if max_tokens is not None else config.get("max_tokens", 1500)

    kwargs: dict[str, Any] = {
        "model": model_id,
        "messages": messages,
        "temperature": temp,
        "max_tokens": tokens,
        "api_key": api_key,
    }

    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}
    if timeout is not None:
        kwargs["timeout"] = timeout

    logger.info(f"LLM call: provider={provider} model={model_id} temp={temp} tokens={tokens}")

    attempt = 0
    while True:
        try:
            response = await acompletion(**kwargs)
            content = response.choices[0].message.content
            if not content:
                raise LLMResponseError(f"Empty response from {provider}/{model_key}")
            logger.info(f"LLM response: {len(content)} chars, usage={getattr(response, 'usage', None)}")
            return content
        except RETRYABLE_ERRORS as e:
            if attempt >= max_retries:
                logger.error(f"LLM error ({provider}/{model_key}) after {attempt + 1} attempt(s): {e}")
                raise
            delay = _backoff_delay(attempt)
            logger.warning(
                f"LLM attempt {attempt + 1}/{max_retries + 1} failed ({type(e).__name__}); "
                f"retrying in {delay:.1f}s"
            )
            await asyncio.sleep(delay)
            attempt += 1
        except Exception as e:
            logger.error(f"LLM error ({provider}/{model_key}): {e}")
            raise


async def complete_json(
    *,
    provider: str,
    model_key: str,
    api_key: str,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
    timeout: float | None = None,
    max_retries: int = 0,
) -> dict | list:
    """
    Same as complete() but parses the response as JSON.
    Falls back to extracting JSON from markdown code blocks if needed.
    """
    raw = await complete(
        provider=provider,
        model_key=model_key,
        api_key=api_key,
        messages=messages,
        prompt_name=prompt_name,
        temperature=temperature,
        max_tokens=max_tokens,
        json_mode=True,
        timeout=timeout,
        max_retries=max_retries,
    )
    return parse_json_response(raw)


def parse_json_response(raw: str) -> dict | list:
    """Parse model output as JSON, tolerating ```json fences around it."""
    # Try direct parse first
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass

    for fence in ("```json", "```"):
        if fence in raw:
            start = raw.index(fence) + len(fence)
            end = raw.find("```", start)
            if end != -1:
                try:
                    return json.loads(raw[start:end].strip())
                except json.JSONDecodeError:
                    break

    raise LLMResponseError(f"Could not parse LLM response as JSON: {raw[:200]}...")
