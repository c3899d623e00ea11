"""
Request-scoped helpers — extract API keys from headers, hand out the shared research client.
"""

from __future__ import annotations

from fastapi import Header
from typing import Optional

from app.config import settings
from app.services.research_service import BraveSearchService


class APIKeys:
    """Container for per-request API keys extracted from headers."""

    def __init__(self, groq: str | None = None):
        self.groq = groq

    def get_key(self, provider: str) -> str | None:
        """Header key for a provider, falling back to the server's configured default."""
        key = getattr(self, provider, None)
        if key:
            return key
        if provider == "groq":
            return settings.groq_api_key or None
        return None


async def get_api_keys(
    x_groq_key: Optional[str] = Header(None, alias="X-Groq-Key"),
) -> APIKeys:
    """FastAPI dependency that extracts API keys from request headers."""
    return APIKeys(groq=(x_groq_key or "").strip() or None)


# ── Research client (lazy singleton) ─────────────────────────────────────────

_research_service: BraveSearchService | None = None


def get_research_service() -> BraveSearchService:
    """FastAPI dependency returning the process-wide Brave Search client."""
    global _research_service
    if _research_service is None:
        _research_service = BraveSearchService(
            api_key=settings.brave_search_api_key,
            timeout=settings.research_timeout_seconds,
            mock_when_unconfigured=settings.brave_search_mock,
        )
    return _research_service
