"""
Research Service — company and recruiter intelligence via the Brave Search API.

Responsibilities:
  • Run a handful of targeted web searches per company / per recruiter
  • Distil results into short bullet lists the prompt composer can embed
  • Never raise: no key, no results, HTTP errors and timeouts all yield an
    empty-but-valid ResearchResult
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any

import httpx

from app.models.research_models import CompanyResearch, PersonResearch, ResearchResult

logger = logging.getLogger(__name__)

BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"

MAX_KEY_INFO = 8
MAX_RECENT_NEWS = 5
MAX_BACKGROUND = 5
MAX_RECENT_ACTIVITIES = 3

_CAREER_WORDS = ("culture", "hiring", "career")
_BACKGROUND_WORDS = ("experience", "background")
_TITLE_AT_RE = re.compile(r"(?:\bat\b|@)\s*([^|•\-]+)", re.IGNORECASE)


class BraveSearchService:
    """Thin async client over Brave web search, shared across requests."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        timeout: float = 10.0,
        mock_when_unconfigured: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key or ""
        self.timeout = timeout
        self.mock_when_unconfigured = mock_when_unconfigured
        self._transport = transport

        if not self.api_key:
            logger.warning("Brave Search API key not configured. Research features will be disabled.")

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def get_status(self) -> str:
        if not self.api_key:
            return "API key not configured - set BRAVE_SEARCH_API_KEY in the environment or .env"
        return "API key configured and ready"

    # ── Public API ───────────────────────────────────────────────────────────

    async def research_both(self, company_name: str, recruiter_name: str) -> ResearchResult:
        """Research the company and the recruiter concurrently."""
        logger.info(f"Research: company={company_name!r} recruiter={recruiter_name!r}")

        if not self.api_key:
            if self.mock_when_unconfigured:
                logger.info("No Brave Search key; returning demo research data")
                return _mock_research(company_name, recruiter_name)
            return ResearchResult.empty(company_name, recruiter_name)

        try:
            async with self._client() as client:
                company, recruiter = await asyncio.gather(
                    self.research_company(company_name, client=client),
                    self.research_person(recruiter_name, company_name, client=client),
                )
        except Exception as e:
            logger.error(f"Error researching company and recruiter: {e}")
            return ResearchResult.empty(company_name, recruiter_name)

        logger.info(
            f"Research done: description={bool(company.description)} news={len(company.recent_news)} "
            f"key_info={len(company.key_info)} recruiter_title={bool(recruiter.title)} "
            f"linkedin={bool(recruiter.linked_in)} background={len(recruiter.background)}"
        )
        return ResearchResult(company=company, recruiter=recruiter)

    async def research_company(
        self, company_name: str, *, client: httpx.AsyncClient | None = None
    ) -> CompanyResearch:
        research = CompanyResearch(company_name=company_name)
        if not self.api_key:
            return research

        if client is None:
            async with self._client() as own_client:
                return await self.research_company(company_name, client=own_client)

        general = await self._search(client, f'"{company_name}" company about mission values', count=5)
        news = await self._search(client, f'"{company_name}" news', count=5, freshness="pm")
        culture = await self._search(client, f'"{company_name}" careers culture technology stack hiring', count=3)

        key_info: list[str] = []
        compact_name = re.sub(r"\s+", "", company_name.lower())

        general_results = _web_results(general)
        homepage = next(
            (
                r for r in general_results
                if compact_name in _text(r, "url").lower()
                or company_name.lower() in _text(r, "title").lower()
            ),
            None,
        )
        if homepage:
            research.website = _text(homepage, "url") or None
            research.description = _text(homepage, "description") or None

        for result in general_results:
            key_info.append(_text(result, "description"))
            key_info.extend(_snippets(result))

        for result in _web_results(news):
            title, description = _text(result, "title"), _text(result, "description")
            if title and description:
                research.recent_news.append(f"{title}: {description}")

        for result in _web_results(culture):
            description = _text(result, "description")
            if any(word in description.lower() for word in _CAREER_WORDS):
                key_info.append(description)

        infobox = (general or {}).get("infobox")
        if not isinstance(infobox, dict):
            infobox = {}
        if _text(infobox, "description"):
            research.description = _text(infobox, "description")
        if _text(infobox, "url"):
            research.website = _text(infobox, "url")

        research.key_info = _dedupe(key_info)[:MAX_KEY_INFO]
        research.recent_news = research.recent_news[:MAX_RECENT_NEWS]
        return research

    async def research_person(
        self, person_name: str, company_name: str, *, client: httpx.AsyncClient | None = None
    ) -> PersonResearch:
        research = PersonResearch(name=person_name, company=company_name)
        if not self.api_key:
            return research

        if client is None:
            async with self._client() as own_client:
                return await self.research_person(person_name, company_name, client=own_client)

        profile = await self._search(
            client, f'"{person_name}" "{company_name}" recruiter LinkedIn profile', count=5
        )
        history = await self._search(
            client, f'"{person_name}" experience background career {company_name}', count=3
        )

        person_lower = person_name.lower()
        company_lower = company_name.lower()
        background: list[str] = []

        for result in _web_results(profile):
            url = _text(result, "url")
            title = _text(result, "title")
            if "linkedin.com" in url and not research.linked_in:
                research.linked_in = url

            if person_lower in title.lower() and company_lower in title.lower():
                match = _TITLE_AT_RE.search(title)
                if match and not research.title:
                    research.title = match.group(1).strip()

            background.append(_text(result, "description"))

        for result in _web_results(history):
            description = _text(result, "description")
            lowered = description.lower()
            if person_lower in lowered or any(word in lowered for word in _BACKGROUND_WORDS):
                background.append(description)

        research.background = _dedupe(background)[:MAX_BACKGROUND]
        research.recent_activities = research.recent_activities[:MAX_RECENT_ACTIVITIES]
        return research

    # ── HTTP ─────────────────────────────────────────────────────────────────

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def _search(
        self,
        client: httpx.AsyncClient,
        query: str,
        *,
        count: int = 10,
        freshness: str | None = None,
        safesearch: str = "moderate",
    ) -> dict[str, Any] | None:
        """One Brave web search; any failure is logged and reported as no results."""
        params = {
            "q": query,
            "count": str(count),
            "safesearch": safesearch,
            "text_decorations": "false",
            "extra_snippets": "true",
        }
        if freshness:
            params["freshness"] = freshness

        try:
            resp = await client.get(
                BRAVE_SEARCH_URL,
                params=params,
                headers={
                    "Accept": "application/json",
                    "Accept-Encoding": "gzip",
                    "X-Subscription-Token": self.api_key,
                },
            )
            resp.raise_for_status()
            return resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Brave Search request failed for {query!r}: {e}")
            return None


# ── Helpers ──────────────────────────────────────────────────────────────────


def _web_results(data: dict[str, Any] | None) -> list[dict[str, Any]]:
    if not data:
        return []
    results = (data.get("web") or {}).get("results") or []
    return [r for r in results if isinstance(r, dict)]


def _text(result: dict[str, Any], key: str) -> str:
    value = result.get(key)
    return value if isinstance(value, str) else ""


def _snippets(result: dict[str, Any]) -> list[str]:
    snippets = result.get("extra_snippets")
    if not isinstance(snippets, list):
        return []
    return [s for s in snippets if isinstance(s, str) and s]


def _dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    unique = []
    for item in items:
        if item and item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def _mock_research(company_name: str, recruiter_name: str) -> ResearchResult:
    """Canned research for demos and local development without a Brave key."""
    slug = re.sub(r"\s+", "", company_name.lower())
    handle = re.sub(r"\s+", "-", recruiter_name.lower())
    return ResearchResult(
        company=CompanyResearch(
            company_name=company_name,
            description=f"{company_name} is a technology company focused on innovation and growth.",
            website=f"https://www.{slug}.com",
            industry="Technology",
            key_info=[
                f"{company_name} values innovation, collaboration, and professional development",
                "Growing team with focus on cutting-edge technology solutions",
                "Strong emphasis on work-life balance and employee satisfaction",
            ],
            recent_news=[
                f"{company_name} announces new product launch and expansion plans",
                f"{company_name} receives industry recognition for workplace culture",
            ],
        ),
        recruiter=PersonResearch(
            name=recruiter_name,
            company=company_name,
            title="Senior Talent Acquisition Specialist",
            linked_in=f"https://linkedin.com/in/{handle}",
            background=[
                f"{recruiter_name} has 5+ years of experience in talent acquisition at {company_name}",
                "Specializes in technical hiring and building diverse, high-performing teams",
            ],
        ),
    )
