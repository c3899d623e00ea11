"""Tests for the Brave Search research client, against an in-process mock transport."""

import httpx
import pytest

from app.services.research_service import (
    BRAVE_SEARCH_URL,
    MAX_BACKGROUND,
    MAX_KEY_INFO,
    BraveSearchService,
)


def _web(*results: dict) -> dict:
    return {"web": {"results": list(results)}}


def _route(request: httpx.Request) -> httpx.Response:
    """Answer each query with canned results keyed on its wording."""
    query = request.url.params["q"]
    if "mission values" in query:
        return httpx.Response(200, json={
            **_web(
                {"title": "Acme - Developer Tools", "url": "https://acme.dev/about",
                 "description": "Acme builds developer tooling.", "extra_snippets": ["Founded 2015"]},
                {"title": "Review of tools", "url": "https://blog.example.com/x", "description": "Acme is popular."},
            ),
            "infobox": {"description": "Acme Corp is a software company.", "url": "https://acme.com"},
        })
    if query.endswith("news"):
        assert request.url.params["freshness"] == "pm"
        return httpx.Response(200, json=_web(
            {"title": "Acme launches v2", "url": "https://news.example.com/1", "description": "Faster builds."},
            {"title": "", "url": "https://news.example.com/2", "description": "untitled"},
        ))
    if "careers culture" in query:
        return httpx.Response(200, json=_web(
            {"title": "Careers", "url": "https://acme.dev/careers", "description": "Our culture is remote-first."},
            {"title": "Stack", "url": "https://stackshare.io/acme", "description": "Acme uses Go and Postgres."},
        ))
    if "recruiter LinkedIn profile" in query:
        return httpx.Response(200, json=_web(
            {"title": "Jane Lee - Technical Recruiter at Acme | LinkedIn", "url": "https://www.linkedin.com/in/janelee",
             "description": "Jane Lee hires engineers at Acme."},
            {"title": "Acme team", "url": "https://acme.dev/team", "description": "Meet the people team."},
        ))
    if "experience background career" in query:
        return httpx.Response(200, json=_web(
            {"title": "Jane", "url": "https://example.com/jane", "description": "Ten years of experience in tech hiring."},
            {"title": "Unrelated", "url": "https://example.com/other", "description": "Weather today."},
        ))
    return httpx.Response(404)


@pytest.fixture
def service() -> BraveSearchService:
    return BraveSearchService(api_key="brave-key", transport=httpx.MockTransport(_route))


# ---------------------------------------------------------------------------
# Company research
# ---------------------------------------------------------------------------
class TestResearchCompany:
    async def test_extracts_company_information(self, service: BraveSearchService) -> None:
        company = await service.research_company("Acme")

        # Infobox wins over the matching search result.
        assert company.description == "Acme Corp is a software company."
        assert company.website == "https://acme.com"
        assert company.key_info[:3] == ["Acme builds developer tooling.", "Founded 2015", "Acme is popular."]
        assert "Our culture is remote-first." in company.key_info
        assert "Acme uses Go and Postgres." not in company.key_info
        assert company.recent_news == ["Acme launches v2: Faster builds."]

    async def test_key_info_capped(self) -> None:
        def many(request: httpx.Request) -> httpx.Response:
            results = [{"title": f"r{i}", "url": f"https://x.com/{i}", "description": f"fact {i}"} for i in range(20)]
            return httpx.Response(200, json=_web(*results))

        service = BraveSearchService(api_key="k", transport=httpx.MockTransport(many))
        company = await service.research_company("Acme")
        assert len(company.key_info) == MAX_KEY_INFO
        assert len(company.recent_news) == 5

    async def test_null_result_fields_are_skipped_not_fatal(self) -> None:
        def nulls(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={
                **_web(
                    {"url": None, "title": "Acme news", "description": "Acme ships v2"},
                    {"url": "https://acme.dev", "title": None, "description": None, "extra_snippets": [None, "", 7, "Remote first"]},
                    {"url": "https://x.com", "title": "x", "description": "y", "extra_snippets": "not a list"},
                ),
                "infobox": {"description": None, "url": None},
            })

        service = BraveSearchService(api_key="k", transport=httpx.MockTransport(nulls))
        company = await service.research_company("Acme")

        assert "Acme ships v2" in company.key_info
        assert "Remote first" in company.key_info
        assert "not a list" not in company.key_info
        assert all(isinstance(item, str) and item for item in company.key_info)
        # The title match wins the homepage slot even without a url.
        assert company.website is None
        assert company.description == "Acme ships v2"
        assert company.recent_news == ["Acme news: Acme ships v2", "x: y"]


# ---------------------------------------------------------------------------
# Person research
# ---------------------------------------------------------------------------
class TestResearchPerson:
    async def test_extracts_person_information(self, service: BraveSearchService) -> None:
        person = await service.research_person("Jane Lee", "Acme")

        assert person.linked_in == "https://www.linkedin.com/in/janelee"
        assert person.title == "Acme"
        assert person.company == "Acme"
        assert person.background == [
            "Jane Lee hires engineers at Acme.",
            "Meet the people team.",
            "Ten years of experience in tech hiring.",
        ]
        assert len(person.background) <= MAX_BACKGROUND


# ---------------------------------------------------------------------------
# research_both
# ---------------------------------------------------------------------------
class TestResearchBoth:
    async def test_combines_company_and_recruiter(self, service: BraveSearchService) -> None:
        result = await service.research_both("Acme", "Jane Lee")
        assert result.company.company_name == "Acme"
        assert result.recruiter.name == "Jane Lee"
        assert result.recruiter.linked_in

    async def test_null_urls_do_not_discard_research(self) -> None:
        service = BraveSearchService(api_key="k", transport=httpx.MockTransport(
            lambda r: httpx.Response(200, json=_web({"url": None, "title": "Acme news", "description": "Acme ships v2"}))
        ))
        result = await service.research_both("Acme", "Jane Lee")

        assert "Acme ships v2" in result.company.key_info
        assert "Acme ships v2" in result.recruiter.background
        assert result.recruiter.linked_in is None

    async def test_sends_subscription_token(self) -> None:
        seen: list[httpx.Request] = []

        def capture(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        service = BraveSearchService(api_key="secret", transport=httpx.MockTransport(capture))
        await service.research_both("Acme", "Jane Lee")

        assert len(seen) == 5
        assert all(r.headers["X-Subscription-Token"] == "secret" for r in seen)
        assert all(str(r.url).startswith(BRAVE_SEARCH_URL) for r in seen)

    async def test_http_errors_yield_empty_research(self) -> None:
        service = BraveSearchService(
            api_key="k", transport=httpx.MockTransport(lambda r: httpx.Response(500, json={"error": "x"}))
        )
        result = await service.research_both("Acme", "Jane Lee")
        assert result.company.key_info == []
        assert result.company.recent_news == []
        assert result.recruiter.background == []
        assert result.company.description is None

    async def test_transport_errors_yield_empty_research(self) -> None:
        def boom(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("no route", request=request)

        service = BraveSearchService(api_key="k", transport=httpx.MockTransport(boom))
        result = await service.research_both("Acme", "Jane Lee")
        assert result.company.key_info == []
        assert result.recruiter.linked_in is None

    async def test_no_key_returns_empty_without_requests(self) -> None:
        def fail(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        service = BraveSearchService(api_key=None, transport=httpx.MockTransport(fail))
        result = await service.research_both("Acme", "Jane Lee")
        assert result.company.key_info == []
        assert result.recruiter.background == []
        assert not service.is_configured()
        assert "not configured" in service.get_status()

    async def test_no_key_with_mock_flag_returns_demo_data(self) -> None:
        service = BraveSearchService(api_key=None, mock_when_unconfigured=True)
        result = await service.research_both("Acme Labs", "Jane Lee")
        assert result.company.website == "https://www.acmelabs.com"
        assert result.recruiter.linked_in == "https://linkedin.com/in/jane-lee"
        assert len(result.company.key_info) == 3
