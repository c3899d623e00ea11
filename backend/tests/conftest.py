"""Shared fixtures: request payloads, candidate profiles, stubbed collaborators."""

import os

# Keep litellm's import offline: use its bundled model-cost map instead of fetching it.
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app
from app.models.research_models import CompanyResearch, PersonResearch, ResearchResult
from app.services.research_service import BraveSearchService
from app.utils.dependencies import get_research_service


@pytest.fixture
def base_payload() -> dict:
    return {
        "jobTitle": "Backend Engineer",
        "companyName": "Acme",
        "recruiterName": "Jane Lee",
        "emailType": "application",
        "tone": "professional",
    }


@pytest.fixture
def full_profile() -> dict:
    return {
        "name": "Sam Rivera",
        "email": "sam@example.com",
        "phone": "+1 555 0100",
        "title": "Software Engineer",
        "location": "Austin, TX",
        "linkedinUrl": "https://linkedin.com/in/samrivera",
        "about": "Builds reliable distributed systems.",
        "experiences": [
            {
                "company": "Globex",
                "position": "Platform Engineer",
                "startDate": "2021-03",
                "description": "Designed and operated the event ingestion pipeline handling 40k messages per second across three regions.",
                "technologies": ["Go", "Kafka"],
            }
        ],
        "education": [
            {
                "institution": "UT Austin",
                "degree": "BSc",
                "fieldOfStudy": "Computer Science",
                "startDate": "2016",
                "endDate": "2020",
                "gpa": "3.8",
            }
        ],
        "skills": [{"name": "Go"}, {"name": "Rust"}, {"name": "SQL"}, {"name": "Python"}],
        "projects": [
            {
                "name": "tinykv",
                "description": "A small replicated key-value store with Raft consensus and snapshotting.",
                "githubUrl": "https://github.com/sam/tinykv",
            }
        ],
        "certificates": [
            {"name": "CKA", "issuer": "CNCF", "dateIssued": "2022-05", "credentialId": "CKA-123"}
        ],
    }


@pytest.fixture
def research() -> ResearchResult:
    return ResearchResult(
        company=CompanyResearch(
            company_name="Acme",
            description="Acme builds developer tooling.",
            website="https://acme.dev",
            key_info=["Acme raised a Series B"],
            recent_news=["Acme launches v2: faster builds"],
        ),
        recruiter=PersonResearch(
            name="Jane Lee",
            company="Acme",
            title="Technical Recruiter",
            linked_in="https://linkedin.com/in/janelee",
            background=["Jane hires platform engineers"],
        ),
    )


@pytest.fixture
def research_stub(research: ResearchResult) -> MagicMock:
    stub = MagicMock(spec=BraveSearchService)
    stub.research_both = AsyncMock(return_value=research)
    stub.is_configured.return_value = True
    stub.get_status.return_value = "API key configured and ready"
    return stub


@pytest.fixture
def configured(monkeypatch: pytest.MonkeyPatch) -> None:
    """Server-side Groq key present, no retries so failures fall back immediately."""
    monkeypatch.setattr(settings, "groq_api_key", "test-groq-key")
    monkeypatch.setattr(settings, "llm_max_retries", 0)


@pytest.fixture
def client(research_stub: MagicMock):
    app.dependency_overrides[get_research_service] = lambda: research_stub
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
