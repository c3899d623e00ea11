from pydantic import BaseModel, Field
from typing import Optional


class CompanyResearch(BaseModel):
    """Best-effort company intelligence gathered from web search."""

    company_name: str = Field(alias="companyName")
    description: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    key_info: list[str] = Field(default_factory=list, alias="keyInfo")
    recent_news: list[str] = Field(default_factory=list, alias="recentNews")

    model_config = {"populate_by_name": True}


class PersonResearch(BaseModel):
    """Best-effort recruiter intelligence gathered from web search."""

    name: str
    company: Optional[str] = None
    title: Optional[str] = None
    linked_in: Optional[str] = Field(None, alias="linkedIn")
    background: list[str] = Field(default_factory=list)
    recent_activities: list[str] = Field(default_factory=list, alias="recentActivities")

    model_config = {"populate_by_name": True}


class ResearchResult(BaseModel):
    """Company + recruiter research, always present in an email response."""

    company: CompanyResearch
    recruiter: PersonResearch

    @classmethod
    def empty(cls, company_name: str, recruiter_name: str) -> "ResearchResult":
        return cls(
            company=CompanyResearch(company_name=company_name),
            recruiter=PersonResearch(name=recruiter_name, company=company_name),
        )
