from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional
from enum import Enum

from app.models.research_models import ResearchResult


class EmailType(str, Enum):
    """Kind of outreach email being drafted."""

    APPLICATION = "application"
    FOLLOW_UP = "follow-up"
    THANK_YOU = "thank-you"
    INQUIRY = "inquiry"
    WITHDRAWAL = "withdrawal"


class Tone(str, Enum):
    """Voice the email is written in."""

    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    CASUAL = "casual"


def _split_technologies(val: Any) -> list[str]:
    if val is None:
        return []
    if isinstance(val, str):
        return [t.strip() for t in val.split(",") if t.strip()]
    if isinstance(val, list):
        return [str(t) for t in val]
    return []


# ── Candidate Profile ───────────────────────────────────────────────────────


class Experience(BaseModel):
    company: str
    position: str
    start_date: str = Field(alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    description: Optional[str] = None
    technologies: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @field_validator("technologies", mode="before")
    @classmethod
    def _coerce_technologies(cls, v: Any) -> list[str]:
        return _split_technologies(v)


class Education(BaseModel):
    institution: str
    degree: str
    field_of_study: str = Field(alias="fieldOfStudy")
    start_date: str = Field(alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    gpa: Optional[str] = None
    description: Optional[str] = None

    model_config = {"populate_by_name": True}


class Skill(BaseModel):
    name: str
    category: Optional[str] = None
    proficiency: Optional[str] = None


class Project(BaseModel):
    name: str
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    github_url: Optional[str] = Field(None, alias="githubUrl")
    live_url: Optional[str] = Field(None, alias="liveUrl")
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")

    model_config = {"populate_by_name": True}

    @field_validator("technologies", mode="before")
    @classmethod
    def _coerce_technologies(cls, v: Any) -> list[str]:
        return _split_technologies(v)


class Certificate(BaseModel):
    name: str
    issuer: str
    date_issued: str = Field(alias="dateIssued")
    expiration_date: Optional[str] = Field(None, alias="expirationDate")
    credential_id: Optional[str] = Field(None, alias="credentialId")
    url: Optional[str] = None

    model_config = {"populate_by_name": True}


class CandidateProfile(BaseModel):
    """Snapshot of the applicant supplied by the caller."""

    name: str
    email: str
    about: Optional[str] = None
    title: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin_url: Optional[str] = Field(None, alias="linkedinUrl")
    experiences: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    certificates: list[Certificate] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @field_validator("experiences", "education", "skills", "projects", "certificates", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v


# ── Request Models ──────────────────────────────────────────────────────────


class EmailGenerateRequest(BaseModel):
    """
    Request to draft an outreach email.

    Required fields are declared optional here so a missing one produces the
    service's own 400 message instead of a schema validation error.
    """

    job_title: Optional[str] = Field(None, alias="jobTitle")
    company_name: Optional[str] = Field(None, alias="companyName")
    recruiter_name: Optional[str] = Field(None, alias="recruiterName")
    job_description: Optional[str] = Field(None, alias="jobDescription")
    candidate_name: Optional[str] = Field(None, alias="candidateName")
    email_type: Optional[str] = Field(None, alias="emailType")
    tone: Optional[str] = None
    additional_context: Optional[str] = Field(None, alias="additionalContext")
    candidate_profile: Optional[CandidateProfile] = Field(None, alias="candidateProfile")

    model_config = {"populate_by_name": True}

    def missing_required(self) -> list[str]:
        """Return wire names of required fields that are absent or blank."""
        required = {
            "jobTitle": self.job_title,
            "companyName": self.company_name,
            "recruiterName": self.recruiter_name,
            "emailType": self.email_type,
        }
        return [name for name, value in required.items() if not (value or "").strip()]


class EmailParams(BaseModel):
    """Validated generation controls handed to the prompt composer and fallback generator."""

    job_title: str
    company_name: str
    recruiter_name: str
    job_description: Optional[str] = None
    candidate_name: str = "Candidate"
    email_type: str
    tone: str = Tone.PROFESSIONAL.value
    additional_context: Optional[str] = None
    candidate_profile: Optional[CandidateProfile] = None

    @classmethod
    def from_request(cls, req: EmailGenerateRequest) -> "EmailParams":
        return cls(
            job_title=req.job_title.strip(),
            company_name=req.company_name.strip(),
            recruiter_name=req.recruiter_name.strip(),
            job_description=req.job_description,
            candidate_name=(req.candidate_name or "").strip() or "Candidate",
            email_type=req.email_type.strip(),
            tone=(req.tone or "").strip() or Tone.PROFESSIONAL.value,
            additional_context=req.additional_context,
            candidate_profile=req.candidate_profile,
        )


# ── Response Models ─────────────────────────────────────────────────────────


class GeneratedEmail(BaseModel):
    """Subject, body and follow-up suggestions for one email."""

    subject: str
    body: str
    suggested_actions: list[str] = Field(default_factory=list, alias="suggestedActions")

    model_config = {"populate_by_name": True}


class EmailGenerateResponse(GeneratedEmail):
    """Generated email plus the research it was grounded on."""

    research_data: ResearchResult = Field(alias="researchData")


class EmailServiceStatus(BaseModel):
    generation_configured: bool
    research_configured: bool
    research_status: str
    model: str


def parse_email_type(val: str | None) -> EmailType | None:
    """Map a raw email type string to the enum, or None when unrecognised."""
    try:
        return EmailType(val)
    except ValueError:
        return None


def parse_tone(val: str | None) -> Tone | None:
    """Map a raw tone string to the enum, or None when unrecognised."""
    try:
        return Tone(val)
    except ValueError:
        return None
