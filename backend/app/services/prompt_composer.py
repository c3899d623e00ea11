"""
Prompt Composer — turn job, candidate and research data into LLM prompts.

Pure string construction: no I/O, no exceptions for sparse input. Every
section is always rendered, with a placeholder line when its data is missing.
"""

from __future__ import annotations

from app.models.email_models import (
    CandidateProfile,
    EmailParams,
    parse_email_type,
    parse_tone,
)
from app.models.research_models import CompanyResearch, PersonResearch, ResearchResult
from app.prompts import ai_email


# ── Research ─────────────────────────────────────────────────────────────────


def format_research(company: CompanyResearch, recruiter: PersonResearch) -> str:
    """Render company + recruiter research as a prompt block."""
    return ai_email.RESEARCH_TEMPLATE.format(
        company_name=company.company_name,
        company_overview=f"Company Overview: {company.description}" if company.description else "",
        company_website=f"Website: {company.website}" if company.website else "",
        key_info=_bullets(company.key_info, ai_email.NO_KEY_INFO),
        recent_news=_bullets(company.recent_news, ai_email.NO_RECENT_NEWS),
        recruiter_name=recruiter.name,
        recruiter_title=f"Title: {recruiter.title}" if recruiter.title else "",
        recruiter_linkedin=f"LinkedIn: {recruiter.linked_in}" if recruiter.linked_in else "",
        recruiter_background=_bullets(recruiter.background, ai_email.NO_RECRUITER_BACKGROUND),
    )


def _bullets(items: list[str], placeholder: str) -> str:
    if not items:
        return f"• {placeholder}"
    return "\n".join(f"• {item}" for item in items)


# ── Candidate Profile ────────────────────────────────────────────────────────


def format_profile(profile: CandidateProfile | None) -> str:
    """Render the candidate profile as a prompt block."""
    if profile is None:
        return ai_email.NO_PROFILE

    identity = [f"Name: {profile.name}"]
    for label, value in (
        ("Current Title", profile.title),
        ("Location", profile.location),
        ("Email", profile.email),
        ("Phone", profile.phone),
        ("LinkedIn", profile.linkedin_url),
        ("About", profile.about),
    ):
        if value:
            identity.append(f"{label}: {value}")

    experience = []
    for exp in profile.experiences:
        lines = [f"• {exp.position} at {exp.company} ({exp.start_date} - {exp.end_date or 'Present'})"]
        if exp.description:
            lines.append(f"  - {exp.description}")
        if exp.technologies:
            lines.append(f"  - Technologies: {', '.join(exp.technologies)}")
        experience.append("\n".join(lines))

    education = []
    for edu in profile.education:
        lines = [
            f"• {edu.degree} in {edu.field_of_study} from {edu.institution} "
            f"({edu.start_date} - {edu.end_date or 'Present'})"
        ]
        if edu.gpa:
            lines.append(f"  - GPA: {edu.gpa}")
        if edu.description:
            lines.append(f"  - {edu.description}")
        education.append("\n".join(lines))

    skills = []
    for skill in profile.skills:
        line = f"• {skill.name}"
        if skill.category:
            line += f" ({skill.category})"
        if skill.proficiency:
            line += f" - {skill.proficiency}"
        skills.append(line)

    projects = []
    for project in profile.projects:
        lines = [f"• {project.name}: {project.description}"]
        if project.technologies:
            lines.append(f"  - Technologies: {', '.join(project.technologies)}")
        if project.github_url:
            lines.append(f"  - GitHub: {project.github_url}")
        if project.live_url:
            lines.append(f"  - Live Demo: {project.live_url}")
        projects.append("\n".join(lines))

    certifications = []
    for cert in profile.certificates:
        lines = [f"• {cert.name} from {cert.issuer} ({cert.date_issued})"]
        if cert.credential_id:
            lines.append(f"  - Credential ID: {cert.credential_id}")
        certifications.append("\n".join(lines))

    return ai_email.PROFILE_TEMPLATE.format(
        identity="\n".join(identity),
        experience="\n".join(experience) or ai_email.NO_EXPERIENCE,
        education="\n".join(education) or ai_email.NO_EDUCATION,
        skills="\n".join(skills) or ai_email.NO_SKILLS,
        projects="\n".join(projects) or ai_email.NO_PROJECTS,
        certifications="\n".join(certifications) or ai_email.NO_CERTIFICATIONS,
    )


# ── Guidance Lookups ─────────────────────────────────────────────────────────


def get_tone_guidelines(tone: str | None) -> str:
    """Guidance block for a tone; unrecognised tones get the generic sentence."""
    known = parse_tone(tone)
    if known is None:
        return ai_email.GENERIC_TONE_GUIDANCE
    return ai_email.TONE_GUIDELINES[known.value]


def get_email_type_instructions(email_type: str | None) -> str:
    """Instruction block for an email type; unrecognised types get the generic sentence."""
    known = parse_email_type(email_type)
    if known is None:
        return ai_email.GENERIC_EMAIL_TYPE_INSTRUCTION
    return ai_email.EMAIL_TYPE_INSTRUCTIONS[known.value]


def closing_paragraph(linkedin_url: str | None) -> str:
    """The humble resume/LinkedIn close every email ends with."""
    linkedin = f" : {linkedin_url}" if linkedin_url else " (available upon request)"
    return ai_email.CLOSING_PARAGRAPH.format(linkedin=linkedin)


# ── Prompts ──────────────────────────────────────────────────────────────────


def build_system_prompt() -> str:
    return ai_email.SYSTEM_PROMPT


def build_user_prompt(params: EmailParams, research: ResearchResult) -> str:
    """Assemble the user prompt from job fields, research and the candidate profile."""
    profile = params.candidate_profile

    contact_line = ""
    if profile and (profile.email or profile.phone):
        contact_line = f"Include contact: {profile.email or ''} {profile.phone or ''}".rstrip()

    return ai_email.USER_PROMPT_TEMPLATE.format(
        email_type=params.email_type,
        job_title=params.job_title,
        company_name=params.company_name,
        recruiter_name=params.recruiter_name,
        job_description=params.job_description or "Not provided",
        research_summary=format_research(research.company, research.recruiter),
        profile_summary=format_profile(profile),
        tone=params.tone,
        additional_context=params.additional_context or "None provided",
        email_type_instructions=get_email_type_instructions(params.email_type),
        tone_guidelines=get_tone_guidelines(params.tone),
        forbidden_phrases="\n".join(f'- "{phrase}"' for phrase in ai_email.FORBIDDEN_PHRASES),
        closing_paragraph=closing_paragraph(profile.linkedin_url if profile else None),
        contact_line=contact_line,
    )


def build_messages(params: EmailParams, research: ResearchResult) -> list[dict[str, str]]:
    """OpenAI-format message list for the generation call."""
    return [
        {"role": "system", "content": build_system_prompt()},
        {"role": "user", "content": build_user_prompt(params, research)},
    ]
