"""
Fallback Email — deterministic template email used when the LLM is unavailable.

Pure and total: any mix of present/absent profile data yields a complete
subject, body and three suggested actions. No I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.models.email_models import EmailParams, EmailType, GeneratedEmail, parse_email_type
from app.services.prompt_composer import closing_paragraph

SUGGESTED_ACTIONS = [
    "Follow up within 5-7 days if no response",
    "Connect with recruiter on LinkedIn with personalized note",
    "Research company news and developments for follow-up topics",
]

_SUBJECTS = {
    EmailType.APPLICATION: "{candidate} here - excited about the {job_title} role!",
    EmailType.FOLLOW_UP: "Following up on {job_title} - still very interested!",
    EmailType.THANK_YOU: "Thanks for the great conversation about {job_title}",
    EmailType.INQUIRY: "{candidate} - exploring opportunities at {company}",
    EmailType.WITHDRAWAL: "Update on {job_title} application",
}

_GENERIC_SUBJECT = "{candidate} - interested in opportunities at {company}"


def generate_fallback_email(params: EmailParams) -> GeneratedEmail:
    """Build a personalised-looking email from the request alone."""
    profile = params.candidate_profile
    candidate = params.candidate_name

    skill_names = [s.name.strip() for s in profile.skills if s.name and s.name.strip()] if profile else []
    skills = ", ".join(skill_names[:3]) or "relevant technical skills"

    experience_text = "gaining valuable experience in my current role."
    if profile and profile.experiences:
        latest = profile.experiences[0]
        doing = _truncate(latest.description, 80) or "developing my expertise in this field"
        experience_text = f"Currently working as {latest.position} at {latest.company}, where I've been {doing}."

    # No placeholder when there is no project: the sentence is simply left out.
    project_text = ""
    if profile and profile.projects:
        project = profile.projects[0]
        which = _truncate(project.description, 60) or "was an interesting challenge"
        project_text = f"I recently worked on {project.name}, which {which}."

    email_type = parse_email_type(params.email_type)
    fields = {"candidate": candidate, "job_title": params.job_title, "company": params.company_name}
    subject = _SUBJECTS.get(email_type, _GENERIC_SUBJECT).format(**fields)

    ctx = _BodyContext(
        recruiter=params.recruiter_name,
        job_title=params.job_title,
        company=params.company_name,
        candidate=candidate,
        skills=skills,
        experience_text=experience_text,
        project_text=project_text,
        close=closing_paragraph(profile.linkedin_url if profile else None),
        email=profile.email if profile else None,
        phone=profile.phone if profile else None,
    )
    builder = _BODIES.get(email_type, _application_body)

    return GeneratedEmail(
        subject=subject,
        body=builder(ctx),
        suggested_actions=list(SUGGESTED_ACTIONS),
    )


# ── Helpers ──────────────────────────────────────────────────────────────────


@dataclass
class _BodyContext:
    recruiter: str
    job_title: str
    company: str
    candidate: str
    skills: str
    experience_text: str
    project_text: str
    close: str
    email: str | None = None
    phone: str | None = None


def _truncate(text: str | None, limit: int) -> str:
    if not text:
        return ""
    return text[:limit] + "..."


def _signature(ctx: _BodyContext, closing: str = "Best regards") -> str:
    return f"{closing},\n{ctx.candidate}"


def _application_body(ctx: _BodyContext) -> str:
    project = f"{ctx.project_text}\n\n" if ctx.project_text else ""
    contact = "\n".join(v for v in (ctx.email, ctx.phone) if v)
    signature = _signature(ctx) + (f"\n{contact}" if contact else "")
    return (
        f"Hi {ctx.recruiter},\n\n"
        f"I came across the {ctx.job_title} position at {ctx.company} and couldn't help but get excited "
        f"- this looks like exactly the kind of challenge I'm looking for!\n\n"
        f"{ctx.experience_text} My background includes experience with {ctx.skills}, "
        f"which seems to align perfectly with what you're looking for.\n\n"
        f"{project}"
        f"{ctx.close}\n\n"
        f"{signature}"
    )


def _follow_up_body(ctx: _BodyContext) -> str:
    middle = (
        f"Since we last spoke, I've been thinking about how my experience with {ctx.skills} "
        f"could really contribute to {ctx.company}'s goals."
    )
    if ctx.project_text:
        middle += f" {ctx.project_text}"
    return (
        f"Hi {ctx.recruiter},\n\n"
        f"Just wanted to circle back on the {ctx.job_title} role we discussed. I'm still very excited "
        f"about the opportunity and wanted to see if there were any updates.\n\n"
        f"{middle}\n\n"
        f"{ctx.close}\n\n"
        f"{_signature(ctx)}"
    )


def _inquiry_body(ctx: _BodyContext) -> str:
    close = ctx.close.replace("fit for this job", "fit for any current or future opportunities")
    return (
        f"Hi {ctx.recruiter},\n\n"
        f"I've been following {ctx.company} and am really impressed by what you're building. "
        f"I'm currently exploring new opportunities and wondered if you might have any openings "
        f"that could be a good fit.\n\n"
        f"{ctx.experience_text} I work primarily with {ctx.skills} and am particularly interested "
        f"in roles like {ctx.job_title}.\n\n"
        f"{close}\n\n"
        f"{_signature(ctx)}"
    )


def _thank_you_body(ctx: _BodyContext) -> str:
    close = ctx.close.replace("if I'm fit for this job", "about the next steps")
    return (
        f"Hi {ctx.recruiter},\n\n"
        f"Thanks for taking the time to chat about the {ctx.job_title} role yesterday "
        f"- I really enjoyed our conversation!\n\n"
        f"Our discussion about {ctx.company}'s direction really confirmed this would be an exciting "
        f"opportunity. I'm particularly excited about the potential to contribute my {ctx.skills} "
        f"experience to the team.\n\n"
        f"{close}\n\n"
        f"{_signature(ctx)}"
    )


def _withdrawal_body(ctx: _BodyContext) -> str:
    return (
        f"Hi {ctx.recruiter},\n\n"
        f"I wanted to reach out with an update on the {ctx.job_title} position. After much "
        f"consideration, I've decided to pursue another opportunity that aligns more closely with "
        f"my current career goals.\n\n"
        f"This was honestly a difficult decision because I was genuinely excited about {ctx.company} "
        f"and the work you're doing. I really appreciated your time and the insights you shared "
        f"about the role.\n\n"
        f"I hope our paths cross again in the future - please keep me in mind for other opportunities!\n\n"
        f"Thank you so much for your time.\n\n"
        f"{_signature(ctx, 'Best wishes')}"
    )


_BODIES = {
    EmailType.APPLICATION: _application_body,
    EmailType.FOLLOW_UP: _follow_up_body,
    EmailType.INQUIRY: _inquiry_body,
    EmailType.THANK_YOU: _thank_you_body,
    EmailType.WITHDRAWAL: _withdrawal_body,
}
