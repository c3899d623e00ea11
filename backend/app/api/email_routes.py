import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.config import MODELS, settings
from app.models.email_models import (
    EmailGenerateRequest,
    EmailGenerateResponse,
    EmailParams,
    EmailServiceStatus,
)
from app.services.email_service import PROVIDER, generate_email
from app.services.research_service import BraveSearchService
from app.utils.dependencies import APIKeys, get_api_keys, get_research_service

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_FIELDS_ERROR = "Missing required fields: jobTitle, companyName, recruiterName, emailType"
KEY_NOT_CONFIGURED_ERROR = "Groq API key not configured"
GENERATION_FAILED_ERROR = "Failed to generate email content"


@router.post("", response_model=EmailGenerateResponse)
async def generate_ai_email(
    req: EmailGenerateRequest,
    api_keys: APIKeys = Depends(get_api_keys),
    research_service: BraveSearchService = Depends(get_research_service),
):
    """Draft a personalised outreach email grounded on live company/recruiter research."""
    missing = req.missing_required()
    if missing:
        logger.info(f"Rejected email request, missing: {', '.join(missing)}")
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})

    # Credential is resolved before any research call.
    key = api_keys.get_key(PROVIDER)
    if not key:
        return JSONResponse(status_code=500, content={"error": KEY_NOT_CONFIGURED_ERROR})

    try:
        return await generate_email(
            params=EmailParams.from_request(req),
            api_key=key,
            research_service=research_service,
        )
    except Exception:
        logger.exception("AI email generation failed")
        return JSONResponse(status_code=500, content={"error": GENERATION_FAILED_ERROR})


@router.get("/status", response_model=EmailServiceStatus)
async def email_service_status(
    api_keys: APIKeys = Depends(get_api_keys),
    research_service: BraveSearchService = Depends(get_research_service),
):
    """Report whether generation and research are configured. No secrets are exposed."""
    return EmailServiceStatus(
        generation_configured=bool(api_keys.get_key(PROVIDER)),
        research_configured=research_service.is_configured(),
        research_status=research_service.get_status(),
        model=MODELS[PROVIDER][settings.email_model_key]["model_id"],
    )
