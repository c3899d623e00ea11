from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Boron Atom Email Service"
    debug: bool = False

    # CORS
    frontend_url: str = "http://localhost:3000"

    # LLM API Keys (a per-request X-Groq-Key header takes precedence over this server default)
    groq_api_key: Optional[str] = None
    email_model_key: str = "llama-3.3-70b"

    # Brave Search
    brave_search_api_key: Optional[str] = None
    brave_search_mock: bool = False

    # Outbound call budgets
    research_timeout_seconds: float = 20.0
    llm_timeout_seconds: float = 45.0
    llm_max_retries: int = 1

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


# ── Model Registry ──────────────────────────────────────────────────────────

MODELS = {
    "groq": {
        "llama-3.3-70b": {
            "name": "LLaMA 3.3 70B",
            "model_id": "groq/llama-3.3-70b-versatile",
            "description": "Creative, personalised outreach emails",
            "recommended": True,
        },
        "llama-3.1-8b": {
            "name": "LLaMA 3.1 8B Instant",
            "model_id": "groq/llama-3.1-8b-instant",
            "description": "Fast and cheap, weaker personalisation",
            "recommended": False,
        },
    },
}

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "ai_email": {"temperature": 0.8, "max_tokens": 2000},
}
