"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables (no hardcoded secrets)
- Settings are immutable dataclass for safety and clarity
- Single source of truth for all configurable values

REQUIRED:
- GEMINI_API_KEY: the app refuses to start without it

OPTIONAL:
- TWILIO_*: without them every SMS fails, which is logged and ignored
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache

# Load .env file if present (development convenience)
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "")
    return int(value) if value.strip() else default


@dataclass(frozen=True)
class LLMSettings:
    """Gemini settings for sentiment classification."""

    api_key: str = field(default_factory=lambda: os.getenv("GEMINI_API_KEY", ""))
    api_url: str = "https://generativelanguage.googleapis.com/v1beta/models"
    model: str = field(default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-1.5-flash"))

    # Deterministic output
    temperature: float = 0.0
    timeout_seconds: int = field(default_factory=lambda: _env_int("GEMINI_TIMEOUT_SECONDS", 15))


@dataclass(frozen=True)
class SMSSettings:
    """Twilio settings for product owner notifications."""

    account_sid: str = field(default_factory=lambda: os.getenv("TWILIO_ACCOUNT_SID", ""))
    auth_token: str = field(default_factory=lambda: os.getenv("TWILIO_AUTH_TOKEN", ""))
    from_number: str = field(default_factory=lambda: os.getenv("TWILIO_PHONE_NUMBER", ""))
    to_number: str = field(default_factory=lambda: os.getenv("PRODUCT_OWNER_PHONE_NUMBER", ""))
    api_url: str = "https://api.twilio.com/2010-04-01"
    timeout_seconds: int = field(default_factory=lambda: _env_int("TWILIO_TIMEOUT_SECONDS", 10))

    @property
    def is_configured(self) -> bool:
        return all((self.account_sid, self.auth_token, self.from_number, self.to_number))


@dataclass(frozen=True)
class ServerSettings:
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _env_int("PORT", 8080))


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from review_relay.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.llm.model)
    """

    # Sub-settings groups
    llm: LLMSettings = field(default_factory=LLMSettings)
    sms: SMSSettings = field(default_factory=SMSSettings)
    server: ServerSettings = field(default_factory=ServerSettings)

    database_file: str = field(default_factory=lambda: os.getenv("REVIEWS_DB", "reviews.db"))

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings/errors.
        Entries starting with "ERROR:" must stop the application.
        """
        issues = []

        if not self.llm.api_key:
            issues.append(
                "ERROR: GEMINI_API_KEY environment variable is not set. "
                "Please set it to your Gemini API key."
            )

        if not self.sms.is_configured:
            issues.append(
                "WARNING: Twilio settings incomplete. "
                "Product owner SMS notifications will fail."
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
