"""
Configuration settings for the suggestion engine
"""
import logging
from typing import Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

# Configure basic logger for config module
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings"""

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # API Keys
    LOVABLE_API_KEY: str = ""

    # AI Gateway
    AI_GATEWAY_URL: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    AI_MODEL: str = "google/gemini-2.5-flash"
    # Seconds; 0 disables the timeout entirely
    AI_GATEWAY_TIMEOUT: float = 60.0

    # Contract strictness
    ENFORCE_CATALOGS: bool = False
    REQUIRE_EXACT_PROJECT_COUNT: bool = False

    # Monitoring
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "development"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def gateway_timeout(self) -> Optional[float]:
        """Timeout handed to httpx, None when disabled"""
        return self.AI_GATEWAY_TIMEOUT if self.AI_GATEWAY_TIMEOUT > 0 else None


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Build settings from the current environment.

    The gateway credential is read per invocation, so this constructs a
    fresh instance instead of returning the startup snapshot.
    """
    return Settings()


def validate_required_config() -> bool:
    """Validate required configuration on startup"""
    errors = []

    if not settings.LOVABLE_API_KEY:
        errors.append("LOVABLE_API_KEY must be configured")

    if errors:
        for error in errors:
            logger.error(f"Configuration error: {error}")
        if settings.ENVIRONMENT == "production":
            raise ValueError(f"Missing required configuration: {', '.join(errors)}")

    return len(errors) == 0
