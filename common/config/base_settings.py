"""
Environment-backed settings shared by every service.

Values come from environment variables or a local .env file. Applications
subclass BaseAppSettings to add their own knobs.
"""

from typing import Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


SUPPORTED_AI_PROVIDERS = ("groq", "claude", "openai")


class BaseAppSettings(BaseSettings):
    """Database, AI provider and runtime settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
        case_sensitive=True,
    )

    # ==========================================================================
    # MongoDB
    # ==========================================================================
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "founder_pulse"

    # ==========================================================================
    # AI provider (insights are disabled when the active provider has no key)
    # ==========================================================================
    AI_PROVIDER: str = "groq"

    GROQ_API_KEY: Optional[str] = None
    GROQ_MODEL: str = "llama-3.1-8b-instant"
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"

    CLAUDE_API_KEY: Optional[str] = None
    CLAUDE_MODEL: str = "claude-sonnet-4-5-20250929"

    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"

    # ==========================================================================
    # Runtime
    # ==========================================================================
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    def get_ai_api_key(self) -> Optional[str]:
        """Key for whichever provider AI_PROVIDER selects."""
        keys: Dict[str, Optional[str]] = {
            "groq": self.GROQ_API_KEY,
            "claude": self.CLAUDE_API_KEY,
            "openai": self.OPENAI_API_KEY,
        }
        return keys.get(self.AI_PROVIDER.lower())

    def validate_required(self) -> None:
        """
        Raises:
            ValueError: Unknown AI provider or missing MongoDB URI
        """
        errors = []
        if self.AI_PROVIDER.lower() not in SUPPORTED_AI_PROVIDERS:
            errors.append(f"Unsupported AI_PROVIDER: {self.AI_PROVIDER}")
        if not self.MONGODB_URI:
            errors.append("MONGODB_URI is required")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
