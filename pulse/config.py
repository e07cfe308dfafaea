"""
Founder Pulse application settings.

Extends the base settings with scoring, matching and insight configuration.
"""

from functools import lru_cache

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Founder Pulse-specific settings."""

    # ==========================================================================
    # AI Insights
    # ==========================================================================
    # Generation slower than this falls back to the fixed text
    INSIGHT_TIMEOUT_SECONDS: float = 3.0
    INSIGHT_MAX_TOKENS: int = 500

    # ==========================================================================
    # Journal
    # ==========================================================================
    TREND_WINDOW_DAYS: int = 7  # 7, 14 or 30

    # ==========================================================================
    # Community
    # ==========================================================================
    MAX_PEER_MATCHES: int = 5

    def validate_required(self) -> None:
        """
        Validate base settings plus application ranges.

        Raises:
            ValueError: If settings are missing or out of range
        """
        super().validate_required()

        errors = []
        if self.TREND_WINDOW_DAYS not in (7, 14, 30):
            errors.append("TREND_WINDOW_DAYS must be 7, 14 or 30")
        if self.INSIGHT_TIMEOUT_SECONDS <= 0:
            errors.append("INSIGHT_TIMEOUT_SECONDS must be positive")
        if self.MAX_PEER_MATCHES < 1:
            errors.append("MAX_PEER_MATCHES must be at least 1")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
