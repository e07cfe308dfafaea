"""Tests for settings validation and service wiring."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from pulse import dependencies
from pulse.config import Settings
from pulse.journal.dependencies import get_burnout_scorer, get_journal_service, get_trend_analyzer


class TestSettings:
    def test_defaults_are_valid(self):
        settings = Settings(_env_file=None)

        settings.validate_required()

        assert settings.TREND_WINDOW_DAYS == 7
        assert settings.MAX_PEER_MATCHES == 5
        assert settings.INSIGHT_TIMEOUT_SECONDS == 3.0

    def test_rejects_unsupported_window(self):
        with pytest.raises(ValueError) as exc_info:
            Settings(_env_file=None, TREND_WINDOW_DAYS=10).validate_required()
        assert "TREND_WINDOW_DAYS" in str(exc_info.value)

    def test_rejects_unknown_provider(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, AI_PROVIDER="cohere").validate_required()

    def test_ai_key_follows_provider(self):
        settings = Settings(_env_file=None, AI_PROVIDER="claude", CLAUDE_API_KEY="k1", GROQ_API_KEY="k2")
        assert settings.get_ai_api_key() == "k1"


class TestServiceWiring:
    @pytest.mark.asyncio
    async def test_init_all_services_and_indexes(self, mock_db, mock_collection):
        dependencies.init_all_services(mock_db, Settings(_env_file=None), ai_client=MagicMock())

        await dependencies.ensure_indexes()

        assert get_journal_service() is not None
        assert get_trend_analyzer() is not None
        assert get_burnout_scorer() is not None
        # journal, peer matches, action items
        assert mock_collection.create_index.await_count == 3

    def test_trend_window_setting_reaches_analyzer(self, mock_db):
        settings = Settings(_env_file=None, TREND_WINDOW_DAYS=14)

        dependencies.init_all_services(mock_db, settings, ai_client=MagicMock())

        assert get_trend_analyzer().default_window == 14
