"""Unit tests for InsightGenerator fallback behavior."""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock

from pulse.assessment.archetypes import ARCHETYPES, BURNING_OUT
from pulse.assessment.services.insight_generator import (
    FALLBACK_TEXT,
    InsightGenerator,
    InsightResult,
)


LONG_REPLY = (
    "You are carrying a lot right now. Your scores show strong drive alongside "
    "real signs of strain, and that combination deserves care."
)


@pytest.fixture
def archetype():
    return ARCHETYPES[BURNING_OUT]


def client_returning(value=None, side_effect=None):
    client = MagicMock()
    client.complete = AsyncMock(return_value=value, side_effect=side_effect)
    return client


class TestPrompt:
    def test_includes_all_dimensions_and_archetype(self, strained_profile, archetype):
        prompt = InsightGenerator(None).build_prompt(strained_profile, archetype)

        for expected in ("Imposter Syndrome: 80", "Founder Doubt: 85", "Identity Fusion: 90",
                         "Fear of Rejection: 75", "Risk Tolerance: 40",
                         "Motivation Type: extrinsic", "Isolation Level: 88",
                         "Their archetype is: Burning Out"):
            assert expected in prompt


class TestGenerate:
    @pytest.mark.asyncio
    async def test_returns_provider_text(self, strained_profile, archetype):
        client = client_returning("  " + LONG_REPLY + "\n")

        result = await InsightGenerator(client, max_tokens=300).generate(strained_profile, archetype)

        assert result == InsightResult(text=LONG_REPLY)
        _, kwargs = client.complete.call_args
        assert kwargs["max_tokens"] == 300

    @pytest.mark.asyncio
    async def test_no_client_falls_back(self, strained_profile, archetype):
        result = await InsightGenerator(None).generate(strained_profile, archetype)

        assert result.is_fallback
        assert result.text == FALLBACK_TEXT

    @pytest.mark.asyncio
    async def test_provider_error_falls_back(self, strained_profile, archetype):
        client = client_returning(side_effect=RuntimeError("rate limited"))

        result = await InsightGenerator(client).generate(strained_profile, archetype)

        assert result.is_fallback

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply", [None, "", "Too short."])
    async def test_insufficient_content_falls_back(self, strained_profile, archetype, reply):
        result = await InsightGenerator(client_returning(reply)).generate(strained_profile, archetype)
        assert result.is_fallback

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self, strained_profile, archetype):
        async def slow_complete(*args, **kwargs):
            await asyncio.sleep(1)
            return LONG_REPLY

        client = MagicMock()
        client.complete = slow_complete

        result = await InsightGenerator(client, timeout_seconds=0.01).generate(strained_profile, archetype)

        assert result.is_fallback
