"""Unit tests for AssessmentService storage and lookups."""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId

from pulse.assessment.services.assessment_service import AssessmentService
from pulse.pipelines.assessment import get_assessment_stats_pipeline


@pytest.fixture
def service(mock_db):
    return AssessmentService(mock_db)


class TestAssessmentStats:
    @pytest.mark.asyncio
    async def test_counts_and_reports_latest(self, service, mock_collection, sample_user_id):
        taken_at = datetime(2026, 3, 1, tzinfo=timezone.utc)
        mock_collection.count_documents = AsyncMock(return_value=3)
        mock_collection.find_one = AsyncMock(return_value={
            "_id": ObjectId(), "archetype": "Growth Seeker", "createdAt": taken_at,
        })

        stats = await service.get_stats(sample_user_id)

        assert stats == {"count": 3, "lastAssessment": taken_at, "archetype": "Growth Seeker"}
        query = mock_collection.count_documents.call_args.args[0]
        assert query == {"userId": ObjectId(sample_user_id)}
        assert mock_collection.find_one.call_args.kwargs["sort"] == [("createdAt", -1)]

    @pytest.mark.asyncio
    async def test_untaken_assessment(self, service, mock_collection, sample_user_id):
        mock_collection.count_documents = AsyncMock(return_value=0)
        mock_collection.find_one = AsyncMock()

        stats = await service.get_stats(sample_user_id)

        assert stats == {"count": 0, "lastAssessment": None, "archetype": None}
        mock_collection.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_pipeline_delegates(self, sample_user_id):
        assessment_service = MagicMock()
        assessment_service.get_stats = AsyncMock(return_value={"count": 1})

        assert await get_assessment_stats_pipeline(assessment_service, sample_user_id) == {"count": 1}
        assessment_service.get_stats.assert_awaited_once_with(sample_user_id)


class TestPopulation:
    @pytest.mark.asyncio
    async def test_cap_keeps_most_recent_users(self, service, mock_collection, make_cursor, sample_user_id):
        mock_collection.aggregate.return_value = make_cursor([])

        await service.get_population(sample_user_id)

        pipeline = mock_collection.aggregate.call_args.args[0]
        assert pipeline[0] == {"$match": {"userId": {"$ne": ObjectId(sample_user_id)}}}
        # The stage right before the cap must order newest first
        assert pipeline[-2] == {"$sort": {"createdAt": -1}}
        assert pipeline[-1] == {"$limit": AssessmentService.POPULATION_LIMIT}
