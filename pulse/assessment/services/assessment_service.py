"""
Assessment storage service.

Handles assessment persistence and profile lookups.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from pulse.assessment.archetypes import Archetype
from pulse.assessment.models import NUMERIC_DIMENSIONS, ScoreVector

logger = logging.getLogger(__name__)


class AssessmentService:
    """
    Handles assessment storage and retrieval.
    Pure CRUD - scoring happens in ScoreCalculator and ArchetypeClassifier.
    """

    POPULATION_LIMIT = 1000

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize AssessmentService.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._collection = db["assessments"]

    async def save_assessment(
        self,
        user_id: str,
        answers: List[str],
        profile: ScoreVector,
        archetype: Archetype,
        insights: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Store a completed assessment. Retakes add a new document; the latest one wins.

        Args:
            user_id: MongoDB user ID
            answers: The validated answers
            profile: Computed ScoreVector
            archetype: Classified archetype
            insights: Optional generated insight text

        Returns:
            Saved assessment document
        """
        now = datetime.now(timezone.utc)

        assessment_doc = {
            "userId": ObjectId(user_id),
            "answers": list(answers),
            "scores": profile.model_dump(),
            "archetype": archetype.name,
            "isUrgent": archetype.is_urgent,
            "insights": insights,
            "createdAt": now,
        }

        result = await self._collection.insert_one(assessment_doc)
        assessment_doc["_id"] = result.inserted_id

        logger.info(f"Assessment saved for user {user_id}: {archetype.name}")
        return assessment_doc

    async def get_latest_assessment(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get the most recent assessment for a user.

        Args:
            user_id: MongoDB user ID

        Returns:
            Assessment dict or None
        """
        return await self._collection.find_one(
            {"userId": ObjectId(user_id)},
            sort=[("createdAt", -1)]
        )

    async def get_latest_profile(self, user_id: str) -> Optional[ScoreVector]:
        """
        Get the user's current profile.

        Returns:
            ScoreVector, or None when the user has not completed the assessment
        """
        doc = await self.get_latest_assessment(user_id)
        if not doc:
            return None
        return self.profile_from_doc(doc)

    async def get_stats(self, user_id: str) -> Dict[str, Any]:
        """
        Assessment count plus the date and archetype of the latest one.

        Returns:
            dict with count, lastAssessment and archetype (None when untaken)
        """
        count = await self._collection.count_documents({"userId": ObjectId(user_id)})
        latest = await self.get_latest_assessment(user_id) if count else None

        return {
            "count": count,
            "lastAssessment": latest["createdAt"] if latest else None,
            "archetype": latest["archetype"] if latest else None,
        }

    async def get_population(self, exclude_user_id: str) -> List[Dict[str, Any]]:
        """
        Latest assessment of other users, capped at POPULATION_LIMIT.

        The cap keeps the most recently assessed users. Ranking order is
        decided by PeerMatchingEngine, not by this query.

        Args:
            exclude_user_id: The requesting user

        Returns:
            One assessment document per user, most recent first
        """
        pipeline = [
            {"$match": {"userId": {"$ne": ObjectId(exclude_user_id)}}},
            {"$sort": {"createdAt": -1}},
            {"$group": {"_id": "$userId", "latest": {"$first": "$$ROOT"}}},
            {"$replaceRoot": {"newRoot": "$latest"}},
            {"$sort": {"createdAt": -1}},
            {"$limit": self.POPULATION_LIMIT},
        ]

        cursor = self._collection.aggregate(pipeline)
        return await cursor.to_list(length=self.POPULATION_LIMIT)

    @staticmethod
    def profile_from_doc(doc: Dict[str, Any]) -> ScoreVector:
        """Rebuild a ScoreVector from a stored assessment document."""
        scores = doc["scores"]
        return ScoreVector(
            **{dimension: scores[dimension] for dimension in NUMERIC_DIMENSIONS},
            motivationType=scores["motivationType"],
        )
