"""
Burnout score history service.

Records every computed burnout score against the entry that produced it.
History is append-only.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from pulse.journal.models import BurnoutScore, ContributingFactor

logger = logging.getLogger(__name__)


class BurnoutService:
    """
    Persists burnout scores. Scores are inserted, never updated.
    """

    MAX_HISTORY = 90

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize BurnoutService.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._collection = db["burnoutScores"]

    async def record_score(self, user_id: str, burnout: BurnoutScore) -> BurnoutScore:
        """
        Append a score to the user's history.

        Args:
            user_id: MongoDB user ID
            burnout: Score computed by BurnoutScorer

        Returns:
            The stored score with calculatedAt set
        """
        now = datetime.now(timezone.utc)

        score_doc = {
            "userId": ObjectId(user_id),
            "journalEntryId": ObjectId(burnout.journalEntryId) if burnout.journalEntryId else None,
            "score": burnout.score,
            "riskLevel": burnout.riskLevel,
            "contributingFactors": [f.model_dump() for f in burnout.contributingFactors],
            "calculatedAt": now,
        }

        await self._collection.insert_one(score_doc)

        logger.info(
            f"Burnout score recorded for user {user_id}: {burnout.score} ({burnout.riskLevel})"
        )
        return burnout.model_copy(update={"calculatedAt": now})

    async def get_latest_score(self, user_id: str) -> Optional[BurnoutScore]:
        """
        Get the most recent score for a user.

        Returns:
            BurnoutScore or None if none exists
        """
        doc = await self._collection.find_one(
            {"userId": ObjectId(user_id)},
            sort=[("calculatedAt", -1)]
        )
        return self.score_from_doc(doc) if doc else None

    async def get_history(self, user_id: str, limit: int = 30) -> List[BurnoutScore]:
        """
        Get recent scores, newest first.

        Args:
            user_id: MongoDB user ID
            limit: Max records to return (capped at 90)
        """
        limit = min(limit, self.MAX_HISTORY)

        cursor = self._collection.find({"userId": ObjectId(user_id)})
        cursor = cursor.sort("calculatedAt", -1)
        cursor = cursor.limit(limit)

        docs = await cursor.to_list(length=limit)
        return [self.score_from_doc(doc) for doc in docs]

    @staticmethod
    def score_from_doc(doc: Dict[str, Any]) -> BurnoutScore:
        """Convert a stored document into a BurnoutScore."""
        entry_id = doc.get("journalEntryId")
        return BurnoutScore(
            score=doc["score"],
            riskLevel=doc["riskLevel"],
            contributingFactors=[
                ContributingFactor(**factor) for factor in doc.get("contributingFactors", [])
            ],
            journalEntryId=str(entry_id) if entry_id else None,
            calculatedAt=doc.get("calculatedAt"),
        )
