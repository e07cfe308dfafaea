"""
Journal CRUD service.

Handles journal entry storage and retrieval operations.
"""

import logging
from datetime import datetime, timezone, timedelta
from typing import Optional, List, Dict, Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from common.utils.exceptions import NotFoundException
from pulse.journal.models import JournalEntry
from pulse.journal.services.metrics_validator import MetricsValidator

logger = logging.getLogger(__name__)


class JournalService:
    """
    Handles journal entry storage and retrieval.
    Pure CRUD - trends and burnout scoring live elsewhere.
    """

    MAX_HISTORY_DAYS = 90

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize JournalService.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._entries_collection = db["journalEntries"]

    async def ensure_indexes(self) -> None:
        """One entry per user per day; concurrent upserts must not create duplicates."""
        await self._entries_collection.create_index(
            [("userId", ASCENDING), ("date", ASCENDING)],
            unique=True,
            name="user_date_unique"
        )

    async def upsert_entry(
        self,
        user_id: str,
        metrics: Dict[str, int],
        notes: Optional[str] = None,
        entry_date: Optional[str] = None
    ) -> JournalEntry:
        """
        Create or overwrite the user's entry for a day.

        Args:
            user_id: MongoDB user ID
            metrics: dict with mood, energy, stress (0-100)
            notes: Optional text notes (max 500 chars)
            entry_date: YYYY-MM-DD, defaults to today (UTC)

        Returns:
            The entry as persisted

        Raises:
            ValidationException: Metrics out of range or notes too long
        """
        MetricsValidator.check(metrics, notes)

        now = datetime.now(timezone.utc)
        day = entry_date or now.strftime("%Y-%m-%d")

        entry_data = {
            "userId": ObjectId(user_id),
            "date": day,
            "mood": metrics["mood"],
            "energy": metrics["energy"],
            "stress": metrics["stress"],
            "notes": notes.strip() if notes else None,
            "updatedAt": now
        }

        result = await self._entries_collection.find_one_and_update(
            {"userId": ObjectId(user_id), "date": day},
            {
                "$set": entry_data,
                "$setOnInsert": {"createdAt": now}
            },
            upsert=True,
            return_document=ReturnDocument.AFTER
        )

        logger.info(f"Journal entry saved for user {user_id} on {day}")
        return self.entry_from_doc(result)

    async def get_entry_by_date(self, user_id: str, day: str) -> Optional[JournalEntry]:
        """
        Get the user's entry for a specific day.

        Args:
            user_id: MongoDB user ID
            day: YYYY-MM-DD

        Returns:
            JournalEntry or None
        """
        doc = await self._entries_collection.find_one({
            "userId": ObjectId(user_id),
            "date": day
        })
        return self.entry_from_doc(doc) if doc else None

    async def get_entries_for_period(self, user_id: str, days: int) -> List[JournalEntry]:
        """
        Get all entries within the last N days.
        Used by TrendAnalyzer.

        Args:
            user_id: MongoDB user ID
            days: Number of days to look back (capped at 90)

        Returns:
            Entries sorted by date ascending
        """
        days = min(days, self.MAX_HISTORY_DAYS)
        start_date = (datetime.now(timezone.utc) - timedelta(days=days)).strftime("%Y-%m-%d")

        cursor = self._entries_collection.find({
            "userId": ObjectId(user_id),
            "date": {"$gte": start_date}
        })
        cursor = cursor.sort("date", 1)

        docs = await cursor.to_list(length=days + 1)
        return [self.entry_from_doc(doc) for doc in docs]

    async def delete_entry(self, user_id: str, entry_id: str) -> None:
        """
        Delete one of the user's entries.

        Raises:
            NotFoundException: No such entry, or it belongs to another user
        """
        result = await self._entries_collection.delete_one({
            "_id": ObjectId(entry_id),
            "userId": ObjectId(user_id)
        })
        if result.deleted_count == 0:
            raise NotFoundException(message="Journal entry not found", code="ENTRY_NOT_FOUND")

        logger.info(f"Journal entry {entry_id} deleted for user {user_id}")

    @staticmethod
    def entry_from_doc(doc: Dict[str, Any]) -> JournalEntry:
        """Convert a stored document into a JournalEntry."""
        return JournalEntry(
            id=str(doc["_id"]),
            userId=str(doc["userId"]),
            date=doc["date"],
            mood=doc["mood"],
            energy=doc["energy"],
            stress=doc["stress"],
            notes=doc.get("notes"),
        )
