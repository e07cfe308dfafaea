"""
In-app notifications for community and wellbeing events.

Two events produce notifications: a peer match becoming mutual (both
parties are told) and a journal entry scoring critical burnout risk.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.utils.exceptions import NotFoundException

logger = logging.getLogger(__name__)


MUTUAL_CONNECTION = "mutual_connection"
BURNOUT_ALERT = "burnout_alert"


class NotificationService:
    """Stores notifications in the "notifications" collection."""

    NOTIFICATION_TYPES = (MUTUAL_CONNECTION, BURNOUT_ALERT)
    LIST_LIMIT = 50

    def __init__(self, db: AsyncIOMotorDatabase):
        self._db = db
        self._collection = db["notifications"]

    async def notify_mutual_connection(self, user_a: str, user_b: str, match_id: str) -> List[Dict[str, Any]]:
        """
        Tell both parties of a peer match that they are connected.

        Callers must only invoke this for the request that made the match
        mutual; it does not deduplicate.
        """
        created = []
        for user_id in (user_a, user_b):
            created.append(await self.create_notification(
                user_id,
                MUTUAL_CONNECTION,
                title="Mutual connection!",
                message="You and another founder have both opted in to connect.",
                metadata={"matchId": match_id},
            ))
        return created

    async def notify_burnout_alert(self, user_id: str, score: int, journal_entry_id: Optional[str]) -> Dict[str, Any]:
        return await self.create_notification(
            user_id,
            BURNOUT_ALERT,
            title="Your burnout risk is critical",
            message=(
                f"Today's burnout score is {score}. Consider reaching out to someone "
                "you trust and taking time to rest."
            ),
            metadata={"journalEntryId": journal_entry_id, "score": score},
        )

    async def create_notification(
        self,
        user_id: str,
        notification_type: str,
        title: str,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Raises:
            ValueError: notification_type is not one of NOTIFICATION_TYPES
        """
        if notification_type not in self.NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type: {notification_type}")

        doc = {
            "userId": ObjectId(user_id),
            "type": notification_type,
            "title": title,
            "message": message,
            "metadata": metadata or {},
            "read": False,
            "createdAt": datetime.now(timezone.utc),
        }
        result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id

        logger.info(f"Notification {notification_type} created for user {user_id}")
        return doc

    async def list_for_user(self, user_id: str, unread_only: bool = False) -> List[Dict[str, Any]]:
        """Newest first, at most LIST_LIMIT."""
        query: Dict[str, Any] = {"userId": ObjectId(user_id)}
        if unread_only:
            query["read"] = False

        cursor = self._collection.find(query).sort("createdAt", -1).limit(self.LIST_LIMIT)
        docs = await cursor.to_list(length=self.LIST_LIMIT)
        return [
            {
                "id": str(doc["_id"]),
                "type": doc["type"],
                "title": doc["title"],
                "message": doc["message"],
                "metadata": doc.get("metadata", {}),
                "read": doc.get("read", False),
                "createdAt": doc.get("createdAt"),
            }
            for doc in docs
        ]

    async def mark_as_read(self, notification_id: str, user_id: str) -> None:
        """
        Raises:
            NotFoundException: No such notification for this user
        """
        result = await self._collection.update_one(
            {"_id": ObjectId(notification_id), "userId": ObjectId(user_id)},
            {"$set": {"read": True}}
        )
        if result.matched_count == 0:
            raise NotFoundException(message="Notification not found", code="NOTIFICATION_NOT_FOUND")

    async def unread_count(self, user_id: str) -> int:
        return await self._collection.count_documents({
            "userId": ObjectId(user_id),
            "read": False
        })
