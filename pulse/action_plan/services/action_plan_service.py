"""
Action plan persistence.

Stores each day's micro-actions, tracks completion and reports
completion statistics.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from math import floor
from typing import Any, Dict, List, Optional, Sequence

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from common.utils.exceptions import NotFoundException
from pulse.action_plan.models import ActionItem, CompletionStats
from pulse.action_plan.services.action_plan_generator import ActionPlanGenerator
from pulse.action_plan.templates import ActionTemplate
from pulse.assessment.models import ScoreVector
from pulse.journal.models import BurnoutScore

logger = logging.getLogger(__name__)


def calculate_streak(items: Sequence[ActionItem], today: date) -> int:
    """
    Consecutive days, counting back from today, with at least one completed action.

    Today is skipped rather than breaking the streak when nothing has been
    completed yet.
    """
    completed_days = {item.assignedDate for item in items if item.isCompleted}

    streak = 0
    for offset in range(365):
        day = (today - timedelta(days=offset)).strftime("%Y-%m-%d")
        if day in completed_days:
            streak += 1
        elif offset > 0:
            break
    return streak


class ActionPlanService:
    """
    Handles daily action plan storage.
    """

    def __init__(self, db: AsyncIOMotorDatabase, generator: Optional[ActionPlanGenerator] = None):
        """
        Initialize ActionPlanService.

        Args:
            db: MongoDB database connection
            generator: Action selection, defaults to ActionPlanGenerator()
        """
        self._db = db
        self._collection = db["actionItems"]
        self._generator = generator or ActionPlanGenerator()

    async def ensure_indexes(self) -> None:
        await self._collection.create_index(
            [("userId", ASCENDING), ("assignedDate", ASCENDING), ("text", ASCENDING)],
            unique=True,
            name="user_day_action_unique"
        )

    async def get_actions_for_day(self, user_id: str, day: str) -> List[ActionItem]:
        """
        Get a user's actions for one day, in creation order.
        """
        cursor = self._collection.find({"userId": ObjectId(user_id), "assignedDate": day})
        cursor = cursor.sort("createdAt", 1)

        docs = await cursor.to_list(length=None)
        return [self.item_from_doc(doc) for doc in docs]

    async def get_or_create_daily_plan(
        self,
        user_id: str,
        day: str,
        archetype: Optional[str] = None,
        profile: Optional[ScoreVector] = None,
        burnout: Optional[BurnoutScore] = None
    ) -> List[ActionItem]:
        """
        Return the day's plan, generating and storing it on first request.

        Args:
            user_id: MongoDB user ID
            day: YYYY-MM-DD
            archetype: Archetype name from the latest assessment
            profile: Latest profile, if any
            burnout: Latest burnout score, if any

        Returns:
            The stored action items for the day
        """
        existing = await self.get_actions_for_day(user_id, day)
        if existing:
            return existing

        templates = self._generator.generate(user_id, day, archetype, profile, burnout)
        await self._store_plan(user_id, day, templates)

        logger.info(f"Created action plan for user {user_id} on {day}: {len(templates)} actions")
        return await self.get_actions_for_day(user_id, day)

    async def _store_plan(self, user_id: str, day: str, templates: Sequence[ActionTemplate]) -> None:
        now = datetime.now(timezone.utc)
        for template in templates:
            # Keyed upsert: a concurrent request for the same day cannot duplicate items
            await self._collection.update_one(
                {"userId": ObjectId(user_id), "assignedDate": day, "text": template.text},
                {
                    "$setOnInsert": {
                        "category": template.category,
                        "targetDimension": template.target_dimension,
                        "isCompleted": False,
                        "completedAt": None,
                        "createdAt": now,
                    }
                },
                upsert=True
            )

    async def complete_action(self, action_id: str, user_id: str) -> ActionItem:
        """
        Mark an action as completed.

        Raises:
            NotFoundException: Action not found or doesn't belong to user
        """
        doc = await self._collection.find_one_and_update(
            {"_id": ObjectId(action_id), "userId": ObjectId(user_id)},
            {"$set": {"isCompleted": True, "completedAt": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER
        )

        if not doc:
            raise NotFoundException(message="Action not found", code="ACTION_NOT_FOUND")

        logger.info(f"Action {action_id} completed by user {user_id}")
        return self.item_from_doc(doc)

    async def get_completion_stats(
        self,
        user_id: str,
        days: int = 7,
        today: Optional[date] = None
    ) -> CompletionStats:
        """
        Completion statistics over the last N days.

        Args:
            user_id: MongoDB user ID
            days: Days to look back
            today: Reference day (default: today, UTC)
        """
        today = today or datetime.now(timezone.utc).date()
        start_date = (today - timedelta(days=days)).strftime("%Y-%m-%d")

        cursor = self._collection.find({
            "userId": ObjectId(user_id),
            "assignedDate": {"$gte": start_date}
        })
        docs = await cursor.to_list(length=None)
        items = [self.item_from_doc(doc) for doc in docs]

        total = len(items)
        completed = sum(1 for item in items if item.isCompleted)
        rate = floor(completed / total * 100 + 0.5) if total else 0

        return CompletionStats(
            totalActions=total,
            completedActions=completed,
            completionRate=rate,
            streakDays=calculate_streak(items, today),
        )

    @staticmethod
    def item_from_doc(doc: Dict[str, Any]) -> ActionItem:
        return ActionItem(
            id=str(doc["_id"]),
            userId=str(doc["userId"]),
            text=doc["text"],
            category=doc["category"],
            targetDimension=doc["targetDimension"],
            assignedDate=doc["assignedDate"],
            isCompleted=doc.get("isCompleted", False),
            completedAt=doc.get("completedAt"),
        )
