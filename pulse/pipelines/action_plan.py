"""
Action plan pipeline functions.

Stateless orchestration logic for daily micro-actions.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pulse.action_plan.models import ActionItem
from pulse.action_plan.services.action_plan_service import ActionPlanService
from pulse.assessment.services.assessment_service import AssessmentService
from pulse.journal.services.burnout_service import BurnoutService

logger = logging.getLogger(__name__)


async def get_daily_plan_pipeline(
    action_plan_service: ActionPlanService,
    assessment_service: AssessmentService,
    burnout_service: BurnoutService,
    user_id: str,
    day: Optional[str] = None
) -> Dict[str, Any]:
    """
    Get the user's plan for a day, generating it on first request.

    Args:
        action_plan_service: For plan persistence
        assessment_service: For archetype and profile
        burnout_service: For the latest burnout score
        user_id: Current user's ID
        day: YYYY-MM-DD, defaults to today (UTC)

    Returns:
        dict with date and actions
    """
    day = day or datetime.now(timezone.utc).strftime("%Y-%m-%d")

    assessment = await assessment_service.get_latest_assessment(user_id)
    archetype = assessment["archetype"] if assessment else None
    profile = AssessmentService.profile_from_doc(assessment) if assessment else None
    burnout = await burnout_service.get_latest_score(user_id)

    actions = await action_plan_service.get_or_create_daily_plan(
        user_id, day, archetype=archetype, profile=profile, burnout=burnout
    )

    return {
        "date": day,
        "actions": [_format_action(action) for action in actions]
    }


async def complete_action_pipeline(
    action_plan_service: ActionPlanService,
    user_id: str,
    action_id: str
) -> Dict[str, Any]:
    """
    Raises:
        NotFoundException: Action not found or doesn't belong to user
    """
    action = await action_plan_service.complete_action(action_id, user_id)
    return _format_action(action)


async def completion_stats_pipeline(
    action_plan_service: ActionPlanService,
    user_id: str,
    days: int = 7
) -> Dict[str, Any]:
    stats = await action_plan_service.get_completion_stats(user_id, days)
    return stats.model_dump()


def _format_action(action: ActionItem) -> Dict[str, Any]:
    """Format action item for API response."""
    return {
        "id": action.id,
        "text": action.text,
        "category": action.category,
        "targetDimension": action.targetDimension,
        "isCompleted": action.isCompleted,
        "completedAt": action.completedAt
    }
