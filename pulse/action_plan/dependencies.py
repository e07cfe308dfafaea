"""
FastAPI dependencies for action plans.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from pulse.action_plan.services.action_plan_service import ActionPlanService


_action_plan_service: Optional[ActionPlanService] = None


def init_action_plan_services(db: AsyncIOMotorDatabase) -> None:
    """
    Initialize action plan services with database connection.

    Args:
        db: MongoDB database connection
    """
    global _action_plan_service

    _action_plan_service = ActionPlanService(db=db)


def get_action_plan_service() -> ActionPlanService:
    """Get action plan service instance."""
    if _action_plan_service is None:
        raise RuntimeError("Action plan services not initialized. Call init_action_plan_services first.")
    return _action_plan_service
