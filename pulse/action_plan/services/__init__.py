"""Action plan services."""

from pulse.action_plan.services.action_plan_generator import ActionPlanGenerator
from pulse.action_plan.services.action_plan_service import ActionPlanService

__all__ = ["ActionPlanGenerator", "ActionPlanService"]
