"""
Action Plan System

Personalized daily micro-actions drawn from the founder's archetype,
high-strain dimensions and latest burnout factors.
"""

from pulse.action_plan.services.action_plan_generator import ActionPlanGenerator
from pulse.action_plan.services.action_plan_service import ActionPlanService

__all__ = ["ActionPlanGenerator", "ActionPlanService"]
