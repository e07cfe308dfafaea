"""
Pydantic models for daily action plans.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from pulse.action_plan.templates import ActionCategory


class ActionItem(BaseModel):
    """One assigned micro-action."""
    id: Optional[str] = None
    userId: str
    text: str
    category: ActionCategory
    targetDimension: str
    assignedDate: str = Field(..., description="YYYY-MM-DD")
    isCompleted: bool = False
    completedAt: Optional[datetime] = None


class CompletionStats(BaseModel):
    """Completion statistics over a trailing period."""
    totalActions: int
    completedActions: int
    completionRate: int = Field(..., ge=0, le=100)
    streakDays: int
