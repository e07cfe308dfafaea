"""
Pydantic models for the journal and burnout system.

Defines journal entry input, trend summaries and burnout scores.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


TrendDirection = Literal["improving", "worsening", "stable"]
RiskLevel = Literal["low", "moderate", "high", "critical"]


class JournalEntryRequest(BaseModel):
    """Request body for submitting today's journal entry."""
    mood: int = Field(..., ge=0, le=100, description="0=struggling, 100=great")
    energy: int = Field(..., ge=0, le=100, description="0=exhausted, 100=energized")
    stress: int = Field(..., ge=0, le=100, description="0=calm, 100=overwhelmed")
    notes: Optional[str] = Field(None, max_length=500)


class JournalEntry(BaseModel):
    """A stored journal entry (one per user per day)."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    userId: str
    date: str = Field(..., description="YYYY-MM-DD")
    mood: int = Field(..., ge=0, le=100)
    energy: int = Field(..., ge=0, le=100)
    stress: int = Field(..., ge=0, le=100)
    notes: Optional[str] = None


class MetricTrend(BaseModel):
    """Rolling statistics for one journal metric."""
    model_config = ConfigDict(frozen=True)

    average: float
    slope: float
    direction: TrendDirection


class TrendSummary(BaseModel):
    """Trend over a trailing window of journal entries."""
    model_config = ConfigDict(frozen=True)

    windowDays: int
    dataPoints: int
    mood: MetricTrend
    energy: MetricTrend
    stress: MetricTrend

    def directions(self) -> List[TrendDirection]:
        return [self.mood.direction, self.energy.direction, self.stress.direction]

    @property
    def is_worsening(self) -> bool:
        return "worsening" in self.directions()


class ContributingFactor(BaseModel):
    """One ranked component of a burnout score."""
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    impact: float


class BurnoutScore(BaseModel):
    """Burnout risk computed for one journal entry."""
    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    riskLevel: RiskLevel
    contributingFactors: List[ContributingFactor]
    journalEntryId: Optional[str] = None
    calculatedAt: Optional[datetime] = None


class SubmitEntryResponse(BaseModel):
    """Response for journal entry submission."""
    entry: JournalEntry
    burnout: BurnoutScore
    trend: Optional[TrendSummary] = None
