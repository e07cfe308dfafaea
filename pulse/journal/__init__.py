"""
Journal System

Daily mood, energy and stress journaling with rolling trend analysis
and a burnout risk score recorded for every entry.
"""

from pulse.journal.services.metrics_validator import MetricsValidator
from pulse.journal.services.trend_analyzer import TrendAnalyzer
from pulse.journal.services.burnout_scorer import BurnoutScorer
from pulse.journal.services.journal_service import JournalService
from pulse.journal.services.burnout_service import BurnoutService

__all__ = [
    "MetricsValidator",
    "TrendAnalyzer",
    "BurnoutScorer",
    "JournalService",
    "BurnoutService",
]
