"""
FastAPI dependencies for the journal system.

Provides dependency injection for journal and burnout services.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from pulse.journal.services.journal_service import JournalService
from pulse.journal.services.burnout_service import BurnoutService
from pulse.journal.services.burnout_scorer import BurnoutScorer
from pulse.journal.services.trend_analyzer import TrendAnalyzer


_journal_service: Optional[JournalService] = None
_burnout_service: Optional[BurnoutService] = None
_trend_analyzer: Optional[TrendAnalyzer] = None
_burnout_scorer: Optional[BurnoutScorer] = None


def init_journal_services(db: AsyncIOMotorDatabase, trend_window_days: int = 7) -> None:
    """
    Initialize journal services with database connection.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        trend_window_days: Default trend window (7, 14 or 30)
    """
    global _journal_service, _burnout_service, _trend_analyzer, _burnout_scorer

    _journal_service = JournalService(db=db)
    _burnout_service = BurnoutService(db=db)
    _trend_analyzer = TrendAnalyzer(default_window=trend_window_days)
    _burnout_scorer = BurnoutScorer()


def get_journal_service() -> JournalService:
    """Get journal service instance."""
    if _journal_service is None:
        raise RuntimeError("Journal services not initialized. Call init_journal_services first.")
    return _journal_service


def get_burnout_service() -> BurnoutService:
    """Get burnout service instance."""
    if _burnout_service is None:
        raise RuntimeError("Journal services not initialized. Call init_journal_services first.")
    return _burnout_service


def get_trend_analyzer() -> TrendAnalyzer:
    if _trend_analyzer is None:
        raise RuntimeError("Journal services not initialized. Call init_journal_services first.")
    return _trend_analyzer


def get_burnout_scorer() -> BurnoutScorer:
    if _burnout_scorer is None:
        raise RuntimeError("Journal services not initialized. Call init_journal_services first.")
    return _burnout_scorer
