"""
Journal pipeline functions.

Stateless orchestration logic for journal entries, trends and burnout.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from pulse.assessment.services.assessment_service import AssessmentService
from pulse.community.services.notification_service import NotificationService
from pulse.journal.services.burnout_scorer import BurnoutScorer
from pulse.journal.services.burnout_service import BurnoutService
from pulse.journal.services.journal_service import JournalService
from pulse.journal.services.trend_analyzer import TrendAnalyzer

logger = logging.getLogger(__name__)


async def submit_entry_pipeline(
    journal_service: JournalService,
    burnout_service: BurnoutService,
    assessment_service: AssessmentService,
    trend_analyzer: TrendAnalyzer,
    burnout_scorer: BurnoutScorer,
    user_id: str,
    metrics: Dict[str, int],
    notes: Optional[str] = None,
    window_days: Optional[int] = None,
    notification_service: Optional[NotificationService] = None
) -> Dict[str, Any]:
    """
    Orchestrates the journal submission flow.

    The burnout score is computed from the entry returned by the upsert,
    so a same-day resubmission is always scored on the stored values.

    Args:
        journal_service: For entry persistence
        burnout_service: For score history
        assessment_service: For the user's profile
        trend_analyzer: For the trailing trend
        burnout_scorer: For burnout scoring
        user_id: Current user's ID
        metrics: mood, energy, stress
        notes: Optional notes
        window_days: Trend window (7, 14 or 30), default: the analyzer's configured window
        notification_service: For critical burnout alerts (optional)

    Returns:
        Response dict with entry, burnout and trend

    Raises:
        ValidationException: Invalid metrics, notes or window
    """
    window_days = window_days or trend_analyzer.default_window
    entry = await journal_service.upsert_entry(user_id, metrics, notes)

    entries = await journal_service.get_entries_for_period(user_id, window_days)
    as_of = datetime.strptime(entry.date, "%Y-%m-%d").date()
    trend = trend_analyzer.summarize(entries, window_days, as_of=as_of)

    profile = await assessment_service.get_latest_profile(user_id)

    burnout = burnout_scorer.score(entry, profile=profile, trend=trend)
    burnout = await burnout_service.record_score(user_id, burnout)

    if notification_service and burnout.riskLevel == "critical":
        try:
            await notification_service.notify_burnout_alert(user_id, burnout.score, entry.id)
        except Exception as e:
            # Don't fail the entry if the alert can't be stored
            logger.warning(f"Failed to create burnout alert: {e}")

    return {
        "entry": entry.model_dump(),
        "burnout": burnout.model_dump(),
        "trend": trend.model_dump() if trend else None
    }


async def get_trend_pipeline(
    journal_service: JournalService,
    trend_analyzer: TrendAnalyzer,
    user_id: str,
    window_days: Optional[int] = None
) -> Dict[str, Any]:
    """
    Get the trend for a trailing window (default: the configured window).

    Returns:
        dict with windowDays and trend (None when there is too little data)

    Raises:
        ValidationException: Unsupported window size
    """
    window_days = window_days or trend_analyzer.default_window
    trend_analyzer.validate_window(window_days)

    entries = await journal_service.get_entries_for_period(user_id, window_days)
    trend = trend_analyzer.summarize(entries, window_days)

    return {
        "windowDays": window_days,
        "trend": trend.model_dump() if trend else None
    }


async def get_journal_history_pipeline(
    journal_service: JournalService,
    user_id: str,
    days: int = 30
) -> Dict[str, Any]:
    """
    Get entries for the last N days.

    Returns:
        dict with entries list, oldest first
    """
    entries = await journal_service.get_entries_for_period(user_id, days)
    return {"entries": [entry.model_dump() for entry in entries]}


async def get_burnout_pipeline(
    burnout_service: BurnoutService,
    user_id: str,
    limit: int = 30
) -> Dict[str, Any]:
    """
    Get the latest burnout score and recent history.

    Returns:
        dict with latest score (or None) and history, newest first
    """
    history = await burnout_service.get_history(user_id, limit)
    return {
        "latest": history[0].model_dump() if history else None,
        "history": [score.model_dump() for score in history]
    }


async def delete_entry_pipeline(
    journal_service: JournalService,
    user_id: str,
    entry_id: str
) -> Dict[str, Any]:
    """
    Raises:
        NotFoundException: Unknown entry or not owned by the user
    """
    await journal_service.delete_entry(user_id, entry_id)
    return {"deleted": True, "id": entry_id}
