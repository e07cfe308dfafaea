"""
Journal trend analysis.

Computes rolling averages and direction for mood, energy and stress over
a trailing window of daily entries.
"""

import logging
import statistics
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence

from common.utils.exceptions import ValidationException
from pulse.journal.models import JournalEntry, MetricTrend, TrendSummary

logger = logging.getLogger(__name__)


class TrendAnalyzer:
    """
    Summarizes a window of journal entries.

    Returns None when fewer than MINIMUM_ENTRIES fall inside the window;
    callers must handle that case explicitly rather than treat it as zero.
    """

    ALLOWED_WINDOWS = (7, 14, 30)
    MINIMUM_ENTRIES = 3
    SLOPE_EPSILON = 0.5  # points per day

    METRICS = ("mood", "energy", "stress")
    # Metrics where a rising value is bad
    INVERSE_METRICS = ("stress",)

    def __init__(self, default_window: int = 7):
        """
        Args:
            default_window: Window used when a caller does not pick one

        Raises:
            ValidationException: Unsupported window size
        """
        self.validate_window(default_window)
        self.default_window = default_window

    def summarize(
        self,
        entries: Sequence[JournalEntry],
        window_days: int,
        as_of: Optional[date] = None
    ) -> Optional[TrendSummary]:
        """
        Summarize entries inside the trailing window.

        Args:
            entries: Journal entries in date order
            window_days: 7, 14 or 30
            as_of: Last day of the window (default: today, UTC)

        Returns:
            TrendSummary, or None if the window holds fewer than 3 entries

        Raises:
            ValidationException: Unsupported window size
        """
        self.validate_window(window_days)

        as_of = as_of or datetime.now(timezone.utc).date()
        window_start = as_of - timedelta(days=window_days)

        by_date: Dict[date, JournalEntry] = {}
        for entry in entries:
            entry_date = self._parse_date(entry.date)
            if window_start < entry_date <= as_of:
                by_date[entry_date] = entry

        if len(by_date) < self.MINIMUM_ENTRIES:
            logger.debug(
                f"Insufficient entries for {window_days}-day trend: {len(by_date)}"
            )
            return None

        days = sorted(by_date)
        offsets = [(day - window_start).days for day in days]

        trends = {
            metric: self._metric_trend(
                offsets,
                [getattr(by_date[day], metric) for day in days],
                inverse=metric in self.INVERSE_METRICS,
            )
            for metric in self.METRICS
        }

        return TrendSummary(windowDays=window_days, dataPoints=len(days), **trends)

    @classmethod
    def validate_window(cls, window_days: int) -> None:
        """
        Raises:
            ValidationException: Unsupported window size
        """
        if window_days not in cls.ALLOWED_WINDOWS:
            raise ValidationException(
                message=f"Trend window must be one of {', '.join(str(w) for w in cls.ALLOWED_WINDOWS)} days"
            )

    def _metric_trend(self, offsets: List[int], values: List[int], inverse: bool) -> MetricTrend:
        slope, _ = statistics.linear_regression(offsets, values)
        return MetricTrend(
            average=round(statistics.fmean(values), 1),
            slope=round(slope, 3),
            direction=self._direction(slope, inverse),
        )

    def _direction(self, slope: float, inverse: bool) -> str:
        if abs(slope) <= self.SLOPE_EPSILON:
            return "stable"
        rising = slope > 0
        if inverse:
            return "worsening" if rising else "improving"
        return "improving" if rising else "worsening"

    @staticmethod
    def _parse_date(value: str) -> date:
        return datetime.strptime(value, "%Y-%m-%d").date()
