"""
Burnout risk scoring.

Fuses the latest journal entry, the founder profile and the recent trend
into a single 0-100 risk score with ranked contributing factors.
"""

import logging
from math import floor
from typing import Dict, List, Optional, Tuple

from pulse.assessment.models import ScoreVector
from pulse.journal.models import BurnoutScore, ContributingFactor, JournalEntry, TrendSummary

logger = logging.getLogger(__name__)


# Acute weights: (100 - mood) * 0.3 + (100 - energy) * 0.3 + stress * 0.4
ACUTE_WEIGHTS: Dict[str, float] = {"mood": 0.3, "energy": 0.3, "stress": 0.4}

# Profile weights apply to the part of each dimension above PROFILE_BASELINE.
PROFILE_BASELINE = 50
PROFILE_WEIGHTS: Dict[str, float] = {
    "imposterSyndrome": 0.08,
    "founderDoubt": 0.12,
    "identityFusion": 0.12,
    "fearOfRejection": 0.06,
    "isolationLevel": 0.12,
}

WORSENING_TREND_PENALTY = 5.0
IMPROVING_TREND_RELIEF = 3.0

# Upper bound (inclusive) of each risk level.
RISK_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (40, "low"),
    (60, "moderate"),
    (80, "high"),
)

FACTOR_LABELS: Dict[str, str] = {
    "mood": "Low mood levels",
    "energy": "Low energy levels",
    "stress": "High stress levels",
    "imposterSyndrome": "High imposter syndrome",
    "founderDoubt": "High founder doubt",
    "identityFusion": "High identity fusion with startup",
    "fearOfRejection": "High fear of rejection",
    "isolationLevel": "High isolation level",
    "moodTrend": "Declining mood trend",
    "energyTrend": "Declining energy trend",
    "stressTrend": "Rising stress trend",
}


def risk_level_for(score: float) -> str:
    """Map a 0-100 score to low / moderate / high / critical."""
    clamped = max(0, min(100, score))
    for upper, level in RISK_THRESHOLDS:
        if clamped <= upper:
            return level
    return "critical"


class BurnoutScorer:
    """
    Combines three sub-scores:

    - acute: inverted mood and energy plus raw stress from the latest entry
    - profile: weighted excess of the burden dimensions (0 without a profile)
    - trend: penalty per worsening metric, relief per improving one
      (0 when the trend is unavailable)
    """

    MAX_FACTORS = 3

    def score(
        self,
        entry: JournalEntry,
        profile: Optional[ScoreVector] = None,
        trend: Optional[TrendSummary] = None
    ) -> BurnoutScore:
        """
        Score one journal entry.

        Args:
            entry: The persisted journal entry
            profile: The user's profile, or None without a completed assessment
            trend: Trend summary, or None when there is insufficient data

        Returns:
            BurnoutScore tied to the entry
        """
        components = self._acute_components(entry)
        components.update(self._profile_components(profile))
        components.update(self._trend_components(trend))

        total = sum(components.values())
        score = max(0, min(100, floor(total + 0.5)))
        risk_level = risk_level_for(score)

        logger.debug(f"Burnout components for entry {entry.id}: {components}")

        return BurnoutScore(
            score=score,
            riskLevel=risk_level,
            contributingFactors=self._rank_factors(components),
            journalEntryId=entry.id,
        )

    def _acute_components(self, entry: JournalEntry) -> Dict[str, float]:
        return {
            "mood": (100 - entry.mood) * ACUTE_WEIGHTS["mood"],
            "energy": (100 - entry.energy) * ACUTE_WEIGHTS["energy"],
            "stress": entry.stress * ACUTE_WEIGHTS["stress"],
        }

    def _profile_components(self, profile: Optional[ScoreVector]) -> Dict[str, float]:
        if profile is None:
            return {}
        return {
            dimension: weight * max(0, profile.value(dimension) - PROFILE_BASELINE)
            for dimension, weight in PROFILE_WEIGHTS.items()
        }

    def _trend_components(self, trend: Optional[TrendSummary]) -> Dict[str, float]:
        if trend is None:
            return {}

        components = {}
        for metric in ("mood", "energy", "stress"):
            direction = getattr(trend, metric).direction
            if direction == "worsening":
                components[f"{metric}Trend"] = WORSENING_TREND_PENALTY
            elif direction == "improving":
                components[f"{metric}Trend"] = -IMPROVING_TREND_RELIEF
        return components

    def _rank_factors(self, components: Dict[str, float]) -> List[ContributingFactor]:
        positive = [(key, impact) for key, impact in components.items() if impact > 0]
        # sorted() is stable, so equal impacts keep component order
        ranked = sorted(positive, key=lambda item: item[1], reverse=True)
        return [
            ContributingFactor(key=key, label=FACTOR_LABELS[key], impact=round(impact, 1))
            for key, impact in ranked[:self.MAX_FACTORS]
        ]
