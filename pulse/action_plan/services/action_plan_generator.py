"""
Daily action plan generation.

Picks 3-5 micro-actions for a user from archetype, dimension and general
wellness templates. The same user gets the same plan for the same day.
"""

import logging
import random
from typing import Iterable, List, Optional

from pulse.action_plan.templates import (
    ARCHETYPE_ACTIONS,
    DIMENSION_ACTIONS,
    GENERAL_WELLNESS_ACTIONS,
    ActionTemplate,
)
from pulse.assessment.models import BURDEN_DIMENSIONS, ScoreVector
from pulse.journal.models import BurnoutScore

logger = logging.getLogger(__name__)


# Burnout factor key -> template dimension
FACTOR_DIMENSIONS = {
    "mood": "mood",
    "energy": "energy",
    "stress": "stress",
    "moodTrend": "mood",
    "energyTrend": "energy",
    "stressTrend": "stress",
    "imposterSyndrome": "imposterSyndrome",
    "founderDoubt": "founderDoubt",
    "identityFusion": "identityFusion",
    "fearOfRejection": "fearOfRejection",
    "isolationLevel": "isolationLevel",
}


class ActionPlanGenerator:
    """
    Selects daily actions.

    Candidates are the archetype's actions, then actions for every high
    profile dimension and every burnout contributing factor, then general
    wellness actions. The candidate list is shuffled with a generator seeded
    by user and day, and selection prefers one action per category before
    filling the remaining slots.
    """

    MIN_DAILY_ACTIONS = 3
    MAX_DAILY_ACTIONS = 5
    HIGH_DIMENSION_THRESHOLD = 70

    def generate(
        self,
        user_id: str,
        day: str,
        archetype: Optional[str] = None,
        profile: Optional[ScoreVector] = None,
        burnout: Optional[BurnoutScore] = None
    ) -> List[ActionTemplate]:
        """
        Build the action list for one user and day.

        Args:
            user_id: MongoDB user ID
            day: YYYY-MM-DD
            archetype: Archetype name from the latest assessment
            profile: Latest profile, if any
            burnout: Latest burnout score, if any

        Returns:
            Between MIN_DAILY_ACTIONS and MAX_DAILY_ACTIONS templates
        """
        candidates: List[ActionTemplate] = list(ARCHETYPE_ACTIONS.get(archetype, []))

        for dimension in self._target_dimensions(profile, burnout):
            candidates.extend(DIMENSION_ACTIONS[dimension])

        candidates.extend(GENERAL_WELLNESS_ACTIONS)
        candidates = list(dict.fromkeys(candidates))

        count = self.action_count(burnout)
        selected = self._select_diverse(candidates, count, seed=f"{user_id}-{day}")

        logger.debug(f"Generated {len(selected)} actions for user {user_id} on {day}")
        return selected

    def action_count(self, burnout: Optional[BurnoutScore]) -> int:
        """More actions when burnout risk is elevated."""
        if burnout is None:
            return self.MIN_DAILY_ACTIONS
        if burnout.riskLevel in ("high", "critical"):
            return self.MAX_DAILY_ACTIONS
        if burnout.riskLevel == "moderate":
            return 4
        return self.MIN_DAILY_ACTIONS

    def _target_dimensions(
        self,
        profile: Optional[ScoreVector],
        burnout: Optional[BurnoutScore]
    ) -> List[str]:
        dimensions = []
        if profile is not None:
            dimensions.extend(
                d for d in BURDEN_DIMENSIONS if profile.value(d) > self.HIGH_DIMENSION_THRESHOLD
            )
        if burnout is not None:
            dimensions.extend(
                FACTOR_DIMENSIONS[f.key] for f in burnout.contributingFactors if f.key in FACTOR_DIMENSIONS
            )
        return list(dict.fromkeys(dimensions))

    def _select_diverse(
        self,
        candidates: Iterable[ActionTemplate],
        count: int,
        seed: str
    ) -> List[ActionTemplate]:
        shuffled = list(candidates)
        if len(shuffled) <= count:
            return shuffled

        random.Random(seed).shuffle(shuffled)

        selected: List[ActionTemplate] = []
        used_categories = set()
        for action in shuffled:
            if len(selected) >= count:
                break
            if action.category not in used_categories:
                selected.append(action)
                used_categories.add(action.category)

        for action in shuffled:
            if len(selected) >= count:
                break
            if action not in selected:
                selected.append(action)

        return selected
