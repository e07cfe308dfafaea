"""
Archetype classification.

Maps a ScoreVector to exactly one of the eight founder archetypes and
builds the follow-up recommendations shown with the result.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from pulse.assessment.archetypes import (
    ARCHETYPES,
    ARCHETYPE_ORDER,
    BURNING_OUT,
    Archetype,
)
from pulse.assessment.models import NUMERIC_DIMENSIONS, ScoreVector

logger = logging.getLogger(__name__)


# Relative importance of each dimension when measuring profile distance.
DIMENSION_WEIGHTS: Dict[str, float] = {
    "imposterSyndrome": 1.0,
    "founderDoubt": 1.2,
    "identityFusion": 0.8,
    "fearOfRejection": 0.8,
    "riskTolerance": 1.2,
    "isolationLevel": 1.0,
}

URGENT_THRESHOLD = 70
URGENT_DIMENSIONS = ("isolationLevel", "founderDoubt", "identityFusion")

HIGH_DIMENSION_THRESHOLD = 70
MAX_RECOMMENDATIONS = 3

DIMENSION_RECOMMENDATIONS: Tuple[Tuple[str, str], ...] = (
    ("imposterSyndrome", "Document your wins daily - imposter syndrome fades when you see evidence of your competence."),
    ("founderDoubt", "Find a mentor who has been through the founder journey - their perspective will help ground your doubts."),
    ("isolationLevel", "Join a founder community this week - isolation amplifies every other challenge."),
    ("identityFusion", "Schedule non-startup activities weekly - your identity needs to be broader than your company."),
    ("fearOfRejection", "Reframe rejection as data - every \"no\" teaches you something about your market."),
)


def weighted_squared_distance(
    a: Sequence[float],
    b: Sequence[float],
    weights: Dict[str, float] = DIMENSION_WEIGHTS,
) -> float:
    """Weighted squared difference over the numeric dimensions in canonical order."""
    return sum(
        weights[dimension] * (x - y) ** 2
        for dimension, x, y in zip(NUMERIC_DIMENSIONS, a, b)
    )


def is_urgent_profile(profile: ScoreVector) -> bool:
    """True when every burnout-indicating dimension is above the urgent threshold."""
    return all(profile.value(dimension) > URGENT_THRESHOLD for dimension in URGENT_DIMENSIONS)


@dataclass(frozen=True)
class ClassificationRule:
    """A named predicate that short-circuits classification."""
    name: str
    predicate: Callable[[ScoreVector], bool]
    archetype: str


class ArchetypeClassifier:
    """
    Classifies profiles into archetypes.

    Rules are evaluated in order and the first match wins. When no rule
    fires, the archetype whose centroid is nearest by weighted squared
    distance is returned; near-ties go to the archetype that comes first in
    ARCHETYPE_ORDER.
    """

    TIE_EPSILON = 1e-9

    RULES: Tuple[ClassificationRule, ...] = (
        ClassificationRule("urgent-burnout", is_urgent_profile, BURNING_OUT),
    )

    def __init__(
        self,
        rules: Optional[Sequence[ClassificationRule]] = None,
        weights: Optional[Dict[str, float]] = None,
    ):
        self._rules = tuple(rules) if rules is not None else self.RULES
        self._weights = weights or DIMENSION_WEIGHTS

    def classify(self, profile: ScoreVector) -> Archetype:
        """
        Return exactly one archetype for a profile.

        Args:
            profile: A complete ScoreVector

        Returns:
            The matching Archetype
        """
        for rule in self._rules:
            if rule.predicate(profile):
                logger.debug(f"Classification rule '{rule.name}' matched")
                return ARCHETYPES[rule.archetype]

        return ARCHETYPES[self.nearest_centroid(profile)]

    def nearest_centroid(self, profile: ScoreVector) -> str:
        """Name of the archetype with the closest centroid."""
        values = profile.numeric_values()

        best_name = ARCHETYPE_ORDER[0]
        best_distance = None
        for name in ARCHETYPE_ORDER:
            distance = weighted_squared_distance(values, ARCHETYPES[name].centroid, self._weights)
            # Strictly smaller by more than epsilon; earlier archetypes keep ties.
            if best_distance is None or distance < best_distance - self.TIE_EPSILON:
                best_name = name
                best_distance = distance

        logger.debug(f"Nearest centroid: {best_name} (distance {best_distance:.1f})")
        return best_name

    def distances(self, profile: ScoreVector) -> Dict[str, float]:
        """Weighted squared distance to every centroid, keyed by archetype name."""
        values = profile.numeric_values()
        return {
            name: weighted_squared_distance(values, ARCHETYPES[name].centroid, self._weights)
            for name in ARCHETYPE_ORDER
        }


def recommendations_for(profile: ScoreVector, archetype: Archetype) -> List[str]:
    """
    Build up to three recommendations for a profile.

    Dimension-specific advice for every burden dimension above 70 comes
    first, followed by the archetype's own recommendation.
    """
    recommendations = [
        text
        for dimension, text in DIMENSION_RECOMMENDATIONS
        if profile.value(dimension) > HIGH_DIMENSION_THRESHOLD
    ]
    recommendations.append(archetype.recommendation)
    return recommendations[:MAX_RECOMMENDATIONS]
