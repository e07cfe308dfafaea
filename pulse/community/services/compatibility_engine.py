"""
Co-founder compatibility.

Compares two founder profiles and explains the score with strengths,
challenges and recommendations.
"""

import logging
from typing import FrozenSet, List, Optional, Set

from common.utils.exceptions import PreconditionException
from pulse.assessment.archetypes import (
    ARCHETYPE_ORDER,
    BALANCED_FOUNDER,
    BURNING_OUT,
    COMMUNITY_DRIVEN,
    GROWTH_SEEKER,
    ISOLATED_DREAMER,
    OPPORTUNISTIC_VISIONARY,
    PERFECTIONIST_BUILDER,
    SELF_ASSURED_HUSTLER,
)
from pulse.assessment.models import (
    BURDEN_DIMENSIONS,
    DIMENSION_LABELS,
    NUMERIC_DIMENSIONS,
    ScoreVector,
)
from pulse.assessment.services.archetype_classifier import ArchetypeClassifier
from pulse.community.models import CompatibilityResult

logger = logging.getLogger(__name__)


LOW_THRESHOLD = 40
HIGH_THRESHOLD = 70
BASE_SCORE = 50

COMPLEMENTARY_BONUS = 10
SHARED_CHALLENGE_PENALTY = 10
SHARED_RESILIENCE_BONUS = 5
ALIGNED_MOTIVATION_BONUS = 10
COMPLEMENTARY_MOTIVATION_BONUS = 5
MIXED_MOTIVATION_PENALTY = 5
ARCHETYPE_PAIR_BONUS = 15
BURNOUT_PENALTY = 20

MAX_RECOMMENDATIONS = 3

COMPATIBLE_ARCHETYPES: FrozenSet[FrozenSet[str]] = frozenset({
    frozenset({PERFECTIONIST_BUILDER, OPPORTUNISTIC_VISIONARY}),
    frozenset({PERFECTIONIST_BUILDER, GROWTH_SEEKER}),
    frozenset({OPPORTUNISTIC_VISIONARY, COMMUNITY_DRIVEN}),
    frozenset({ISOLATED_DREAMER, COMMUNITY_DRIVEN}),
    frozenset({ISOLATED_DREAMER, SELF_ASSURED_HUSTLER}),
    frozenset({SELF_ASSURED_HUSTLER, BALANCED_FOUNDER}),
    frozenset({BALANCED_FOUNDER, GROWTH_SEEKER}),
})

COMPLEMENTARY_STRENGTHS = {
    "imposterSyndrome": "One partner's self-belief can steady the other's imposter feelings",
    "founderDoubt": "A confident partner can counterbalance moments of founder doubt",
    "identityFusion": "One partner keeps perspective outside the company while the other goes all in",
    "fearOfRejection": "One partner can lead on sales and pitching while the other prepares",
    "riskTolerance": "Balanced risk approach - one brings caution, one brings boldness",
    "isolationLevel": "Different social needs can complement each other",
}

RECOMMENDATIONS = {
    "burnout": "Address individual burnout before co-founding partnership",
    "shared_challenge": "Agree on how you will support each other when you both feel the same strain",
    "complementary_motivation": "Discuss how to balance purpose-driven and results-driven decisions",
    "mixed_motivation": "Talk openly about what each of you wants from the company",
    "more_challenges": "Consider working on individual growth areas before partnering",
    "strong_foundation": "Strong foundation for partnership - establish clear communication early",
}


class CompatibilityEngine:
    """
    Scores co-founder compatibility.

    Symmetric: compare(a, b) and compare(b, a) produce the same score and
    the same findings.
    """

    def __init__(self, classifier: Optional[ArchetypeClassifier] = None):
        self._classifier = classifier or ArchetypeClassifier()

    def compare(
        self,
        profile_a: Optional[ScoreVector],
        profile_b: Optional[ScoreVector]
    ) -> CompatibilityResult:
        """
        Compare two profiles.

        Args:
            profile_a: First founder's profile
            profile_b: Second founder's profile

        Returns:
            CompatibilityResult with a 0-100 score

        Raises:
            PreconditionException: Either profile is missing
        """
        if profile_a is None or profile_b is None:
            raise PreconditionException()

        score = BASE_SCORE
        strengths: List[str] = []
        challenges: List[str] = []
        conditions: Set[str] = set()

        for dimension in NUMERIC_DIMENSIONS:
            a = profile_a.value(dimension)
            b = profile_b.value(dimension)
            label = DIMENSION_LABELS[dimension]

            if min(a, b) < LOW_THRESHOLD and max(a, b) > HIGH_THRESHOLD:
                score += COMPLEMENTARY_BONUS
                strengths.append(COMPLEMENTARY_STRENGTHS[dimension])
            elif a > HIGH_THRESHOLD and b > HIGH_THRESHOLD:
                score -= SHARED_CHALLENGE_PENALTY
                challenges.append(f"Both have high {label} - may amplify each other's struggles")
                conditions.add("shared_challenge")
            elif a < LOW_THRESHOLD and b < LOW_THRESHOLD and dimension in BURDEN_DIMENSIONS:
                score += SHARED_RESILIENCE_BONUS
                strengths.append(f"Both have healthy {label} levels")

        score += self._score_motivation(profile_a, profile_b, strengths, challenges, conditions)
        score += self._score_archetypes(profile_a, profile_b, strengths, challenges, conditions)

        if len(challenges) > len(strengths):
            conditions.add("more_challenges")
        if len(strengths) >= 3:
            conditions.add("strong_foundation")

        score = max(0, min(100, score))
        logger.debug(f"Compatibility score {score}: {sorted(conditions)}")

        return CompatibilityResult(
            score=score,
            strengths=strengths,
            challenges=challenges,
            recommendations=self._recommendations(conditions),
        )

    def _score_motivation(
        self,
        profile_a: ScoreVector,
        profile_b: ScoreVector,
        strengths: List[str],
        challenges: List[str],
        conditions: Set[str]
    ) -> int:
        types = {profile_a.motivationType, profile_b.motivationType}

        if types == {"mixed"}:
            return 0
        if len(types) == 1:
            strengths.append(f"Aligned motivation type: {profile_a.motivationType}")
            return ALIGNED_MOTIVATION_BONUS
        if types == {"intrinsic", "extrinsic"}:
            strengths.append("Complementary motivations - passion meets pragmatism")
            conditions.add("complementary_motivation")
            return COMPLEMENTARY_MOTIVATION_BONUS

        challenges.append("One partner has a clear motivation while the other is still mixed")
        conditions.add("mixed_motivation")
        return -MIXED_MOTIVATION_PENALTY

    def _score_archetypes(
        self,
        profile_a: ScoreVector,
        profile_b: ScoreVector,
        strengths: List[str],
        challenges: List[str],
        conditions: Set[str]
    ) -> int:
        names = sorted(
            (self._classifier.classify(profile_a).name, self._classifier.classify(profile_b).name),
            key=ARCHETYPE_ORDER.index,
        )
        adjustment = 0

        if frozenset(names) in COMPATIBLE_ARCHETYPES:
            adjustment += ARCHETYPE_PAIR_BONUS
            strengths.append(f"Complementary archetypes: {names[0]} + {names[1]}")

        if BURNING_OUT in names:
            adjustment -= BURNOUT_PENALTY
            challenges.append("One or both founders showing burnout signs - prioritize wellbeing first")
            conditions.add("burnout")

        return adjustment

    def _recommendations(self, conditions: Set[str]) -> List[str]:
        # RECOMMENDATIONS is ordered by priority
        return [
            text for key, text in RECOMMENDATIONS.items() if key in conditions
        ][:MAX_RECOMMENDATIONS]
