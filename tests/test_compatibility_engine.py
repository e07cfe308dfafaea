"""Unit tests for CompatibilityEngine."""

import pytest
from unittest.mock import MagicMock

from common.utils.exceptions import PreconditionException
from pulse.assessment.archetypes import (
    ARCHETYPES,
    BALANCED_FOUNDER,
    BURNING_OUT,
    GROWTH_SEEKER,
    OPPORTUNISTIC_VISIONARY,
    PERFECTIONIST_BUILDER,
)
from pulse.assessment.models import ScoreVector
from pulse.community.services.compatibility_engine import (
    COMPLEMENTARY_STRENGTHS,
    RECOMMENDATIONS,
    CompatibilityEngine,
)


def make_profile(motivation="mixed", **values):
    base = dict(
        imposterSyndrome=50,
        founderDoubt=50,
        identityFusion=50,
        fearOfRejection=50,
        riskTolerance=50,
        isolationLevel=50,
    )
    base.update(values)
    return ScoreVector(**base, motivationType=motivation)


def engine_with(*archetype_names):
    """Engine whose classifier returns the given archetypes in call order."""
    classifier = MagicMock()
    classifier.classify.side_effect = [ARCHETYPES[name] for name in archetype_names]
    return CompatibilityEngine(classifier=classifier)


def neutral_engine():
    """Engine whose classifier never yields a pair bonus or burnout."""
    classifier = MagicMock()
    classifier.classify.return_value = ARCHETYPES[BALANCED_FOUNDER]
    return CompatibilityEngine(classifier=classifier)


# ─────────────────────────────────────────────────────────────────
# Preconditions and invariants
# ─────────────────────────────────────────────────────────────────


class TestPreconditions:
    def test_missing_profile_raises(self, balanced_profile):
        engine = CompatibilityEngine()

        with pytest.raises(PreconditionException) as exc_info:
            engine.compare(balanced_profile, None)
        assert exc_info.value.status_code == 409
        assert exc_info.value.code == "ASSESSMENT_REQUIRED"

        with pytest.raises(PreconditionException):
            engine.compare(None, balanced_profile)

    def test_is_symmetric(self, balanced_profile, strained_profile, random_profiles):
        engine = CompatibilityEngine()
        profiles = random_profiles(400) + [balanced_profile, strained_profile]

        for x, y in zip(profiles[::2], profiles[1::2]):
            forward = engine.compare(x, y)
            assert forward == engine.compare(y, x)
            assert 0 <= forward.score <= 100
            assert len(forward.recommendations) <= 3

    def test_neutral_pair_scores_baseline(self, balanced_profile):
        result = neutral_engine().compare(balanced_profile, balanced_profile)

        assert result.score == 50
        assert result.strengths == []
        assert result.challenges == []
        assert result.recommendations == []


# ─────────────────────────────────────────────────────────────────
# Dimension comparisons
# ─────────────────────────────────────────────────────────────────


class TestDimensions:
    def test_complementary_risk_tolerance(self):
        a = make_profile(riskTolerance=10)
        b = make_profile(riskTolerance=90)

        result = neutral_engine().compare(a, b)

        assert COMPLEMENTARY_STRENGTHS["riskTolerance"] in result.strengths
        assert result.score == 60

    def test_default_classifier_still_reports_complementary_risk(self):
        result = CompatibilityEngine().compare(
            make_profile(riskTolerance=10), make_profile(riskTolerance=90)
        )
        assert COMPLEMENTARY_STRENGTHS["riskTolerance"] in result.strengths

    def test_thresholds_are_exclusive(self):
        result = neutral_engine().compare(
            make_profile(riskTolerance=40), make_profile(riskTolerance=70)
        )
        assert result.score == 50
        assert result.strengths == []

    def test_shared_challenge(self):
        result = neutral_engine().compare(
            make_profile(isolationLevel=80), make_profile(isolationLevel=75)
        )

        assert result.score == 40
        assert result.challenges == ["Both have high Isolation Level - may amplify each other's struggles"]
        assert result.recommendations == [
            RECOMMENDATIONS["shared_challenge"],
            RECOMMENDATIONS["more_challenges"],
        ]

    def test_shared_resilience_on_burden_dimension(self):
        result = neutral_engine().compare(
            make_profile(imposterSyndrome=30), make_profile(imposterSyndrome=20)
        )

        assert result.score == 55
        assert result.strengths == ["Both have healthy Imposter Syndrome levels"]

    def test_shared_low_risk_tolerance_is_neutral(self):
        result = neutral_engine().compare(
            make_profile(riskTolerance=20), make_profile(riskTolerance=30)
        )
        assert result.score == 50
        assert result.strengths == []


# ─────────────────────────────────────────────────────────────────
# Motivation
# ─────────────────────────────────────────────────────────────────


class TestMotivation:
    def test_aligned(self):
        result = neutral_engine().compare(make_profile("intrinsic"), make_profile("intrinsic"))

        assert result.score == 60
        assert result.strengths == ["Aligned motivation type: intrinsic"]

    def test_complementary(self):
        result = neutral_engine().compare(make_profile("intrinsic"), make_profile("extrinsic"))

        assert result.score == 55
        assert result.recommendations == [RECOMMENDATIONS["complementary_motivation"]]

    def test_mixed_against_clear_motivation_is_penalized(self):
        result = neutral_engine().compare(make_profile("mixed"), make_profile("extrinsic"))

        assert result.score == 45
        assert len(result.challenges) == 1
        assert RECOMMENDATIONS["mixed_motivation"] in result.recommendations

    def test_both_mixed_is_neutral(self):
        result = neutral_engine().compare(make_profile("mixed"), make_profile("mixed"))
        assert result.score == 50


# ─────────────────────────────────────────────────────────────────
# Archetypes
# ─────────────────────────────────────────────────────────────────


class TestArchetypes:
    @pytest.mark.parametrize("order", [
        (PERFECTIONIST_BUILDER, OPPORTUNISTIC_VISIONARY),
        (OPPORTUNISTIC_VISIONARY, PERFECTIONIST_BUILDER),
    ])
    def test_compatible_pair_bonus_is_order_independent(self, balanced_profile, order):
        result = engine_with(*order).compare(balanced_profile, balanced_profile)

        assert result.score == 65
        assert result.strengths == [
            "Complementary archetypes: Perfectionist Builder + Opportunistic Visionary"
        ]

    def test_burnout_penalty_and_recommendation_first(self, balanced_profile):
        result = engine_with(BURNING_OUT, GROWTH_SEEKER).compare(balanced_profile, balanced_profile)

        assert result.score == 30
        assert result.recommendations[0] == RECOMMENDATIONS["burnout"]

    def test_two_strained_founders(self, strained_profile):
        result = CompatibilityEngine().compare(strained_profile, strained_profile)

        # Five shared challenges, aligned motivation and burnout
        assert result.score == 0
        assert result.recommendations == [
            RECOMMENDATIONS["burnout"],
            RECOMMENDATIONS["shared_challenge"],
            RECOMMENDATIONS["more_challenges"],
        ]


# ─────────────────────────────────────────────────────────────────
# Score bounds and recommendations
# ─────────────────────────────────────────────────────────────────


class TestScoreBounds:
    def test_clamped_to_hundred(self):
        low = dict(imposterSyndrome=20, founderDoubt=20, identityFusion=20,
                   fearOfRejection=20, isolationLevel=20)
        a = make_profile("intrinsic", riskTolerance=20, **low)
        b = make_profile("intrinsic", riskTolerance=80, **low)

        result = engine_with(PERFECTIONIST_BUILDER, GROWTH_SEEKER).compare(a, b)

        assert result.score == 100
        assert RECOMMENDATIONS["strong_foundation"] in result.recommendations

    def test_recommendations_capped_at_three(self, strained_profile):
        a = strained_profile.model_copy(update={"motivationType": "mixed"})
        result = engine_with(BURNING_OUT, BURNING_OUT).compare(a, strained_profile)

        assert len(result.recommendations) == 3
        assert RECOMMENDATIONS["mixed_motivation"] in result.recommendations
        assert RECOMMENDATIONS["more_challenges"] not in result.recommendations
