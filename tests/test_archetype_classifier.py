"""Unit tests for ArchetypeClassifier and archetype recommendations."""

import pytest

from pulse.assessment.archetypes import (
    ARCHETYPES,
    ARCHETYPE_ORDER,
    BALANCED_FOUNDER,
    BURNING_OUT,
    GROWTH_SEEKER,
    all_archetypes,
)
from pulse.assessment.models import NUMERIC_DIMENSIONS, ScoreVector
from pulse.assessment.services.archetype_classifier import (
    ArchetypeClassifier,
    ClassificationRule,
    is_urgent_profile,
    recommendations_for,
)
from pulse.assessment.services.score_calculator import ScoreCalculator


def profile_from(values, motivation="mixed"):
    return ScoreVector(**dict(zip(NUMERIC_DIMENSIONS, values)), motivationType=motivation)


@pytest.fixture
def classifier():
    return ArchetypeClassifier()


# ─────────────────────────────────────────────────────────────────
# Catalog
# ─────────────────────────────────────────────────────────────────


class TestCatalog:
    def test_eight_archetypes_in_canonical_order(self):
        assert [a.name for a in all_archetypes()] == list(ARCHETYPE_ORDER)
        assert len(ARCHETYPE_ORDER) == 8

    def test_only_burning_out_is_urgent(self):
        urgent = [a.name for a in all_archetypes() if a.is_urgent]
        assert urgent == [BURNING_OUT]

    def test_only_growth_seeker_has_encouragement(self):
        encouraged = [a.name for a in all_archetypes() if a.encouragement]
        assert encouraged == [GROWTH_SEEKER]

    def test_to_dict_uses_api_field_names(self):
        data = ARCHETYPES[BURNING_OUT].to_dict()
        assert data["isUrgent"] is True
        assert "centroid" not in data


# ─────────────────────────────────────────────────────────────────
# Urgency rule
# ─────────────────────────────────────────────────────────────────


class TestUrgencyRule:
    def test_urgent_profile_is_burning_out(self, classifier, strained_profile):
        assert classifier.classify(strained_profile).name == BURNING_OUT

    def test_urgent_regardless_of_other_dimensions(self, classifier):
        # Only isolation, doubt and identity are high
        profile = profile_from([0, 71, 71, 0, 100, 71], "intrinsic")
        assert classifier.classify(profile).name == BURNING_OUT

    def test_threshold_is_exclusive(self):
        assert not is_urgent_profile(profile_from([90, 71, 71, 90, 50, 70]))
        assert is_urgent_profile(profile_from([0, 71, 71, 0, 50, 71]))

    def test_answers_driving_three_dimensions_high_classify_urgent(self, classifier):
        answers = ["A"] * 25
        for index in range(5, 13):
            answers[index] = "D"  # founder doubt and identity fusion
        answers[24] = "D"  # isolation

        profile = ScoreCalculator().compute(answers)

        assert classifier.classify(profile).name == BURNING_OUT


# ─────────────────────────────────────────────────────────────────
# Nearest centroid
# ─────────────────────────────────────────────────────────────────


class TestNearestCentroid:
    @pytest.mark.parametrize("name", [n for n in ARCHETYPE_ORDER if n != BURNING_OUT])
    def test_centroid_classifies_to_itself(self, classifier, name):
        profile = profile_from(ARCHETYPES[name].centroid)
        assert classifier.classify(profile).name == name

    def test_balanced_profile(self, classifier, balanced_profile):
        assert classifier.classify(balanced_profile).name == BALANCED_FOUNDER

    def test_is_total(self, classifier, random_profiles):
        for profile in random_profiles(1000):
            archetype = classifier.classify(profile)
            assert archetype.name in ARCHETYPE_ORDER
            if is_urgent_profile(profile):
                assert archetype.name == BURNING_OUT

        for value in (0, 100):
            assert classifier.classify(profile_from([value] * 6)).name in ARCHETYPE_ORDER

    def test_distances_cover_every_archetype(self, classifier, balanced_profile):
        distances = classifier.distances(balanced_profile)

        assert list(distances) == list(ARCHETYPE_ORDER)
        assert distances[BALANCED_FOUNDER] == 0
        assert min(distances, key=distances.get) == classifier.nearest_centroid(balanced_profile)


# ─────────────────────────────────────────────────────────────────
# Custom rules
# ─────────────────────────────────────────────────────────────────


class TestCustomRules:
    def test_first_matching_rule_wins(self, balanced_profile):
        classifier = ArchetypeClassifier(rules=[
            ClassificationRule("never", lambda p: False, BURNING_OUT),
            ClassificationRule("always", lambda p: True, GROWTH_SEEKER),
            ClassificationRule("also-always", lambda p: True, BURNING_OUT),
        ])
        assert classifier.classify(balanced_profile).name == GROWTH_SEEKER

    def test_no_rules_uses_centroids_only(self, strained_profile):
        classifier = ArchetypeClassifier(rules=[])
        # Nearest centroid still lands on the burnout centroid for this profile
        assert classifier.classify(strained_profile).name == BURNING_OUT


# ─────────────────────────────────────────────────────────────────
# Recommendations
# ─────────────────────────────────────────────────────────────────


class TestRecommendations:
    def test_archetype_recommendation_only_when_nothing_is_high(self, balanced_profile):
        archetype = ARCHETYPES[BALANCED_FOUNDER]
        assert recommendations_for(balanced_profile, archetype) == [archetype.recommendation]

    def test_capped_at_three_high_dimensions_first(self, strained_profile):
        recommendations = recommendations_for(strained_profile, ARCHETYPES[BURNING_OUT])

        assert len(recommendations) == 3
        assert recommendations[0].startswith("Document your wins")
        assert recommendations[1].startswith("Find a mentor")
        assert recommendations[2].startswith("Join a founder community")

    def test_high_dimension_then_archetype(self):
        profile = profile_from([50, 50, 50, 50, 50, 80])
        archetype = ARCHETYPES[BALANCED_FOUNDER]

        recommendations = recommendations_for(profile, archetype)

        assert recommendations == [
            "Join a founder community this week - isolation amplifies every other challenge.",
            archetype.recommendation,
        ]

    def test_risk_tolerance_never_triggers_advice(self):
        profile = profile_from([50, 50, 50, 50, 95, 50])
        archetype = ARCHETYPES[BALANCED_FOUNDER]
        assert recommendations_for(profile, archetype) == [archetype.recommendation]
