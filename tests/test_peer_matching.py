"""Unit tests for PeerMatchingEngine ranking and the match state machine."""

import pytest
from datetime import datetime, timedelta, timezone

from common.utils.exceptions import ConflictException, ForbiddenException
from pulse.assessment.archetypes import BALANCED_FOUNDER, GROWTH_SEEKER
from pulse.assessment.models import ScoreVector
from pulse.community.models import PeerMatch, PeerProfile
from pulse.community.services.peer_matching import PeerMatchingEngine


T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def uniform_profile(value, motivation="mixed"):
    return ScoreVector(
        imposterSyndrome=value,
        founderDoubt=value,
        identityFusion=value,
        fearOfRejection=value,
        riskTolerance=value,
        isolationLevel=value,
        motivationType=motivation,
    )


def member(user_id, value, archetype=GROWTH_SEEKER, created=T0):
    return PeerProfile(
        userId=user_id,
        profile=uniform_profile(value),
        archetype=archetype,
        createdAt=created,
    )


@pytest.fixture
def engine():
    return PeerMatchingEngine()


@pytest.fixture
def requester():
    return member("requester", 50, archetype=BALANCED_FOUNDER)


@pytest.fixture
def match():
    return PeerMatch(id="m1", requesterId="alice", candidateId="bob", matchScore=80)


# ─────────────────────────────────────────────────────────────────
# Similarity
# ─────────────────────────────────────────────────────────────────


class TestSimilarity:
    def test_uniform_shift_maps_to_distance(self, engine, requester):
        # Shifting every dimension by d scales to exactly d of the maximum
        assert engine.similarity(requester, member("x", 60)) == 90
        assert engine.similarity(requester, member("x", 20)) == 70

    def test_same_archetype_bonus(self, engine, requester):
        peer = member("x", 60, archetype=BALANCED_FOUNDER)
        assert engine.similarity(requester, peer) == 100

    def test_identical_same_archetype_is_clamped(self, engine, requester):
        twin = member("x", 50, archetype=BALANCED_FOUNDER)
        assert engine.similarity(requester, twin) == 100

    def test_opposite_extremes_score_zero(self, engine):
        a = member("a", 0, archetype=BALANCED_FOUNDER)
        b = member("b", 100, archetype=GROWTH_SEEKER)
        assert engine.similarity(a, b) == 0

    def test_is_symmetric(self, engine, requester):
        peer = member("x", 35)
        assert engine.similarity(requester, peer) == engine.similarity(peer, requester)

    def test_shared_dimensions_threshold(self, engine):
        labels = engine.shared_dimensions(uniform_profile(50), uniform_profile(65))
        assert len(labels) == 6
        assert labels[0] == "Imposter Syndrome"

        assert engine.shared_dimensions(uniform_profile(50), uniform_profile(66)) == []


# ─────────────────────────────────────────────────────────────────
# find_matches
# ─────────────────────────────────────────────────────────────────


class TestFindMatches:
    def test_excludes_requester_and_dismissed(self, engine, requester):
        population = [
            member("requester", 50, archetype=BALANCED_FOUNDER),
            member("dismissed", 55),
            member("kept", 55),
        ]

        matches = engine.find_matches(requester, population, dismissed_ids={"dismissed"})

        assert [m.userId for m in matches] == ["kept"]

    def test_similarity_floor_is_inclusive(self, engine, requester):
        population = [member("at-floor", 90), member("below", 95)]

        matches = engine.find_matches(requester, population)

        assert [(m.userId, m.matchScore) for m in matches] == [("at-floor", 60)]

    def test_archetype_bonus_can_lift_over_floor(self, engine, requester):
        population = [member("bonus", 95, archetype=BALANCED_FOUNDER)]
        assert engine.find_matches(requester, population)[0].matchScore == 65

    def test_sorted_by_score_descending(self, engine, requester):
        population = [member("far", 80), member("near", 55), member("mid", 70)]

        matches = engine.find_matches(requester, population)

        assert [m.userId for m in matches] == ["near", "mid", "far"]
        assert [m.matchScore for m in matches] == [95, 80, 70]

    def test_ties_break_on_created_at_then_user_id(self, engine, requester):
        population = [
            member("late", 60, created=T0 + timedelta(days=2)),
            member("zed", 60, created=T0),
            member("amy", 60, created=T0),
        ]

        matches = engine.find_matches(requester, population)

        assert [m.userId for m in matches] == ["amy", "zed", "late"]

    def test_capped_at_five(self, engine, requester):
        population = [member(f"user-{i}", 50 + i) for i in range(8)]

        matches = engine.find_matches(requester, population)

        assert len(matches) == 5
        assert [m.userId for m in matches] == [f"user-{i}" for i in range(5)]

    def test_custom_cap(self, requester):
        engine = PeerMatchingEngine(max_matches=2)
        population = [member(f"user-{i}", 50 + i) for i in range(4)]
        assert len(engine.find_matches(requester, population)) == 2

    def test_empty_population(self, engine, requester):
        assert engine.find_matches(requester, []) == []

    def test_candidate_carries_shared_dimensions(self, engine, requester):
        matches = engine.find_matches(requester, [member("close", 60)])
        assert len(matches[0].sharedDimensions) == 6


# ─────────────────────────────────────────────────────────────────
# State machine
# ─────────────────────────────────────────────────────────────────


class TestOptIn:
    def test_sets_only_acting_party(self, engine, match):
        updated = engine.opt_in(match, "alice")

        assert updated.requesterState == "opted_in"
        assert updated.candidateState == "suggested"
        assert updated.state_for("alice") == "opted_in"
        assert match.requesterState == "suggested"

    def test_both_parties_make_it_mutual(self, engine, match):
        updated = engine.opt_in(engine.opt_in(match, "alice"), "bob")

        assert updated.is_mutual_opt_in
        assert updated.state_for("alice") == "mutual"
        assert updated.state_for("bob") == "mutual"

    def test_one_sided_opt_in_is_not_mutual(self, engine, match):
        updated = engine.opt_in(match, "bob")
        assert not updated.is_mutual_opt_in
        assert updated.state_for("alice") == "suggested"

    def test_repeat_is_idempotent(self, engine, match):
        once = engine.opt_in(match, "alice")
        assert engine.opt_in(once, "alice") is once

    def test_after_dismiss_conflicts(self, engine, match):
        dismissed = engine.dismiss(match, "alice")

        with pytest.raises(ConflictException) as exc_info:
            engine.opt_in(dismissed, "alice")
        assert exc_info.value.code == "MATCH_DISMISSED"

    def test_non_member_is_forbidden(self, engine, match):
        with pytest.raises(ForbiddenException) as exc_info:
            engine.opt_in(match, "mallory")
        assert exc_info.value.code == "NOT_MATCH_PARTY"


class TestDismiss:
    def test_leaves_other_party_untouched(self, engine, match):
        opted = engine.opt_in(match, "bob")

        dismissed = engine.dismiss(opted, "alice")

        assert dismissed.requesterState == "dismissed"
        assert dismissed.candidateState == "opted_in"
        assert dismissed.state_for("bob") == "opted_in"

    def test_can_withdraw_one_sided_opt_in(self, engine, match):
        opted = engine.opt_in(match, "alice")
        assert engine.dismiss(opted, "alice").requesterState == "dismissed"

    def test_repeat_is_idempotent(self, engine, match):
        once = engine.dismiss(match, "bob")
        assert engine.dismiss(once, "bob") is once

    def test_mutual_match_conflicts(self, engine, match):
        mutual = engine.opt_in(engine.opt_in(match, "alice"), "bob")

        with pytest.raises(ConflictException) as exc_info:
            engine.dismiss(mutual, "bob")
        assert exc_info.value.code == "MATCH_MUTUAL"

    def test_non_member_is_forbidden(self, engine, match):
        with pytest.raises(ForbiddenException):
            engine.dismiss(match, "mallory")


class TestPeerMatchModel:
    def test_state_for_non_member_raises(self, match):
        with pytest.raises(ValueError):
            match.state_for("mallory")

    def test_other_party(self, match):
        assert match.other_party("alice") == "bob"
        assert match.other_party("bob") == "alice"
