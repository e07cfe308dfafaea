"""
Peer matching.

Ranks a population of founder profiles by similarity to a requester and
applies the per-party opt-in / dismiss transitions of a peer match.
"""

import logging
from math import floor, sqrt
from typing import Dict, Iterable, List, Optional

from common.utils.exceptions import ConflictException, ForbiddenException
from pulse.assessment.models import DIMENSION_LABELS, NUMERIC_DIMENSIONS, ScoreVector
from pulse.assessment.services.archetype_classifier import (
    DIMENSION_WEIGHTS,
    weighted_squared_distance,
)
from pulse.community.models import MatchCandidate, MatchRole, PeerMatch, PeerProfile

logger = logging.getLogger(__name__)


class PeerMatchingEngine:
    """
    Similarity ranking and the peer match state machine.

    Similarity is 100 minus the weighted euclidean distance between two
    profiles, scaled so that opposite extremes on every dimension score 0,
    plus a bonus when both founders share an archetype.
    """

    MAX_PEER_MATCHES = 5
    MIN_SIMILARITY = 60
    SAME_ARCHETYPE_BONUS = 10
    SHARED_DIMENSION_THRESHOLD = 15

    def __init__(
        self,
        weights: Optional[Dict[str, float]] = None,
        max_matches: int = MAX_PEER_MATCHES,
        min_similarity: int = MIN_SIMILARITY
    ):
        self._weights = weights or DIMENSION_WEIGHTS
        self._max_matches = max_matches
        self._min_similarity = min_similarity
        self._max_distance = sqrt(sum(w * 100 ** 2 for w in self._weights.values()))

    # ─────────────────────────────────────────────────────────────────
    # Ranking
    # ─────────────────────────────────────────────────────────────────

    def similarity(self, a: PeerProfile, b: PeerProfile) -> int:
        """0-100 similarity between two population members."""
        distance = sqrt(weighted_squared_distance(
            a.profile.numeric_values(), b.profile.numeric_values(), self._weights
        ))
        score = 100 - distance / self._max_distance * 100
        if a.archetype == b.archetype:
            score += self.SAME_ARCHETYPE_BONUS
        return max(0, min(100, floor(score + 0.5)))

    def shared_dimensions(self, a: ScoreVector, b: ScoreVector) -> List[str]:
        """Labels of dimensions where both founders are within the closeness threshold."""
        return [
            DIMENSION_LABELS[dimension]
            for dimension in NUMERIC_DIMENSIONS
            if abs(a.value(dimension) - b.value(dimension)) <= self.SHARED_DIMENSION_THRESHOLD
        ]

    def find_matches(
        self,
        requester: PeerProfile,
        population: Iterable[PeerProfile],
        dismissed_ids: Iterable[str] = ()
    ) -> List[MatchCandidate]:
        """
        Rank the population against the requester.

        Args:
            requester: The founder asking for matches
            population: Candidate profiles (latest assessment per user)
            dismissed_ids: Users the requester has already dismissed

        Returns:
            Up to max_matches candidates at or above the similarity floor,
            best first; ties go to the earliest-created candidate, then user id
        """
        excluded = set(dismissed_ids)
        excluded.add(requester.userId)

        candidates = []
        for member in population:
            if member.userId in excluded:
                continue

            score = self.similarity(requester, member)
            if score < self._min_similarity:
                continue

            candidates.append(MatchCandidate(
                userId=member.userId,
                matchScore=score,
                sharedDimensions=self.shared_dimensions(requester.profile, member.profile),
                archetype=member.archetype,
                createdAt=member.createdAt,
            ))

        candidates.sort(key=lambda c: (-c.matchScore, c.createdAt, c.userId))

        logger.debug(
            f"Peer ranking for {requester.userId}: {len(candidates)} above floor, "
            f"returning {min(len(candidates), self._max_matches)}"
        )
        return candidates[:self._max_matches]

    # ─────────────────────────────────────────────────────────────────
    # State machine
    # ─────────────────────────────────────────────────────────────────

    def opt_in(self, match: PeerMatch, user_id: str) -> PeerMatch:
        """
        Record a party's opt-in.

        Opting in again (or after the match became mutual) returns the
        match unchanged.

        Raises:
            ForbiddenException: user_id is not a party to the match
            ConflictException: The party already dismissed the match
        """
        role = self.require_role(match, user_id)
        state = match.own_state(role)

        if state == "dismissed":
            raise ConflictException(
                message="Cannot opt in to a dismissed match",
                code="MATCH_DISMISSED"
            )
        if state == "opted_in":
            return match

        return match.model_copy(update={f"{role}State": "opted_in"})

    def dismiss(self, match: PeerMatch, user_id: str) -> PeerMatch:
        """
        Record a party's dismissal. The other party's state is untouched.

        Raises:
            ForbiddenException: user_id is not a party to the match
            ConflictException: The match is already mutual
        """
        role = self.require_role(match, user_id)

        if match.is_mutual_opt_in:
            raise ConflictException(
                message="Cannot dismiss a mutual connection",
                code="MATCH_MUTUAL"
            )
        if match.own_state(role) == "dismissed":
            return match

        return match.model_copy(update={f"{role}State": "dismissed"})

    @staticmethod
    def require_role(match: PeerMatch, user_id: str) -> MatchRole:
        """
        Raises:
            ForbiddenException: user_id is not a party to the match
        """
        role = match.role_of(user_id)
        if role is None:
            raise ForbiddenException(
                message="You are not a party to this match",
                code="NOT_MATCH_PARTY"
            )
        return role
