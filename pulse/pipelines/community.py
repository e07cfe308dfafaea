"""
Community pipeline functions.

Stateless orchestration logic for compatibility and peer matching.
"""

import logging
from typing import Any, Dict, Optional

from common.utils.exceptions import PreconditionException
from pulse.assessment.services.assessment_service import AssessmentService
from pulse.community.models import PeerMatch, PeerProfile
from pulse.community.services.compatibility_engine import CompatibilityEngine
from pulse.community.services.notification_service import NotificationService
from pulse.community.services.peer_match_service import PeerMatchService
from pulse.community.services.peer_matching import PeerMatchingEngine

logger = logging.getLogger(__name__)


async def compatibility_pipeline(
    assessment_service: AssessmentService,
    compatibility_engine: CompatibilityEngine,
    user_id: str,
    other_user_id: str
) -> Dict[str, Any]:
    """
    Compare the current user with another founder.

    Raises:
        PreconditionException: Either user has not completed the assessment
    """
    profile_a = await assessment_service.get_latest_profile(user_id)
    profile_b = await assessment_service.get_latest_profile(other_user_id)

    result = compatibility_engine.compare(profile_a, profile_b)
    return result.model_dump()


async def find_peer_matches_pipeline(
    assessment_service: AssessmentService,
    peer_matching_engine: PeerMatchingEngine,
    peer_match_service: PeerMatchService,
    user_id: str
) -> Dict[str, Any]:
    """
    Rank the population against the user and store the suggestions.

    Args:
        assessment_service: For the requester's profile and the population
        peer_matching_engine: For similarity ranking
        peer_match_service: For match persistence
        user_id: Current user's ID

    Returns:
        dict with matches list, best first

    Raises:
        PreconditionException: The user has not completed the assessment
    """
    requester_doc = await assessment_service.get_latest_assessment(user_id)
    if not requester_doc:
        raise PreconditionException(message="Complete the assessment to find peer matches")

    requester = _peer_profile(requester_doc)
    population = [
        _peer_profile(doc) for doc in await assessment_service.get_population(user_id)
    ]
    dismissed_ids = await peer_match_service.get_dismissed_candidate_ids(user_id)

    candidates = peer_matching_engine.find_matches(requester, population, dismissed_ids)
    matches = await peer_match_service.upsert_suggestions(user_id, candidates)

    return {"matches": [_format_match(match, user_id) for match in matches]}


async def list_matches_pipeline(
    peer_match_service: PeerMatchService,
    user_id: str
) -> Dict[str, Any]:
    """List the user's stored matches that they have not dismissed."""
    matches = await peer_match_service.list_matches(user_id)
    return {"matches": [_format_match(match, user_id) for match in matches]}


async def opt_in_pipeline(
    peer_match_service: PeerMatchService,
    user_id: str,
    match_id: str,
    notification_service: Optional[NotificationService] = None
) -> Dict[str, Any]:
    """
    Opt the user in to a peer match, notifying both parties once it becomes mutual.

    Raises:
        NotFoundException: Unknown match
        ForbiddenException: User is not a party to the match
        ConflictException: User already dismissed the match
    """
    match, became_mutual = await peer_match_service.opt_in(match_id, user_id)

    if became_mutual and notification_service:
        try:
            await notification_service.notify_mutual_connection(
                match.requesterId, match.candidateId, match.id
            )
        except Exception as e:
            # Don't fail the opt-in if notification fails
            logger.warning(f"Failed to send mutual connection notifications: {e}")

    return _format_match(match, user_id)


async def dismiss_pipeline(
    peer_match_service: PeerMatchService,
    user_id: str,
    match_id: str
) -> Dict[str, Any]:
    """
    Dismiss a peer match for the user.

    Raises:
        NotFoundException: Unknown match
        ForbiddenException: User is not a party to the match
        ConflictException: The match is already mutual
    """
    match = await peer_match_service.dismiss(match_id, user_id)
    return _format_match(match, user_id)


def _peer_profile(doc: Dict[str, Any]) -> PeerProfile:
    return PeerProfile(
        userId=str(doc["userId"]),
        profile=AssessmentService.profile_from_doc(doc),
        archetype=doc["archetype"],
        createdAt=doc["createdAt"],
    )


def _format_match(match: PeerMatch, user_id: str) -> Dict[str, Any]:
    """Format a peer match from one party's point of view."""
    return {
        "id": match.id,
        "peerId": match.other_party(user_id),
        "matchScore": match.matchScore,
        "sharedDimensions": match.sharedDimensions,
        "state": match.state_for(user_id),
        "isMutualOptIn": match.is_mutual_opt_in,
        "createdAt": match.createdAt
    }
