"""
Peer match persistence.

Stores one match document per pair of users and applies opt-in and
dismiss transitions as single atomic updates.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional, Sequence, Set, Tuple

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from common.utils.exceptions import ConflictException, NotFoundException
from pulse.community.models import MatchCandidate, PeerMatch
from pulse.community.services.peer_matching import PeerMatchingEngine

logger = logging.getLogger(__name__)


def pair_key(user_a: str, user_b: str) -> str:
    """Order-independent key for a pair of users."""
    return ":".join(sorted((user_a, user_b)))


class PeerMatchService:
    """
    Handles peer match storage and state transitions.

    The requester/candidate roles are fixed by whoever's search created
    the match; both parties act on the same document afterwards.
    """

    def __init__(self, db: AsyncIOMotorDatabase, engine: Optional[PeerMatchingEngine] = None):
        """
        Initialize PeerMatchService.

        Args:
            db: MongoDB database connection
            engine: State machine used to validate transitions
        """
        self._db = db
        self._collection = db["peerMatches"]
        self._engine = engine or PeerMatchingEngine()

    async def ensure_indexes(self) -> None:
        await self._collection.create_index(
            [("pairKey", ASCENDING)], unique=True, name="pair_unique"
        )

    async def upsert_suggestions(
        self,
        requester_id: str,
        candidates: Sequence[MatchCandidate]
    ) -> List[PeerMatch]:
        """
        Persist ranked candidates. Existing matches are returned as stored.

        Args:
            requester_id: The user who ran the search
            candidates: Output of PeerMatchingEngine.find_matches

        Returns:
            Matches in candidate order
        """
        now = datetime.now(timezone.utc)
        matches = []

        for candidate in candidates:
            doc = await self._collection.find_one_and_update(
                {"pairKey": pair_key(requester_id, candidate.userId)},
                {
                    "$setOnInsert": {
                        "requesterId": ObjectId(requester_id),
                        "candidateId": ObjectId(candidate.userId),
                        "matchScore": candidate.matchScore,
                        "sharedDimensions": candidate.sharedDimensions,
                        "requesterState": "suggested",
                        "candidateState": "suggested",
                        "mutualAt": None,
                        "createdAt": now,
                    }
                },
                upsert=True,
                return_document=ReturnDocument.AFTER
            )
            matches.append(self.match_from_doc(doc))

        logger.info(f"Stored {len(matches)} peer suggestions for user {requester_id}")
        return matches

    async def get_dismissed_candidate_ids(self, user_id: str) -> Set[str]:
        """Users this user has dismissed, in either role."""
        uid = ObjectId(user_id)
        cursor = self._collection.find({
            "$or": [
                {"requesterId": uid, "requesterState": "dismissed"},
                {"candidateId": uid, "candidateState": "dismissed"},
            ]
        })
        docs = await cursor.to_list(length=None)
        return {self.match_from_doc(doc).other_party(user_id) for doc in docs}

    async def get_match(self, match_id: str) -> PeerMatch:
        """
        Raises:
            NotFoundException: No match with this id
        """
        doc = await self._collection.find_one({"_id": ObjectId(match_id)})
        if not doc:
            raise NotFoundException(message="Peer match not found", code="MATCH_NOT_FOUND")
        return self.match_from_doc(doc)

    async def list_matches(self, user_id: str, include_dismissed: bool = False) -> List[PeerMatch]:
        """
        Matches where the user is either party, best score first.

        Args:
            user_id: MongoDB user ID
            include_dismissed: Also return matches this user dismissed
        """
        uid = ObjectId(user_id)
        cursor = self._collection.find({"$or": [{"requesterId": uid}, {"candidateId": uid}]})
        cursor = cursor.sort([("matchScore", -1), ("createdAt", 1)])

        docs = await cursor.to_list(length=None)
        matches = [self.match_from_doc(doc) for doc in docs]
        if include_dismissed:
            return matches
        return [m for m in matches if m.state_for(user_id) != "dismissed"]

    async def opt_in(self, match_id: str, user_id: str) -> Tuple[PeerMatch, bool]:
        """
        Opt the user in to a match.

        The acting party's state is flipped with one conditional update whose
        returned document also carries the other party's state. When both are
        opted in, mutualAt is claimed with a second conditional update; only
        the caller that wins that claim reports the match as newly mutual.

        Args:
            match_id: Peer match ID
            user_id: Acting user

        Returns:
            tuple of (match, became_mutual)

        Raises:
            NotFoundException: Unknown match
            ForbiddenException: User is not a party to the match
            ConflictException: User already dismissed the match
        """
        match = await self.get_match(match_id)
        role = self._engine.require_role(match, user_id)
        self._engine.opt_in(match, user_id)

        if match.own_state(role) == "opted_in":
            return await self._settle_mutual(match)

        state_field = f"{role}State"
        doc = await self._collection.find_one_and_update(
            {"_id": ObjectId(match_id), state_field: "suggested"},
            {"$set": {state_field: "opted_in"}},
            return_document=ReturnDocument.AFTER
        )

        if doc is None:
            # Another request changed this party's state first
            current = await self.get_match(match_id)
            self._engine.opt_in(current, user_id)
            return await self._settle_mutual(current)

        updated = self.match_from_doc(doc)
        logger.info(f"User {user_id} opted in to peer match {match_id}")
        return await self._settle_mutual(updated)

    async def _settle_mutual(self, match: PeerMatch) -> Tuple[PeerMatch, bool]:
        """
        Claim mutualAt for a match both parties have opted in to.

        Also completes a claim left unset by an interrupted earlier opt-in.
        Only the caller whose guarded update succeeds gets True.
        """
        if not match.is_mutual_opt_in or match.mutualAt is not None:
            return match, False

        claimed = await self._collection.find_one_and_update(
            {
                "_id": ObjectId(match.id),
                "requesterState": "opted_in",
                "candidateState": "opted_in",
                "mutualAt": None,
            },
            {"$set": {"mutualAt": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER
        )

        if claimed is None:
            return match, False

        logger.info(f"Peer match {match.id} is now mutual")
        return self.match_from_doc(claimed), True

    async def dismiss(self, match_id: str, user_id: str) -> PeerMatch:
        """
        Dismiss a match for the acting user only.

        Raises:
            NotFoundException: Unknown match
            ForbiddenException: User is not a party to the match
            ConflictException: The match is already mutual
        """
        match = await self.get_match(match_id)
        role = self._engine.require_role(match, user_id)
        self._engine.dismiss(match, user_id)

        if match.own_state(role) == "dismissed":
            return match

        state_field = f"{role}State"
        other_field = "candidateState" if role == "requester" else "requesterState"

        doc = await self._collection.find_one_and_update(
            {
                "_id": ObjectId(match_id),
                "$or": [
                    {state_field: "suggested"},
                    {state_field: "opted_in", other_field: {"$ne": "opted_in"}},
                ],
            },
            {"$set": {state_field: "dismissed"}},
            return_document=ReturnDocument.AFTER
        )

        if doc is None:
            current = await self.get_match(match_id)
            if current.is_mutual_opt_in:
                raise ConflictException(
                    message="Cannot dismiss a mutual connection",
                    code="MATCH_MUTUAL"
                )
            return current

        logger.info(f"User {user_id} dismissed peer match {match_id}")
        return self.match_from_doc(doc)

    @staticmethod
    def match_from_doc(doc: Dict[str, Any]) -> PeerMatch:
        """Convert a stored document into a PeerMatch."""
        return PeerMatch(
            id=str(doc["_id"]),
            requesterId=str(doc["requesterId"]),
            candidateId=str(doc["candidateId"]),
            matchScore=doc["matchScore"],
            sharedDimensions=doc.get("sharedDimensions", []),
            requesterState=doc.get("requesterState", "suggested"),
            candidateState=doc.get("candidateState", "suggested"),
            createdAt=doc.get("createdAt"),
            mutualAt=doc.get("mutualAt"),
        )
