"""
Pydantic models for the community system.

Defines compatibility results, peer profiles, match candidates and the
persisted two-party peer match.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from pulse.assessment.models import ScoreVector


# Per-party state stored on a match. "mutual" is derived, never stored.
MatchState = Literal["suggested", "opted_in", "dismissed"]
MatchView = Literal["suggested", "opted_in", "dismissed", "mutual"]

MatchRole = Literal["requester", "candidate"]


class CompatibilityResult(BaseModel):
    """Co-founder compatibility between two profiles."""
    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    strengths: List[str]
    challenges: List[str]
    recommendations: List[str]


class PeerProfile(BaseModel):
    """One member of the matching population."""
    model_config = ConfigDict(frozen=True)

    userId: str
    profile: ScoreVector
    archetype: str
    createdAt: datetime


class MatchCandidate(BaseModel):
    """A ranked peer suggestion before it is persisted."""
    model_config = ConfigDict(frozen=True)

    userId: str
    matchScore: int = Field(..., ge=0, le=100)
    sharedDimensions: List[str]
    archetype: str
    createdAt: datetime


class PeerMatch(BaseModel):
    """
    A persisted match between two users.

    Each party has its own state. The match is mutual once both parties
    have opted in; dismissing only ever changes the acting party's state.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    requesterId: str
    candidateId: str
    matchScore: int = Field(..., ge=0, le=100)
    sharedDimensions: List[str] = Field(default_factory=list)
    requesterState: MatchState = "suggested"
    candidateState: MatchState = "suggested"
    createdAt: Optional[datetime] = None
    mutualAt: Optional[datetime] = None

    @property
    def is_mutual_opt_in(self) -> bool:
        return self.requesterState == "opted_in" and self.candidateState == "opted_in"

    def role_of(self, user_id: str) -> Optional[MatchRole]:
        """requester, candidate, or None for a non-member."""
        if user_id == self.requesterId:
            return "requester"
        if user_id == self.candidateId:
            return "candidate"
        return None

    def other_party(self, user_id: str) -> str:
        return self.candidateId if user_id == self.requesterId else self.requesterId

    def own_state(self, role: MatchRole) -> MatchState:
        return self.requesterState if role == "requester" else self.candidateState

    def state_for(self, user_id: str) -> MatchView:
        """
        The match as seen by one party.

        Raises:
            ValueError: user_id is not a party to the match
        """
        role = self.role_of(user_id)
        if role is None:
            raise ValueError(f"User {user_id} is not a party to this match")
        if self.is_mutual_opt_in:
            return "mutual"
        return self.own_state(role)
