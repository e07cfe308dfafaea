"""
FastAPI dependencies for the community system.

Provides dependency injection for matching and notification services.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from pulse.community.services.compatibility_engine import CompatibilityEngine
from pulse.community.services.peer_matching import PeerMatchingEngine
from pulse.community.services.peer_match_service import PeerMatchService
from pulse.community.services.notification_service import NotificationService


_compatibility_engine: Optional[CompatibilityEngine] = None
_peer_matching_engine: Optional[PeerMatchingEngine] = None
_peer_match_service: Optional[PeerMatchService] = None
_notification_service: Optional[NotificationService] = None


def init_community_services(db: AsyncIOMotorDatabase, max_matches: int = PeerMatchingEngine.MAX_PEER_MATCHES) -> None:
    """
    Initialize community services with database connection.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        max_matches: Cap on ranked peer suggestions
    """
    global _compatibility_engine, _peer_matching_engine, _peer_match_service, _notification_service

    _compatibility_engine = CompatibilityEngine()
    _peer_matching_engine = PeerMatchingEngine(max_matches=max_matches)
    _peer_match_service = PeerMatchService(db=db, engine=_peer_matching_engine)
    _notification_service = NotificationService(db=db)


def get_compatibility_engine() -> CompatibilityEngine:
    if _compatibility_engine is None:
        raise RuntimeError("Community services not initialized. Call init_community_services first.")
    return _compatibility_engine


def get_peer_matching_engine() -> PeerMatchingEngine:
    if _peer_matching_engine is None:
        raise RuntimeError("Community services not initialized. Call init_community_services first.")
    return _peer_matching_engine


def get_peer_match_service() -> PeerMatchService:
    """Get peer match service instance."""
    if _peer_match_service is None:
        raise RuntimeError("Community services not initialized. Call init_community_services first.")
    return _peer_match_service


def get_notification_service() -> NotificationService:
    """Get notification service instance."""
    if _notification_service is None:
        raise RuntimeError("Community services not initialized. Call init_community_services first.")
    return _notification_service
