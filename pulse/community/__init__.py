"""
Community System

Co-founder compatibility, peer matching with two-party opt-in, and
in-app notifications.
"""

from pulse.community.services.compatibility_engine import CompatibilityEngine
from pulse.community.services.peer_matching import PeerMatchingEngine
from pulse.community.services.peer_match_service import PeerMatchService
from pulse.community.services.notification_service import NotificationService

__all__ = [
    "CompatibilityEngine",
    "PeerMatchingEngine",
    "PeerMatchService",
    "NotificationService",
]
