"""Services package - service class exports."""

from app.services.auth import VoterMarker, require_admin
from app.services.election import ElectionController
from app.services.events import EventBus, log_event
from app.services.registry import VoterRegistry

__all__ = [
    "ElectionController",
    "EventBus",
    "VoterMarker",
    "VoterRegistry",
    "log_event",
    "require_admin",
]
