"""Common models - base classes, event log and domain events."""

from app.models.common.base import BaseEntity
from app.models.common.event import (
    EVENT_LOG_DDL,
    EVENT_SEQ_DDL,
    DomainEvent,
    ElectionEnded,
    ElectionStarted,
    ResultDeclared,
    VoteCast,
    VoterMarkedAsVoted,
    VoterRegistered,
)

__all__ = [
    "BaseEntity",
    "EVENT_SEQ_DDL",
    "EVENT_LOG_DDL",
    "DomainEvent",
    "VoterRegistered",
    "VoterMarkedAsVoted",
    "ElectionStarted",
    "VoteCast",
    "ElectionEnded",
    "ResultDeclared",
]
