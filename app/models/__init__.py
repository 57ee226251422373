"""Models package - DDL and entities for all domains."""

from app.models.common import EVENT_LOG_DDL, EVENT_SEQ_DDL, BaseEntity, DomainEvent
from app.models.election import (
    CANDIDATE_DDL,
    ELECTION_DDL,
    VOTE_RECORD_DDL,
    VOTE_RECORD_INDEXES,
    Candidate,
    ElectionState,
    Phase,
    VoteRecord,
)
from app.models.registry import VOTER_DDL, Voter

ALL_DDL = [
    # Registry
    VOTER_DDL,
    # Election
    CANDIDATE_DDL,
    ELECTION_DDL,
    VOTE_RECORD_DDL,
    *VOTE_RECORD_INDEXES,
    # Common
    EVENT_SEQ_DDL,
    EVENT_LOG_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "DomainEvent",
    "EVENT_SEQ_DDL",
    "EVENT_LOG_DDL",
    # Registry
    "VOTER_DDL",
    "Voter",
    # Election
    "CANDIDATE_DDL",
    "ELECTION_DDL",
    "VOTE_RECORD_DDL",
    "Candidate",
    "ElectionState",
    "Phase",
    "VoteRecord",
    # All DDL
    "ALL_DDL",
]
