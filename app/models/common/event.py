"""Event log table and domain events emitted by state-changing operations."""

from dataclasses import dataclass

from app.models.common.base import BaseEntity

EVENT_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS event_seq START 1"

EVENT_LOG_DDL = """
CREATE TABLE IF NOT EXISTS event_log (
    seq BIGINT DEFAULT nextval('event_seq') PRIMARY KEY,
    name VARCHAR NOT NULL,
    payload JSON NOT NULL
)
"""


@dataclass
class DomainEvent(BaseEntity):
    """Base class for events. Payload is the dataclass fields."""

    @property
    def event_name(self) -> str:
        return self.__class__.__name__


@dataclass
class VoterRegistered(DomainEvent):
    voter_hash: str


@dataclass
class VoterMarkedAsVoted(DomainEvent):
    voter_hash: str


@dataclass
class ElectionStarted(DomainEvent):
    name: str
    start_time: int
    end_time: int


@dataclass
class VoteCast(DomainEvent):
    voter_hash: str
    candidate_id: int


@dataclass
class ElectionEnded(DomainEvent):
    end_time: int


@dataclass
class ResultDeclared(DomainEvent):
    pass
