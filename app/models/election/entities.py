"""Election domain entities."""

from dataclasses import dataclass
from enum import StrEnum

from app.models.common import BaseEntity


class Phase(StrEnum):
    """Election lifecycle. Transitions only move forward."""

    CREATED = "created"
    ACTIVE = "active"
    CLOSED = "closed"
    RESULT_DECLARED = "result_declared"


@dataclass
class Candidate(BaseEntity):
    """Candidate with running tally."""

    candidate_id: int
    name: str
    party: str
    vote_count: int = 0


@dataclass
class ElectionState(BaseEntity):
    """Singleton election record."""

    name: str
    phase: Phase = Phase.CREATED
    start_time: int | None = None
    end_time: int | None = None

    @property
    def is_active(self) -> bool:
        return self.phase == Phase.ACTIVE

    @property
    def result_declared(self) -> bool:
        return self.phase == Phase.RESULT_DECLARED

    def accepts(self, now: int) -> bool:
        """Check now lies within the voting window (inclusive)."""
        if self.start_time is None or self.end_time is None:
            return False
        return self.start_time <= now <= self.end_time


@dataclass
class VoteRecord(BaseEntity):
    """Which candidate a voter chose."""

    voter_hash: str
    candidate_id: int
