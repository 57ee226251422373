"""Election repositories."""

from app.repositories.election.candidate import CandidateRepository
from app.repositories.election.election import ElectionRepository
from app.repositories.election.vote import VoteRecordRepository

__all__ = [
    "CandidateRepository",
    "ElectionRepository",
    "VoteRecordRepository",
]
