"""Election domain models - candidates, election state and vote records."""

from app.models.election.candidate import CANDIDATE_DDL
from app.models.election.election import ELECTION_DDL
from app.models.election.entities import Candidate, ElectionState, Phase, VoteRecord
from app.models.election.vote_record import VOTE_RECORD_DDL, VOTE_RECORD_INDEXES

__all__ = [
    "CANDIDATE_DDL",
    "ELECTION_DDL",
    "VOTE_RECORD_DDL",
    "VOTE_RECORD_INDEXES",
    "Candidate",
    "ElectionState",
    "Phase",
    "VoteRecord",
]
