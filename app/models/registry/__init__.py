"""Registry domain models - voters."""

from app.models.registry.entities import VOTER_HASH_RE, Voter, is_voter_hash
from app.models.registry.voter import VOTER_DDL

__all__ = [
    "VOTER_DDL",
    "VOTER_HASH_RE",
    "Voter",
    "is_voter_hash",
]
