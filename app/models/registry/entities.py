"""Registry domain entities."""

import re
from dataclasses import dataclass

from app.models.common import BaseEntity

# SHA-256 hex digest, computed upstream from the voter's real-world identifier
VOTER_HASH_RE = re.compile(r"^[0-9a-f]{64}$")


def is_voter_hash(value) -> bool:
    """Check value looks like a voter identity hash."""
    return isinstance(value, str) and VOTER_HASH_RE.match(value) is not None


@dataclass
class Voter(BaseEntity):
    """Registered voter, keyed by identity hash."""

    voter_hash: str
    holder_address: str
    is_registered: bool = True
    has_voted: bool = False

    @property
    def is_eligible(self) -> bool:
        return self.is_registered and not self.has_voted
