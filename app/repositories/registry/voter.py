"""Voter repository - access to voter records."""

from loguru import logger

from app.models.registry import Voter
from app.repositories.base import BaseRepository

_COLUMNS = ", ".join(Voter.columns())


class VoterRepository(BaseRepository):
    """Repository for voter records."""

    def get(self, voter_hash: str) -> Voter | None:
        """Get voter by identity hash."""
        row = self.fetchone(f"SELECT {_COLUMNS} FROM voter WHERE voter_hash = ?", [voter_hash])
        return Voter.from_row(row) if row else None

    def insert(self, voter: Voter) -> None:
        """Insert a new voter."""
        self.execute(
            f"INSERT INTO voter ({_COLUMNS}) VALUES (?, ?, ?, ?)",
            [voter.voter_hash, voter.holder_address, voter.is_registered, voter.has_voted],
        )
        logger.debug("Voter inserted: {}", voter.voter_hash)

    def mark_voted(self, voter_hash: str) -> None:
        """Flip has_voted to true."""
        self.execute("UPDATE voter SET has_voted = TRUE WHERE voter_hash = ?", [voter_hash])
        logger.debug("Voter marked voted: {}", voter_hash)

    def counts(self) -> dict[str, int]:
        """Registered and voted totals."""
        row = self.fetchone(
            """
            SELECT
                COUNT(*) FILTER (WHERE is_registered) AS registered,
                COUNT(*) FILTER (WHERE has_voted) AS voted
            FROM voter
            """
        )
        return {"registered": int(row[0]), "voted": int(row[1])}
