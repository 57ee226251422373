"""Candidate repository - candidates and tallies."""

from loguru import logger

from app.models.election import Candidate
from app.repositories.base import BaseRepository

_COLUMNS = ", ".join(Candidate.columns())


class CandidateRepository(BaseRepository):
    """Repository for candidate data access."""

    def count(self) -> int:
        """Number of candidates."""
        return int(self.fetchone("SELECT COUNT(*) FROM candidate")[0])

    def get(self, candidate_id: int) -> Candidate | None:
        """Get candidate by sequence number."""
        row = self.fetchone(f"SELECT {_COLUMNS} FROM candidate WHERE candidate_id = ?", [candidate_id])
        return Candidate.from_row(row) if row else None

    def list_all(self) -> list[Candidate]:
        """All candidates in insertion order."""
        rows = self.fetchall(f"SELECT {_COLUMNS} FROM candidate ORDER BY candidate_id")
        return [Candidate.from_row(r) for r in rows]

    def append(self, name: str, party: str) -> Candidate:
        """Insert with the next sequence number."""
        candidate = Candidate(candidate_id=self.count(), name=name, party=party)
        self.execute(
            "INSERT INTO candidate (candidate_id, name, party, vote_count) VALUES (?, ?, ?, 0)",
            [candidate.candidate_id, candidate.name, candidate.party],
        )
        logger.debug("Candidate inserted: #{} {}", candidate.candidate_id, candidate.name)
        return candidate

    def increment(self, candidate_id: int) -> None:
        """Add one vote to a candidate's tally."""
        self.execute("UPDATE candidate SET vote_count = vote_count + 1 WHERE candidate_id = ?", [candidate_id])
