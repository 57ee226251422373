"""Vote record repository."""

from app.models.election import VoteRecord
from app.repositories.base import BaseRepository


class VoteRecordRepository(BaseRepository):
    """Repository for per-voter vote records."""

    def get(self, voter_hash: str) -> VoteRecord | None:
        row = self.fetchone("SELECT voter_hash, candidate_id FROM vote_record WHERE voter_hash = ?", [voter_hash])
        return VoteRecord.from_row(row) if row else None

    def insert(self, record: VoteRecord) -> None:
        self.execute(
            "INSERT INTO vote_record (voter_hash, candidate_id) VALUES (?, ?)",
            [record.voter_hash, record.candidate_id],
        )

    def count(self) -> int:
        return int(self.fetchone("SELECT COUNT(*) FROM vote_record")[0])
