"""Vote record model - one row per voter who voted."""

VOTE_RECORD_DDL = """
CREATE TABLE IF NOT EXISTS vote_record (
    voter_hash VARCHAR PRIMARY KEY,
    candidate_id INTEGER NOT NULL
)
"""

VOTE_RECORD_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_vote_record_candidate ON vote_record(candidate_id)",
]
