"""Candidate model."""

CANDIDATE_DDL = """
CREATE TABLE IF NOT EXISTS candidate (
    candidate_id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    party VARCHAR NOT NULL,
    vote_count INTEGER NOT NULL DEFAULT 0
)
"""
