"""Voter model."""

VOTER_DDL = """
CREATE TABLE IF NOT EXISTS voter (
    voter_hash VARCHAR PRIMARY KEY,
    holder_address VARCHAR NOT NULL,
    is_registered BOOLEAN NOT NULL DEFAULT TRUE,
    has_voted BOOLEAN NOT NULL DEFAULT FALSE
)
"""
