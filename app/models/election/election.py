"""Election state model (single row)."""

ELECTION_DDL = """
CREATE TABLE IF NOT EXISTS election (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    phase VARCHAR NOT NULL,
    start_time BIGINT,
    end_time BIGINT
)
"""
