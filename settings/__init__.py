"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("ELECTION_DB_PATH", "election.duckdb")

# Election
ADMIN = os.getenv("ELECTION_ADMIN", "admin")
ELECTION_NAME = os.getenv("ELECTION_NAME", "General Election")

# Logging
LOG_DIR = Path(os.getenv("ELECTION_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("ELECTION_LOG_LEVEL", "INFO")
