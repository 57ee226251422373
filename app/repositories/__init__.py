"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.common import EventLogRepository
from app.repositories.db import (
    TransactionManager,
    close_db,
    connect,
    get_db,
    init_tables,
)
from app.repositories.election import (
    CandidateRepository,
    ElectionRepository,
    VoteRecordRepository,
)
from app.repositories.registry import VoterRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    "connect",
    "TransactionManager",
    # Base
    "BaseRepository",
    # Common
    "EventLogRepository",
    # Registry
    "VoterRepository",
    # Election
    "CandidateRepository",
    "ElectionRepository",
    "VoteRecordRepository",
]
