"""Dependency Injection container - initialized at app startup."""

import duckdb

from app.clock import Clock, SystemClock
from app.repositories.common import EventLogRepository
from app.repositories.db import TransactionManager, get_db
from app.repositories.election import CandidateRepository, ElectionRepository, VoteRecordRepository
from app.repositories.registry import VoterRepository
from app.services.election import ElectionController
from app.services.events import EventBus, log_event
from app.services.registry import VoterRegistry
from settings import ADMIN, ELECTION_NAME


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        conn: duckdb.DuckDBPyConnection | None = None,
        clock: Clock | None = None,
        admin: str = ADMIN,
        election_name: str = ELECTION_NAME,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        conn = conn if conn is not None else get_db()
        self.transactions = TransactionManager(conn)

        # Repositories (singletons)
        self.event_log = EventLogRepository(conn)
        voter_repo = VoterRepository(conn)
        candidate_repo = CandidateRepository(conn)
        election_repo = ElectionRepository(conn)
        vote_repo = VoteRecordRepository(conn)

        # Events: log line + persisted log
        self.events = EventBus([log_event, self.event_log.append])

        # Services (with injected repos)
        self.registry = VoterRegistry(
            admin=admin,
            voters=voter_repo,
            tx=self.transactions,
            events=self.events,
        )

        self.election = ElectionController(
            name=election_name,
            registry=self.registry,
            marker=self.registry.grant_marker(caller=admin),
            candidates=candidate_repo,
            elections=election_repo,
            votes=vote_repo,
            clock=clock or SystemClock(),
            events=self.events,
        )

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() rewires from scratch."""
        for attr in ("transactions", "event_log", "events", "registry", "election"):
            self.__dict__.pop(attr, None)
        self._initialized = False


# Global container instance
container = Container()
