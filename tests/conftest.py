"""Shared fixtures: in-memory DuckDB, manual clock, wired registry and controller."""

import hashlib

import pytest

from app.clock import ManualClock
from app.repositories import (
    CandidateRepository,
    ElectionRepository,
    EventLogRepository,
    TransactionManager,
    VoteRecordRepository,
    VoterRepository,
    connect,
)
from app.services import ElectionController, EventBus, VoterRegistry

ADMIN = "admin"


def _hash(identifier: str) -> str:
    return hashlib.sha256(identifier.encode()).hexdigest()


@pytest.fixture
def conn():
    c = connect(":memory:")
    yield c
    c.close()


@pytest.fixture
def tx(conn):
    return TransactionManager(conn)


@pytest.fixture
def clock():
    return ManualClock(0)


@pytest.fixture
def published():
    """Events delivered to observers, in order."""
    return []


@pytest.fixture
def bus(published):
    return EventBus([published.append])


@pytest.fixture
def event_log(conn):
    return EventLogRepository(conn)


@pytest.fixture
def registry(conn, tx, bus):
    return VoterRegistry(admin=ADMIN, voters=VoterRepository(conn), tx=tx, events=bus)


@pytest.fixture
def controller(conn, registry, clock, bus):
    return ElectionController(
        name="Student Council",
        registry=registry,
        marker=registry.grant_marker(caller=ADMIN),
        candidates=CandidateRepository(conn),
        elections=ElectionRepository(conn),
        votes=VoteRecordRepository(conn),
        clock=clock,
        events=bus,
    )


@pytest.fixture
def voter_a():
    return _hash("voter-A")


@pytest.fixture
def voter_b():
    return _hash("voter-B")


@pytest.fixture
def prepared(registry, controller, voter_a, voter_b):
    """Voters A and B registered, Alice and Bob standing, not started."""
    registry.register(voter_a, "holder-a", caller=ADMIN)
    registry.register(voter_b, "holder-b", caller=ADMIN)
    controller.add_candidate("Alice", "Red", caller=ADMIN)
    controller.add_candidate("Bob", "Blue", caller=ADMIN)
    return controller


@pytest.fixture
def active(prepared, clock):
    """Election running with window [100, 200], clock at 150."""
    prepared.start_election(100, 200, caller=ADMIN)
    clock.set(150)
    return prepared


@pytest.fixture
def hash_of():
    """Identity hash helper, as computed upstream."""
    return _hash
