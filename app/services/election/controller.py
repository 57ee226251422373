"""Election controller - candidates, phases, vote casting and tallies."""

from functools import partial

from loguru import logger

from app.clock import Clock
from app.errors import AlreadyVotedError, AuthorizationError, StateError, ValidationError
from app.models.common import DomainEvent, ElectionEnded, ElectionStarted, ResultDeclared, VoteCast
from app.models.election import Candidate, ElectionState, Phase, VoteRecord
from app.repositories.election import CandidateRepository, ElectionRepository, VoteRecordRepository
from app.services.auth import VoterMarker, require_admin
from app.services.events import EventBus
from app.services.registry import VoterRegistry


# BIGINT columns
MIN_TIME = -(2**63)
MAX_TIME = 2**63 - 1


def _check_time(value, label: str) -> None:
    """Reject anything that is not an int storable as BIGINT."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer, got {value!r}")
    if not MIN_TIME <= value <= MAX_TIME:
        raise ValidationError(f"{label} {value} is out of range")


class ElectionController:
    """Drives one election through Created -> Active -> Closed -> ResultDeclared.

    Shares the registry's transaction manager, so a vote's three writes (voter
    flag, vote record, tally) commit or roll back together.
    """

    def __init__(
        self,
        name: str,
        registry: VoterRegistry,
        marker: VoterMarker,
        candidates: CandidateRepository,
        elections: ElectionRepository,
        votes: VoteRecordRepository,
        clock: Clock,
        events: EventBus | None = None,
    ):
        if not name:
            raise ValidationError("Election name is required")
        self._registry = registry
        self._marker = marker
        self._candidates = candidates
        self._elections = elections
        self._votes = votes
        self._clock = clock
        self._events = events or EventBus()
        self._tx = registry.transactions

        with self._tx.atomic():
            state = self._elections.get()
            if state is None:
                state = self._elections.create(name)
                logger.info("Election created: {}", name)
            elif state.name != name:
                raise ValidationError(f"Database holds election {state.name!r}, not {name!r}")
            else:
                logger.info("Election resumed: {} ({})", name, state.phase)

    @property
    def phase(self) -> Phase:
        return self.get_state().phase

    def _state(self) -> ElectionState:
        return self._elections.get()

    def _emit(self, event: DomainEvent) -> None:
        self._tx.on_commit(partial(self._events.publish, event))

    def _require_admin(self, caller: str, action: str) -> None:
        require_admin(caller, self._registry.admin, action)

    # Administration

    def add_candidate(self, name: str, party: str, *, caller: str) -> Candidate:
        """Append a candidate. Only before the election starts."""
        self._require_admin(caller, "add candidates")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Candidate name is required")
        if party is None:
            party = ""
        if not isinstance(party, str):
            raise ValidationError("Party label must be a string")
        with self._tx.atomic():
            state = self._state()
            if state.phase != Phase.CREATED:
                raise StateError(f"Cannot add candidates once the election is {state.phase}")
            candidate = self._candidates.append(name.strip(), party.strip())
        logger.info("Candidate #{} added: {} ({})", candidate.candidate_id, candidate.name, candidate.party)
        return candidate

    def start_election(self, start_time: int, end_time: int, *, caller: str) -> ElectionState:
        """Open the voting window [start_time, end_time]."""
        self._require_admin(caller, "start the election")
        with self._tx.atomic():
            state = self._state()
            if state.phase != Phase.CREATED:
                raise StateError(f"Election already started (phase {state.phase})")
            _check_time(start_time, "Start time")
            _check_time(end_time, "End time")
            if end_time <= start_time:
                raise ValidationError(f"End time {end_time} must be after start time {start_time}")
            if self._candidates.count() == 0:
                raise ValidationError("Cannot start an election without candidates")
            now = self._clock()
            if end_time <= now:
                raise ValidationError(f"Voting window ends at {end_time}, which is not after now ({now})")

            state.phase = Phase.ACTIVE
            state.start_time = start_time
            state.end_time = end_time
            self._elections.save(state)
            self._emit(ElectionStarted(name=state.name, start_time=start_time, end_time=end_time))
        logger.info("Election {} started: window [{}, {}]", state.name, start_time, end_time)
        return state

    def end_election(self, *, caller: str) -> ElectionState:
        """Close voting once the window has run out."""
        self._require_admin(caller, "end the election")
        with self._tx.atomic():
            state = self._state()
            if not state.is_active:
                raise StateError(f"Election is not active (phase {state.phase})")
            now = self._clock()
            if now < state.end_time:
                raise StateError(f"Voting window is open until {state.end_time} (now {now})")

            state.phase = Phase.CLOSED
            self._elections.save(state)
            self._emit(ElectionEnded(end_time=state.end_time))
        logger.info("Election {} ended", state.name)
        return state

    def declare_results(self, *, caller: str) -> ElectionState:
        """Publish results of a closed election."""
        self._require_admin(caller, "declare results")
        with self._tx.atomic():
            state = self._state()
            if state.is_active:
                raise StateError("Cannot declare results while the election is active")
            if state.result_declared:
                raise StateError("Results already declared")
            if state.phase != Phase.CLOSED:
                raise StateError("Election has not been held yet")

            state.phase = Phase.RESULT_DECLARED
            self._elections.save(state)
            self._emit(ResultDeclared())
        logger.info("Results declared for {}", state.name)
        return state

    # Voting

    def cast_vote(self, voter_hash: str, candidate_id: int) -> VoteRecord:
        """Record one vote: mark voter, store record and bump tally together."""
        with self._tx.atomic():
            state = self._state()
            if not state.is_active:
                raise StateError(f"Election is not active (phase {state.phase})")
            now = self._clock()
            if not state.accepts(now):
                raise StateError(f"Time {now} is outside the voting window [{state.start_time}, {state.end_time}]")

            if not self._registry.is_eligible(voter_hash):
                voter = self._registry.get_voter(voter_hash)
                if voter is not None and voter.has_voted:
                    logger.warning("Rejected repeat vote from {}", voter_hash)
                    raise AlreadyVotedError(f"Voter already voted: {voter_hash}")
                logger.warning("Rejected vote from unregistered voter {!r}", voter_hash)
                raise AuthorizationError(f"Voter is not eligible: {voter_hash}")

            if isinstance(candidate_id, bool) or not isinstance(candidate_id, int):
                raise ValidationError(f"Invalid candidate id: {candidate_id!r}")
            if not 0 <= candidate_id < self._candidates.count():
                raise ValidationError(f"No candidate with id {candidate_id}")

            self._marker.mark_voted(voter_hash)
            record = VoteRecord(voter_hash=voter_hash, candidate_id=candidate_id)
            self._votes.insert(record)
            self._candidates.increment(candidate_id)
            self._emit(VoteCast(voter_hash=voter_hash, candidate_id=candidate_id))
        logger.info("Vote cast by {} for candidate #{}", voter_hash, candidate_id)
        return record

    # Queries

    def get_results(self) -> tuple[list[int], list[int]]:
        """Candidate ids and vote counts, in insertion order."""
        with self._tx.snapshot():
            if not self._state().result_declared:
                raise StateError("Results have not been declared")
            candidates = self._candidates.list_all()
        return [c.candidate_id for c in candidates], [c.vote_count for c in candidates]

    def get_candidate_count(self) -> int:
        with self._tx.snapshot():
            return self._candidates.count()

    def get_candidates(self) -> list[Candidate]:
        with self._tx.snapshot():
            return self._candidates.list_all()

    def get_candidate(self, candidate_id: int) -> Candidate | None:
        with self._tx.snapshot():
            return self._candidates.get(candidate_id)

    def get_state(self) -> ElectionState:
        with self._tx.snapshot():
            return self._state()

    def get_vote(self, voter_hash: str) -> VoteRecord | None:
        """Recorded choice of a voter, if they voted."""
        with self._tx.snapshot():
            return self._votes.get(voter_hash)
