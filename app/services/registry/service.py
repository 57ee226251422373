"""Voter registry service."""

from collections.abc import Iterable
from functools import partial

from loguru import logger

from app.errors import DuplicateError, ValidationError
from app.models.common import DomainEvent, VoterMarkedAsVoted, VoterRegistered
from app.models.registry import Voter, is_voter_hash
from app.repositories.db import TransactionManager
from app.repositories.registry import VoterRepository
from app.services.auth import VoterMarker, require_admin
from app.services.events import EventBus


class VoterRegistry:
    """Authoritative record of who may vote and who already has.

    The administrator identity is fixed at construction. Only the administrator
    registers voters or marks them voted, either directly or through the single
    ``VoterMarker`` capability granted to the election controller.
    """

    def __init__(
        self,
        admin: str,
        voters: VoterRepository,
        tx: TransactionManager,
        events: EventBus | None = None,
    ):
        if not admin:
            raise ValidationError("Administrator identity is required")
        self._admin = admin
        self._voters = voters
        self._tx = tx
        self._events = events or EventBus()
        self._marker_granted = False
        logger.debug("VoterRegistry initialized (admin={})", admin)

    @property
    def admin(self) -> str:
        return self._admin

    @property
    def transactions(self) -> TransactionManager:
        return self._tx

    def _emit(self, event: DomainEvent) -> None:
        self._tx.on_commit(partial(self._events.publish, event))

    def register(self, voter_hash: str, holder_address: str, *, caller: str) -> Voter:
        """Register a voter by identity hash."""
        require_admin(caller, self._admin, "register voters")
        with self._tx.atomic():
            voter = self._register(voter_hash, holder_address)
        logger.info("Voter registered: {}", voter_hash)
        return voter

    def register_many(self, rows: Iterable[tuple[str, str]], *, caller: str) -> int:
        """Register a batch of (voter_hash, holder_address) pairs, all or none."""
        require_admin(caller, self._admin, "register voters")
        count = 0
        with self._tx.atomic():
            for voter_hash, holder_address in rows:
                self._register(voter_hash, holder_address)
                count += 1
        logger.info("Voters registered: {}", count)
        return count

    def _register(self, voter_hash: str, holder_address: str) -> Voter:
        if not is_voter_hash(voter_hash):
            raise ValidationError(f"Malformed voter hash: {voter_hash!r}")
        if not isinstance(holder_address, str) or not holder_address:
            raise ValidationError("Holder address is required")
        if holder_address == self._admin:
            raise ValidationError("Holder address must differ from the administrator")
        if self._voters.get(voter_hash) is not None:
            raise DuplicateError(f"Voter already registered: {voter_hash}")

        voter = Voter(voter_hash=voter_hash, holder_address=holder_address)
        self._voters.insert(voter)
        self._emit(VoterRegistered(voter_hash=voter_hash))
        return voter

    def is_eligible(self, voter_hash: str) -> bool:
        """Registered and not yet voted."""
        if not is_voter_hash(voter_hash):
            return False
        with self._tx.snapshot():
            voter = self._voters.get(voter_hash)
        return voter is not None and voter.is_eligible

    def get_voter(self, voter_hash: str) -> Voter | None:
        if not is_voter_hash(voter_hash):
            return None
        with self._tx.snapshot():
            return self._voters.get(voter_hash)

    def stats(self) -> dict[str, int]:
        """Registered and voted counts."""
        with self._tx.snapshot():
            return self._voters.counts()

    def mark_voted(self, voter_hash: str, *, caller: str) -> None:
        """Flip a voter's has_voted flag. Administrator only."""
        require_admin(caller, self._admin, "mark voters as voted")
        self._mark_voted(voter_hash)

    def _mark_voted(self, voter_hash: str) -> None:
        with self._tx.atomic():
            voter = self._voters.get(voter_hash) if is_voter_hash(voter_hash) else None
            if voter is None or not voter.is_registered:
                raise ValidationError(f"Voter not registered: {voter_hash}")
            if voter.has_voted:
                raise DuplicateError(f"Voter already voted: {voter_hash}")
            self._voters.mark_voted(voter_hash)
            self._emit(VoterMarkedAsVoted(voter_hash=voter_hash))
        logger.debug("Voter marked as voted: {}", voter_hash)

    def grant_marker(self, *, caller: str) -> VoterMarker:
        """Hand out the mark-voted capability. Granted once per registry."""
        require_admin(caller, self._admin, "grant the voter marker")
        if self._marker_granted:
            raise DuplicateError("Voter marker already granted")
        self._marker_granted = True
        logger.info("Voter marker granted")
        return VoterMarker(self._mark_voted)
