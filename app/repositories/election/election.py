"""Election repository - the single election state row."""

from loguru import logger

from app.models.election import ElectionState, Phase
from app.repositories.base import BaseRepository

ELECTION_ID = 1


class ElectionRepository(BaseRepository):
    """Repository for the election state record."""

    def get(self) -> ElectionState | None:
        """Load election state, if created."""
        row = self.fetchone(
            "SELECT name, phase, start_time, end_time FROM election WHERE id = ?",
            [ELECTION_ID],
        )
        if row is None:
            return None
        return ElectionState(name=row[0], phase=Phase(row[1]), start_time=row[2], end_time=row[3])

    def create(self, name: str) -> ElectionState:
        """Create the election in the Created phase."""
        state = ElectionState(name=name)
        self.execute(
            "INSERT INTO election (id, name, phase, start_time, end_time) VALUES (?, ?, ?, NULL, NULL)",
            [ELECTION_ID, state.name, state.phase.value],
        )
        logger.debug("Election row created: {}", name)
        return state

    def save(self, state: ElectionState) -> None:
        """Persist phase and window."""
        self.execute(
            "UPDATE election SET phase = ?, start_time = ?, end_time = ? WHERE id = ?",
            [state.phase.value, state.start_time, state.end_time, ELECTION_ID],
        )
        logger.debug("Election saved: phase={}", state.phase)
