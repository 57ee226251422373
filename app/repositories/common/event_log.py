"""Event log repository - append-only record of emitted events."""

import json

from loguru import logger

from app.models.common import DomainEvent
from app.repositories.base import BaseRepository


class EventLogRepository(BaseRepository):
    """Repository for the persisted event log."""

    def append(self, event: DomainEvent) -> None:
        """Store an event. Usable directly as an event bus handler."""
        self.execute(
            "INSERT INTO event_log (name, payload) VALUES (?, ?)",
            [event.event_name, json.dumps(event.to_dict())],
        )
        logger.debug("Event stored: {}", event.event_name)

    def all(self) -> list[dict]:
        """All events in emission order."""
        rows = self.fetchall("SELECT seq, name, payload FROM event_log ORDER BY seq")
        return [{"seq": r[0], "name": r[1], "payload": json.loads(r[2])} for r in rows]

    def count(self, name: str | None = None) -> int:
        """Number of stored events, optionally of one kind."""
        if name:
            return int(self.fetchone("SELECT COUNT(*) FROM event_log WHERE name = ?", [name])[0])
        return int(self.fetchone("SELECT COUNT(*) FROM event_log")[0])
