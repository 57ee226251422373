"""Common repositories."""

from app.repositories.common.event_log import EventLogRepository

__all__ = ["EventLogRepository"]
