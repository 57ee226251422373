"""Election services."""

from app.services.election.controller import ElectionController

__all__ = ["ElectionController"]
