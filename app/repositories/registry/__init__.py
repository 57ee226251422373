"""Registry repositories."""

from app.repositories.registry.voter import VoterRepository

__all__ = ["VoterRepository"]
