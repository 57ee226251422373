"""Registry API."""

from web.api.registry.views import get_eligibility, register_voter

__all__ = [
    "register_voter",
    "get_eligibility",
]
