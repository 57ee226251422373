"""Election API."""

from web.api.election.views import cast_vote, get_candidates, get_results, get_status

__all__ = [
    "get_status",
    "get_candidates",
    "cast_vote",
    "get_results",
]
