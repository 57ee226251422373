"""Authorization guard and the mark-voted capability."""

from collections.abc import Callable

from loguru import logger

from app.errors import AuthorizationError


def require_admin(caller: str, admin: str, action: str) -> None:
    """Raise AuthorizationError unless caller is the administrator."""
    if caller != admin:
        logger.warning("Rejected {} by {!r}: administrator only", action, caller)
        raise AuthorizationError(f"Only the administrator may {action}")


class VoterMarker:
    """Capability to mark voters as voted, granted by a registry.

    Holding one carries administrator trust for that single operation; the
    caller's identity is not checked again.
    """

    __slots__ = ("_mark",)

    def __init__(self, mark: Callable[[str], None]):
        self._mark = mark

    def mark_voted(self, voter_hash: str) -> None:
        self._mark(voter_hash)
