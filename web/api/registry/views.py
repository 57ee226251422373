"""Registry API views - thin layer over the voter registry."""

from app.container import container

from .schemas import EligibilityResponse, RegisterVoterRequest, VoterResponse


def register_voter(request: RegisterVoterRequest, caller: str) -> VoterResponse:
    """Register a voter. Caller identity comes from the auth layer."""
    voter = container.registry.register(request.voter_hash, request.holder_address, caller=caller)
    return VoterResponse(**voter.to_dict())


def get_eligibility(voter_hash: str) -> EligibilityResponse:
    """Check whether a voter may still vote."""
    return EligibilityResponse(
        voter_hash=voter_hash,
        eligible=container.registry.is_eligible(voter_hash),
    )
