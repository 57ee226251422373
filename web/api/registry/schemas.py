"""Registry API request and response schemas."""

from pydantic import BaseModel, Field

VOTER_HASH_PATTERN = r"^[0-9a-f]{64}$"


class RegisterVoterRequest(BaseModel):
    """Voter registration request."""

    voter_hash: str = Field(..., pattern=VOTER_HASH_PATTERN)
    holder_address: str = Field(..., min_length=1)


class VoterResponse(BaseModel):
    """Registered voter."""

    voter_hash: str
    holder_address: str
    is_registered: bool
    has_voted: bool


class EligibilityResponse(BaseModel):
    """Eligibility check result."""

    voter_hash: str
    eligible: bool
