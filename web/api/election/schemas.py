"""Election API request and response schemas."""

from pydantic import BaseModel, Field

from web.api.registry.schemas import VOTER_HASH_PATTERN


class StatusResponse(BaseModel):
    """Election status."""

    name: str
    phase: str
    is_active: bool
    result_declared: bool
    start_time: int | None
    end_time: int | None
    candidates: int
    registered: int
    voted: int


class CandidateItem(BaseModel):
    """Candidate listing."""

    candidate_id: int
    name: str
    party: str


class CandidatesResponse(BaseModel):
    """Candidates response."""

    items: list[CandidateItem]


class CastVoteRequest(BaseModel):
    """Ballot."""

    voter_hash: str = Field(..., pattern=VOTER_HASH_PATTERN)
    candidate_id: int = Field(..., ge=0)


class VoteReceipt(BaseModel):
    """Accepted vote."""

    voter_hash: str
    candidate_id: int


class ResultItem(BaseModel):
    """Tally for one candidate."""

    candidate_id: int
    name: str
    party: str
    votes: int


class ResultsResponse(BaseModel):
    """Declared results."""

    name: str
    items: list[ResultItem]
    total_votes: int
