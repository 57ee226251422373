"""Election API views - thin layer over the election controller."""

from app.container import container

from .schemas import (
    CandidateItem,
    CandidatesResponse,
    CastVoteRequest,
    ResultItem,
    ResultsResponse,
    StatusResponse,
    VoteReceipt,
)


def get_status() -> StatusResponse:
    """Get election phase, window and turnout."""
    state = container.election.get_state()
    stats = container.registry.stats()

    return StatusResponse(
        name=state.name,
        phase=state.phase.value,
        is_active=state.is_active,
        result_declared=state.result_declared,
        start_time=state.start_time,
        end_time=state.end_time,
        candidates=container.election.get_candidate_count(),
        registered=stats["registered"],
        voted=stats["voted"],
    )


def get_candidates() -> CandidatesResponse:
    """Get candidates without tallies."""
    items = [
        CandidateItem(candidate_id=c.candidate_id, name=c.name, party=c.party)
        for c in container.election.get_candidates()
    ]
    return CandidatesResponse(items=items)


def cast_vote(request: CastVoteRequest) -> VoteReceipt:
    """Cast a ballot."""
    record = container.election.cast_vote(request.voter_hash, request.candidate_id)
    return VoteReceipt(voter_hash=record.voter_hash, candidate_id=record.candidate_id)


def get_results() -> ResultsResponse:
    """Get declared results."""
    ids, counts = container.election.get_results()
    candidates = {c.candidate_id: c for c in container.election.get_candidates()}

    items = [
        ResultItem(
            candidate_id=cid,
            name=candidates[cid].name,
            party=candidates[cid].party,
            votes=votes,
        )
        for cid, votes in zip(ids, counts)
    ]

    return ResultsResponse(
        name=container.election.get_state().name,
        items=items,
        total_votes=sum(counts),
    )
