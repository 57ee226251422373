"""Tests for vote casting, atomicity and the end-to-end election flow."""

import threading

import pytest

from app.errors import AlreadyVotedError, AuthorizationError, DuplicateError, StateError, ValidationError
from app.models.common import VoteCast, VoterMarkedAsVoted
from etl import validate_election

ADMIN = "admin"


class TestCastVote:
    def test_records_vote(self, active, registry, voter_a):
        record = active.cast_vote(voter_a, 0)
        assert record.candidate_id == 0
        assert active.get_vote(voter_a) == record
        assert active.get_candidate(0).vote_count == 1
        assert active.get_candidate(1).vote_count == 0
        assert registry.get_voter(voter_a).has_voted

    def test_emits_events_in_order(self, active, published, voter_a):
        published.clear()
        active.cast_vote(voter_a, 1)
        assert published == [
            VoterMarkedAsVoted(voter_hash=voter_a),
            VoteCast(voter_hash=voter_a, candidate_id=1),
        ]

    def test_before_start(self, prepared, voter_a):
        with pytest.raises(StateError):
            prepared.cast_vote(voter_a, 0)

    def test_before_window(self, prepared, clock, voter_a):
        prepared.start_election(100, 200, caller=ADMIN)
        clock.set(99)
        with pytest.raises(StateError):
            prepared.cast_vote(voter_a, 0)

    @pytest.mark.parametrize("now", [100, 200])
    def test_window_inclusive(self, prepared, clock, voter_a, now):
        prepared.start_election(100, 200, caller=ADMIN)
        clock.set(now)
        prepared.cast_vote(voter_a, 0)
        assert prepared.get_candidate(0).vote_count == 1

    def test_after_window(self, active, clock, voter_a):
        clock.set(201)
        with pytest.raises(StateError):
            active.cast_vote(voter_a, 0)

    def test_after_end(self, active, clock, voter_a):
        clock.set(250)
        active.end_election(caller=ADMIN)
        with pytest.raises(StateError):
            active.cast_vote(voter_a, 0)

    def test_unregistered_voter(self, active, hash_of):
        with pytest.raises(AuthorizationError) as exc:
            active.cast_vote(hash_of("stranger"), 0)
        assert not isinstance(exc.value, DuplicateError)

    def test_double_vote(self, active, voter_a):
        active.cast_vote(voter_a, 0)
        with pytest.raises(AuthorizationError) as exc:
            active.cast_vote(voter_a, 1)
        assert isinstance(exc.value, AlreadyVotedError)
        assert isinstance(exc.value, DuplicateError)
        assert active.get_candidate(1).vote_count == 0
        assert active.get_vote(voter_a).candidate_id == 0

    @pytest.mark.parametrize("candidate_id", [2, -1, "0", True, None])
    def test_invalid_candidate(self, active, registry, voter_a, candidate_id):
        with pytest.raises(ValidationError):
            active.cast_vote(voter_a, candidate_id)
        assert registry.is_eligible(voter_a)
        assert active.get_vote(voter_a) is None

    def test_state_checked_before_eligibility(self, prepared, hash_of):
        with pytest.raises(StateError):
            prepared.cast_vote(hash_of("stranger"), 99)

    def test_eligibility_checked_before_candidate(self, active, hash_of):
        with pytest.raises(AuthorizationError):
            active.cast_vote(hash_of("stranger"), 99)


class TestAtomicity:
    def test_failed_tally_rolls_back_everything(self, active, registry, published, voter_a, monkeypatch):
        def boom(candidate_id):
            raise RuntimeError("disk full")

        monkeypatch.setattr(active._candidates, "increment", boom)
        published.clear()

        with pytest.raises(RuntimeError):
            active.cast_vote(voter_a, 0)

        assert registry.is_eligible(voter_a)
        assert active.get_vote(voter_a) is None
        assert active.get_candidate(0).vote_count == 0
        assert published == []

    def test_failed_record_rolls_back_voter_flag(self, active, registry, voter_a, monkeypatch):
        def boom(record):
            raise RuntimeError("constraint")

        monkeypatch.setattr(active._votes, "insert", boom)
        with pytest.raises(RuntimeError):
            active.cast_vote(voter_a, 1)
        assert not registry.get_voter(voter_a).has_voted

    def test_voter_can_vote_after_rolled_back_attempt(self, active, voter_a, monkeypatch):
        def boom(record):
            raise RuntimeError("constraint")

        with monkeypatch.context() as m:
            m.setattr(active._votes, "insert", boom)
            with pytest.raises(RuntimeError):
                active.cast_vote(voter_a, 1)
        active.cast_vote(voter_a, 1)
        assert active.get_candidate(1).vote_count == 1

    def test_concurrent_double_vote_counts_once(self, active, voter_a):
        outcomes = []
        barrier = threading.Barrier(8)

        def vote():
            barrier.wait()
            try:
                active.cast_vote(voter_a, 0)
                outcomes.append("ok")
            except AuthorizationError:
                outcomes.append("rejected")

        threads = [threading.Thread(target=vote) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count("ok") == 1
        assert outcomes.count("rejected") == 7
        assert active.get_candidate(0).vote_count == 1


class TestScenarios:
    def test_full_election(self, active, registry, clock, voter_a, voter_b, conn):
        active.cast_vote(voter_a, 0)
        assert active.get_candidate(0).vote_count == 1

        # B tries to reuse A's identity
        with pytest.raises(DuplicateError):
            active.cast_vote(voter_a, 0)
        assert active.get_candidate(0).vote_count == 1

        clock.set(250)
        active.end_election(caller=ADMIN)
        active.declare_results(caller=ADMIN)

        assert active.get_results() == ([0, 1], [1, 0])
        assert registry.is_eligible(voter_b)
        assert validate_election(conn)["valid"]

    def test_tally_matches_turnout(self, prepared, registry, clock, hash_of):
        voters = [hash_of(f"citizen-{i}") for i in range(10)]
        registry.register_many([(v, f"holder-{i}") for i, v in enumerate(voters)], caller=ADMIN)
        prepared.start_election(100, 200, caller=ADMIN)
        clock.set(120)

        for i, voter in enumerate(voters[:7]):
            prepared.cast_vote(voter, i % 2)
        with pytest.raises(AuthorizationError):
            prepared.cast_vote(voters[0], 1)

        clock.set(200)
        prepared.end_election(caller=ADMIN)
        prepared.declare_results(caller=ADMIN)

        ids, counts = prepared.get_results()
        assert ids == [0, 1]
        assert counts == [4, 3]
        assert sum(counts) == registry.stats()["voted"] == 7

    def test_candidates_frozen_after_start(self, active):
        with pytest.raises(StateError):
            active.add_candidate("Carol", "Green", caller=ADMIN)
        assert active.get_candidate_count() == 2
