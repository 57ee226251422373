"""Tests for the voter registry."""

import pytest

from app.errors import AuthorizationError, DuplicateError, ValidationError
from app.models.common import VoterMarkedAsVoted, VoterRegistered
from app.repositories import VoterRepository
from app.services import VoterRegistry

ADMIN = "admin"


class TestRegister:
    def test_creates_eligible_voter(self, registry, voter_a):
        voter = registry.register(voter_a, "holder-a", caller=ADMIN)
        assert voter.is_registered
        assert not voter.has_voted
        assert registry.is_eligible(voter_a)

    def test_emits_event(self, registry, published, voter_a):
        registry.register(voter_a, "holder-a", caller=ADMIN)
        assert published == [VoterRegistered(voter_hash=voter_a)]

    def test_non_admin_rejected(self, registry, voter_a):
        with pytest.raises(AuthorizationError):
            registry.register(voter_a, "holder-a", caller="mallory")
        assert registry.get_voter(voter_a) is None

    def test_duplicate_rejected(self, registry, published, voter_a):
        registry.register(voter_a, "holder-a", caller=ADMIN)
        with pytest.raises(DuplicateError):
            registry.register(voter_a, "someone-else", caller=ADMIN)
        assert registry.get_voter(voter_a).holder_address == "holder-a"
        assert len(published) == 1

    @pytest.mark.parametrize("bad", ["", "abc", "A" * 64, "g" * 64, None])
    def test_malformed_hash_rejected(self, registry, bad):
        with pytest.raises(ValidationError):
            registry.register(bad, "holder", caller=ADMIN)

    def test_holder_required(self, registry, voter_a):
        with pytest.raises(ValidationError):
            registry.register(voter_a, "", caller=ADMIN)

    def test_holder_cannot_be_admin(self, registry, voter_a):
        with pytest.raises(ValidationError):
            registry.register(voter_a, ADMIN, caller=ADMIN)


class TestRegisterMany:
    def test_registers_all(self, registry, hash_of):
        rows = [(hash_of(f"v{i}"), f"holder-{i}") for i in range(5)]
        assert registry.register_many(rows, caller=ADMIN) == 5
        assert registry.stats() == {"registered": 5, "voted": 0}

    def test_bad_row_rolls_back_batch(self, registry, published, hash_of):
        rows = [(hash_of("v1"), "h1"), (hash_of("v2"), "h2"), ("not-a-hash", "h3")]
        with pytest.raises(ValidationError):
            registry.register_many(rows, caller=ADMIN)
        assert registry.stats() == {"registered": 0, "voted": 0}
        assert published == []

    def test_duplicate_within_batch_rolls_back(self, registry, hash_of):
        rows = [(hash_of("v1"), "h1"), (hash_of("v1"), "h1")]
        with pytest.raises(DuplicateError):
            registry.register_many(rows, caller=ADMIN)
        assert registry.get_voter(hash_of("v1")) is None


class TestEligibility:
    def test_unknown_voter(self, registry, voter_a):
        assert not registry.is_eligible(voter_a)

    def test_malformed_hash_is_not_eligible(self, registry):
        assert not registry.is_eligible("nope")

    def test_voted_voter_not_eligible(self, registry, voter_a):
        registry.register(voter_a, "holder-a", caller=ADMIN)
        registry.mark_voted(voter_a, caller=ADMIN)
        assert not registry.is_eligible(voter_a)


class TestMarkVoted:
    def test_flips_flag_once(self, registry, published, voter_a):
        registry.register(voter_a, "holder-a", caller=ADMIN)
        registry.mark_voted(voter_a, caller=ADMIN)
        assert registry.get_voter(voter_a).has_voted
        assert published[-1] == VoterMarkedAsVoted(voter_hash=voter_a)

    def test_second_call_fails(self, registry, voter_a):
        registry.register(voter_a, "holder-a", caller=ADMIN)
        registry.mark_voted(voter_a, caller=ADMIN)
        with pytest.raises(DuplicateError):
            registry.mark_voted(voter_a, caller=ADMIN)
        assert registry.stats()["voted"] == 1

    def test_unregistered_voter(self, registry, voter_a):
        with pytest.raises(ValidationError):
            registry.mark_voted(voter_a, caller=ADMIN)

    def test_non_admin_rejected(self, registry, voter_a):
        registry.register(voter_a, "holder-a", caller=ADMIN)
        with pytest.raises(AuthorizationError):
            registry.mark_voted(voter_a, caller="holder-a")
        assert registry.is_eligible(voter_a)


class TestMarker:
    def test_granted_once(self, registry):
        registry.grant_marker(caller=ADMIN)
        with pytest.raises(DuplicateError):
            registry.grant_marker(caller=ADMIN)

    def test_grant_requires_admin(self, registry):
        with pytest.raises(AuthorizationError):
            registry.grant_marker(caller="mallory")

    def test_marker_acts_without_caller(self, registry, voter_a):
        marker = registry.grant_marker(caller=ADMIN)
        registry.register(voter_a, "holder-a", caller=ADMIN)
        marker.mark_voted(voter_a)
        assert registry.get_voter(voter_a).has_voted

    def test_marker_keeps_guards(self, registry, voter_a):
        marker = registry.grant_marker(caller=ADMIN)
        with pytest.raises(ValidationError):
            marker.mark_voted(voter_a)

    def test_admin_is_required(self, conn, tx):
        with pytest.raises(ValidationError):
            VoterRegistry(admin="", voters=VoterRepository(conn), tx=tx)
