import asyncio

import pytest

from app.ringvote.core import registration
from app.ringvote.exceptions import (
    AlreadyRegisteredError,
    ElectionNotFoundError,
    PersistenceError,
    RegistrationClosedError,
    RegistrationConflict,
)

from tests.fakes import MemoryStore

pytestmark = pytest.mark.anyio


async def test_register_creates_verified_registration(store):
    election = store.add_election()

    voter_registration = await registration.register_voter(store, user_id=7, election_id=election.id)

    assert voter_registration.user_id == 7
    assert voter_registration.election_id == election.id
    assert voter_registration.verified is True
    assert voter_registration.ring_position == 1


async def test_register_twice_is_rejected(store):
    election = store.add_election()
    await registration.register_voter(store, user_id=7, election_id=election.id)

    with pytest.raises(AlreadyRegisteredError):
        await registration.register_voter(store, user_id=7, election_id=election.id)

    assert len(await store.get_registrations_by_election(election.id)) == 1


async def test_ring_positions_follow_registration_order(store):
    election = store.add_election()

    for user_id in range(1, 6):
        await registration.register_voter(store, user_id=user_id, election_id=election.id)

    registrations = await store.get_registrations_by_election(election.id)
    assert [r.ring_position for r in registrations] == [1, 2, 3, 4, 5]
    assert [r.user_id for r in registrations] == [1, 2, 3, 4, 5]


async def test_ring_positions_are_per_election(store):
    first = store.add_election(title="First")
    second = store.add_election(title="Second")
    await registration.register_voter(store, user_id=1, election_id=first.id)
    await registration.register_voter(store, user_id=2, election_id=first.id)

    voter_registration = await registration.register_voter(store, user_id=1, election_id=second.id)

    assert voter_registration.ring_position == 1


async def test_register_when_registration_closed(store):
    election = store.add_election(registration_open=False, voting_open=True)

    with pytest.raises(RegistrationClosedError) as exc_info:
        await registration.register_voter(store, user_id=7, election_id=election.id)

    assert exc_info.value.status_code == 403
    assert await store.get_registration(7, election.id) is None


async def test_register_unknown_election(store):
    with pytest.raises(ElectionNotFoundError):
        await registration.register_voter(store, user_id=7, election_id=99)


async def test_concurrent_registrations_of_same_user(store):
    election = store.add_election()

    outcomes = await asyncio.gather(
        registration.register_voter(store, user_id=7, election_id=election.id),
        registration.register_voter(store, user_id=7, election_id=election.id),
        return_exceptions=True,
    )

    errors = [o for o in outcomes if isinstance(o, Exception)]
    assert len(errors) == 1
    assert isinstance(errors[0], AlreadyRegisteredError)
    assert len(await store.get_registrations_by_election(election.id)) == 1


async def test_concurrent_registrations_get_distinct_positions(store):
    election = store.add_election()

    await asyncio.gather(
        *[registration.register_voter(store, user_id=user_id, election_id=election.id) for user_id in range(1, 4)]
    )

    positions = [r.ring_position for r in await store.get_registrations_by_election(election.id)]
    assert sorted(positions) == [1, 2, 3]


class AlwaysConflictingStore(MemoryStore):

    async def create_registration(self, user_id, election_id, ring_position, verified):
        raise RegistrationConflict()


async def test_registration_gives_up_after_repeated_conflicts():
    store = AlwaysConflictingStore()
    election = store.add_election()

    with pytest.raises(PersistenceError):
        await registration.register_voter(store, user_id=7, election_id=election.id)


async def test_get_registrations_of_unknown_election(store):
    with pytest.raises(ElectionNotFoundError):
        await registration.get_registrations(store, 99)
