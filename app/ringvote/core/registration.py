"""
Registration Ledger.
"""

from app.ringvote.core.election_state import get_election_or_404
from app.ringvote.exceptions import (
    AlreadyRegisteredError,
    PersistenceError,
    RegistrationClosedError,
    RegistrationConflict,
)
from app.ringvote.store import AbstractStore

REGISTRATION_ATTEMPTS = 3


async def register_voter(store: AbstractStore, user_id: int, election_id: int):
    """
    Registers a user for an election, at most once.

    The ring position is the next number of the election's sequence.
    Uniqueness of both the user and the position is left to the store:
    a conflict caused by the same user means a concurrent registration
    won, any other conflict means the position was taken and a new
    one is drawn.
    """
    election = await get_election_or_404(store, election_id)
    if not election.registration_open:
        raise RegistrationClosedError()

    for _ in range(REGISTRATION_ATTEMPTS):
        if await store.get_registration(user_id, election_id) is not None:
            raise AlreadyRegisteredError()

        ring_position = await store.get_max_ring_position(election_id) + 1
        try:
            # No verification step exists, registrations are verified right away
            return await store.create_registration(
                user_id=user_id,
                election_id=election_id,
                ring_position=ring_position,
                verified=True,
            )
        except RegistrationConflict:
            continue

    if await store.get_registration(user_id, election_id) is not None:
        raise AlreadyRegisteredError()
    raise PersistenceError("Could not assign a ring position")


async def get_registrations(store: AbstractStore, election_id: int):
    await get_election_or_404(store, election_id)
    return await store.get_registrations_by_election(election_id)
