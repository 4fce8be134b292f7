"""
Election State Controller.

The three lifecycle flags of an election are independent: any
combination is accepted, e.g. voting may be open while registration
is already closed.
"""

from app.ringvote.exceptions import ElectionNotFoundError
from app.ringvote.store import AbstractStore


async def get_election_or_404(store: AbstractStore, election_id: int):
    election = await store.get_election(election_id)
    if election is None:
        raise ElectionNotFoundError()
    return election


async def get_current_election(store: AbstractStore):
    """
    The first election is the one shown by the client.
    """
    elections = await store.get_elections()
    if not elections:
        raise ElectionNotFoundError("No election found")
    return elections[0]


async def update_election_flags(store: AbstractStore, election_id: int, flags: dict):
    """
    Applies a partial update of registration_open, voting_open and
    results_visible; flags not present in `flags` keep their value.
    """
    election = await get_election_or_404(store, election_id)
    if not flags:
        return election

    return await store.update_election(election_id, flags)
