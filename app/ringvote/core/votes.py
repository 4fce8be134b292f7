"""
Vote Recorder.
"""

from app.ringvote.core.election_state import get_election_or_404
from app.ringvote.exceptions import (
    InvalidCandidateError,
    NotRegisteredOrUnverifiedError,
    VotingClosedError,
)
from app.ringvote.signatures import PlaceholderRingSigner, default_signer
from app.ringvote.store import AbstractStore


async def submit_vote(
    store: AbstractStore,
    user_id: int,
    election_id: int,
    candidate_id: int,
    signer: PlaceholderRingSigner = default_signer,
) -> dict:
    """
    Records a vote and returns its receipt.

    The stored vote keeps no reference to the user. One vote per
    registered user is not enforced.
    """
    election = await get_election_or_404(store, election_id)

    registration = await store.get_registration(user_id, election_id)
    if registration is None or not registration.verified:
        raise NotRegisteredOrUnverifiedError()

    if not election.voting_open:
        raise VotingClosedError()

    candidates = await store.get_candidates_by_election(election_id)
    if candidate_id not in {c.id for c in candidates}:
        raise InvalidCandidateError(candidate_id=candidate_id, election_id=election_id)

    signature = signer.sign(election_id, candidate_id)
    vote = await store.create_vote(
        election_id=election_id,
        candidate_id=candidate_id,
        ring_signature_hash=signature.signature_hash,
        ring_size=signature.ring_size,
    )
    return {
        "vote": vote,
        "ring_signature_hash": vote.ring_signature_hash,
        "ring_size": vote.ring_size,
        "timestamp": vote.timestamp,
    }
