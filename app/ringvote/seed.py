"""
Demo data: one election, two candidates and a pre-filled ballot box.
"""

import random
from datetime import timedelta

from app.database import db_handler
from app.logger import logger
from app.ringvote import utils
from app.ringvote.model import models
from app.ringvote.model.schemas import CandidateIn, ElectionIn
from app.ringvote.model import crud
from app.ringvote.signatures import PlaceholderRingSigner

DEMO_ELECTION = ElectionIn(
    title="2024 Student Council Election",
    description="Annual student council election for leadership positions",
    registration_open=True,
    voting_open=True,
    results_visible=True,
)

DEMO_CANDIDATES = [
    (
        CandidateIn(
            name="Alex Johnson",
            party="Independent",
            platform="Promoting student wellness and academic excellence through innovative programs.",
            image_url="https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?auto=format&fit=crop&w=300&h=300",
        ),
        98,
    ),
    (
        CandidateIn(
            name="Sarah Chen",
            party="Progressive Alliance",
            platform="Building an inclusive campus community with sustainable initiatives and equal opportunities.",
            image_url="https://images.unsplash.com/photo-1494790108755-2616b612b47c?auto=format&fit=crop&w=300&h=300",
        ),
        89,
    ),
]


@db_handler.func_with_session
async def seed_demo_election(session, signer: PlaceholderRingSigner = None) -> models.Election:
    """
    Creates the demo election with its candidates and votes
    spread over the last 24 hours.
    """
    signer = signer or PlaceholderRingSigner()
    rng = random.Random()
    now = utils.tz_now()

    election = await crud.create_election(session=session, election=DEMO_ELECTION)
    for candidate_in, total_votes in DEMO_CANDIDATES:
        candidate = await crud.create_candidate(session=session, election_id=election.id, candidate=candidate_in)
        for _ in range(total_votes):
            signature = signer.sign(election.id, candidate.id)
            db_handler.add(
                session,
                models.Vote(
                    election_id=election.id,
                    candidate_id=candidate.id,
                    ring_signature_hash=signature.signature_hash,
                    ring_size=signature.ring_size,
                    timestamp=now - timedelta(seconds=rng.uniform(0, 24 * 60 * 60)),
                ),
            )
        await db_handler.commit(session)

    logger.info("Demo election %s seeded" % election.id)
    return election
