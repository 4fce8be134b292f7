"""
CRUD utils for RingVote
(Create - Read - Update - delete)
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, update, func

from app.ringvote import utils
from app.ringvote.model import models
from app.ringvote.model.schemas import ElectionIn, CandidateIn
from app.database import db_handler


REGISTRATION_QUERY_OPTIONS = selectinload(
    models.VoterRegistration.user
)


# ----- Election CRUD Utils -----


async def get_elections(session: Session | AsyncSession):
    query = select(models.Election).order_by(models.Election.id)
    result = await db_handler.execute(session, query)
    return result.scalars().all()


async def get_election_by_id(session: Session | AsyncSession, election_id: int):
    query = select(models.Election).where(models.Election.id == election_id)
    result = await db_handler.execute(session, query)
    return result.scalars().first()


async def create_election(session: Session | AsyncSession, election: ElectionIn):
    db_election = models.Election(**election.model_dump())
    db_handler.add(session, db_election)
    await db_handler.commit(session)
    await db_handler.refresh(session, db_election)
    return db_election


async def update_election(session: Session | AsyncSession, election_id: int, fields: dict):
    query = update(models.Election).where(
        models.Election.id == election_id
    ).values(fields)
    await db_handler.execute(session, query)
    await db_handler.commit(session)

    election = await get_election_by_id(session=session, election_id=election_id)
    if election is not None:
        await db_handler.refresh(session, election)
    return election


# ----- Candidate CRUD Utils -----


async def get_candidates_by_election_id(session: Session | AsyncSession, election_id: int):
    query = select(models.Candidate).where(
        models.Candidate.election_id == election_id
    ).order_by(models.Candidate.id)
    result = await db_handler.execute(session, query)
    return result.scalars().all()


async def create_candidate(session: Session | AsyncSession, election_id: int, candidate: CandidateIn):
    db_candidate = models.Candidate(election_id=election_id, **candidate.model_dump())
    db_handler.add(session, db_candidate)
    await db_handler.commit(session)
    await db_handler.refresh(session, db_candidate)
    return db_candidate


# ----- Vote CRUD Utils -----


async def get_votes_by_election_id(session: Session | AsyncSession, election_id: int):
    query = select(models.Vote).where(models.Vote.election_id == election_id)
    result = await db_handler.execute(session, query)
    return result.scalars().all()


async def create_vote(session: Session | AsyncSession, election_id: int, candidate_id: int, ring_signature_hash: str, ring_size: int):
    db_vote = models.Vote(
        election_id=election_id,
        candidate_id=candidate_id,
        ring_signature_hash=ring_signature_hash,
        ring_size=ring_size,
        timestamp=utils.tz_now(),
    )
    db_handler.add(session, db_vote)
    await db_handler.commit(session)
    await db_handler.refresh(session, db_vote)
    return db_vote


# ----- VoterRegistration CRUD Utils -----


async def get_registration(session: Session | AsyncSession, user_id: int, election_id: int):
    query = select(models.VoterRegistration).where(
        models.VoterRegistration.user_id == user_id,
        models.VoterRegistration.election_id == election_id,
    )
    result = await db_handler.execute(session, query)
    return result.scalars().first()


async def get_registrations_by_election_id(session: Session | AsyncSession, election_id: int):
    query = select(models.VoterRegistration).where(
        models.VoterRegistration.election_id == election_id
    ).order_by(models.VoterRegistration.ring_position).options(
        REGISTRATION_QUERY_OPTIONS
    )
    result = await db_handler.execute(session, query)
    return result.scalars().all()


async def get_max_ring_position(session: Session | AsyncSession, election_id: int):
    query = select(func.max(models.VoterRegistration.ring_position)).where(
        models.VoterRegistration.election_id == election_id
    )
    result = await db_handler.execute(session, query)
    return result.scalar() or 0


async def create_registration(session: Session | AsyncSession, user_id: int, election_id: int, ring_position: int, verified: bool):
    db_registration = models.VoterRegistration(
        user_id=user_id,
        election_id=election_id,
        ring_position=ring_position,
        verified=verified,
    )
    db_handler.add(session, db_registration)
    await db_handler.commit(session)
    await db_handler.refresh(session, db_registration)
    return db_registration


# ----- ElectionLog CRUD Utils -----


async def log_to_db(session: Session | AsyncSession, election_id: int, log_level: str, event: str, event_params: str):
    db_log = models.ElectionLog(
        election_id=election_id,
        log_level=log_level,
        event=event,
        event_params=event_params,
    )
    db_handler.add(session, db_log)
    await db_handler.commit(session)
    await db_handler.refresh(session, db_log)
    return db_log


async def get_logs_by_election_id(session: Session | AsyncSession, election_id: int):
    query = select(models.ElectionLog).where(
        models.ElectionLog.election_id == election_id
    ).order_by(models.ElectionLog.id)
    result = await db_handler.execute(session, query)
    return result.scalars().all()
