"""
Storage capability used by the voting core.

The core never touches a session: it receives a store and calls
the operations below. SQLStore is the production implementation,
tests plug an in-memory store with the same methods.
"""

from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from app.database import db_handler
from app.logger import logger
from app.ringvote.exceptions import PersistenceError, RegistrationConflict
from app.ringvote.model import crud
from app.ringvote.model.schemas import CandidateIn, ElectionIn


class AbstractStore(object):
    """
    Holds the operations the election core needs from persistence.
    """

    async def get_elections(self):
        raise NotImplementedError

    async def get_election(self, election_id: int):
        raise NotImplementedError

    async def create_election(self, election: ElectionIn):
        raise NotImplementedError

    async def update_election(self, election_id: int, fields: dict):
        raise NotImplementedError

    async def get_candidates_by_election(self, election_id: int):
        raise NotImplementedError

    async def create_candidate(self, election_id: int, candidate: CandidateIn):
        raise NotImplementedError

    async def get_votes_by_election(self, election_id: int):
        raise NotImplementedError

    async def create_vote(self, election_id: int, candidate_id: int, ring_signature_hash: str, ring_size: int):
        raise NotImplementedError

    async def get_registration(self, user_id: int, election_id: int):
        raise NotImplementedError

    async def get_registrations_by_election(self, election_id: int):
        """
        Registrations of an election with their user loaded.
        """
        raise NotImplementedError

    async def get_max_ring_position(self, election_id: int) -> int:
        raise NotImplementedError

    async def create_registration(self, user_id: int, election_id: int, ring_position: int, verified: bool):
        """
        Must raise RegistrationConflict when the (user, election) or the
        (election, ring_position) pair is already taken.
        """
        raise NotImplementedError

    async def get_election_logs(self, election_id: int):
        raise NotImplementedError


def persistence_guard(method):
    """
    Turns any SQLAlchemy failure into a PersistenceError after
    rolling back the session.
    """

    @wraps(method)
    async def wrapper(self, *args, **kwargs):
        try:
            return await method(self, *args, **kwargs)
        except SQLAlchemyError as e:
            logger.error("Store operation %s failed: %r" % (method.__name__, e))
            await db_handler.rollback(self.session)
            raise PersistenceError() from e

    return wrapper


class SQLStore(AbstractStore):
    """
    Store backed by the relational database through the crud utils.
    """

    def __init__(self, session: Session | AsyncSession) -> None:
        self.session = session

    @persistence_guard
    async def get_elections(self):
        return await crud.get_elections(session=self.session)

    @persistence_guard
    async def get_election(self, election_id: int):
        return await crud.get_election_by_id(session=self.session, election_id=election_id)

    @persistence_guard
    async def create_election(self, election: ElectionIn):
        return await crud.create_election(session=self.session, election=election)

    @persistence_guard
    async def update_election(self, election_id: int, fields: dict):
        return await crud.update_election(session=self.session, election_id=election_id, fields=fields)

    @persistence_guard
    async def get_candidates_by_election(self, election_id: int):
        return await crud.get_candidates_by_election_id(session=self.session, election_id=election_id)

    @persistence_guard
    async def create_candidate(self, election_id: int, candidate: CandidateIn):
        return await crud.create_candidate(session=self.session, election_id=election_id, candidate=candidate)

    @persistence_guard
    async def get_votes_by_election(self, election_id: int):
        return await crud.get_votes_by_election_id(session=self.session, election_id=election_id)

    @persistence_guard
    async def create_vote(self, election_id: int, candidate_id: int, ring_signature_hash: str, ring_size: int):
        return await crud.create_vote(
            session=self.session,
            election_id=election_id,
            candidate_id=candidate_id,
            ring_signature_hash=ring_signature_hash,
            ring_size=ring_size,
        )

    @persistence_guard
    async def get_registration(self, user_id: int, election_id: int):
        return await crud.get_registration(session=self.session, user_id=user_id, election_id=election_id)

    @persistence_guard
    async def get_registrations_by_election(self, election_id: int):
        return await crud.get_registrations_by_election_id(session=self.session, election_id=election_id)

    @persistence_guard
    async def get_max_ring_position(self, election_id: int) -> int:
        return await crud.get_max_ring_position(session=self.session, election_id=election_id)

    @persistence_guard
    async def create_registration(self, user_id: int, election_id: int, ring_position: int, verified: bool):
        try:
            return await crud.create_registration(
                session=self.session,
                user_id=user_id,
                election_id=election_id,
                ring_position=ring_position,
                verified=verified,
            )
        except IntegrityError as e:
            await db_handler.rollback(self.session)
            raise RegistrationConflict() from e

    @persistence_guard
    async def get_election_logs(self, election_id: int):
        return await crud.get_logs_by_election_id(session=self.session, election_id=election_id)
