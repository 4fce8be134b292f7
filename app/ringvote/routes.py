from fastapi import Depends, APIRouter

from app.dependencies import get_store
from app.logger import election_logger, logger
from app.ringvote.core import election_state, registration, tally, votes
from app.ringvote.model import schemas
from app.ringvote.model.enums import ElectionAdminEventEnum, ElectionPublicEventEnum
from app.ringvote.exceptions import (
    NotRegisteredOrUnverifiedError,
    RegistrationClosedError,
    VotingClosedError,
)
from app.ringvote.store import AbstractStore
from app.ringvote_auth.auth_bearer import AuthAdmin, AuthUser
from app.ringvote_auth.model.models import User

api_router = APIRouter(prefix="/api")


# ----- Election Routes -----


@api_router.get(
    "/elections", response_model=list[schemas.ElectionOut], status_code=200
)
async def get_elections(store: AbstractStore = Depends(get_store)):
    """
    Route for listing every election
    """
    return await store.get_elections()


@api_router.get(
    "/elections/current", response_model=schemas.ElectionOut, status_code=200
)
async def get_current_election(store: AbstractStore = Depends(get_store)):
    """
    Route for getting the election shown by the client
    """
    return await election_state.get_current_election(store)


@api_router.get(
    "/elections/{election_id}", response_model=schemas.ElectionOut, status_code=200
)
async def get_election(election_id: int, store: AbstractStore = Depends(get_store)):
    """
    Route for getting a specific election by id
    """
    return await election_state.get_election_or_404(store, election_id)


@api_router.get(
    "/elections/{election_id}/candidates",
    response_model=list[schemas.CandidateOut],
    status_code=200,
)
async def get_candidates(election_id: int, store: AbstractStore = Depends(get_store)):
    """
    Route for getting the candidates of an election
    """
    return await store.get_candidates_by_election(election_id)


@api_router.get(
    "/elections/{election_id}/results", response_model=schemas.ResultsOut, status_code=200
)
async def get_results(
    election_id: int,
    current_user: User | None = Depends(AuthUser(auto_error=False)),
    store: AbstractStore = Depends(get_store),
):
    """
    Route for getting the tally of an election
    """
    is_admin = current_user is not None and current_user.is_admin
    return await tally.get_results(store, election_id, is_admin=is_admin)


# ----- Voter Routes -----


@api_router.post(
    "/elections/{election_id}/register",
    response_model=schemas.RegistrationOut,
    status_code=200,
)
async def register(
    election_id: int,
    current_user: User = Depends(AuthUser()),
    store: AbstractStore = Depends(get_store),
):
    """
    Route for registering the current user as a voter of an election
    """
    try:
        voter_registration = await registration.register_voter(
            store, user_id=current_user.id, election_id=election_id
        )
    except RegistrationClosedError:
        await election_logger.warning(
            election_id=election_id,
            event=ElectionAdminEventEnum.REGISTRATION_REJECTED,
            user_id=current_user.id,
        )
        raise

    logger.info("User %s registered for election %s" % (current_user.id, election_id))
    await election_logger.info(
        election_id=election_id,
        event=ElectionPublicEventEnum.VOTER_REGISTERED,
        ring_position=voter_registration.ring_position,
    )
    return voter_registration


@api_router.post(
    "/elections/{election_id}/vote",
    response_model=schemas.VoteReceiptOut,
    status_code=200,
)
async def vote(
    election_id: int,
    vote_in: schemas.VoteIn,
    current_user: User = Depends(AuthUser()),
    store: AbstractStore = Depends(get_store),
):
    """
    Route for casting a vote
    """
    try:
        receipt = await votes.submit_vote(
            store,
            user_id=current_user.id,
            election_id=election_id,
            candidate_id=vote_in.candidate_id,
        )
    except (NotRegisteredOrUnverifiedError, VotingClosedError) as e:
        await election_logger.warning(
            election_id=election_id,
            event=ElectionAdminEventEnum.VOTE_REJECTED,
            reason=e.message,
        )
        raise

    # The voter is left out on purpose, a vote must not point back to a user
    await election_logger.info(
        election_id=election_id,
        event=ElectionPublicEventEnum.VOTE_CAST,
        ring_signature_hash=receipt["ring_signature_hash"],
    )
    return receipt


# ----- Election Admin Routes -----


@api_router.post(
    "/admin/elections", response_model=schemas.ElectionOut, status_code=201
)
async def create_election(
    election_in: schemas.ElectionIn,
    current_user: User = Depends(AuthAdmin()),
    store: AbstractStore = Depends(get_store),
):
    """
    Admin's route for creating an election
    """
    election = await store.create_election(election_in)
    await election_logger.info(
        election_id=election.id,
        event=ElectionPublicEventEnum.ELECTION_CREATED,
        admin_id=current_user.id,
    )
    return election


@api_router.patch(
    "/admin/elections/{election_id}", response_model=schemas.ElectionOut, status_code=200
)
async def update_election(
    election_id: int,
    flags_in: schemas.ElectionFlagsIn,
    current_user: User = Depends(AuthAdmin()),
    store: AbstractStore = Depends(get_store),
):
    """
    Admin's route for toggling the lifecycle flags of an election
    """
    flags = flags_in.changed_flags()
    election = await election_state.update_election_flags(store, election_id, flags)
    await election_logger.info(
        election_id=election.id,
        event=ElectionPublicEventEnum.FLAGS_UPDATED,
        admin_id=current_user.id,
        **flags,
    )
    return election


@api_router.post(
    "/admin/elections/{election_id}/candidates",
    response_model=schemas.CandidateOut,
    status_code=201,
)
async def create_candidate(
    election_id: int,
    candidate_in: schemas.CandidateIn,
    current_user: User = Depends(AuthAdmin()),
    store: AbstractStore = Depends(get_store),
):
    """
    Admin's route for adding a candidate to an election
    """
    await election_state.get_election_or_404(store, election_id)
    candidate = await store.create_candidate(election_id, candidate_in)
    await election_logger.info(
        election_id=election_id,
        event=ElectionPublicEventEnum.CANDIDATE_ADDED,
        candidate_id=candidate.id,
    )
    return candidate


@api_router.get(
    "/admin/elections/{election_id}/registrations",
    response_model=list[schemas.RegistrationWithUserOut],
    status_code=200,
)
async def get_registrations(
    election_id: int,
    current_user: User = Depends(AuthAdmin()),
    store: AbstractStore = Depends(get_store),
):
    """
    Admin's route for getting the voter registrations of an election
    """
    return await registration.get_registrations(store, election_id)


@api_router.get(
    "/admin/elections/{election_id}/logs",
    response_model=list[schemas.ElectionLogOut],
    status_code=200,
)
async def get_election_logs(
    election_id: int,
    current_user: User = Depends(AuthAdmin()),
    store: AbstractStore = Depends(get_store),
):
    """
    Admin's route for getting the event log of an election
    """
    await election_state.get_election_or_404(store, election_id)
    return await store.get_election_logs(election_id)
