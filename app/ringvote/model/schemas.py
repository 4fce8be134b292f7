"""
Pydantic schemas (FastAPI) for RingVote.


Pydantic schemas are a way to give a 'type' to a group
of related data.

When we deal with SQLAlchemy we must note the following:

    Let 'TestModel' be a SQLAlchemy model, the API can:
        - Create/modify an instance of TestModel.
        - Out an instance of TestModel.

    To achieve this we create up to 3 schemas:
        - TestModelBase: Inherits from RingVoteSchema
          and holds the common data from both creating and
          returning an instance of TestModel.

        - TestModelIn: Inherits from TestModelBase and
          contains the specific data needed to create/modify an
          instance of TestModel.

        - TestModelOut: Inherits from TestModelBase and contains
          the data that we want the API to return to the user.

    By doing this we explicitly separate between creation data,
    which could be sensitive, and return data, improving the
    overall security of the API.

The browser client speaks camelCase, so every schema is exposed
through camelCase aliases while the Python side keeps snake_case.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.ringvote import utils
from app.ringvote_auth.model.schemas import UserOut


class RingVoteSchema(BaseModel):
    """
    Base class for a RingVote schema, includes the camelCase aliases.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ------------------ model-related schemas ------------------

#  Election-related schemas

class ElectionBase(RingVoteSchema):
    """
    Basic election schema.
    """

    title: str = Field(min_length=1, max_length=200)
    description: str | None = None


class ElectionIn(ElectionBase):
    """
    Schema for creating an election.
    """

    registration_open: bool = True
    voting_open: bool = False
    results_visible: bool = False


class ElectionOut(ElectionBase):
    """
    Schema for reading/returning election data
    """

    id: int
    registration_open: bool
    voting_open: bool
    results_visible: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ElectionFlagsIn(RingVoteSchema):
    """
    Partial update of the election lifecycle flags, missing
    flags are left untouched.
    """

    registration_open: bool | None = None
    voting_open: bool | None = None
    results_visible: bool | None = None

    model_config = ConfigDict(extra="forbid")

    def changed_flags(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


#  Candidate-related schemas

class CandidateBase(RingVoteSchema):
    """
    Basic candidate schema.
    """

    name: str = Field(min_length=1, max_length=200)
    party: str | None = None
    platform: str | None = None
    image_url: str | None = None


class CandidateIn(CandidateBase):
    """
    Schema for creating a candidate.
    """

    pass


class CandidateOut(CandidateBase):
    """
    Schema for reading/returning candidate data.
    """

    id: int
    election_id: int

    model_config = ConfigDict(from_attributes=True)


#  Registration-related schemas

class RegistrationOut(RingVoteSchema):
    """
    Schema for reading/returning a voter registration.
    """

    id: int
    user_id: int
    election_id: int
    ring_position: int
    verified: bool
    registered_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class RegistrationWithUserOut(RegistrationOut):
    """
    Registration joined with its user, for the admin panel.
    """

    user: UserOut

    model_config = ConfigDict(from_attributes=True)


#  Vote-related schemas

class VoteIn(RingVoteSchema):
    """
    Schema for casting a vote, the election comes from the path.
    """

    candidate_id: int = Field(gt=0)


class VoteOut(RingVoteSchema):
    """
    Schema for reading/returning vote data.
    """

    id: int
    election_id: int
    candidate_id: int | None
    ring_signature_hash: str
    ring_size: int
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)


class VoteReceiptOut(RingVoteSchema):
    """
    What the voter gets back after casting a vote.
    """

    vote: VoteOut
    ring_signature_hash: str
    ring_size: int
    timestamp: datetime


#  Results-related schemas

class CandidateResultOut(RingVoteSchema):
    candidate_id: int
    count: int
    percentage: str
    candidate: CandidateOut


class ResultsOut(RingVoteSchema):
    """
    Tally of an election.
    """

    results: list[CandidateResultOut]
    total_votes: int
    turnout: str = Field(alias="voterTurnout")


#  Log-related schemas

class ElectionLogOut(RingVoteSchema):
    id: int
    election_id: int
    log_level: str
    event: str
    event_params: dict | None = None
    created_at: datetime | None = None

    @field_validator("event_params", mode="before")
    @classmethod
    def parse_event_params(cls, value):
        return utils.from_json(value)

    model_config = ConfigDict(from_attributes=True)
