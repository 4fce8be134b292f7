"""
Enums for RingVote model.
"""

import enum


class ElectionEventEnum(str, enum.Enum):
    """Events stored in the election log."""


class ElectionPublicEventEnum(ElectionEventEnum):
    ELECTION_CREATED = "election_created"
    CANDIDATE_ADDED = "candidate_added"
    FLAGS_UPDATED = "flags_updated"
    VOTER_REGISTERED = "voter_registered"
    VOTE_CAST = "vote_cast"


class ElectionAdminEventEnum(ElectionEventEnum):
    REGISTRATION_REJECTED = "registration_rejected"
    VOTE_REJECTED = "vote_rejected"
