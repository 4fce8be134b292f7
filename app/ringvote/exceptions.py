"""
Custom Exceptions for RingVote.

Every domain error carries the HTTP status the API answers with,
the handlers registered in app.main do the translation.
"""


class RingVoteError(Exception):
    """Base class for RingVote domain exceptions"""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"detail": self.message}


class NotFoundError(RingVoteError):
    status_code = 404
    message = "Resource not found"


class ElectionNotFoundError(NotFoundError):
    message = "Election not found"


class AlreadyRegisteredError(RingVoteError):
    status_code = 400
    message = "Already registered for this election"


class InvalidCandidateError(RingVoteError):
    """
    Raised when the voted candidate does not run in the election.

    Reported like a schema failure, with a field-level error list.
    """

    status_code = 400
    message = "Invalid vote data"

    def __init__(self, candidate_id: int, election_id: int):
        super().__init__()
        self.errors = [
            {
                "field": "candidateId",
                "message": f"Candidate {candidate_id} does not belong to election {election_id}",
                "type": "invalid_candidate",
            }
        ]

    def to_dict(self) -> dict:
        return {"detail": self.message, "errors": self.errors}


class NotRegisteredOrUnverifiedError(RingVoteError):
    status_code = 403
    message = "Not registered or verified for this election"


class RegistrationClosedError(RingVoteError):
    status_code = 403
    message = "Registration is closed for this election"


class VotingClosedError(RingVoteError):
    status_code = 403
    message = "Voting is closed for this election"


class ResultsHiddenError(RingVoteError):
    status_code = 403
    message = "Results are not visible yet"


class PersistenceError(RingVoteError):
    """
    Any backing-store failure, the cause is logged but never sent
    back to the client.
    """

    status_code = 500
    message = "Internal server error"


class RegistrationConflict(Exception):
    """
    Raised by a store when inserting a registration breaks one of its
    uniqueness constraints (same user or same ring position).
    """
