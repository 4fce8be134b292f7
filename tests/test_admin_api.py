import anyio
import pytest

from app.ringvote.model import models
from app.ringvote.seed import seed_demo_election


def test_admin_routes_require_authentication(client, election):
    response = client.patch(f"/api/admin/elections/{election.id}", json={"votingOpen": False})

    assert response.status_code == 401


def test_admin_routes_reject_regular_users(client, election, voter_headers):
    response = client.patch(
        f"/api/admin/elections/{election.id}", json={"votingOpen": False}, headers=voter_headers
    )

    assert response.status_code == 403
    assert response.json() == {"detail": "Administrator access required"}


def test_create_election(client, admin_headers):
    response = client.post(
        "/api/admin/elections",
        json={"title": "Club President", "description": "Spring vote"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Club President"
    assert body["registrationOpen"] is True
    assert body["votingOpen"] is False
    assert body["resultsVisible"] is False


def test_create_election_without_title(client, admin_headers):
    response = client.post("/api/admin/elections", json={"description": "No title"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "title"


def test_update_single_flag(client, election, admin_headers):
    response = client.patch(
        f"/api/admin/elections/{election.id}", json={"resultsVisible": True}, headers=admin_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["resultsVisible"] is True
    assert body["registrationOpen"] is True
    assert body["votingOpen"] is True


def test_update_flags_rejects_unknown_fields(client, election, admin_headers):
    response = client.patch(
        f"/api/admin/elections/{election.id}", json={"title": "Renamed"}, headers=admin_headers
    )

    assert response.status_code == 400


def test_update_unknown_election(client, admin_headers):
    response = client.patch("/api/admin/elections/123", json={"votingOpen": True}, headers=admin_headers)

    assert response.status_code == 404


def test_closed_registration_still_allows_registered_voters_to_vote(
    client, election, candidates, voter_headers, admin_headers
):
    client.post(f"/api/elections/{election.id}/register", headers=voter_headers)
    client.patch(
        f"/api/admin/elections/{election.id}", json={"registrationOpen": False}, headers=admin_headers
    )

    response = client.post(
        f"/api/elections/{election.id}/vote",
        json={"candidateId": candidates[0].id},
        headers=voter_headers,
    )

    assert response.status_code == 200


def test_create_candidate(client, election, admin_headers):
    response = client.post(
        f"/api/admin/elections/{election.id}/candidates",
        json={"name": "Jordan Lee", "party": "Green", "imageUrl": "https://example.com/j.png"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["electionId"] == election.id
    assert body["imageUrl"] == "https://example.com/j.png"
    names = [c["name"] for c in client.get(f"/api/elections/{election.id}/candidates").json()]
    assert names == ["Jordan Lee"]


def test_create_candidate_for_unknown_election(client, admin_headers):
    response = client.post(
        "/api/admin/elections/123/candidates", json={"name": "Nobody"}, headers=admin_headers
    )

    assert response.status_code == 404


def test_list_registrations_with_users(client, election, voter, voter_headers, other_voter_headers, admin_headers):
    client.post(f"/api/elections/{election.id}/register", headers=voter_headers)
    client.post(f"/api/elections/{election.id}/register", headers=other_voter_headers)

    response = client.get(f"/api/admin/elections/{election.id}/registrations", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert [r["ringPosition"] for r in body] == [1, 2]
    assert body[0]["user"]["email"] == voter.email
    assert body[0]["user"]["id"] == voter.id


def test_election_logs(client, election, candidates, voter_headers, admin_headers):
    client.post(f"/api/elections/{election.id}/register", headers=voter_headers)
    client.post(
        f"/api/elections/{election.id}/vote",
        json={"candidateId": candidates[0].id},
        headers=voter_headers,
    )

    response = client.get(f"/api/admin/elections/{election.id}/logs", headers=admin_headers)

    assert response.status_code == 200
    logs = response.json()
    assert [log["event"] for log in logs] == ["voter_registered", "vote_cast"]
    assert logs[0]["eventParams"] == {"ring_position": 1}
    vote_params = logs[1]["eventParams"]
    assert set(vote_params) == {"ring_signature_hash"}


def test_rejected_votes_are_logged(client, election, candidates, voter_headers, admin_headers):
    client.post(
        f"/api/elections/{election.id}/vote",
        json={"candidateId": candidates[0].id},
        headers=voter_headers,
    )

    logs = client.get(f"/api/admin/elections/{election.id}/logs", headers=admin_headers).json()

    assert [log["event"] for log in logs] == ["vote_rejected"]
    assert logs[0]["logLevel"] == "WARNING"


@pytest.mark.anyio
async def test_seed_demo_election(app, db_session):
    election = await seed_demo_election()

    assert election.registration_open and election.voting_open and election.results_visible
    candidates = db_session.query(models.Candidate).filter_by(election_id=election.id).order_by(models.Candidate.id).all()
    assert [c.name for c in candidates] == ["Alex Johnson", "Sarah Chen"]
    assert db_session.query(models.Vote).filter_by(election_id=election.id).count() == 187


def test_seeded_results(client, app):
    election = anyio.run(seed_demo_election)

    body = client.get(f"/api/elections/{election.id}/results").json()

    assert body["totalVotes"] == 187
    assert [(r["count"], r["percentage"]) for r in body["results"]] == [(98, "52.4"), (89, "47.6")]
