from pathlib import Path
import sys
import os
import tempfile

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# The engine is built at import time, point it to a throwaway SQLite file first.
_DB_DIR = tempfile.mkdtemp(prefix="ringvote-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "ringvote.sqlite3")
os.environ["USE_ASYNC_ENGINE"] = "0"

from fastapi.testclient import TestClient

from app.main import app as ringvote_app
from app.database import Base, engine, SessionLocal
from app.ringvote.model import models
from app.ringvote_auth.model.models import User
from app.ringvote_auth.utils import generate_token

from tests.fakes import MemoryStore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def app():
    if engine.url.drivername != "sqlite":
        raise RuntimeError(
            f"Test database must be SQLite, got '{engine.url.drivername}'. Refusing to run destructive test setup."
        )
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield ringvote_app
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db_session(app):
    with SessionLocal() as session:
        yield session


@pytest.fixture()
def store():
    return MemoryStore()


def _add_user(session, email, name, is_admin=False, external_id=None):
    user = User(email=email, name=name, is_admin=is_admin, external_id=external_id)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture()
def voter(db_session):
    return _add_user(db_session, "voter@example.com", "Voter One", external_id="ms-voter-1")


@pytest.fixture()
def other_voter(db_session):
    return _add_user(db_session, "voter2@example.com", "Voter Two", external_id="ms-voter-2")


@pytest.fixture()
def admin_user(db_session):
    return _add_user(db_session, "admin@example.com", "Admin User", is_admin=True)


def auth_headers(user):
    return {"Authorization": f"Bearer {generate_token(user)}"}


@pytest.fixture()
def voter_headers(voter):
    return auth_headers(voter)


@pytest.fixture()
def other_voter_headers(other_voter):
    return auth_headers(other_voter)


@pytest.fixture()
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture()
def election(db_session):
    db_election = models.Election(
        title="Student Council",
        description="Yearly election",
        registration_open=True,
        voting_open=True,
        results_visible=False,
    )
    db_session.add(db_election)
    db_session.commit()
    db_session.refresh(db_election)
    return db_election


@pytest.fixture()
def candidates(db_session, election):
    result = []
    for name, party in [("Alex Johnson", "Independent"), ("Sarah Chen", "Progressive Alliance")]:
        candidate = models.Candidate(election_id=election.id, name=name, party=party)
        db_session.add(candidate)
        result.append(candidate)
    db_session.commit()
    for candidate in result:
        db_session.refresh(candidate)
    return result
