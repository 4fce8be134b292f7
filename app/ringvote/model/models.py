"""
SQLAlchemy Models for RingVote.
"""

from __future__ import annotations

from sqlalchemy.orm import relationship
from sqlalchemy import Column, ForeignKey, UniqueConstraint
from sqlalchemy.types import Boolean, Integer, String, Text, DateTime

from app.ringvote import utils
from app.database import Base
from app.ringvote_auth.model.models import User


class Election(Base):
    __tablename__ = "ringvote_election"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)

    # Lifecycle flags, each one toggled on its own by an administrator
    registration_open = Column(Boolean, nullable=False, default=True)
    voting_open = Column(Boolean, nullable=False, default=False)
    results_visible = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=utils.tz_now)

    # One-to-many relationships
    candidates = relationship(
        "Candidate", cascade="all, delete", back_populates="election", order_by="Candidate.id"
    )
    registrations = relationship(
        "VoterRegistration", cascade="all, delete", back_populates="election"
    )
    logs = relationship("ElectionLog", cascade="all, delete", backref="ringvote_election")


class Candidate(Base):
    __tablename__ = "ringvote_candidate"

    id = Column(Integer, primary_key=True, index=True)
    election_id = Column(
        Integer,
        ForeignKey("ringvote_election.id",
                   onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )

    name = Column(String(200), nullable=False)
    party = Column(String(200), nullable=True)
    platform = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)

    election = relationship("Election", back_populates="candidates")


class VoterRegistration(Base):
    __tablename__ = "ringvote_voter_registration"
    __table_args__ = (
        UniqueConstraint("user_id", "election_id", name="uq_registration_user_election"),
        UniqueConstraint("election_id", "ring_position", name="uq_registration_ring_position"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("auth_user.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    election_id = Column(
        Integer,
        ForeignKey("ringvote_election.id",
                   onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )

    # Sequence number inside the election, not a cryptographic ring index
    ring_position = Column(Integer, nullable=False)
    verified = Column(Boolean, nullable=False, default=False)
    registered_at = Column(DateTime, default=utils.tz_now)

    user = relationship(User)
    election = relationship("Election", back_populates="registrations")


class Vote(Base):
    __tablename__ = "ringvote_vote"

    id = Column(Integer, primary_key=True, index=True)
    election_id = Column(
        Integer,
        ForeignKey("ringvote_election.id",
                   onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    candidate_id = Column(
        Integer,
        ForeignKey("ringvote_candidate.id",
                   onupdate="CASCADE", ondelete="SET NULL"),
        nullable=True,
    )

    ring_signature_hash = Column(String(100), nullable=False)
    ring_size = Column(Integer, nullable=False)
    timestamp = Column(DateTime, nullable=False)


class ElectionLog(Base):
    __tablename__ = "election_logs"

    id = Column(Integer, primary_key=True, index=True)
    election_id = Column(
        Integer,
        ForeignKey("ringvote_election.id",
                   onupdate="CASCADE", ondelete="CASCADE"),
    )

    log_level = Column(String(200), nullable=False)

    event = Column(String(200), nullable=False)
    event_params = Column(Text, nullable=False)

    created_at = Column(DateTime, default=utils.tz_now)
