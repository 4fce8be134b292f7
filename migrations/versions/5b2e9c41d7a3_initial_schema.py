"""initial schema

Revision ID: 5b2e9c41d7a3
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5b2e9c41d7a3'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'auth_user',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(200), nullable=False, unique=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('external_id', sa.String(200), nullable=True, unique=True),
        sa.Column('is_admin', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_table(
        'ringvote_election',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('registration_open', sa.Boolean(), nullable=False),
        sa.Column('voting_open', sa.Boolean(), nullable=False),
        sa.Column('results_visible', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_table(
        'ringvote_candidate',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('election_id', sa.Integer(), sa.ForeignKey('ringvote_election.id', onupdate='CASCADE', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('party', sa.String(200), nullable=True),
        sa.Column('platform', sa.Text(), nullable=True),
        sa.Column('image_url', sa.String(500), nullable=True),
    )
    op.create_table(
        'ringvote_voter_registration',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('auth_user.id', onupdate='CASCADE', ondelete='CASCADE'), nullable=False),
        sa.Column('election_id', sa.Integer(), sa.ForeignKey('ringvote_election.id', onupdate='CASCADE', ondelete='CASCADE'), nullable=False),
        sa.Column('ring_position', sa.Integer(), nullable=False),
        sa.Column('verified', sa.Boolean(), nullable=False),
        sa.Column('registered_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('user_id', 'election_id', name='uq_registration_user_election'),
        sa.UniqueConstraint('election_id', 'ring_position', name='uq_registration_ring_position'),
    )
    op.create_table(
        'ringvote_vote',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('election_id', sa.Integer(), sa.ForeignKey('ringvote_election.id', onupdate='CASCADE', ondelete='CASCADE'), nullable=False),
        sa.Column('candidate_id', sa.Integer(), sa.ForeignKey('ringvote_candidate.id', onupdate='CASCADE', ondelete='SET NULL'), nullable=True),
        sa.Column('ring_signature_hash', sa.String(100), nullable=False),
        sa.Column('ring_size', sa.Integer(), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
    )
    op.create_table(
        'election_logs',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('election_id', sa.Integer(), sa.ForeignKey('ringvote_election.id', onupdate='CASCADE', ondelete='CASCADE'), nullable=True),
        sa.Column('log_level', sa.String(200), nullable=False),
        sa.Column('event', sa.String(200), nullable=False),
        sa.Column('event_params', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )


def downgrade():
    op.drop_table('election_logs')
    op.drop_table('ringvote_vote')
    op.drop_table('ringvote_voter_registration')
    op.drop_table('ringvote_candidate')
    op.drop_table('ringvote_election')
    op.drop_table('auth_user')
