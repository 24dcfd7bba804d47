"""Create facts and ingestion_runs tables

Revision ID: 3b1e9c0d7a42
Revises:
Create Date: 2026-10-19 10:12:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b1e9c0d7a42'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'facts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('text', sa.String(length=900), nullable=False),
        sa.Column('text_key', sa.Text(), nullable=False),
        sa.Column('inserted_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('source', sa.String(length=2048), nullable=False),
        sa.Column('occurrence_count', sa.Integer(), nullable=False),
        sa.Column('like_count', sa.Integer(), nullable=False),
        sa.Column('dislike_count', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('text'),
        sa.UniqueConstraint('text_key'),
    )
    with op.batch_alter_table('facts', schema=None) as batch_op:
        batch_op.create_index('ix_facts_inserted_at', ['inserted_at'], unique=False)

    op.create_table(
        'ingestion_runs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('source', sa.String(length=2048), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('started_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('finished_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('fetched', sa.Integer(), server_default='0', nullable=True),
        sa.Column('inserted', sa.Integer(), server_default='0', nullable=True),
        sa.Column('incremented', sa.Integer(), server_default='0', nullable=True),
        sa.Column('conflicts', sa.Integer(), server_default='0', nullable=True),
        sa.Column('latency_ms', sa.Float(), nullable=True),
        sa.Column('error', sa.String(length=512), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('ingestion_runs', schema=None) as batch_op:
        batch_op.create_index('ix_ingestion_runs_started_at', ['started_at'], unique=False)


def downgrade():
    with op.batch_alter_table('ingestion_runs', schema=None) as batch_op:
        batch_op.drop_index('ix_ingestion_runs_started_at')
    op.drop_table('ingestion_runs')

    with op.batch_alter_table('facts', schema=None) as batch_op:
        batch_op.drop_index('ix_facts_inserted_at')
    op.drop_table('facts')
