"""initial economy and check-in tables

Revision ID: 4b7e21c9a0d3
Revises: 
Create Date: 2026-10-19 09:12:44.318207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e21c9a0d3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'exercise_completions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.String(length=100), nullable=False),
        sa.Column('exercise_name', sa.String(length=100), nullable=True),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('duration_minutes', sa.Float(), nullable=False),
        sa.Column('credits', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_exercise_completions_id'), 'exercise_completions', ['id'], unique=False)
    op.create_index(op.f('ix_exercise_completions_user_id'), 'exercise_completions', ['user_id'], unique=False)
    op.create_index(op.f('ix_exercise_completions_date'), 'exercise_completions', ['date'], unique=False)

    op.create_table(
        'economy_states',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('banked_weeks', sa.Integer(), nullable=False),
        sa.Column('last_treat_id', sa.String(length=50), nullable=True),
        sa.Column('last_treat_name', sa.String(length=100), nullable=True),
        sa.Column('last_treat_date', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_economy_states_id'), 'economy_states', ['id'], unique=False)
    op.create_index(op.f('ix_economy_states_user_id'), 'economy_states', ['user_id'], unique=True)

    op.create_table(
        'treat_redemptions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('treat_id', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.String(length=20), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=True),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_treat_redemptions_id'), 'treat_redemptions', ['id'], unique=False)
    op.create_index(op.f('ix_treat_redemptions_user_id'), 'treat_redemptions', ['user_id'], unique=False)

    op.create_table(
        'banked_weeks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('week_number', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_banked_weeks_id'), 'banked_weeks', ['id'], unique=False)
    op.create_index(op.f('ix_banked_weeks_user_id'), 'banked_weeks', ['user_id'], unique=False)

    op.create_table(
        'checkin_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('energy', sa.Integer(), nullable=False),
        sa.Column('mood', sa.Integer(), nullable=False),
        sa.Column('sleep_quality', sa.Integer(), nullable=True),
        sa.Column('avg_condition_pain', sa.Integer(), nullable=False),
        sa.Column('skipped', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_checkin_logs_id'), 'checkin_logs', ['id'], unique=False)
    op.create_index(op.f('ix_checkin_logs_user_id'), 'checkin_logs', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_checkin_logs_user_id'), table_name='checkin_logs')
    op.drop_index(op.f('ix_checkin_logs_id'), table_name='checkin_logs')
    op.drop_table('checkin_logs')
    op.drop_index(op.f('ix_banked_weeks_user_id'), table_name='banked_weeks')
    op.drop_index(op.f('ix_banked_weeks_id'), table_name='banked_weeks')
    op.drop_table('banked_weeks')
    op.drop_index(op.f('ix_treat_redemptions_user_id'), table_name='treat_redemptions')
    op.drop_index(op.f('ix_treat_redemptions_id'), table_name='treat_redemptions')
    op.drop_table('treat_redemptions')
    op.drop_index(op.f('ix_economy_states_user_id'), table_name='economy_states')
    op.drop_index(op.f('ix_economy_states_id'), table_name='economy_states')
    op.drop_table('economy_states')
    op.drop_index(op.f('ix_exercise_completions_date'), table_name='exercise_completions')
    op.drop_index(op.f('ix_exercise_completions_user_id'), table_name='exercise_completions')
    op.drop_index(op.f('ix_exercise_completions_id'), table_name='exercise_completions')
    op.drop_table('exercise_completions')
