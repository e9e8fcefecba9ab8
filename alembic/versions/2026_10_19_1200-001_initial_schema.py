"""Initial schema: users, subjects, cycles, assignments, user settings

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# SQLAlchemy stores enum members by name
difficulty_level = sa.Enum('VERY_EASY', 'EASY', 'MEDIUM', 'HARD', 'VERY_HARD', name='difficultylevel')
weight_level = sa.Enum('LOW', 'MEDIUM', 'HIGH', name='weightlevel')
cycle_status = sa.Enum('ACTIVE', 'PAUSED', 'COMPLETED', name='cyclestatus')


def upgrade() -> None:
    """Create all study planner tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('full_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('subjects', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('difficulty', difficulty_level, nullable=False),
        sa.Column('weight', weight_level, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_subjects_user_id'), 'subjects', ['user_id'], unique=False)

    op.create_table('cycles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('weekly_hours', sa.Float(), nullable=False),
        sa.Column('status', cycle_status, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_cycles_user_id'), 'cycles', ['user_id'], unique=False)
    op.create_index(op.f('ix_cycles_status'), 'cycles', ['status'], unique=False)

    op.create_table('cycle_assignments', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('cycle_id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sa.Integer(), nullable=False),
        sa.Column('hours_assigned', sa.Float(), nullable=False),
        sa.Column('hours_completed', sa.Float(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['cycle_id'], ['cycles.id']),
        sa.ForeignKeyConstraint(['subject_id'], ['subjects.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_cycle_assignments_cycle_id'), 'cycle_assignments', ['cycle_id'], unique=False)
    op.create_index(op.f('ix_cycle_assignments_subject_id'), 'cycle_assignments', ['subject_id'], unique=False)

    op.create_table('user_settings', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('ask_hours', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('weekly_hours', sa.Float(), nullable=True),
        sa.Column('current_cycle_id', sa.Integer(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['current_cycle_id'], ['cycles.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_user_settings_user_id'), 'user_settings', ['user_id'], unique=True)


def downgrade() -> None:
    """Drop all study planner tables."""
    op.drop_index(op.f('ix_user_settings_user_id'), table_name='user_settings')
    op.drop_table('user_settings')
    op.drop_index(op.f('ix_cycle_assignments_subject_id'), table_name='cycle_assignments')
    op.drop_index(op.f('ix_cycle_assignments_cycle_id'), table_name='cycle_assignments')
    op.drop_table('cycle_assignments')
    op.drop_index(op.f('ix_cycles_status'), table_name='cycles')
    op.drop_index(op.f('ix_cycles_user_id'), table_name='cycles')
    op.drop_table('cycles')
    op.drop_index(op.f('ix_subjects_user_id'), table_name='subjects')
    op.drop_table('subjects')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
    cycle_status.drop(op.get_bind(), checkfirst=True)
    weight_level.drop(op.get_bind(), checkfirst=True)
    difficulty_level.drop(op.get_bind(), checkfirst=True)
