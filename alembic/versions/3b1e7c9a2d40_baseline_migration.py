"""baseline_migration

Revision ID: 3b1e7c9a2d40
Revises:
Create Date: 2026-10-17 09:12:44.118204

Creates the users, credential, profile, application and feedback tables.
Tables that already exist (e.g. created by init_db) are left alone.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3b1e7c9a2d40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    if not table_exists('users'):
        op.create_table('users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('email', sa.String(), nullable=False),
            sa.Column('first_name', sa.String(), nullable=True),
            sa.Column('last_name', sa.String(), nullable=True),
            sa.Column('profile_image_url', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    if not table_exists('user_auth'):
        op.create_table('user_auth',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('email', sa.String(), nullable=False),
            sa.Column('hashed_password', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('user_id')
        )
        op.create_index(op.f('ix_user_auth_id'), 'user_auth', ['id'], unique=False)
        op.create_index(op.f('ix_user_auth_email'), 'user_auth', ['email'], unique=True)

    if not table_exists('user_profiles'):
        op.create_table('user_profiles',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('first_name', sa.String(), nullable=True),
            sa.Column('last_name', sa.String(), nullable=True),
            sa.Column('email', sa.String(), nullable=True),
            sa.Column('phone', sa.String(), nullable=True),
            sa.Column('location', sa.String(), nullable=True),
            sa.Column('linkedin_url', sa.String(), nullable=True),
            sa.Column('portfolio_url', sa.String(), nullable=True),
            sa.Column('current_title', sa.String(), nullable=True),
            sa.Column('years_of_experience', sa.String(), nullable=True),
            sa.Column('target_salary', sa.String(), nullable=True),
            sa.Column('availability_date', sa.String(), nullable=True),
            sa.Column('work_location', sa.String(), nullable=True),
            sa.Column('highest_education', sa.String(), nullable=True),
            sa.Column('field_of_study', sa.String(), nullable=True),
            sa.Column('university', sa.String(), nullable=True),
            sa.Column('graduation_year', sa.String(), nullable=True),
            sa.Column('skills', sa.Text(), nullable=True),
            sa.Column('bio', sa.Text(), nullable=True),
            sa.Column('career_objective', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_user_profiles_id'), 'user_profiles', ['id'], unique=False)
        op.create_index(op.f('ix_user_profiles_user_id'), 'user_profiles', ['user_id'], unique=True)

    if not table_exists('job_applications'):
        op.create_table('job_applications',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('company', sa.String(), nullable=False),
            sa.Column('position', sa.String(), nullable=False),
            sa.Column('location', sa.String(), nullable=True),
            sa.Column('salary_range', sa.String(), nullable=True),
            sa.Column('status', sa.String(), nullable=False),
            sa.Column('application_date', sa.Date(), nullable=False),
            sa.Column('job_description_url', sa.String(), nullable=True),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_job_applications_id'), 'job_applications', ['id'], unique=False)
        op.create_index(op.f('ix_job_applications_user_id'), 'job_applications', ['user_id'], unique=False)
        op.create_index(op.f('ix_job_applications_company'), 'job_applications', ['company'], unique=False)
        op.create_index('idx_job_applications_user_date', 'job_applications', ['user_id', 'application_date'], unique=False)

    if not table_exists('ai_feedback'):
        op.create_table('ai_feedback',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('job_description', sa.Text(), nullable=False),
            sa.Column('resume', sa.Text(), nullable=False),
            sa.Column('match_score', sa.String(), nullable=True),
            sa.Column('strengths', sa.Text(), nullable=True),
            sa.Column('improvements', sa.Text(), nullable=True),
            sa.Column('recommendations', sa.Text(), nullable=True),
            sa.Column('source', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_ai_feedback_id'), 'ai_feedback', ['id'], unique=False)
        op.create_index(op.f('ix_ai_feedback_user_id'), 'ai_feedback', ['user_id'], unique=False)
        op.create_index(op.f('ix_ai_feedback_created_at'), 'ai_feedback', ['created_at'], unique=False)
        op.create_index('idx_ai_feedback_user_created', 'ai_feedback', ['user_id', 'created_at'], unique=False)


def downgrade() -> None:
    op.drop_table('ai_feedback')
    op.drop_table('job_applications')
    op.drop_table('user_profiles')
    op.drop_table('user_auth')
    op.drop_table('users')
