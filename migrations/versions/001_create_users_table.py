"""Create users table

Revision ID: 001
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users table"""

    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False, comment='Unique identifier for each user'),
        sa.Column('name', sa.String(100), nullable=False, comment='Display name'),
        sa.Column('email', sa.String(255), nullable=False, comment='Lowercased email address, unique among non-deleted users'),
        sa.Column('password', sa.String(255), nullable=False, comment='Hashed password using bcrypt'),
        sa.Column('role', sa.String(20), nullable=False, server_default='user', comment='Role: user, admin or moderator'),
        sa.Column('phone', sa.String(20), nullable=True, comment='Phone number'),
        sa.Column('date_of_birth', sa.Date(), nullable=True, comment='Date of birth'),
        sa.Column('avatar_url', sa.String(500), nullable=True, comment='Avatar image URL'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true(), comment='Account active flag'),
        sa.Column('last_login_at', sa.DateTime(timezone=True), nullable=True, comment='Last login timestamp'),
        sa.Column('email_verified_at', sa.DateTime(timezone=True), nullable=True, comment='Email verification timestamp'),
        sa.Column('is_deleted', sa.Boolean(), nullable=False, server_default=sa.false(), comment='Soft-delete flag'),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True, comment='Soft-delete timestamp'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False, comment='Record creation date'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False, comment='Last modification date'),

        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.CheckConstraint("role IN ('user', 'admin', 'moderator')", name='ck_users_role_valid'),
    )

    op.create_index('ix_users_role', 'users', ['role'])
    op.create_index('ix_users_is_active', 'users', ['is_active'])
    op.create_index('ix_users_is_deleted', 'users', ['is_deleted'])
    op.create_index('ix_users_created_at', 'users', ['created_at'])

    # Email is unique among live users only, so a deleted user's address can be reused
    op.create_index(
        'uq_users_email_active',
        'users',
        ['email'],
        unique=True,
        postgresql_where=sa.text('is_deleted = false'),
        sqlite_where=sa.text('is_deleted = 0'),
    )


def downgrade() -> None:
    """Drop users table"""

    op.drop_index('uq_users_email_active', table_name='users')
    op.drop_index('ix_users_created_at', table_name='users')
    op.drop_index('ix_users_is_deleted', table_name='users')
    op.drop_index('ix_users_is_active', table_name='users')
    op.drop_index('ix_users_role', table_name='users')
    op.drop_table('users')
