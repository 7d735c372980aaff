"""create user, moderation_log and report tables

Revision ID: 3f9c2a7d1b84
Revises:
Create Date: 2026-03-02 09:14:27.512031

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d1b84'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'user',
        sa.Column('username', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('staff', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('id_user', sa.Integer(), nullable=False),
        sa.Column('secret', sqlmodel.sql.sqltypes.AutoString(length=128), nullable=True),
        sa.Column('date_creation', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id_user')
    )
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)
    op.create_index(op.f('ix_user_staff'), 'user', ['staff'], unique=False)
    op.create_index(op.f('ix_user_secret'), 'user', ['secret'], unique=True)

    op.create_table(
        'moderation_log',
        sa.Column('moderator_id', sa.Integer(), nullable=False),
        sa.Column('moderator_username', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('action_type', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('id_user_target', sa.Integer(), nullable=True),
        sa.Column('reason', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.Column('id_log', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['moderator_id'], ['user.id_user']),
        sa.ForeignKeyConstraint(['id_user_target'], ['user.id_user']),
        sa.PrimaryKeyConstraint('id_log')
    )
    op.create_index(op.f('ix_moderation_log_moderator_id'), 'moderation_log', ['moderator_id'], unique=False)
    op.create_index(op.f('ix_moderation_log_action_type'), 'moderation_log', ['action_type'], unique=False)
    op.create_index(op.f('ix_moderation_log_created_at'), 'moderation_log', ['created_at'], unique=False)

    report_status_enum = sa.Enum('PENDING', 'RESOLVED', 'DISMISSED', name='reportstatus')
    op.create_table(
        'report',
        sa.Column('type', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('reason', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('id_user_reporter', sa.Integer(), nullable=False),
        sa.Column('id_user_reported', sa.Integer(), nullable=False),
        sa.Column('id_report', sa.Integer(), nullable=False),
        sa.Column('status', report_status_enum, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('reviewed_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['id_user_reporter'], ['user.id_user']),
        sa.ForeignKeyConstraint(['id_user_reported'], ['user.id_user']),
        sa.PrimaryKeyConstraint('id_report')
    )
    op.create_index(op.f('ix_report_status'), 'report', ['status'], unique=False)
    op.create_index(op.f('ix_report_created_at'), 'report', ['created_at'], unique=False)
    op.create_index(op.f('ix_report_reviewed_at'), 'report', ['reviewed_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_report_reviewed_at'), table_name='report')
    op.drop_index(op.f('ix_report_created_at'), table_name='report')
    op.drop_index(op.f('ix_report_status'), table_name='report')
    op.drop_table('report')
    sa.Enum(name='reportstatus').drop(op.get_bind(), checkfirst=True)

    op.drop_index(op.f('ix_moderation_log_created_at'), table_name='moderation_log')
    op.drop_index(op.f('ix_moderation_log_action_type'), table_name='moderation_log')
    op.drop_index(op.f('ix_moderation_log_moderator_id'), table_name='moderation_log')
    op.drop_table('moderation_log')

    op.drop_index(op.f('ix_user_secret'), table_name='user')
    op.drop_index(op.f('ix_user_staff'), table_name='user')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_index(op.f('ix_user_username'), table_name='user')
    op.drop_table('user')
