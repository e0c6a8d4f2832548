"""Create the will registry tables.

Revision ID: create_will_tables
Revises:
Create Date: 2026-10-17
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'create_will_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Unsigned 64-bit amounts; decimal text on SQLite (see models.Amount)
AMOUNT = sa.Numeric(20, 0).with_variant(sa.String(20), 'sqlite')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('email', sa.String(320), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
    )
    op.create_index('ix_users_created_at', 'users', ['created_at'])

    op.create_table(
        'executors',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('contact', sa.String(320), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
    )
    op.create_index('ix_executors_created_at', 'executors', ['created_at'])

    op.create_table(
        'wills',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('executor_id', sa.String(36), sa.ForeignKey('executors.id'), nullable=False),
        sa.Column('is_executed', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
    )
    op.create_index('ix_wills_created_at', 'wills', ['created_at'])
    op.create_index('idx_will_user', 'wills', ['user_id'])

    op.create_table(
        'assets',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('will_id', sa.String(36), sa.ForeignKey('wills.id'), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('value', AMOUNT, nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
    )
    op.create_index('ix_assets_created_at', 'assets', ['created_at'])
    op.create_index('idx_asset_will', 'assets', ['will_id', 'position'])

    op.create_table(
        'beneficiaries',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('will_id', sa.String(36), sa.ForeignKey('wills.id'), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('share', AMOUNT, nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
    )
    op.create_index('ix_beneficiaries_created_at', 'beneficiaries', ['created_at'])
    op.create_index('idx_beneficiary_will', 'beneficiaries', ['will_id', 'position'])


def downgrade() -> None:
    op.drop_table('beneficiaries')
    op.drop_table('assets')
    op.drop_table('wills')
    op.drop_table('executors')
    op.drop_table('users')
