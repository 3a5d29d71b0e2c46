"""create crop ledger tables

Revision ID: 001_create_crop_tables
Revises:
Create Date: 2026-10-18
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = '001_create_crop_tables'
down_revision: Union[str, Sequence[str], None] = None
branch_labels = None
depends_on = None

EXPENSE_TYPES = (
    'ploughing', 'planting', 'fertilizer', 'pesticide',
    'irrigation', 'harvesting', 'labor', 'others',
)


def upgrade() -> None:
    # --- Users ---
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # --- Crops ---
    op.create_table(
        'crops',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('acres', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'])
    )
    op.create_index('ix_crops_user_id', 'crops', ['user_id'])
    op.create_index('ix_crops_date', 'crops', ['date'])

    # --- Expenses ---
    op.create_table(
        'expenses',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('crop_id', sa.String(36), nullable=False),
        sa.Column(
            'type',
            sa.Enum(*EXPENSE_TYPES, name='expense_type', native_enum=False),
            nullable=False,
        ),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['crop_id'], ['crops.id'])
    )
    op.create_index('ix_expenses_crop_id', 'expenses', ['crop_id'])

    # --- Incomes ---
    op.create_table(
        'incomes',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('crop_id', sa.String(36), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['crop_id'], ['crops.id'])
    )
    op.create_index('ix_incomes_crop_id', 'incomes', ['crop_id'])


def downgrade() -> None:
    op.drop_index('ix_incomes_crop_id', table_name='incomes')
    op.drop_table('incomes')
    op.drop_index('ix_expenses_crop_id', table_name='expenses')
    op.drop_table('expenses')
    op.drop_index('ix_crops_date', table_name='crops')
    op.drop_index('ix_crops_user_id', table_name='crops')
    op.drop_table('crops')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
