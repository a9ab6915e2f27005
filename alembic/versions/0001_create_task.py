"""Create task table

Revision ID: 0001_create_task
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_create_task'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the task table.

    status is stored as its display string (New / InProgress / Completed)
    and guarded by a check constraint. Timestamps are ISO-8601 text so
    the offset sent by the client is kept.
    """
    op.create_table(
        'task',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=True),
        sa.Column(
            'status',
            sa.Enum(
                'New', 'InProgress', 'Completed',
                name='task_status',
                native_enum=False,
                length=20,
                create_constraint=True,
            ),
            nullable=False,
        ),
        sa.Column('due_at', sa.String(length=40), nullable=False),
        sa.Column('created_at', sa.String(length=40), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('task')
