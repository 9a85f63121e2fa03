"""create_assistant_configurations

Revision ID: a3f1c2d4e5b6
Revises:
Create Date: 2026-10-18 10:12:44.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a3f1c2d4e5b6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'assistant_configurations',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('template_id', sa.String(length=100), nullable=False),
        sa.Column('template_version', sa.String(length=20), nullable=False),
        sa.Column('dynamic_segments', sa.JSON(), nullable=False),
        sa.Column('voice_settings', sa.JSON(), nullable=False),
        sa.Column('conversation_settings', sa.JSON(), nullable=False),
        sa.Column('assembled_prompt', sa.Text(), nullable=False),
        sa.Column('configuration', sa.JSON(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('remote_id', sa.String(length=100), nullable=True),
        sa.Column('phone_number', sa.String(length=50), nullable=True),
        sa.Column('last_error', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_assistant_configurations_user_id'),
        'assistant_configurations',
        ['user_id'],
    )
    op.create_index(
        op.f('ix_assistant_configurations_template_id'),
        'assistant_configurations',
        ['template_id'],
    )


def downgrade() -> None:
    op.drop_index(op.f('ix_assistant_configurations_template_id'), table_name='assistant_configurations')
    op.drop_index(op.f('ix_assistant_configurations_user_id'), table_name='assistant_configurations')
    op.drop_table('assistant_configurations')
