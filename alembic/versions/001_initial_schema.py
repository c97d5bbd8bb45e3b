"""Initial database schema

Revision ID: 001
Revises:
Create Date: 2025-10-01 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create organizador table
    op.create_table('organizador',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('contact_phone', sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    # Create evento table
    op.create_table('evento',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('organizador_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('start_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=True),
        sa.ForeignKeyConstraint(['organizador_id'], ['organizador.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_evento_organizador_id', 'evento', ['organizador_id'])

    # Create participante table
    op.create_table('participante',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('profile', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # Create registro table
    op.create_table('registro',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('evento_id', sa.String(length=36), nullable=False),
        sa.Column('participante_id', sa.String(length=36), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=True),
        sa.Column('paid_amount', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['evento_id'], ['evento.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['participante_id'], ['participante.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_registro_evento_id', 'registro', ['evento_id'])
    op.create_index('ix_registro_participante_id', 'registro', ['participante_id'])


def downgrade() -> None:
    op.drop_index('ix_registro_participante_id', table_name='registro')
    op.drop_index('ix_registro_evento_id', table_name='registro')
    op.drop_table('registro')
    op.drop_table('participante')
    op.drop_index('ix_evento_organizador_id', table_name='evento')
    op.drop_table('evento')
    op.drop_table('organizador')
