"""Add breeding cycle tables (heat, insemination, pregnancy check, calving, legacy records)

Revision ID: e4f1a9c2b7d3
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = 'e4f1a9c2b7d3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _event_columns() -> list:
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), sa.ForeignKey('animals.id'), nullable=False),
    ]


def _audit_columns() -> list:
    return [
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Create animals, farm settings and the per-animal breeding event tables."""

    # --- animals ---
    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('tag', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('production_status', sa.String(length=32), nullable=True),
        sa.Column('sex', sa.String(length=16), nullable=True),
        sa.Column('disposition_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tenant_id', 'tag', name='ux_animals_tenant_tag'),
    )

    # --- farm_breeding_settings ---
    op.create_table(
        'farm_breeding_settings',
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('minimum_breeding_age_months', sa.Integer(), nullable=True),
        sa.Column('default_gestation_period_days', sa.Integer(), nullable=True),
        sa.Column('pregnancy_check_wait_days', sa.Integer(), nullable=True),
        sa.Column('postpartum_breeding_delay_days', sa.Integer(), nullable=True),
        sa.Column('heat_cycle_days', sa.Integer(), nullable=True),
        sa.Column('auto_schedule_pregnancy_check', sa.Boolean(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('tenant_id'),
    )

    # --- heat_events ---
    op.create_table(
        'heat_events',
        *_event_columns(),
        sa.Column('event_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('heat_signs', postgresql.ARRAY(sa.String()), nullable=False, server_default='{}'),
        sa.Column('action_taken', sa.String(length=128), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_heat_events_tenant_animal_date', 'heat_events',
        ['tenant_id', 'animal_id', 'event_date'], unique=False,
    )

    # --- insemination_events ---
    op.create_table(
        'insemination_events',
        *_event_columns(),
        sa.Column('event_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('method', sa.String(length=16), nullable=False),
        sa.Column('sire_code', sa.String(length=128), nullable=True),
        sa.Column('technician', sa.String(length=255), nullable=True),
        sa.Column('estimated_due_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_insemination_events_tenant_animal_date', 'insemination_events',
        ['tenant_id', 'animal_id', 'event_date'], unique=False,
    )

    # --- pregnancy_checks ---
    op.create_table(
        'pregnancy_checks',
        *_event_columns(),
        sa.Column('check_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('result', sa.String(length=16), nullable=False),
        sa.Column('method', sa.String(length=32), nullable=True),
        sa.Column('checked_by', sa.String(length=255), nullable=True),
        sa.Column('estimated_due_date', sa.Date(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_pregnancy_checks_tenant_animal_date', 'pregnancy_checks',
        ['tenant_id', 'animal_id', 'check_date'], unique=False,
    )

    # --- calving_events ---
    op.create_table(
        'calving_events',
        *_event_columns(),
        sa.Column('event_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('estimated_due_date', sa.Date(), nullable=True),
        sa.Column('outcome', sa.String(length=16), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_calving_events_tenant_animal_date', 'calving_events',
        ['tenant_id', 'animal_id', 'event_date'], unique=False,
    )

    # --- breeding_records (legacy) ---
    op.create_table(
        'breeding_records',
        *_event_columns(),
        sa.Column('breeding_date', sa.Date(), nullable=False),
        sa.Column('breeding_method', sa.String(length=32), nullable=False),
        sa.Column('pregnancy_status', sa.String(length=16), server_default='pending', nullable=False),
        sa.Column('expected_calving_date', sa.Date(), nullable=True),
        sa.Column('actual_calving_date', sa.Date(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_breeding_records_tenant_animal_date', 'breeding_records',
        ['tenant_id', 'animal_id', 'breeding_date'], unique=False,
    )


def downgrade() -> None:
    """Drop breeding cycle tables."""
    op.drop_index('ix_breeding_records_tenant_animal_date', table_name='breeding_records')
    op.drop_table('breeding_records')
    op.drop_index('ix_calving_events_tenant_animal_date', table_name='calving_events')
    op.drop_table('calving_events')
    op.drop_index('ix_pregnancy_checks_tenant_animal_date', table_name='pregnancy_checks')
    op.drop_table('pregnancy_checks')
    op.drop_index('ix_insemination_events_tenant_animal_date', table_name='insemination_events')
    op.drop_table('insemination_events')
    op.drop_index('ix_heat_events_tenant_animal_date', table_name='heat_events')
    op.drop_table('heat_events')
    op.drop_table('farm_breeding_settings')
    op.drop_table('animals')
