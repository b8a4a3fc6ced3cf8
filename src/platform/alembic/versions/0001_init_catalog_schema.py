"""init_catalog_schema

Revision ID: 0001
Revises:
Create Date: 2025-06-01

Schema:
- venues: rentable venues with tags and media URLs
- events: events held at a venue
- ticket_types: priced ticket tiers per event (optional quantity cap and sales window)
- add_ons / event_add_ons: shared extras linked to events, with optional price override
- tickets: purchased tickets (active -> used | cancelled)
- user_roles: role grants for identity-provider users
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
    )


def upgrade() -> None:
    op.create_table(
        'venues',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('city', sa.String(length=255), nullable=False),
        sa.Column('zip_code', sa.String(length=20), nullable=False),
        sa.Column('description', sa.JSON(), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('rental_rate_per_hour', sa.Numeric(10, 2), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('website', sa.String(length=500), nullable=True),
        sa.Column('media_urls', sa.JSON(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('capacity >= 1', name='ck_venues_capacity'),
        sa.CheckConstraint('rental_rate_per_hour >= 0', name='ck_venues_rate'),
    )
    op.create_index(op.f('ix_venues_name'), 'venues', ['name'])

    op.create_table(
        'events',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('venue_id', sa.String(length=36), nullable=False),
        sa.Column('media_urls', sa.JSON(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(['venue_id'], ['venues.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('end_date >= start_date', name='ck_events_dates'),
    )
    op.create_index(op.f('ix_events_start_date'), 'events', ['start_date'])
    op.create_index(op.f('ix_events_venue_id'), 'events', ['venue_id'])

    op.create_table(
        'ticket_types',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('event_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('quantity_available', sa.Integer(), nullable=True),
        sa.Column('start_sales_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('end_sales_date', sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['event_id'], ['events.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('price >= 0', name='ck_ticket_types_price'),
        sa.CheckConstraint(
            'start_sales_date IS NULL OR end_sales_date IS NULL OR start_sales_date <= end_sales_date',
            name='ck_ticket_types_sales_window',
        ),
    )
    op.create_index(op.f('ix_ticket_types_event_id'), 'ticket_types', ['event_id'])

    op.create_table(
        'add_ons',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'event_add_ons',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('event_id', sa.String(length=36), nullable=False),
        sa.Column('add_on_id', sa.String(length=36), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(['event_id'], ['events.id']),
        sa.ForeignKeyConstraint(['add_on_id'], ['add_ons.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('event_id', 'add_on_id', name='uq_event_add_on'),
    )
    op.create_index(op.f('ix_event_add_ons_event_id'), 'event_add_ons', ['event_id'])

    op.create_table(
        'tickets',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('ticket_type_id', sa.String(length=36), nullable=False),
        sa.Column('purchaser_id', sa.String(length=64), nullable=False),
        sa.Column('purchase_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(['ticket_type_id'], ['ticket_types.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "status IN ('active', 'used', 'cancelled')", name='ck_tickets_status'
        ),
    )
    op.create_index(op.f('ix_tickets_ticket_type_id'), 'tickets', ['ticket_type_id'])
    op.create_index(op.f('ix_tickets_purchaser_id'), 'tickets', ['purchaser_id'])

    op.create_table(
        'user_roles',
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('user_id', 'role'),
    )


def downgrade() -> None:
    op.drop_table('user_roles')
    op.drop_table('tickets')
    op.drop_table('event_add_ons')
    op.drop_table('add_ons')
    op.drop_table('ticket_types')
    op.drop_table('events')
    op.drop_table('venues')
