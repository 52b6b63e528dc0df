"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- account: travelers and administrators (unique email)
- flight: catalog with seat-count CHECK constraints
- booking: ledger rows with UUID7 primary key and unique PNR
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables with final schema."""

    # Account table
    op.create_table(
        'account',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_account_email'), 'account', ['email'], unique=True)

    # Flight table
    op.create_table(
        'flight',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('flight_number', sa.String(length=16), nullable=False),
        sa.Column('airline', sa.String(length=100), nullable=False),
        sa.Column('origin', sa.String(length=100), nullable=False),
        sa.Column('destination', sa.String(length=100), nullable=False),
        sa.Column('departure_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('arrival_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('duration', sa.String(length=20), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('total_seats', sa.Integer(), nullable=False),
        sa.Column('available_seats', sa.Integer(), nullable=False),
        sa.Column('aircraft', sa.String(length=100), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('total_seats > 0', name='ck_flight_total_seats_positive'),
        sa.CheckConstraint(
            'available_seats >= 0 AND available_seats <= total_seats',
            name='ck_flight_available_seats_range',
        ),
        sa.CheckConstraint('price >= 0', name='ck_flight_price_non_negative'),
        sa.CheckConstraint(
            "status IN ('active', 'cancelled', 'delayed')", name='ck_flight_status_valid'
        ),
    )
    op.create_index(op.f('ix_flight_flight_number'), 'flight', ['flight_number'], unique=True)
    op.create_index(op.f('ix_flight_origin'), 'flight', ['origin'])
    op.create_index(op.f('ix_flight_destination'), 'flight', ['destination'])
    op.create_index(op.f('ix_flight_departure_time'), 'flight', ['departure_time'])

    # Booking table
    op.create_table(
        'booking',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('account_id', sa.Integer(), nullable=False),
        sa.Column('flight_id', sa.Integer(), nullable=False),
        sa.Column('passenger_name', sa.String(length=255), nullable=False),
        sa.Column('passenger_email', sa.String(length=255), nullable=False),
        sa.Column('passenger_phone', sa.String(length=32), nullable=False),
        sa.Column('seat_numbers', sa.JSON(), nullable=False),
        sa.Column('total_price', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('pnr', sa.String(length=6), nullable=False),
        sa.Column('booked_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['account_id'], ['account.id']),
        sa.ForeignKeyConstraint(['flight_id'], ['flight.id']),
    )
    op.create_index(op.f('ix_booking_account_id'), 'booking', ['account_id'])
    op.create_index(op.f('ix_booking_flight_id'), 'booking', ['flight_id'])
    op.create_index(op.f('ix_booking_pnr'), 'booking', ['pnr'], unique=True)
    op.create_index(op.f('ix_booking_booked_at'), 'booking', ['booked_at'])


def downgrade() -> None:
    op.drop_table('booking')
    op.drop_table('flight')
    op.drop_table('account')
