"""booking payment fields

Revision ID: 0002_booking_payment_fields
Revises: 0001_initial
Create Date: 2026-10-17

"""

from alembic import op
import sqlalchemy as sa

revision = "0002_booking_payment_fields"
down_revision = "0001_initial"
branch_labels = None
depends_on = None

def upgrade() -> None:
    # last four digits only; the full card number is never stored
    op.add_column("bookings", sa.Column("payment_date", sa.DateTime(timezone=True), nullable=True))
    op.add_column("bookings", sa.Column("card_last_four", sa.String(length=4), nullable=True))

def downgrade() -> None:
    op.drop_column("bookings", "card_last_four")
    op.drop_column("bookings", "payment_date")
