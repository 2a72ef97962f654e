"""bookings unique on (court, date, slot_timings)"""
from alembic import op

# revision identifiers, used by Alembic.
revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None

def upgrade():
    with op.batch_alter_table("bookings") as batch:
        batch.create_unique_constraint("uq_bookings_court_date_slot", ["court", "date", "slot_timings"])

def downgrade():
    with op.batch_alter_table("bookings") as batch:
        batch.drop_constraint("uq_bookings_court_date_slot", type_="unique")
