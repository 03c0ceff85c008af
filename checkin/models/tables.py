# =======================================================================================
# checkin/models/tables.py - Table Definitions
# =======================================================================================
from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    func,
)

metadata = MetaData()

attendees = Table(
    "attendees",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("registration_id", String(64), nullable=False, unique=True),  # Roll number / ticket id
    Column("name", String(255)),
    Column("dept", String(255)),
    Column("grad_year", Integer),
    Column("phone", String(64)),
    Column("address", String(512)),
    Column("rfid_uid", String(100), nullable=True, unique=True),  # NULL until a card is issued
    Column("meal_credits", Integer, nullable=False),  # seeded from DEFAULT_MEAL_CREDITS on insert
    Column("is_inside", Boolean, nullable=False, default=False),
    Column("created_at", DateTime, nullable=False, server_default=func.current_timestamp()),
    Column(
        "updated_at",
        DateTime,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
    ),
    CheckConstraint("meal_credits >= 0", name="ck_attendees_meal_credits_non_negative"),
)

audit_logs = Table(
    "audit_logs",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "attendee_id",
        Integer,
        ForeignKey("attendees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("location", String(32), nullable=False),  # ENTRANCE, CAFETERIA, EXIT, DESK, STAFF
    Column("action", String(32), nullable=False),    # ENTERED, MEAL_REDEEMED, ...
    Column("description", String(255)),
    Column("created_at", DateTime, nullable=False, server_default=func.current_timestamp()),
)
