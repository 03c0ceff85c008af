# =======================================================================================
# checkin/repositories/attendee_repository.py - Attendee Directory Storage
# =======================================================================================
from typing import Any, Dict, List, Optional
from sqlalchemy import DateTime, text
from sqlalchemy.engine import Connection

Attendee = Dict[str, Any]

_ATTENDEE_COLUMNS = """
    id, registration_id, name, dept, grad_year, phone, address,
    rfid_uid, meal_credits, is_inside
"""


def _to_attendee(row) -> Optional[Attendee]:
    if row is None:
        return None
    attendee = dict(row)
    # SQLite hands booleans back as 0/1
    attendee["is_inside"] = bool(attendee["is_inside"])
    return attendee


class AttendeeRepository:
    """
    SQL access to the attendees / audit_logs tables.

    Bound to one connection, so everything done through a repository instance
    belongs to the caller's transaction (see DatabaseManager.get_connection).
    """

    def __init__(self, conn: Connection):
        self.conn = conn

    # ----------------- lookups -----------------
    def find_by_registration_id(self, registration_id: str) -> Optional[Attendee]:
        row = self.conn.execute(
            text(f"SELECT {_ATTENDEE_COLUMNS} FROM attendees WHERE registration_id = :rid"),
            {"rid": registration_id},
        ).mappings().first()
        return _to_attendee(row)

    def find_by_tag(self, rfid_uid: str) -> Optional[Attendee]:
        row = self.conn.execute(
            text(f"SELECT {_ATTENDEE_COLUMNS} FROM attendees WHERE rfid_uid = :tag"),
            {"tag": rfid_uid},
        ).mappings().first()
        return _to_attendee(row)

    def get(self, attendee_id: int) -> Optional[Attendee]:
        row = self.conn.execute(
            text(f"SELECT {_ATTENDEE_COLUMNS} FROM attendees WHERE id = :id"),
            {"id": attendee_id},
        ).mappings().first()
        return _to_attendee(row)

    # ----------------- writes -----------------
    def insert(self, registration_id: str, name: Optional[str], dept: Optional[str],
               grad_year: Optional[int], meal_credits: int,
               phone: Optional[str] = None, address: Optional[str] = None) -> int:
        """Insert a new attendee with no tag. Raises IntegrityError on duplicate registration id."""
        result = self.conn.execute(
            text("""
                INSERT INTO attendees
                    (registration_id, name, dept, grad_year, phone, address, meal_credits, is_inside)
                VALUES (:rid, :name, :dept, :year, :phone, :address, :credits, :inside)
            """),
            {
                "rid": registration_id, "name": name, "dept": dept, "year": grad_year,
                "phone": phone, "address": address, "credits": meal_credits, "inside": False,
            },
        )
        return result.lastrowid

    def bind_tag(self, attendee_id: int, rfid_uid: str) -> bool:
        """Set the tag if the attendee has none yet. Returns False if already bound."""
        result = self.conn.execute(
            text("""
                UPDATE attendees
                SET rfid_uid = :tag, updated_at = CURRENT_TIMESTAMP
                WHERE id = :id AND rfid_uid IS NULL
            """),
            {"tag": rfid_uid, "id": attendee_id},
        )
        return result.rowcount == 1

    def set_inside(self, attendee_id: int, inside: bool) -> None:
        self.conn.execute(
            text("UPDATE attendees SET is_inside = :inside, updated_at = CURRENT_TIMESTAMP WHERE id = :id"),
            {"inside": inside, "id": attendee_id},
        )

    def enter(self, attendee_id: int) -> bool:
        """Flip is_inside false -> true. Returns False when the attendee was already inside."""
        result = self.conn.execute(
            text("""
                UPDATE attendees
                SET is_inside = :inside, updated_at = CURRENT_TIMESTAMP
                WHERE id = :id AND is_inside = :outside
            """),
            {"inside": True, "outside": False, "id": attendee_id},
        )
        return result.rowcount == 1

    def adjust_meal_credits(self, attendee_id: int, delta: int) -> bool:
        """Add delta to meal_credits only if the result stays >= 0."""
        result = self.conn.execute(
            text("""
                UPDATE attendees
                SET meal_credits = meal_credits + :delta, updated_at = CURRENT_TIMESTAMP
                WHERE id = :id AND meal_credits + :delta >= 0
            """),
            {"delta": delta, "id": attendee_id},
        )
        return result.rowcount == 1

    def meal_credits(self, attendee_id: int) -> int:
        return int(self.conn.execute(
            text("SELECT meal_credits FROM attendees WHERE id = :id"),
            {"id": attendee_id},
        ).scalar_one())

    # ----------------- audit log -----------------
    def append_log(self, attendee_id: int, location: str, action: str,
                   description: Optional[str] = None) -> int:
        result = self.conn.execute(
            text("""
                INSERT INTO audit_logs (attendee_id, location, action, description)
                VALUES (:aid, :loc, :action, :desc)
            """),
            {"aid": attendee_id, "loc": location, "action": action, "desc": description},
        )
        return result.lastrowid

    def list_logs(self, attendee_id: int) -> List[Dict[str, Any]]:
        rows = self.conn.execute(
            text("""
                SELECT id, location, action, description, created_at
                FROM audit_logs
                WHERE attendee_id = :aid
                ORDER BY id
            """).columns(created_at=DateTime),
            {"aid": attendee_id},
        ).mappings().all()
        return [dict(row) for row in rows]
