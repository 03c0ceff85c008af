# =======================================================================================
# checkin/services/dashboard_service.py
# =======================================================================================

from typing import Dict
from sqlalchemy import text

from ..database import DatabaseManager
from ..models.enums import AuditAction


class DashboardService:
    """Aggregated counts for the event staff dashboard."""

    def __init__(self, db: DatabaseManager):
        self.db = db

    def get_summary(self) -> Dict[str, int]:
        with self.db.get_connection() as conn:
            row = conn.execute(
                text(
                    """
                    SELECT
                      COUNT(*) AS total,
                      SUM(CASE WHEN rfid_uid IS NOT NULL THEN 1 ELSE 0 END) AS tagged,
                      SUM(CASE WHEN is_inside THEN 1 ELSE 0 END)            AS inside
                    FROM attendees
                    """
                )
            ).mappings().first()

            meals = conn.execute(
                text("SELECT COUNT(*) FROM audit_logs WHERE action = :action"),
                {"action": AuditAction.MEAL_REDEEMED.value},
            ).scalar()

        if not row:
            return {"total": 0, "tagged": 0, "inside": 0, "meals_redeemed": int(meals or 0)}

        return {
            "total": int(row["total"] or 0),
            "tagged": int(row["tagged"] or 0),
            "inside": int(row["inside"] or 0),
            "meals_redeemed": int(meals or 0),
        }
