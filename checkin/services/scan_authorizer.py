# =======================================================================================
# checkin/services/scan_authorizer.py - Core Business Logic
# =======================================================================================
import logging
from ..database import DatabaseManager
from ..models.decisions import Allowed, Decision, Denied
from ..models.enums import AuditAction, DenyReason, Location, SCAN_LOCATIONS
from ..repositories import Attendee, AttendeeRepository
from ..utils.exceptions import InvalidLocationError, UnknownTagError

logger = logging.getLogger(__name__)


class ScanAuthorizer:
    """
    Allow/deny decisions for tag scans.

    Decision table (evaluated in this order):
    - unknown tag                      -> Denied(UNKNOWN_TAG), nothing written
    - ENTRANCE, already inside         -> Denied(ALREADY_INSIDE), nothing written
    - ENTRANCE                         -> is_inside=True, log ENTERED, Allowed
    - CAFETERIA, credits left          -> credits -= 1, log MEAL_REDEEMED, Allowed
    - CAFETERIA, no credits            -> log MEAL_DENIED, Denied(NO_CREDITS)
    - EXIT                             -> is_inside=False, log EXITED, Allowed
    - any other location               -> InvalidLocationError

    Each scan is one transaction; the state change and its audit entry commit together.
    The inside/credit checks are guarded UPDATEs, so two concurrent scans of the
    same tag cannot both pass.
    """

    def __init__(self, db: DatabaseManager):
        self.db = db

    def scan(self, rfid_uid: str, location: str) -> Decision:
        """Process one scanner event."""
        with self.db.get_connection() as conn:
            repo = AttendeeRepository(conn)

            attendee = repo.find_by_tag(rfid_uid)
            if not attendee:
                logger.info("Scan denied: unknown tag %s at %s", rfid_uid, location)
                return Denied(DenyReason.UNKNOWN_TAG)

            if location not in SCAN_LOCATIONS:
                logger.warning("Scan rejected: invalid location %r (tag %s)", location, rfid_uid)
                raise InvalidLocationError("Invalid Location ID")

            if location == Location.ENTRANCE.value:
                decision = self._enter(repo, attendee)
            elif location == Location.CAFETERIA.value:
                decision = self._redeem_meal(repo, attendee)
            else:
                decision = self._exit(repo, attendee)

        logger.info("Scan %s at %s -> %s", rfid_uid, location,
                    "allowed" if decision.allowed else decision.reason.value)
        return decision

    def issue_meal(self, rfid_uid: str) -> Decision:
        """Admin meal issue: the cafeteria rule alone. Unknown tags are an error here, not a denial."""
        with self.db.get_connection() as conn:
            repo = AttendeeRepository(conn)
            attendee = repo.find_by_tag(rfid_uid)
            if not attendee:
                raise UnknownTagError("Tag not registered")
            decision = self._redeem_meal(repo, attendee)

        logger.info("Admin meal issue %s -> %s", rfid_uid,
                    "allowed" if decision.allowed else decision.reason.value)
        return decision

    # ----------------------------------------------------------------------
    # Rules
    # ----------------------------------------------------------------------
    @staticmethod
    def _enter(repo: AttendeeRepository, attendee: Attendee) -> Decision:
        if attendee["is_inside"] or not repo.enter(attendee["id"]):
            return Denied(DenyReason.ALREADY_INSIDE, {"name": attendee["name"]})
        repo.append_log(attendee["id"], Location.ENTRANCE.value, AuditAction.ENTERED.value,
                        f"{attendee['name']} entered")
        return Allowed("Welcome", {"name": attendee["name"]})

    @staticmethod
    def _redeem_meal(repo: AttendeeRepository, attendee: Attendee) -> Decision:
        if attendee["meal_credits"] > 0 and repo.adjust_meal_credits(attendee["id"], -1):
            remaining = repo.meal_credits(attendee["id"])
            repo.append_log(attendee["id"], Location.CAFETERIA.value, AuditAction.MEAL_REDEEMED.value,
                            f"Meal redeemed, {remaining} left")
            return Allowed("Meal Approved", {"credits_remaining": remaining})

        repo.append_log(attendee["id"], Location.CAFETERIA.value, AuditAction.MEAL_DENIED.value,
                        "No meal credits left")
        return Denied(DenyReason.NO_CREDITS)

    @staticmethod
    def _exit(repo: AttendeeRepository, attendee: Attendee) -> Decision:
        # No check that the attendee was inside
        repo.set_inside(attendee["id"], False)
        repo.append_log(attendee["id"], Location.EXIT.value, AuditAction.EXITED.value,
                        f"{attendee['name']} exited")
        return Allowed("Goodbye", {"name": attendee["name"]})
