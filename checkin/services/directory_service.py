# =======================================================================================
# checkin/services/directory_service.py - Attendee Directory Service
# =======================================================================================
import io
import csv
import logging
from typing import Any, Dict, List, Optional, Union
from sqlalchemy.exc import IntegrityError
from ..config import config
from ..database import DatabaseManager
from ..models.enums import AuditAction, Location
from ..models.schemas import AddStudentRequest
from ..repositories import Attendee, AttendeeRepository
from ..utils.exceptions import (
    DuplicateIdError,
    InvalidImportError,
    RegistrationNotFoundError,
    TagAlreadyBoundError,
    UnknownTagError,
)

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class DirectoryService:
    """Registration, tag binding and read-only lookups over the attendee directory."""

    def __init__(self, db: DatabaseManager):
        self.db = db

    def register(self, request: AddStudentRequest) -> Attendee:
        """Create an attendee with no tag. Raises DuplicateIdError if the id is taken."""
        try:
            with self.db.get_connection() as conn:
                repo = AttendeeRepository(conn)
                if repo.find_by_registration_id(request.registration_id):
                    raise DuplicateIdError("Student ID already exists")
                attendee_id = repo.insert(
                    registration_id=request.registration_id,
                    name=request.name,
                    dept=request.dept,
                    grad_year=request.grad_year,
                    meal_credits=config.DEFAULT_MEAL_CREDITS,
                    phone=request.phone,
                    address=request.address,
                )
                attendee = repo.get(attendee_id)
        except IntegrityError:
            # lost a race with a concurrent registration of the same id;
            # any other constraint failure is a fault
            if self.find_by_registration_id(request.registration_id):
                raise DuplicateIdError("Student ID already exists")
            raise

        logger.info("Registered %s (%s)", request.registration_id, request.name)
        return attendee

    def import_csv(self, data: Union[bytes, str]) -> Dict[str, int]:
        """
        Bulk registration. Headers: registration_id,name,dept,grad_year[,phone,address]
        Rows with a blank or already-known registration id count as duplicates.
        """
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8-sig")
            reader = csv.DictReader(io.StringIO(data))
            if not reader.fieldnames or "registration_id" not in reader.fieldnames:
                raise InvalidImportError("CSV must have a registration_id column")
            rows = list(reader)
        except UnicodeDecodeError:
            raise InvalidImportError("Invalid CSV encoding")
        except csv.Error as e:
            raise InvalidImportError(f"Malformed CSV: {e}")

        inserted = 0
        duplicates = 0
        seen = set()

        with self.db.get_connection() as conn:
            repo = AttendeeRepository(conn)
            for row in rows:
                registration_id = _clean(row.get("registration_id"))
                if not registration_id or registration_id in seen or repo.find_by_registration_id(registration_id):
                    duplicates += 1
                    continue

                grad_year = _clean(row.get("grad_year"))
                repo.insert(
                    registration_id=registration_id,
                    name=_clean(row.get("name")),
                    dept=_clean(row.get("dept")),
                    grad_year=int(grad_year) if grad_year and grad_year.isdigit() else None,
                    meal_credits=config.DEFAULT_MEAL_CREDITS,
                    phone=_clean(row.get("phone")),
                    address=_clean(row.get("address")),
                )
                seen.add(registration_id)
                inserted += 1

        logger.info("CSV import: %d inserted, %d duplicates", inserted, duplicates)
        return {"inserted": inserted, "duplicates": duplicates}

    def bind_tag(self, registration_id: str, rfid_uid: str, mark_inside: bool) -> Attendee:
        """
        Link a blank tag to a registration, exactly once.

        mark_inside=True is the entrance-desk variant: handing over the card
        also lets the attendee in. The staff variant leaves is_inside alone.
        """
        location = Location.DESK if mark_inside else Location.STAFF
        try:
            with self.db.get_connection() as conn:
                repo = AttendeeRepository(conn)

                attendee = repo.find_by_registration_id(registration_id)
                if not attendee:
                    raise RegistrationNotFoundError("Student not found in list")

                if repo.find_by_tag(rfid_uid):
                    raise TagAlreadyBoundError("This Tag is already assigned!")

                if not repo.bind_tag(attendee["id"], rfid_uid):
                    raise TagAlreadyBoundError("This student already has a Tag assigned!")

                if mark_inside:
                    repo.set_inside(attendee["id"], True)

                repo.append_log(
                    attendee["id"], location.value, AuditAction.ISSUED.value,
                    f"Assigned to {attendee['name']}",
                )
                attendee = repo.get(attendee["id"])
        except IntegrityError:
            if self.find_by_tag(rfid_uid):
                raise TagAlreadyBoundError("This Tag is already assigned!")
            raise

        logger.info("Tag %s bound to %s at %s", rfid_uid, registration_id, location.value)
        return attendee

    def find_by_tag(self, rfid_uid: str) -> Optional[Attendee]:
        with self.db.get_connection() as conn:
            return AttendeeRepository(conn).find_by_tag(rfid_uid)

    def find_by_registration_id(self, registration_id: str) -> Optional[Attendee]:
        with self.db.get_connection() as conn:
            return AttendeeRepository(conn).find_by_registration_id(registration_id)

    def check_status(self, rfid_uid: str) -> Dict[str, Any]:
        """Read-only projection for staff: name, dept, meal credits, inside/outside."""
        attendee = self.find_by_tag(rfid_uid)
        if not attendee:
            raise UnknownTagError("Tag not registered")
        return {
            "name": attendee["name"],
            "dept": attendee["dept"],
            "meal_credits": attendee["meal_credits"],
            "is_inside": attendee["is_inside"],
        }

    def history(self, registration_id: str) -> List[Dict[str, Any]]:
        with self.db.get_connection() as conn:
            repo = AttendeeRepository(conn)
            attendee = repo.find_by_registration_id(registration_id)
            if not attendee:
                raise RegistrationNotFoundError("Student not found in list")
            return repo.list_logs(attendee["id"])
