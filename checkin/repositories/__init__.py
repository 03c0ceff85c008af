# =======================================================================================
# checkin/repositories/__init__.py - Repositories Package
# =======================================================================================
from .attendee_repository import Attendee, AttendeeRepository

__all__ = ["Attendee", "AttendeeRepository"]
