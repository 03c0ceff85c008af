# =======================================================================================
# checkin/models/enums.py - Enums and Constants
# =======================================================================================
from enum import Enum
from typing import Literal

# Type aliases for better type hints
ScanStatus = Literal["allowed", "denied"]
BeepPattern = Literal["success", "long_error"]

class Location(str, Enum):
    """Location codes reported by scanners and staff desks."""
    ENTRANCE = "ENTRANCE"
    CAFETERIA = "CAFETERIA"
    EXIT = "EXIT"
    DESK = "DESK"
    STAFF = "STAFF"

# Locations a scanner may report to /scan
SCAN_LOCATIONS = frozenset({Location.ENTRANCE.value, Location.CAFETERIA.value, Location.EXIT.value})

class AuditAction(str, Enum):
    """Outcome tags written to the audit log."""
    ISSUED = "ISSUED"
    ENTERED = "ENTERED"
    EXITED = "EXITED"
    MEAL_REDEEMED = "MEAL_REDEEMED"
    MEAL_DENIED = "MEAL_DENIED"

class DenyReason(str, Enum):
    """Reason codes returned with a denied scan."""
    UNKNOWN_TAG = "UNKNOWN_TAG"
    ALREADY_INSIDE = "ALREADY_INSIDE"
    NO_CREDITS = "NO_CREDITS"
