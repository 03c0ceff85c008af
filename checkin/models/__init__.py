# =======================================================================================
# checkin/models/__init__.py - Models Package
# =======================================================================================
from .schemas import *
from .enums import *
from .decisions import *

__all__ = [
    "AddStudentRequest", "AddStudentResponse", "ImportStudentsResponse", "LinkCardRequest",
    "IssueCardResponse", "TagRequest", "ScanRequest", "ScanResponse", "IssueMealResponse",
    "AttendeeStatus", "CheckStatusResponse", "AuditLogItem", "AttendeeLogsResponse",
    "SummaryResponse", "HealthResponse", "ErrorResponse",
    "ScanStatus", "BeepPattern", "Location", "SCAN_LOCATIONS", "AuditAction", "DenyReason",
    "Allowed", "Denied", "Decision",
]
