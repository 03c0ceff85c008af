# =======================================================================================
# checkin/models/schemas.py - Pydantic Models
# =======================================================================================
from datetime import datetime
from typing import Optional, List
from pydantic import AliasChoices, BaseModel, Field
from .enums import ScanStatus, BeepPattern

# Hardware and the desk app send snake_case; newer clients send camelCase.
_REGISTRATION_ID = AliasChoices("registration_id", "registrationId")
_TAG_ID = AliasChoices("rfid_uid", "tagId", "tag_id", "rfid_tag")

# ========== Registration ==========
class AddStudentRequest(BaseModel):
    """Register an attendee before the event (no tag yet)."""
    registration_id: str = Field(..., min_length=1, max_length=64, validation_alias=_REGISTRATION_ID,
                                 description="Roll number / ticket id")
    name: Optional[str] = Field(None, max_length=255)
    dept: Optional[str] = Field(None, max_length=255, validation_alias=AliasChoices("dept", "department"))
    grad_year: Optional[int] = Field(None, validation_alias=AliasChoices("grad_year", "gradYear", "graduationYear"))
    phone: Optional[str] = Field(None, max_length=64)
    address: Optional[str] = Field(None, max_length=512)

class AddStudentResponse(BaseModel):
    status: str = "success"
    msg: str

class ImportStudentsResponse(BaseModel):
    status: str = "success"
    inserted: int
    duplicates: int

# ========== Card issue / link ==========
class LinkCardRequest(BaseModel):
    """Bind a blank RFID tag to an existing registration."""
    registration_id: str = Field(..., min_length=1, max_length=64, validation_alias=_REGISTRATION_ID)
    rfid_uid: str = Field(..., min_length=1, max_length=100, validation_alias=_TAG_ID,
                          description="RFID tag identifier")

class IssueCardResponse(BaseModel):
    status: str = "success"
    student: Optional[str] = None
    credits: int

# ========== Scanning ==========
class TagRequest(BaseModel):
    rfid_uid: str = Field(..., min_length=1, max_length=100, validation_alias=_TAG_ID,
                          description="RFID tag identifier")

class ScanRequest(TagRequest):
    """Scanner event: a tag observed at a location."""
    location: str = Field(..., description="ENTRANCE | CAFETERIA | EXIT")

class ScanResponse(BaseModel):
    status: ScanStatus
    reason: Optional[str] = None
    name: Optional[str] = None
    msg: Optional[str] = None
    credits_remaining: Optional[int] = None
    beep: Optional[BeepPattern] = None

class IssueMealResponse(BaseModel):
    status: str                 # "success" | "denied"
    remaining: Optional[int] = None
    reason: Optional[str] = None

# ========== Staff status ==========
class AttendeeStatus(BaseModel):
    name: Optional[str] = None
    dept: Optional[str] = None
    meal_credits: int
    is_inside: bool

class CheckStatusResponse(BaseModel):
    status: str = "success"
    data: AttendeeStatus

# ========== Audit / dashboard ==========
class AuditLogItem(BaseModel):
    id: int
    location: str
    action: str
    description: Optional[str] = None
    created_at: datetime

class AttendeeLogsResponse(BaseModel):
    status: str = "success"
    registration_id: str
    logs: List[AuditLogItem]

class SummaryResponse(BaseModel):
    total: int
    tagged: int
    inside: int
    meals_redeemed: int

class HealthResponse(BaseModel):
    status: str                 # "ok" | "error"
    database: bool
    message: Optional[str] = None

class ErrorResponse(BaseModel):
    status: str = "error"
    msg: str
