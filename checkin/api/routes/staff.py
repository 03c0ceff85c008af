# =======================================================================================
# checkin/api/routes/staff.py - Staff / Admin Lookup Endpoints
# =======================================================================================
from fastapi import APIRouter, Depends
from ...models.schemas import (
    AttendeeLogsResponse,
    AttendeeStatus,
    AuditLogItem,
    CheckStatusResponse,
    SummaryResponse,
    TagRequest,
)
from ...services.dashboard_service import DashboardService
from ...services.directory_service import DirectoryService
from ..dependencies import get_dashboard_service, get_directory_service

router = APIRouter()


@router.post("/staff/check_status", response_model=CheckStatusResponse)
def check_status(request: TagRequest, directory: DirectoryService = Depends(get_directory_service)):
    data = directory.check_status(request.rfid_uid)
    return CheckStatusResponse(data=AttendeeStatus(**data))


@router.get("/admin/attendees/{registration_id}/logs", response_model=AttendeeLogsResponse)
def attendee_logs(registration_id: str, directory: DirectoryService = Depends(get_directory_service)):
    logs = directory.history(registration_id)
    return AttendeeLogsResponse(
        registration_id=registration_id,
        logs=[AuditLogItem(**entry) for entry in logs],
    )


@router.get("/admin/summary", response_model=SummaryResponse)
def summary(dashboard: DashboardService = Depends(get_dashboard_service)):
    return SummaryResponse(**dashboard.get_summary())
