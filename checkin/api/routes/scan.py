# =======================================================================================
# checkin/api/routes/scan.py - Scan Endpoints
# =======================================================================================
from fastapi import APIRouter, Depends
from ...models.decisions import Allowed, Decision
from ...models.schemas import IssueMealResponse, ScanRequest, ScanResponse, TagRequest
from ...services.scan_authorizer import ScanAuthorizer
from ..dependencies import get_scan_authorizer

router = APIRouter()


def _to_scan_response(decision: Decision) -> ScanResponse:
    if isinstance(decision, Allowed):
        return ScanResponse(status="allowed", msg=decision.message, beep="success", **decision.side_data)
    return ScanResponse(status="denied", reason=decision.reason.value, beep="long_error", **decision.side_data)


@router.post("/scan", response_model=ScanResponse, response_model_exclude_none=True)
def handle_scan(request: ScanRequest, authorizer: ScanAuthorizer = Depends(get_scan_authorizer)):
    """
    Universal scanner for gates and food.
    Hardware sends: { "rfid_uid": "...", "location": "CAFETERIA" }
    """
    decision = authorizer.scan(request.rfid_uid, request.location)
    return _to_scan_response(decision)


@router.post("/admin/issue_meal", response_model=IssueMealResponse, response_model_exclude_none=True)
def issue_meal(request: TagRequest, authorizer: ScanAuthorizer = Depends(get_scan_authorizer)):
    """Hand out a meal from the admin desk (same rule and audit entry as a cafeteria scan)."""
    decision = authorizer.issue_meal(request.rfid_uid)
    if isinstance(decision, Allowed):
        return IssueMealResponse(status="success", remaining=decision.side_data["credits_remaining"])
    return IssueMealResponse(status="denied", reason=decision.reason.value)
