# =======================================================================================
# checkin/api/routes/cards.py - Card Issue Endpoints
# =======================================================================================
from fastapi import APIRouter, Depends
from ...models.schemas import IssueCardResponse, LinkCardRequest
from ...services.directory_service import DirectoryService
from ..dependencies import get_directory_service

router = APIRouter()


@router.post("/gate/issue_card", response_model=IssueCardResponse)
def issue_card(request: LinkCardRequest, directory: DirectoryService = Depends(get_directory_service)):
    """Entrance desk: link a blank tag to a registration and mark the student as entered."""
    student = directory.bind_tag(request.registration_id, request.rfid_uid, mark_inside=True)
    return IssueCardResponse(student=student["name"], credits=student["meal_credits"])


@router.post("/staff/link_card", response_model=IssueCardResponse)
def link_card(request: LinkCardRequest, directory: DirectoryService = Depends(get_directory_service)):
    """Staff desk: link a tag without touching inside/outside state."""
    student = directory.bind_tag(request.registration_id, request.rfid_uid, mark_inside=False)
    return IssueCardResponse(student=student["name"], credits=student["meal_credits"])
