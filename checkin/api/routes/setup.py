# =======================================================================================
# checkin/api/routes/setup.py - Registration Endpoints
# =======================================================================================
from fastapi import APIRouter, Depends, File, UploadFile
from ...models.schemas import AddStudentRequest, AddStudentResponse, ImportStudentsResponse
from ...services.directory_service import DirectoryService
from ..dependencies import get_directory_service

router = APIRouter()


@router.post("/setup/add_student", response_model=AddStudentResponse)
@router.post("/admin/add_student", response_model=AddStudentResponse)
def add_student(request: AddStudentRequest, directory: DirectoryService = Depends(get_directory_service)):
    """Add a student before the event. No RFID assigned yet."""
    directory.register(request)
    return AddStudentResponse(msg=f"Added {request.name or request.registration_id}")


@router.post("/setup/import_students", response_model=ImportStudentsResponse)
def import_students(
    file: UploadFile = File(...), directory: DirectoryService = Depends(get_directory_service)
):
    """
    CSV import: headers = registration_id,name,dept,grad_year[,phone,address]
    Example line: R1001,Jane Doe,CSE,2026
    """
    counts = directory.import_csv(file.file.read())
    return ImportStudentsResponse(**counts)
