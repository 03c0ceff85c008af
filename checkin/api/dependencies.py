# =======================================================================================
# checkin/api/dependencies.py - FastAPI Dependencies
# =======================================================================================
from fastapi import Depends
from ..database import DatabaseManager, db_manager
from ..services import DashboardService, DirectoryService, ScanAuthorizer

def get_db_manager() -> DatabaseManager:
    """Dependency to get the database manager (overridden in tests)."""
    return db_manager

def get_directory_service(db: DatabaseManager = Depends(get_db_manager)) -> DirectoryService:
    return DirectoryService(db)

def get_scan_authorizer(db: DatabaseManager = Depends(get_db_manager)) -> ScanAuthorizer:
    return ScanAuthorizer(db)

def get_dashboard_service(db: DatabaseManager = Depends(get_db_manager)) -> DashboardService:
    return DashboardService(db)
