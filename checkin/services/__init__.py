# =======================================================================================
# checkin/services/__init__.py - Services Package
# =======================================================================================
from .directory_service import DirectoryService
from .scan_authorizer import ScanAuthorizer
from .dashboard_service import DashboardService

__all__ = ["DirectoryService", "ScanAuthorizer", "DashboardService"]
