import pytest
from fastapi.testclient import TestClient

from checkin.api.dependencies import get_db_manager
from checkin.database import DatabaseManager
from checkin.main import app
from checkin.models.schemas import AddStudentRequest
from checkin.services import DirectoryService, ScanAuthorizer


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(f"sqlite:///{tmp_path / 'event_test.sqlite'}")
    manager.create_schema()
    yield manager
    manager.dispose()


@pytest.fixture
def directory(db):
    return DirectoryService(db)


@pytest.fixture
def authorizer(db):
    return ScanAuthorizer(db)


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db_manager] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice(directory):
    """R1 / Alice, card T1 issued at the entrance desk (so already inside)."""
    directory.register(AddStudentRequest(registration_id="R1", name="Alice", dept="CSE", grad_year=2026))
    return directory.bind_tag("R1", "T1", mark_inside=True)


@pytest.fixture
def count_logs(db):
    def _count(action=None):
        if action is None:
            row = db.fetch_one("SELECT COUNT(*) AS n FROM audit_logs")
        else:
            row = db.fetch_one("SELECT COUNT(*) AS n FROM audit_logs WHERE action = :a", {"a": action})
        return row["n"]
    return _count
