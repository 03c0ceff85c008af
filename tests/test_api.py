from fastapi.testclient import TestClient

from checkin.api.dependencies import get_scan_authorizer
from checkin.config import config
from checkin.main import app


def add_student(client, registration_id="R1", name="Alice", **extra):
    body = {"registration_id": registration_id, "name": name, "dept": "CSE", "grad_year": 2026}
    body.update(extra)
    return client.post("/setup/add_student", json=body)


def test_add_student(client):
    resp = add_student(client)
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "msg": "Added Alice"}


def test_add_student_duplicate(client):
    add_student(client)
    resp = client.post("/admin/add_student", json={"registrationId": "R1", "name": "Someone"})
    assert resp.status_code == 400
    assert resp.json()["status"] == "error"


def test_add_student_missing_id_is_validation_error(client):
    resp = client.post("/setup/add_student", json={"name": "No Id"})
    assert resp.status_code == 422


def test_issue_card(client):
    add_student(client)
    resp = client.post("/gate/issue_card", json={"registration_id": "R1", "rfid_uid": "T1"})
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "student": "Alice", "credits": 1}


def test_issue_card_unknown_student(client):
    resp = client.post("/gate/issue_card", json={"registration_id": "R404", "rfid_uid": "T1"})
    assert resp.status_code == 404
    assert resp.json() == {"status": "error", "msg": "Student not found in list"}


def test_issue_card_tag_taken(client):
    add_student(client, "R1", "Alice")
    add_student(client, "R2", "Bob")
    client.post("/gate/issue_card", json={"registration_id": "R1", "rfid_uid": "T1"})

    resp = client.post("/staff/link_card", json={"registrationId": "R2", "tagId": "T1"})
    assert resp.status_code == 400
    assert resp.json()["msg"] == "This Tag is already assigned!"


def test_scan_unknown_tag(client):
    resp = client.post("/scan", json={"rfid_uid": "ghost", "location": "ENTRANCE"})
    assert resp.status_code == 200
    assert resp.json() == {"status": "denied", "reason": "UNKNOWN_TAG", "beep": "long_error"}


def test_scan_invalid_location(client):
    add_student(client)
    client.post("/gate/issue_card", json={"registration_id": "R1", "rfid_uid": "T1"})

    resp = client.post("/scan", json={"rfid_uid": "T1", "location": "ROOFTOP"})
    assert resp.status_code == 400
    assert resp.json() == {"status": "error", "msg": "Invalid Location ID"}


def test_full_event_scenario(client):
    add_student(client)
    client.post("/gate/issue_card", json={"registration_id": "R1", "rfid_uid": "T1"})

    resp = client.post("/scan", json={"rfid_uid": "T1", "location": "ENTRANCE"})
    assert resp.json() == {
        "status": "denied", "reason": "ALREADY_INSIDE", "name": "Alice", "beep": "long_error",
    }

    resp = client.post("/scan", json={"rfid_uid": "T1", "location": "EXIT"})
    assert resp.json()["status"] == "allowed"
    assert resp.json()["msg"] == "Goodbye"

    status = client.post("/staff/check_status", json={"rfid_uid": "T1"}).json()
    assert status["data"]["is_inside"] is False

    resp = client.post("/scan", json={"tagId": "T1", "location": "CAFETERIA"})
    assert resp.json() == {
        "status": "allowed", "msg": "Meal Approved", "credits_remaining": 0, "beep": "success",
    }

    resp = client.post("/scan", json={"rfid_uid": "T1", "location": "CAFETERIA"})
    assert resp.json() == {"status": "denied", "reason": "NO_CREDITS", "beep": "long_error"}

    resp = client.post("/scan", json={"rfid_uid": "T1", "location": "ENTRANCE"})
    assert resp.json()["status"] == "allowed"
    assert resp.json()["name"] == "Alice"

    logs = client.get("/admin/attendees/R1/logs").json()["logs"]
    assert [entry["action"] for entry in logs] == [
        "ISSUED", "EXITED", "MEAL_REDEEMED", "MEAL_DENIED", "ENTERED",
    ]


def test_issue_meal(client):
    add_student(client)
    client.post("/staff/link_card", json={"registration_id": "R1", "rfid_uid": "T1"})

    resp = client.post("/admin/issue_meal", json={"rfid_uid": "T1"})
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "remaining": 0}

    resp = client.post("/admin/issue_meal", json={"rfid_uid": "T1"})
    assert resp.status_code == 200
    assert resp.json() == {"status": "denied", "reason": "NO_CREDITS"}

    actions = [e["action"] for e in client.get("/admin/attendees/R1/logs").json()["logs"]]
    assert actions == ["ISSUED", "MEAL_REDEEMED", "MEAL_DENIED"]


def test_issue_meal_unknown_tag(client):
    resp = client.post("/admin/issue_meal", json={"rfid_uid": "ghost"})
    assert resp.status_code == 404


def test_check_status(client):
    add_student(client)
    client.post("/staff/link_card", json={"registration_id": "R1", "rfid_uid": "T1"})

    resp = client.post("/staff/check_status", json={"rfid_uid": "T1"})
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "success",
        "data": {"name": "Alice", "dept": "CSE", "meal_credits": 1, "is_inside": False},
    }


def test_check_status_unregistered_tag(client):
    resp = client.post("/staff/check_status", json={"rfid_uid": "ghost"})
    assert resp.status_code == 404


def test_logs_unknown_registration(client):
    assert client.get("/admin/attendees/R404/logs").status_code == 404


def test_import_students(client):
    csv_data = b"registration_id,name,dept,grad_year\nR1,Alice,CSE,2026\nR2,Bob,ME,2025\nR1,Dup,CSE,2026\n"
    resp = client.post(
        "/setup/import_students",
        files={"file": ("students.csv", csv_data, "text/csv")},
    )
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "inserted": 2, "duplicates": 1}


def test_summary(client):
    add_student(client, "R1", "Alice")
    add_student(client, "R2", "Bob")
    client.post("/gate/issue_card", json={"registration_id": "R1", "rfid_uid": "T1"})
    client.post("/scan", json={"rfid_uid": "T1", "location": "CAFETERIA"})

    assert client.get("/admin/summary").json() == {
        "total": 2, "tagged": 1, "inside": 1, "meals_redeemed": 1,
    }


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "database": True, "message": None}


def test_unexpected_fault_is_500(client):
    class BrokenAuthorizer:
        def scan(self, rfid_uid, location):
            raise RuntimeError("store unavailable")

    app.dependency_overrides[get_scan_authorizer] = lambda: BrokenAuthorizer()
    faulty = TestClient(app, raise_server_exceptions=False)

    resp = faulty.post("/scan", json={"rfid_uid": "T1", "location": "EXIT"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "System Error"}


def test_add_student_without_name_echoes_registration_id(client):
    resp = client.post("/setup/add_student", json={"registration_id": "R7"})
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "msg": "Added R7"}


def test_unanticipated_constraint_failure_is_500(client, monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_MEAL_CREDITS", -1)
    faulty = TestClient(app, raise_server_exceptions=False)

    resp = faulty.post("/setup/add_student", json={"registration_id": "FRESH", "name": "Fresh"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "System Error"}
