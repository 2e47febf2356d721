from __future__ import annotations

import pytest

from tests.conftest import COWORKER_ID, EMPLOYEE_ID, MANAGER_ID

VALID_BODY = {"startDate": "2099-01-01", "endDate": "2099-01-03", "reason": "Vacation"}


@pytest.fixture
def created(login_as, fixed_today) -> dict:
    response = login_as(EMPLOYEE_ID).post(f"/api/absence/employee/{EMPLOYEE_ID}", json=VALID_BODY)
    assert response.status_code == 201
    return response.json()["data"]


class TestCreate:
    def test_owner_creates_pending_request(self, created):
        assert created["status"] == "pending"
        assert created["employeeId"] == EMPLOYEE_ID
        assert created["startDate"] == "2099-01-01"

    def test_manager_creates_for_employee(self, login_as, fixed_today):
        response = login_as(MANAGER_ID).post(f"/api/absence/employee/{COWORKER_ID}", json=VALID_BODY)
        assert response.status_code == 201
        assert response.json()["message"] == "Absence request created successfully"

    def test_other_user_is_forbidden(self, login_as, fixed_today):
        response = login_as(COWORKER_ID).post(f"/api/absence/employee/{EMPLOYEE_ID}", json=VALID_BODY)
        assert response.status_code == 403
        assert response.json()["error"] == "Not authorized to create absence requests for this employee"

    def test_validation_error_is_400(self, login_as, fixed_today):
        body = {**VALID_BODY, "endDate": "2098-12-31"}
        response = login_as(EMPLOYEE_ID).post(f"/api/absence/employee/{EMPLOYEE_ID}", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "End date cannot be before start date"

    def test_missing_field_is_422(self, login_as, fixed_today):
        response = login_as(EMPLOYEE_ID).post(
            f"/api/absence/employee/{EMPLOYEE_ID}",
            json={"startDate": "2099-01-01", "endDate": "2099-01-03"},
        )
        assert response.status_code == 422
        assert response.json()["error"].startswith("reason")


class TestRead:
    def test_owner_lists_own_requests(self, login_as, created):
        data = login_as(EMPLOYEE_ID).get(f"/api/absence/employee/{EMPLOYEE_ID}").json()["data"]
        assert {r["id"] for r in data} == {"1", created["id"]}

    def test_other_user_cannot_list(self, login_as):
        response = login_as(COWORKER_ID).get(f"/api/absence/employee/{EMPLOYEE_ID}")
        assert response.status_code == 403

    def test_list_all_is_manager_only(self, login_as, created):
        assert login_as(EMPLOYEE_ID).get("/api/absence").status_code == 403

        data = login_as(MANAGER_ID).get("/api/absence").json()["data"]
        assert [r["id"] for r in data] == [created["id"], "1"]

    def test_statistics(self, login_as, created):
        response = login_as(EMPLOYEE_ID).get(f"/api/absence/employee/{EMPLOYEE_ID}/statistics")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "totalRequests": 2,
            "pendingRequests": 1,
            "approvedRequests": 1,
            "rejectedRequests": 0,
            "totalDaysRequested": 2,
            "remainingVacationDays": 24,
        }

    def test_statistics_forbidden_for_others(self, login_as):
        response = login_as(COWORKER_ID).get(f"/api/absence/employee/{EMPLOYEE_ID}/statistics")
        assert response.status_code == 403


class TestStatusUpdate:
    def test_manager_approves(self, login_as, created):
        client = login_as(MANAGER_ID)
        response = client.put(f"/api/absence/{created['id']}/status", json={"status": "approved"})

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "approved"
        assert response.json()["message"] == "Absence request approved successfully"

        stats = client.get(f"/api/absence/employee/{EMPLOYEE_ID}/statistics").json()["data"]
        assert stats["totalDaysRequested"] == 2 + 3

    def test_employee_cannot_update_status(self, login_as, created):
        response = login_as(EMPLOYEE_ID).put(f"/api/absence/{created['id']}/status", json={"status": "approved"})
        assert response.status_code == 403

    def test_unknown_status_value(self, login_as, created):
        response = login_as(MANAGER_ID).put(f"/api/absence/{created['id']}/status", json={"status": "maybe"})
        assert response.status_code == 422

    def test_unknown_request(self, login_as):
        response = login_as(MANAGER_ID).put("/api/absence/missing/status", json={"status": "rejected"})
        assert response.status_code == 404
        assert response.json()["error"] == "Absence request not found"


class TestDelete:
    def test_owner_deletes_pending(self, login_as, created):
        client = login_as(EMPLOYEE_ID)
        response = client.delete(f"/api/absence/{created['id']}/employee/{EMPLOYEE_ID}")

        assert response.status_code == 200
        assert response.json()["message"] == "Absence request deleted successfully"
        ids = [r["id"] for r in client.get(f"/api/absence/employee/{EMPLOYEE_ID}").json()["data"]]
        assert created["id"] not in ids

    def test_approved_request_cannot_be_deleted(self, login_as):
        response = login_as(EMPLOYEE_ID).delete(f"/api/absence/1/employee/{EMPLOYEE_ID}")
        assert response.status_code == 400
        assert response.json()["error"] == "Can only delete pending absence requests"

    def test_other_user_cannot_delete(self, login_as, created):
        response = login_as(COWORKER_ID).delete(f"/api/absence/{created['id']}/employee/{EMPLOYEE_ID}")
        assert response.status_code == 403

    def test_mismatched_employee_is_not_found(self, login_as, created):
        response = login_as(MANAGER_ID).delete(f"/api/absence/{created['id']}/employee/{COWORKER_ID}")
        assert response.status_code == 404


def test_config_endpoint(client):
    response = client.get("/api/config")

    assert response.status_code == 200
    assert response.json()["data"] == {
        "annualVacationDays": 26,
        "maxAbsenceReasonLength": 500,
        "maxAdvanceBookingYears": 1,
    }
