import pytest


def _employee(client, email, position="dispatcher"):
    response = client.post(
        "/api/employees",
        json={"first_name": "Leave", "last_name": email.split("@")[0], "email": email, "position": position},
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


@pytest.fixture
def staff(client):
    return {
        "dispatcher": _employee(client, "disp@example.com"),
        "other": _employee(client, "other@example.com"),
        "lead": _employee(client, "lead@example.com", "shift_supervisor"),
    }


def _request(client, employee_id, start="2025-01-14", end="2025-01-15", kind="vacation"):
    return client.post(
        "/api/time-off",
        json={"employee_id": employee_id, "start_date": start, "end_date": end, "request_type": kind},
    )


def test_request_starts_pending(client, staff):
    created = _request(client, staff["dispatcher"])
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["status"] == "pending"
    assert body["approved_by"] is None
    assert client.get(f"/api/time-off/{body['id']}").json()["request_type"] == "vacation"


def test_request_validation(client, staff):
    assert _request(client, staff["dispatcher"], start="2025-01-15", end="2025-01-14").status_code == 422
    assert _request(client, staff["dispatcher"], kind="sabbatical").status_code == 422
    assert _request(client, 999).status_code == 404
    assert client.get("/api/time-off/999").status_code == 404


def test_decision_rules(client, staff):
    request_id = _request(client, staff["dispatcher"]).json()["id"]
    url = f"/api/time-off/{request_id}"

    assert client.patch(url, json={"status": "approved", "approved_by": staff["other"]}).status_code == 403
    assert client.patch(url, json={"status": "pending", "approved_by": staff["lead"]}).status_code == 422

    approved = client.patch(url, json={"status": "approved", "approved_by": staff["lead"]})
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"
    assert approved.json()["approved_by"] == staff["lead"]

    assert client.patch(url, json={"status": "denied", "approved_by": staff["lead"]}).status_code == 409
    assert client.delete(url).status_code == 409


def test_supervisor_cannot_approve_own_request(client, staff):
    request_id = _request(client, staff["lead"]).json()["id"]
    decision = client.patch(f"/api/time-off/{request_id}", json={"status": "approved", "approved_by": staff["lead"]})
    assert decision.status_code == 403


def test_listing_filters_and_withdraw(client, staff):
    pending = _request(client, staff["dispatcher"]).json()
    _request(client, staff["other"], start="2025-02-01", end="2025-02-03", kind="sick")

    mine = client.get("/api/time-off", params={"employee_id": staff["dispatcher"]}).json()
    assert [row["id"] for row in mine] == [pending["id"]]
    january = client.get("/api/time-off", params={"start_date": "2025-01-01", "end_date": "2025-01-31"}).json()
    assert [row["id"] for row in january] == [pending["id"]]
    assert len(client.get("/api/time-off", params={"status": "pending"}).json()) == 2

    assert client.delete(f"/api/time-off/{pending['id']}").status_code == 204
    assert client.get(f"/api/time-off/{pending['id']}").status_code == 404


def test_approved_time_off_blocks_assignment(client, staff):
    schedule_id = client.post(
        "/api/schedules",
        json={"name": "Week 3", "start_date": "2025-01-12", "end_date": "2025-01-18"},
    ).json()["id"]
    shift_id = client.post("/api/shifts", json={"name": "Day", "start_time": "09:00", "end_time": "17:00"}).json()["id"]
    request_id = _request(client, staff["dispatcher"]).json()["id"]

    def assign(on):
        return client.post(
            f"/api/schedules/{schedule_id}/assignments",
            json={"employee_id": staff["dispatcher"], "shift_id": shift_id, "date": on},
        )

    # pending requests do not block
    assert assign("2025-01-14").status_code == 201
    client.patch(f"/api/time-off/{request_id}", json={"status": "approved", "approved_by": staff["lead"]})
    blocked = assign("2025-01-15")
    assert blocked.status_code == 409
    assert "time off" in blocked.json()["detail"]
    assert assign("2025-01-16").status_code == 201
