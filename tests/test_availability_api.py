def _employee(client, email, position="dispatcher"):
    response = client.post(
        "/api/employees",
        json={"first_name": "Avail", "last_name": email.split("@")[0], "email": email, "position": position},
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


def _schedule_and_shift(client, start="09:00", end="17:00"):
    schedule = client.post(
        "/api/schedules",
        json={"name": "Week 3", "start_date": "2025-01-12", "end_date": "2025-01-18"},
    ).json()
    shift = client.post("/api/shifts", json={"name": "Shift", "start_time": start, "end_time": end}).json()
    return schedule["id"], shift["id"]


def test_availability_upserts_per_day(client):
    employee_id = _employee(client, "a@example.com")
    url = f"/api/employees/{employee_id}/availability"

    first = client.post(url, json={"day_of_week": "monday", "start_time": "08:00", "end_time": "16:00"})
    assert first.status_code == 200, first.text
    assert first.json()["day_of_week"] == 1
    assert first.json()["is_available"] is True

    second = client.post(url, json={"day_of_week": 1, "start_time": "10:00", "end_time": "18:00"})
    assert second.json()["id"] == first.json()["id"]

    rows = client.get(url).json()
    assert len(rows) == 1
    assert rows[0]["start_time"] == "10:00:00"


def test_availability_validation(client):
    employee_id = _employee(client, "b@example.com")
    url = f"/api/employees/{employee_id}/availability"
    assert client.post(url, json={"day_of_week": 7, "start_time": "08:00", "end_time": "16:00"}).status_code == 422
    assert client.post(url, json={"day_of_week": 2, "start_time": "16:00", "end_time": "08:00"}).status_code == 422
    assert client.get("/api/employees/999/availability").status_code == 404


def test_weekly_replace_clears_missing_days(client):
    employee_id = _employee(client, "c@example.com")
    url = f"/api/employees/{employee_id}/availability"
    client.post(url, json={"day_of_week": 0, "start_time": "08:00", "end_time": "16:00"})

    week = [
        {"day_of_week": 1, "start_time": "07:00", "end_time": "19:00"},
        {"day_of_week": 2, "start_time": "07:00", "end_time": "19:00", "is_available": False},
    ]
    replaced = client.put(url, json=week)
    assert replaced.status_code == 200, replaced.text
    assert [row["day_of_week"] for row in replaced.json()] == [1, 2]

    duplicate = client.put(url, json=[week[0], week[0]])
    assert duplicate.status_code == 422


def test_assignment_respects_availability(client):
    schedule_id, shift_id = _schedule_and_shift(client, "09:00", "17:00")
    employee_id = _employee(client, "d@example.com")
    url = f"/api/employees/{employee_id}/availability"
    client.post(url, json={"day_of_week": 1, "start_time": "12:00", "end_time": "20:00"})
    client.post(url, json={"day_of_week": 2, "start_time": "08:00", "end_time": "18:00", "is_available": False})
    client.post(url, json={"day_of_week": 3, "start_time": "08:00", "end_time": "18:00"})

    def assign(on):
        return client.post(
            f"/api/schedules/{schedule_id}/assignments",
            json={"employee_id": employee_id, "shift_id": shift_id, "date": on},
        )

    outside_window = assign("2025-01-13")
    assert outside_window.status_code == 409
    assert "availability" in outside_window.json()["detail"]
    assert assign("2025-01-14").status_code == 409
    assert assign("2025-01-15").status_code == 201
    # no entry for Thursday
    assert assign("2025-01-16").status_code == 201
