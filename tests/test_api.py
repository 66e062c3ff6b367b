from __future__ import annotations

from datetime import date

from src.center_admin.center_admin.core.exceptions import StoreUnavailableError


def _seed(client):
    for sid, name in [("S1", "Ravi"), ("S2", "Meena"), ("S3", "Kiran")]:
        res = client.post(
            "/api/students",
            json={"id": sid, "name": name, "classLevel": "5th", "admissionDate": "2024-02-20"},
        )
        assert res.status_code == 201
    for rid, present in [("A", ["S1", "S2"]), ("B", ["S1"])]:
        res = client.post(
            "/api/attendance",
            json={"id": rid, "date": "2024-03-04T10:00:00Z", "presentStudentIds": present, "mode": "QR", "totalStudents": 3},
        )
        assert res.status_code == 201


def test_requires_session(app):
    res = app.test_client().get("/api/history")

    assert res.status_code == 401
    assert res.get_json()["success"] is False


def test_session_roundtrip(client):
    assert client.get("/api/session").get_json()["centerId"] == "C1"
    assert client.delete("/api/session").status_code == 204
    assert client.get("/api/session").status_code == 401


def test_monthly_report_endpoint(client):
    _seed(client)

    data = client.get("/api/reports/monthly?month=2&year=2024&class=5th").get_json()

    assert data["month"] == "March"
    assert data["workingDays"] == 2
    assert data["totalStudents"] == 3
    assert [s["percentage"] for s in data["studentStats"]] == [100.0, 50.0, 0.0]
    assert data["averageAttendance"] == 50.0


def test_monthly_report_bad_month_is_400(client):
    res = client.get("/api/reports/monthly?month=12&year=2024")

    assert res.status_code == 400


def test_monthly_report_csv(client):
    _seed(client)

    res = client.get("/api/reports/monthly.csv?month=2&year=2024")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "Attendance_March_2024_All.csv" in res.headers["Content-Disposition"]
    lines = res.get_data().decode("utf-8-sig").splitlines()
    assert lines[0] == "student_id,name,present_days,working_days,percentage"
    assert lines[1] == "S1,Ravi,2,2,100.0"


def test_history_filter_and_delete(client):
    _seed(client)
    client.post("/api/diary", json={"date": "2024-03-05", "studentCount": 3, "thought": "Read daily"})

    diary = client.get("/api/history?type=Diary").get_json()
    assert [i["type"] for i in diary] == ["Diary"]
    assert diary[0]["details"] == "Read daily"

    everything = client.get("/api/history?type=ALL").get_json()
    assert len(everything) == 6

    assert client.delete("/api/history/Attendance/B").status_code == 204
    remaining = client.get("/api/history?type=Attendance").get_json()
    assert [i["id"] for i in remaining] == ["A"]
    report = client.get("/api/reports/monthly?month=2&year=2024").get_json()
    assert report["workingDays"] == 1


def test_delete_unknown_id_is_still_204(client):
    assert client.delete("/api/history/Diary/missing").status_code == 204


def test_delete_unknown_type_is_400(client):
    assert client.delete("/api/history/Feedback/x").status_code == 400


def test_history_csv(client):
    _seed(client)

    res = client.get("/api/history.csv?type=Admission")

    lines = res.get_data().decode("utf-8-sig").splitlines()
    assert lines[0] == "date,type,id,details"
    assert len(lines) == 4


def test_student_upsert_and_lookup(client):
    client.post("/api/students", json={"id": "S1", "name": "Ravi", "classLevel": "5th"})
    client.post("/api/students", json={"id": "s1", "name": "Ravi Kumar"})

    students = client.get("/api/students").get_json()
    assert [(s["id"], s["name"], s["classLevel"]) for s in students] == [("S1", "Ravi Kumar", "5th")]
    assert client.get("/api/students/S1").get_json()["name"] == "Ravi Kumar"
    assert client.get("/api/students/S404").status_code == 404


def test_student_without_name_is_400(client):
    res = client.post("/api/students", json={"classLevel": "5th"})

    assert res.status_code == 400


def test_non_json_body_is_400(client):
    res = client.post("/api/students", data="name=Ravi", content_type="application/x-www-form-urlencoded")

    assert res.status_code == 400


def test_feedback(client, container):
    res = client.post("/api/feedback", json={"subject": "Books", "message": "Need more"})

    assert res.status_code == 201
    assert container.feedback_service.list_for_center("C1")[0].volunteer_id == "MDA1001"


def test_store_failure_maps_to_503(client, container, monkeypatch):
    def _down(*args, **kwargs):
        raise StoreUnavailableError("Record store is unavailable")

    monkeypatch.setattr(container.students_repo, "list_by_center", _down)

    res = client.get("/api/students")

    assert res.status_code == 503
    assert res.get_json() == {"success": False, "message": "Service temporarily unavailable"}


def test_writes_stay_in_the_session_center(client, container, add_attendance):
    client.post("/api/attendance", json={"id": "A1", "date": "2024-03-04", "centerId": "C2", "presentStudentIds": []})
    client.post("/api/diary", json={"id": "D1", "date": "2024-03-04", "centerId": "C2", "studentCount": 1})
    client.post("/api/students", json={"id": "S1", "name": "Ravi", "centerId": "C2"})

    assert container.attendance_repo.get_by_id("A1").center_id == "C1"
    assert container.diary_repo.get_by_id("D1").center_id == "C1"
    assert container.students_repo.get_by_id("S1").center_id == "C1"

    add_attendance(date(2024, 3, 4), [], center_id="C2", record_id="X9")
    assert client.delete("/api/history/Attendance/X9").status_code == 204
    assert container.attendance_repo.get_by_id("X9") is not None


def test_other_center_student_is_invisible(client, add_student):
    add_student("X1", "Elsewhere", center_id="C2")

    assert client.get("/api/students/X1").status_code == 404
    assert client.post("/api/students", json={"id": "X1", "name": "Renamed"}).status_code == 404
