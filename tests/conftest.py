from __future__ import annotations

from datetime import date

import pytest

from src.center_admin.center_admin.container import BACKEND_MEMORY, build_container
from src.center_admin.center_admin.core.enums import AttendanceMode
from src.center_admin.center_admin.users.model import Volunteer


@pytest.fixture
def container():
    return build_container(backend=BACKEND_MEMORY)


@pytest.fixture
def volunteer():
    return Volunteer(volunteer_id="MDA1001", name="Asha", center_id="C1", center_name="Mankapur")


@pytest.fixture
def add_student(container, volunteer):
    def _add(student_id: str, name: str, class_level: str = "5th", **extra):
        fields = {"id": student_id, "name": name, "class_level": class_level, "admission_date": "2024-01-10"}
        fields.update(extra)
        return container.student_service.add_student(fields, volunteer)

    return _add


@pytest.fixture
def add_attendance(container):
    def _add(day: date, present, *, center_id: str = "C1", total: int = 3, record_id=None):
        return container.attendance_service.save_attendance(
            center_id=center_id,
            work_date=day,
            present_student_ids=present,
            mode=AttendanceMode.MANUAL,
            total_students=total,
            record_id=record_id,
        )

    return _add


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.center_admin.center_admin.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    c = app.test_client()
    res = c.post(
        "/api/session",
        json={"volunteerId": "MDA1001", "name": "Asha", "centerId": "C1", "centerName": "Mankapur"},
    )
    assert res.status_code == 201
    return c
