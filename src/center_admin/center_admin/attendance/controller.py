from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import today_local
from ..common.web import current_volunteer, json_body, volunteer_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @volunteer_required
    def list_attendance():
        v = current_volunteer()
        return jsonify([r.to_dict() for r in container.attendance_service.list_for_center(v.center_id)])

    @app.route("/api/attendance", methods=["POST"], endpoint="save_attendance")
    @volunteer_required
    def save_attendance():
        """Submit one attendance sheet (manual checklist or QR scan session)."""

        v = current_volunteer()
        data = json_body()
        record = container.attendance_service.save_attendance(
            center_id=v.center_id,
            work_date=data.get("date") or today_local(),
            present_student_ids=data.get("present_student_ids") or [],
            mode=data.get("mode") or "MANUAL",
            total_students=data.get("total_students") or 0,
            record_id=data.get("id"),
        )
        return jsonify(record.to_dict()), 201
