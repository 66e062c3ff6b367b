from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import today_local
from ..common.web import current_volunteer, json_body, snake_keys, volunteer_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/diary", methods=["GET"], endpoint="list_diary")
    @volunteer_required
    def list_diary():
        v = current_volunteer()
        return jsonify([e.to_dict() for e in container.diary_service.list_for_center(v.center_id)])

    @app.route("/api/diary", methods=["POST"], endpoint="save_diary")
    @volunteer_required
    def save_diary():
        v = current_volunteer()
        data = json_body()
        entry = container.diary_service.save_diary(
            center_id=v.center_id,
            entry_date=data.get("date") or today_local(),
            student_count=data.get("student_count") or 0,
            thought=data.get("thought") or "",
            in_time=data.get("in_time") or "",
            out_time=data.get("out_time") or "",
            volunteers=[snake_keys(x) for x in data.get("volunteers") or [] if isinstance(x, dict)],
            entry_id=data.get("id"),
        )
        return jsonify(entry.to_dict()), 201
