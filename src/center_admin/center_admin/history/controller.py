from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import csv_response, current_volunteer, volunteer_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _filtered():
        v = current_volunteer()
        return container.history_service.get_history(request.args.get("type"), center_id=v.center_id)

    @app.route("/api/history", methods=["GET"], endpoint="history")
    @volunteer_required
    def history():
        """Newest-first feed for the volunteer's center. ``type``: ALL, Admission, Attendance, Diary."""

        return jsonify([item.to_dict() for item in _filtered()])

    @app.route("/api/history.csv", methods=["GET"], endpoint="history_csv")
    @volunteer_required
    def history_csv():
        rows = [
            {
                "date": item.date.isoformat(),
                "type": item.type.value,
                "id": item.item_id,
                "details": item.details,
            }
            for item in _filtered()
        ]
        return csv_response(rows=rows, fieldnames=["date", "type", "id", "details"], filename="history.csv")

    @app.route("/api/history/<item_type>/<item_id>", methods=["DELETE"], endpoint="delete_history_item")
    @volunteer_required
    def delete_history_item(item_type: str, item_id: str):
        v = current_volunteer()
        container.history_service.delete_history_item(item_id, item_type, center_id=v.center_id)
        return "", 204
