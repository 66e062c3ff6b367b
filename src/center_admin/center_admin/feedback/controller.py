from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_volunteer, json_body, volunteer_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/feedback", methods=["POST"], endpoint="submit_feedback")
    @volunteer_required
    def submit_feedback():
        data = json_body()
        container.feedback_service.submit_feedback(
            acting_user=current_volunteer(),
            subject=data.get("subject") or "",
            message=data.get("message") or "",
        )
        return jsonify({"success": True}), 201
