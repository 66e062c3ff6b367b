from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.validators import require_non_empty
from ..common.web import current_volunteer, json_body, volunteer_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/session", methods=["POST"], endpoint="open_session")
    def open_session():
        """Attach the volunteer chosen by the external login/center-select flow."""

        data = json_body()
        session["volunteer"] = {
            "volunteer_id": require_non_empty(data.get("volunteer_id") or "", "Volunteer ID"),
            "name": require_non_empty(data.get("name") or "", "Name"),
            "center_id": require_non_empty(data.get("center_id") or "", "Center"),
            "center_name": (data.get("center_name") or "").strip(),
        }
        return jsonify({"success": True, "volunteer": session["volunteer"]}), 201

    @app.route("/api/session", methods=["GET"], endpoint="show_session")
    @volunteer_required
    def show_session():
        v = current_volunteer()
        return jsonify(
            {
                "volunteerId": v.volunteer_id,
                "name": v.name,
                "centerId": v.center_id,
                "centerName": v.center_name,
            }
        )

    @app.route("/api/session", methods=["DELETE"], endpoint="close_session")
    def close_session():
        session.pop("volunteer", None)
        return "", 204
