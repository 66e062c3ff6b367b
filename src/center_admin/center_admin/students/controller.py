from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_volunteer, json_body, volunteer_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @volunteer_required
    def list_students():
        v = current_volunteer()
        class_level = request.args.get("class") or None
        students = container.student_service.list_for_center(v.center_id, class_level=class_level)
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/students/classes", methods=["GET"], endpoint="list_classes")
    @volunteer_required
    def list_classes():
        v = current_volunteer()
        return jsonify(container.student_service.list_classes(v.center_id))

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    @volunteer_required
    def add_student():
        """Admission form and the manual QR-card "save/update" both land here."""

        v = current_volunteer()
        student = container.student_service.add_student(json_body(), v, scope_center=v.center_id)
        return jsonify(student.to_dict()), 201

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="get_student")
    @volunteer_required
    def get_student(student_id: str):
        v = current_volunteer()
        return jsonify(container.student_service.get_student(student_id, center_id=v.center_id).to_dict())
