from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.web import csv_response, current_volunteer, volunteer_required
from ..container import Container
from ..core.constants import ALL_CLASSES


def register(app: Flask, container: Container) -> None:
    def _build_report():
        v = current_volunteer()
        today = today_local()
        return container.report_service.get_monthly_report(
            v.center_id,
            request.args.get("month", today.month - 1),
            request.args.get("year", today.year),
            request.args.get("class") or ALL_CLASSES,
        )

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="monthly_report")
    @volunteer_required
    def monthly_report():
        """Query: month (0-11), year, class ("All" by default). Defaults to the current month."""

        return jsonify(_build_report().to_dict())

    @app.route("/api/reports/monthly.csv", methods=["GET"], endpoint="monthly_report_csv")
    @volunteer_required
    def monthly_report_csv():
        report = _build_report()
        rows = [
            {
                "student_id": s.student_id,
                "name": s.name,
                "present_days": s.present_days,
                "working_days": report.working_days,
                "percentage": f"{s.percentage:.1f}",
            }
            for s in report.student_stats
        ]
        filename = f"Attendance_{report.month}_{report.year}_{report.class_name}.csv".replace(" ", "_")
        return csv_response(
            rows=rows,
            fieldnames=["student_id", "name", "present_days", "working_days", "percentage"],
            filename=filename,
        )
