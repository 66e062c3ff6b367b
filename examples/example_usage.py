"""Example: drive the service layer directly (no Flask).

Uses the in-memory store, so it runs without a database.
"""

from datetime import date

from src.center_admin.center_admin.container import BACKEND_MEMORY, build_container
from src.center_admin.center_admin.users.model import Volunteer


def main():
    container = build_container(backend=BACKEND_MEMORY)
    volunteer = Volunteer(volunteer_id="NGP2001", name="Demo", center_id="NGP-01")

    for name in ("Ravi", "Meena", "Kiran"):
        container.student_service.add_student({"name": name, "class_level": "5th"}, volunteer)

    container.attendance_service.save_attendance(
        center_id="NGP-01",
        work_date=date(2024, 3, 4),
        present_student_ids=["NGP-01-001", "NGP-01-002"],
        total_students=3,
    )

    print(container.report_service.get_monthly_report("NGP-01", 2, 2024).to_dict())
    for item in container.history_service.get_all_history():
        print(item.date, item.type.value, item.details)


if __name__ == "__main__":
    main()
