from __future__ import annotations

from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, month_name
from ..common.validators import require_month, require_non_empty
from ..core.constants import ALL_CLASSES
from ..students.repository import StudentRepository
from .model import MonthlyReportData, StudentMonthlyStat


class MonthlyReportService:
    """Monthly per-student attendance statistics for one center.

    Every call recomputes from the store; nothing is cached.
    """

    def __init__(self, students: StudentRepository, attendance: AttendanceRepository):
        self._students = students
        self._attendance = attendance

    def get_monthly_report(
        self,
        center_id: str,
        month: int,
        year: int,
        class_filter: Optional[str] = ALL_CLASSES,
    ) -> MonthlyReportData:
        """Build the report for zero-based ``month`` (0 = January) of ``year``.

        Working days are the number of attendance sheets in the month; two
        sheets submitted on the same day count as two.
        """

        center_id = require_non_empty(center_id, "Center")
        month, year = require_month(month, year)
        class_filter = (class_filter or "").strip()
        if not class_filter or class_filter.lower() == ALL_CLASSES.lower():
            class_filter = ALL_CLASSES

        students = self._students.list_by_center(
            center_id,
            class_level=None if class_filter == ALL_CLASSES else class_filter,
        )
        start, end = month_bounds(year, month)
        records = self._attendance.list_by_center(center_id, start_date=start, end_date=end)

        working_days = len(records)
        present_sets = [frozenset(r.present_student_ids) for r in records]

        stats: list[StudentMonthlyStat] = []
        for s in students:
            present_days = sum(1 for present in present_sets if s.student_id in present)
            percentage = present_days / working_days * 100 if working_days else 0.0
            stats.append(
                StudentMonthlyStat(
                    student_id=s.student_id,
                    name=s.name,
                    present_days=present_days,
                    percentage=percentage,
                )
            )

        average = sum(s.percentage for s in stats) / len(stats) if stats else 0.0

        return MonthlyReportData(
            month=month_name(month),
            year=year,
            class_name=class_filter,
            working_days=working_days,
            average_attendance=average,
            total_students=len(stats),
            student_stats=tuple(stats),
        )
