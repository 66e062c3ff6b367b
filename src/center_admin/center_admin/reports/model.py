from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudentMonthlyStat:
    student_id: str
    name: str
    present_days: int
    percentage: float

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "name": self.name,
            "presentDays": self.present_days,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class MonthlyReportData:
    """Read-model handed unchanged to the PDF/Excel/CSV renderers."""

    month: str
    year: int
    class_name: str
    working_days: int
    average_attendance: float
    total_students: int
    student_stats: tuple[StudentMonthlyStat, ...]

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "year": self.year,
            "className": self.class_name,
            "workingDays": self.working_days,
            "averageAttendance": self.average_attendance,
            "totalStudents": self.total_students,
            "studentStats": [s.to_dict() for s in self.student_stats],
        }
