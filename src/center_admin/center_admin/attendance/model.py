from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceMode


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one submitted attendance sheet for a center.

    Immutable once saved. ``total_students`` is the roster size at submission
    time and is informational only.
    """

    record_id: str
    date: date
    center_id: str
    present_student_ids: tuple[str, ...]
    mode: AttendanceMode
    total_students: int

    @property
    def present_count(self) -> int:
        return len(self.present_student_ids)

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "date": self.date.isoformat(),
            "centerId": self.center_id,
            "presentStudentIds": list(self.present_student_ids),
            "mode": self.mode.value,
            "totalStudents": self.total_students,
        }
