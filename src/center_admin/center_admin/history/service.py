from __future__ import annotations

import logging
from typing import Optional, Union

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..core.constants import ALL_HISTORY
from ..core.enums import HistoryType
from ..core.exceptions import ValidationError
from ..diary.model import DiaryEntry
from ..diary.repository import DiaryRepository
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import AdmissionHistoryItem, AnyHistoryItem, AttendanceHistoryItem, DiaryHistoryItem

logger = logging.getLogger(__name__)


def parse_history_type(value: Union[HistoryType, str, None]) -> Optional[HistoryType]:
    """Map a client-supplied type to ``HistoryType``; ``None``/``"ALL"`` mean no filter."""

    if value is None or isinstance(value, HistoryType):
        return value
    text = value.strip()
    if not text or text.upper() == ALL_HISTORY:
        return None
    for t in HistoryType:
        if t.value.lower() == text.lower():
            return t
    raise ValidationError(f"Unknown history type: {value!r}")


def _admission_item(s: Student) -> AdmissionHistoryItem:
    school = s.school_name or "No school"
    return AdmissionHistoryItem(
        item_id=s.student_id,
        date=s.admission_date,
        details=f"{s.name} - Class {s.class_level}, {school}",
        data=s,
    )


def _attendance_item(r: AttendanceRecord) -> AttendanceHistoryItem:
    return AttendanceHistoryItem(
        item_id=r.record_id,
        date=r.date,
        details=f"{r.present_count}/{r.total_students} present",
        data=r,
    )


def _diary_item(e: DiaryEntry) -> DiaryHistoryItem:
    details = e.thought.strip() or f"{e.student_count} students, {len(e.volunteers)} volunteers"
    return DiaryHistoryItem(item_id=e.entry_id, date=e.date, details=details, data=e)


class HistoryService:
    """Unified, newest-first feed over admissions, attendance and diary records.

    Items sharing a date keep the order Admission, Attendance, Diary and,
    within a type, the store's insertion order.
    """

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        diary: DiaryRepository,
    ):
        self._students = students
        self._attendance = attendance
        self._diary = diary

    def get_all_history(self, *, center_id: Optional[str] = None) -> list[AnyHistoryItem]:
        if center_id:
            students = self._students.list_by_center(center_id)
            records = self._attendance.list_by_center(center_id)
            entries = self._diary.list_by_center(center_id)
        else:
            students = self._students.list_all()
            records = self._attendance.list_all()
            entries = self._diary.list_all()

        items: list[AnyHistoryItem] = []
        items.extend(_admission_item(s) for s in students)
        items.extend(_attendance_item(r) for r in records)
        items.extend(_diary_item(e) for e in entries)

        # list.sort is stable, also with reverse=True
        items.sort(key=lambda item: item.date, reverse=True)
        return items

    def get_history(
        self,
        filter_type: Union[HistoryType, str, None] = None,
        *,
        center_id: Optional[str] = None,
    ) -> list[AnyHistoryItem]:
        wanted = parse_history_type(filter_type)
        items = self.get_all_history(center_id=center_id)
        if wanted is None:
            return items
        return [item for item in items if item.type == wanted]

    def delete_history_item(
        self,
        item_id: str,
        item_type: Union[HistoryType, str],
        *,
        center_id: Optional[str] = None,
    ) -> None:
        """Delete the record behind a history item. Absent records are a no-op.

        With ``center_id`` a record belonging to another center counts as absent.
        """

        target = parse_history_type(item_type)
        if target is None:
            raise ValidationError("A concrete history type is required for deletion")

        if target == HistoryType.ADMISSION:
            repo = self._students
        elif target == HistoryType.ATTENDANCE:
            repo = self._attendance
        else:
            repo = self._diary

        if center_id is not None:
            record = repo.get_by_id(item_id)
            if record is not None and record.center_id != center_id:
                logger.warning(
                    "Refused to delete %s record %s of center %s from center %s",
                    target.value,
                    item_id,
                    record.center_id,
                    center_id,
                )
                return

        if repo.delete_by_id(item_id):
            logger.info("Deleted %s record %s", target.value, item_id)
        else:
            logger.debug("No %s record %s to delete", target.value, item_id)
