from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional, Sequence, Union

from ..common.datetime_utils import coerce_day
from ..common.ids import new_record_id, normalize_student_id
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import AttendanceMode
from ..core.exceptions import ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _unique_ids(ids: Iterable[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for raw in ids:
        if raw is None or not str(raw).strip():
            continue
        seen.setdefault(normalize_student_id(str(raw)), None)
    return tuple(seen)


class AttendanceService:
    """Use case: submit an attendance sheet (manual checklist or QR scans)."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def save_attendance(
        self,
        *,
        center_id: str,
        work_date: Union[date, datetime, str],
        present_student_ids: Iterable[str],
        mode: Union[AttendanceMode, str] = AttendanceMode.MANUAL,
        total_students: int = 0,
        record_id: Optional[str] = None,
    ) -> AttendanceRecord:
        try:
            mode = AttendanceMode(mode)
        except ValueError:
            raise ValidationError(f"Unknown attendance mode: {mode!r}") from None

        record = AttendanceRecord(
            record_id=(record_id or "").strip() or new_record_id(),
            date=coerce_day(work_date),
            center_id=require_non_empty(center_id, "Center"),
            present_student_ids=_unique_ids(present_student_ids or ()),
            mode=mode,
            total_students=require_non_negative(total_students, "Total students"),
        )
        saved = self._attendance.insert(record)
        logger.info(
            "Saved %s attendance %s for center %s on %s (%d/%d present)",
            saved.mode.value,
            saved.record_id,
            saved.center_id,
            saved.date.isoformat(),
            saved.present_count,
            saved.total_students,
        )
        return saved

    def list_for_center(self, center_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_center(center_id)
