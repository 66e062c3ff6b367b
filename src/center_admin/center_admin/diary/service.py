from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from ..common.datetime_utils import coerce_day
from ..common.ids import new_record_id
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import VolunteerStatus
from ..core.exceptions import ValidationError
from .model import DiaryEntry, DiaryVolunteerEntry
from .repository import DiaryRepository

logger = logging.getLogger(__name__)


def _to_volunteer(v: Union[DiaryVolunteerEntry, Mapping[str, Any]]) -> DiaryVolunteerEntry:
    if isinstance(v, DiaryVolunteerEntry):
        return v
    try:
        status = VolunteerStatus(v.get("status") or VolunteerStatus.PRESENT)
    except ValueError:
        raise ValidationError(f"Unknown volunteer status: {v.get('status')!r}") from None
    return DiaryVolunteerEntry(
        volunteer_id=str(v.get("volunteer_id") or "").strip(),
        name=require_non_empty(v.get("name") or "", "Volunteer name"),
        in_time=str(v.get("in_time") or ""),
        out_time=str(v.get("out_time") or ""),
        status=status,
        class_handled=str(v.get("class_handled") or ""),
        subject=str(v.get("subject") or ""),
        topic=str(v.get("topic") or ""),
    )


class DiaryService:
    """Use case: record the daily diary of a center."""

    def __init__(self, diary: DiaryRepository):
        self._diary = diary

    def save_diary(
        self,
        *,
        center_id: str,
        entry_date: Union[date, datetime, str],
        student_count: int,
        thought: str = "",
        in_time: str = "",
        out_time: str = "",
        volunteers: Iterable[Union[DiaryVolunteerEntry, Mapping[str, Any]]] = (),
        entry_id: Optional[str] = None,
    ) -> DiaryEntry:
        entry = DiaryEntry(
            entry_id=(entry_id or "").strip() or new_record_id(),
            date=coerce_day(entry_date),
            center_id=require_non_empty(center_id, "Center"),
            student_count=require_non_negative(student_count, "Student count"),
            thought=(thought or "").strip(),
            in_time=in_time or "",
            out_time=out_time or "",
            volunteers=tuple(_to_volunteer(v) for v in volunteers or ()),
        )
        saved = self._diary.insert(entry)
        logger.info("Saved diary %s for center %s on %s", saved.entry_id, saved.center_id, saved.date.isoformat())
        return saved

    def list_for_center(self, center_id: str) -> Sequence[DiaryEntry]:
        return self._diary.list_by_center(center_id)
