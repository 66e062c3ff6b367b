from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, ClassVar, Union

from ..attendance.model import AttendanceRecord
from ..core.enums import HistoryType
from ..diary.model import DiaryEntry
from ..students.model import Student


@dataclass(frozen=True)
class HistoryItem:
    """Read-only projection of one stored record into the history feed.

    Never stored: it exists exactly as long as its source record does, and
    (``item_id``, ``type``) points back at that record.
    """

    type: ClassVar[HistoryType]

    item_id: str
    date: date
    details: str
    data: Any

    def to_dict(self) -> dict:
        return {
            "id": self.item_id,
            "type": self.type.value,
            "date": self.date.isoformat(),
            "details": self.details,
            "data": self.data.to_dict(),
        }


@dataclass(frozen=True)
class AdmissionHistoryItem(HistoryItem):
    type: ClassVar[HistoryType] = HistoryType.ADMISSION

    data: Student


@dataclass(frozen=True)
class AttendanceHistoryItem(HistoryItem):
    type: ClassVar[HistoryType] = HistoryType.ATTENDANCE

    data: AttendanceRecord


@dataclass(frozen=True)
class DiaryHistoryItem(HistoryItem):
    type: ClassVar[HistoryType] = HistoryType.DIARY

    data: DiaryEntry


AnyHistoryItem = Union[AdmissionHistoryItem, AttendanceHistoryItem, DiaryHistoryItem]
