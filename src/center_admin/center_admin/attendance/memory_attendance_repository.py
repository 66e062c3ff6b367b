from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.exceptions import DuplicateRecordError
from ..database.memory_base import LockedCollection
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self):
        self._records: LockedCollection[AttendanceRecord] = LockedCollection(key=lambda r: r.record_id)

    def insert(self, record: AttendanceRecord) -> AttendanceRecord:
        try:
            return self._records.add(record)
        except KeyError:
            raise DuplicateRecordError(f"Attendance record {record.record_id} already exists") from None

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self._records.get(record_id)

    def list_by_center(
        self,
        center_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        return [
            r
            for r in self._records.snapshot()
            if r.center_id == center_id
            and (start_date is None or r.date >= start_date)
            and (end_date is None or r.date <= end_date)
        ]

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._records.snapshot()

    def delete_by_id(self, record_id: str) -> bool:
        return self._records.remove(record_id)
