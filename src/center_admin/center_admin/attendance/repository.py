from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Append-only record store for attendance sheets (no update path)."""

    def insert(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_by_center(
        self,
        center_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records of a center, optionally limited to ``start_date..end_date`` inclusive."""

        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
