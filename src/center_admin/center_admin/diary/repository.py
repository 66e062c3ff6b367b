from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DiaryEntry


class DiaryRepository(Protocol):
    """Append-only record store for diary entries."""

    def insert(self, entry: DiaryEntry) -> DiaryEntry:
        raise NotImplementedError

    def get_by_id(self, entry_id: str) -> Optional[DiaryEntry]:
        raise NotImplementedError

    def list_by_center(
        self,
        center_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[DiaryEntry]:
        raise NotImplementedError

    def list_all(self) -> Sequence[DiaryEntry]:
        raise NotImplementedError

    def delete_by_id(self, entry_id: str) -> bool:
        raise NotImplementedError
