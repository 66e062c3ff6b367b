from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.exceptions import DuplicateRecordError
from ..database.memory_base import LockedCollection
from .model import DiaryEntry
from .repository import DiaryRepository


class InMemoryDiaryRepository(DiaryRepository):
    def __init__(self):
        self._entries: LockedCollection[DiaryEntry] = LockedCollection(key=lambda e: e.entry_id)

    def insert(self, entry: DiaryEntry) -> DiaryEntry:
        try:
            return self._entries.add(entry)
        except KeyError:
            raise DuplicateRecordError(f"Diary entry {entry.entry_id} already exists") from None

    def get_by_id(self, entry_id: str) -> Optional[DiaryEntry]:
        return self._entries.get(entry_id)

    def list_by_center(
        self,
        center_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[DiaryEntry]:
        return [
            e
            for e in self._entries.snapshot()
            if e.center_id == center_id
            and (start_date is None or e.date >= start_date)
            and (end_date is None or e.date <= end_date)
        ]

    def list_all(self) -> Sequence[DiaryEntry]:
        return self._entries.snapshot()

    def delete_by_id(self, entry_id: str) -> bool:
        return self._entries.remove(entry_id)
