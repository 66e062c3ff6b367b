from __future__ import annotations

from typing import Sequence

from ..database.memory_base import LockedCollection
from .model import FeedbackEntry
from .repository import FeedbackRepository


class InMemoryFeedbackRepository(FeedbackRepository):
    def __init__(self):
        self._entries: LockedCollection[FeedbackEntry] = LockedCollection(key=lambda f: f.feedback_id)

    def insert(self, entry: FeedbackEntry) -> FeedbackEntry:
        return self._entries.add(entry)

    def list_by_center(self, center_id: str) -> Sequence[FeedbackEntry]:
        return [f for f in self._entries.snapshot() if f.center_id == center_id]
