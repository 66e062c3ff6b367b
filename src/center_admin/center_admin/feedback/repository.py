from __future__ import annotations

from typing import Protocol, Sequence

from .model import FeedbackEntry


class FeedbackRepository(Protocol):
    def insert(self, entry: FeedbackEntry) -> FeedbackEntry:
        raise NotImplementedError

    def list_by_center(self, center_id: str) -> Sequence[FeedbackEntry]:
        raise NotImplementedError
