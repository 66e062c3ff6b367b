from __future__ import annotations

import logging
from typing import Sequence

from ..common.datetime_utils import today_local
from ..common.ids import new_record_id
from ..common.validators import require_non_empty
from ..users.model import Volunteer
from .model import FeedbackEntry
from .repository import FeedbackRepository

logger = logging.getLogger(__name__)


class FeedbackService:
    def __init__(self, feedback: FeedbackRepository):
        self._feedback = feedback

    def submit_feedback(self, *, acting_user: Volunteer, subject: str, message: str) -> FeedbackEntry:
        entry = FeedbackEntry(
            feedback_id=new_record_id(),
            volunteer_id=acting_user.volunteer_id,
            volunteer_name=acting_user.name,
            center_id=acting_user.center_id,
            subject=require_non_empty(subject, "Subject"),
            message=require_non_empty(message, "Message"),
            date=today_local(),
        )
        saved = self._feedback.insert(entry)
        logger.info("Feedback %s submitted by volunteer %s", saved.feedback_id, saved.volunteer_id)
        return saved

    def list_for_center(self, center_id: str) -> Sequence[FeedbackEntry]:
        return self._feedback.list_by_center(center_id)
