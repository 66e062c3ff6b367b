from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FeedbackEntry:
    feedback_id: str
    volunteer_id: str
    volunteer_name: str
    center_id: str
    subject: str
    message: str
    date: date

    def to_dict(self) -> dict:
        return {
            "id": self.feedback_id,
            "volunteerId": self.volunteer_id,
            "volunteerName": self.volunteer_name,
            "centerId": self.center_id,
            "subject": self.subject,
            "message": self.message,
            "date": self.date.isoformat(),
        }
