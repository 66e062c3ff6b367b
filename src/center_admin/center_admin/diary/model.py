from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import VolunteerStatus


@dataclass(frozen=True)
class DiaryVolunteerEntry:
    volunteer_id: str
    name: str
    in_time: str = ""
    out_time: str = ""
    status: VolunteerStatus = VolunteerStatus.PRESENT
    class_handled: str = ""
    subject: str = ""
    topic: str = ""

    def to_dict(self) -> dict:
        return {
            "volunteerId": self.volunteer_id,
            "name": self.name,
            "inTime": self.in_time,
            "outTime": self.out_time,
            "status": self.status.value,
            "classHandled": self.class_handled,
            "subject": self.subject,
            "topic": self.topic,
        }


@dataclass(frozen=True)
class DiaryEntry:
    """Domain entity: the daily center log (thought of the day + volunteer logs)."""

    entry_id: str
    date: date
    center_id: str
    student_count: int
    thought: str = ""
    in_time: str = ""
    out_time: str = ""
    volunteers: tuple[DiaryVolunteerEntry, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "date": self.date.isoformat(),
            "centerId": self.center_id,
            "studentCount": self.student_count,
            "thought": self.thought,
            "inTime": self.in_time,
            "outTime": self.out_time,
            "volunteers": [v.to_dict() for v in self.volunteers],
        }
