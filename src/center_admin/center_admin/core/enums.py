from __future__ import annotations

from enum import Enum


class HistoryType(str, Enum):
    """Source collection of a history item; also the deletion routing key."""

    ADMISSION = "Admission"
    ATTENDANCE = "Attendance"
    DIARY = "Diary"


class AttendanceMode(str, Enum):
    """How an attendance sheet was captured."""

    MANUAL = "MANUAL"
    QR = "QR"


class VolunteerStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
