from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, MySQLConnectionFactory
from .diary.memory_diary_repository import InMemoryDiaryRepository
from .diary.mysql_diary_repository import MySQLDiaryRepository
from .diary.repository import DiaryRepository
from .diary.service import DiaryService
from .feedback.memory_feedback_repository import InMemoryFeedbackRepository
from .feedback.mysql_feedback_repository import MySQLFeedbackRepository
from .feedback.repository import FeedbackRepository
from .feedback.service import FeedbackService
from .history.service import HistoryService
from .reports.service import MonthlyReportService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService

BACKEND_MYSQL = "mysql"
BACKEND_MEMORY = "memory"


@dataclass(frozen=True)
class Container:
    conn: Optional[MySQLConnectionFactory]

    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    diary_repo: DiaryRepository
    feedback_repo: FeedbackRepository

    student_service: StudentService
    attendance_service: AttendanceService
    diary_service: DiaryService
    feedback_service: FeedbackService
    report_service: MonthlyReportService
    history_service: HistoryService


def build_container(*, db_config: Optional[dict] = None, backend: str = BACKEND_MYSQL) -> Container:
    backend = (backend or BACKEND_MYSQL).lower()

    conn: Optional[MySQLConnectionFactory] = None
    if backend == BACKEND_MYSQL:
        if not db_config:
            raise ValueError("db_config is required for the mysql backend")
        conn = MySQLConnectionFactory(DBConfig.from_dict(db_config))
        students_repo = MySQLStudentRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
        diary_repo = MySQLDiaryRepository(conn)
        feedback_repo = MySQLFeedbackRepository(conn)
    elif backend == BACKEND_MEMORY:
        students_repo = InMemoryStudentRepository()
        attendance_repo = InMemoryAttendanceRepository()
        diary_repo = InMemoryDiaryRepository()
        feedback_repo = InMemoryFeedbackRepository()
    else:
        raise ValueError(f"Unknown store backend: {backend!r}")

    return Container(
        conn=conn,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        diary_repo=diary_repo,
        feedback_repo=feedback_repo,
        student_service=StudentService(students_repo),
        attendance_service=AttendanceService(attendance_repo),
        diary_service=DiaryService(diary_repo),
        feedback_service=FeedbackService(feedback_repo),
        report_service=MonthlyReportService(students_repo, attendance_repo),
        history_service=HistoryService(students_repo, attendance_repo, diary_repo),
    )
