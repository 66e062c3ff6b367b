from __future__ import annotations

from collections import deque
from datetime import date

import mysql.connector
import pytest
from mysql.connector import errorcode

from src.center_admin.center_admin.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.center_admin.center_admin.core.enums import AttendanceMode, Gender, VolunteerStatus
from src.center_admin.center_admin.core.exceptions import DuplicateRecordError, StoreUnavailableError
from src.center_admin.center_admin.diary.mysql_diary_repository import MySQLDiaryRepository
from src.center_admin.center_admin.students.model import Student
from src.center_admin.center_admin.students.mysql_student_repository import MySQLStudentRepository


class _FakeDB:
    """Scripted stand-in for MySQL: queued fetch results, queued INSERT failures."""

    def __init__(self, results=(), insert_errors=(), rowcount=0):
        self.rowcount = rowcount
        self.results = deque(results)
        self.insert_errors = deque(insert_errors)
        self.executed: list[tuple[str, tuple]] = []
        self.commits = 0
        self.rollbacks = 0

    def connect(self):
        return _FakeConn(self)

    def describe(self):
        return "tester@fake:3306/center_admin"

    def statements(self, prefix: str) -> list[tuple[str, tuple]]:
        return [(sql, params) for sql, params in self.executed if sql.startswith(prefix)]


class _FakeCursor:
    def __init__(self, db: _FakeDB):
        self._db = db
        self.rowcount = 0

    def execute(self, sql, params=()):
        sql = " ".join(sql.split())
        self._db.executed.append((sql, tuple(params)))
        self.rowcount = self._db.rowcount
        if sql.startswith("INSERT") and self._db.insert_errors:
            raise self._db.insert_errors.popleft()

    def executemany(self, sql, seq):
        for params in seq:
            self.execute(sql, params)

    def fetchone(self):
        return self._db.results.popleft()

    def fetchall(self):
        return self._db.results.popleft()

    def close(self):
        pass


class _FakeConn:
    def __init__(self, db: _FakeDB):
        self._db = db

    def cursor(self, dictionary=True):
        return _FakeCursor(self._db)

    def commit(self):
        self._db.commits += 1

    def rollback(self):
        self._db.rollbacks += 1

    def close(self):
        pass


def _duplicate_key(student_id: str) -> mysql.connector.IntegrityError:
    return mysql.connector.IntegrityError(
        msg=f"Duplicate entry '{student_id}' for key 'PRIMARY'",
        errno=errorcode.ER_DUP_ENTRY,
    )


def _student_row(**overrides):
    row = {
        "student_id": "C1-001",
        "center_id": "C1",
        "class_level": "5th",
        "name": "Ravi",
        "admission_date": date(2024, 1, 10),
        "gender": "Male",
        "dob": None,
        "age": None,
        "school_name": "GPS Mankapur",
        "parent_name": None,
        "parent_occupation": None,
        "aadhaar": None,
        "contact": None,
        "registration_number": None,
    }
    row.update(overrides)
    return row


def _build(new_id: str) -> Student:
    return Student(student_id=new_id, center_id="C1", class_level="5th", name="Ravi", admission_date=date(2024, 1, 10))


def test_student_row_mapping_fills_blank_columns():
    db = _FakeDB(results=[_student_row()])

    student = MySQLStudentRepository(db).get_by_id("C1-001")

    assert student == Student(
        student_id="C1-001",
        center_id="C1",
        class_level="5th",
        name="Ravi",
        admission_date=date(2024, 1, 10),
        gender=Gender.MALE,
        school_name="GPS Mankapur",
    )
    assert db.executed[0][1] == ("C1-001",)


def test_student_lookup_miss_returns_none():
    assert MySQLStudentRepository(_FakeDB(results=[None])).get_by_id("C1-404") is None


def test_upsert_updates_in_place_on_duplicate_key():
    db = _FakeDB()

    MySQLStudentRepository(db).upsert(_build("C1-001"))

    [(sql, params)] = db.statements("INSERT INTO students")
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert params[0] == "C1-001" and params[5] == "Other"


def test_generated_id_uses_plain_insert_and_skips_taken_ids():
    # 2 students in C1, C1-003 already used by a manual id
    db = _FakeDB(results=[{"n": 2}, {"taken": 1}, None])

    student = MySQLStudentRepository(db).insert_with_generated_id("C1", _build)

    assert student.student_id == "C1-004"
    [(sql, params)] = db.statements("INSERT INTO students")
    assert "ON DUPLICATE KEY" not in sql
    assert params[0] == "C1-004"


def test_generated_id_retries_when_a_concurrent_writer_wins():
    db = _FakeDB(results=[{"n": 0}, None, {"n": 1}, None], insert_errors=[_duplicate_key("C1-001")])

    student = MySQLStudentRepository(db).insert_with_generated_id("C1", _build)

    assert student.student_id == "C1-002"
    assert [p[0] for _, p in db.statements("INSERT INTO students")] == ["C1-001", "C1-002"]
    assert db.rollbacks == 1


def test_generated_id_gives_up_after_repeated_collisions():
    attempts = 5
    db = _FakeDB(
        results=[{"n": 0}, None] * attempts,
        insert_errors=[_duplicate_key("C1-001") for _ in range(attempts)],
    )

    with pytest.raises(DuplicateRecordError):
        MySQLStudentRepository(db).insert_with_generated_id("C1", _build)


def test_other_integrity_errors_are_store_failures():
    fk_error = mysql.connector.IntegrityError(msg="Cannot add a child row", errno=errorcode.ER_NO_REFERENCED_ROW_2)
    db = _FakeDB(insert_errors=[fk_error])

    with pytest.raises(StoreUnavailableError):
        MySQLStudentRepository(db).upsert(_build("C1-001"))


def test_attendance_select_joins_present_ids_in_position_order():
    db = _FakeDB(
        results=[
            [
                {"record_id": "A", "center_id": "C1", "work_date": date(2024, 3, 4), "mode": "QR", "total_students": 3},
                {"record_id": "B", "center_id": "C1", "work_date": date(2024, 3, 5), "mode": "MANUAL", "total_students": 3},
            ],
            [
                {"record_id": "A", "student_id": "S2"},
                {"record_id": "A", "student_id": "S1"},
            ],
        ]
    )

    records = MySQLAttendanceRepository(db).list_by_center("C1", start_date=date(2024, 3, 1), end_date=date(2024, 3, 31))

    assert [r.record_id for r in records] == ["A", "B"]
    assert records[0].present_student_ids == ("S2", "S1")
    assert records[0].mode == AttendanceMode.QR
    assert records[1].present_student_ids == ()
    select_sql, select_params = db.executed[0]
    assert "work_date >= %s AND work_date <= %s" in select_sql
    assert select_params == ("C1", date(2024, 3, 1), date(2024, 3, 31))
    assert db.executed[1][1] == ("A", "B")


def test_attendance_select_with_no_rows_skips_child_query():
    db = _FakeDB(results=[[]])

    assert MySQLAttendanceRepository(db).get_by_id("nope") is None
    assert len(db.executed) == 1


def test_attendance_insert_writes_present_ids_with_positions():
    from src.center_admin.center_admin.attendance.model import AttendanceRecord

    db = _FakeDB()
    record = AttendanceRecord(
        record_id="A",
        date=date(2024, 3, 4),
        center_id="C1",
        present_student_ids=("S2", "S1"),
        mode=AttendanceMode.MANUAL,
        total_students=3,
    )

    MySQLAttendanceRepository(db).insert(record)

    assert [p for _, p in db.statements("INSERT INTO attendance_present")] == [("A", 0, "S2"), ("A", 1, "S1")]
    assert db.commits == 1


def test_diary_select_groups_volunteers_per_entry():
    db = _FakeDB(
        results=[
            [
                {
                    "entry_id": "D1",
                    "center_id": "C1",
                    "entry_date": date(2024, 3, 4),
                    "student_count": 12,
                    "in_time": "10:00",
                    "out_time": None,
                    "thought": None,
                }
            ],
            [
                {
                    "entry_id": "D1",
                    "volunteer_id": "MDA1001",
                    "name": "Asha",
                    "in_time": "10:00",
                    "out_time": "12:00",
                    "status": "Present",
                    "class_handled": "5th",
                    "subject": "Maths",
                    "topic": "Fractions",
                }
            ],
        ]
    )

    entry = MySQLDiaryRepository(db).get_by_id("D1")

    assert entry.thought == "" and entry.out_time == ""
    assert entry.student_count == 12
    assert [(v.volunteer_id, v.status) for v in entry.volunteers] == [("MDA1001", VolunteerStatus.PRESENT)]


def test_delete_reports_whether_a_row_was_removed():
    assert MySQLDiaryRepository(_FakeDB(rowcount=1)).delete_by_id("D1") is True
    assert MySQLAttendanceRepository(_FakeDB(rowcount=0)).delete_by_id("A") is False
