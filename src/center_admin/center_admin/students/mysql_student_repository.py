from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.ids import format_student_id
from ..core.enums import Gender
from ..core.exceptions import DuplicateRecordError
from ..database.connection import MySQLConnectionFactory
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

_COLUMNS = """
    student_id, center_id, class_level, name, admission_date, gender, dob, age,
    school_name, parent_name, parent_occupation, aadhaar, contact, registration_number
"""

_INSERT = f"INSERT INTO students({_COLUMNS}) VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)"

_UPSERT = (
    _INSERT
    + """
    ON DUPLICATE KEY UPDATE
        center_id=VALUES(center_id), class_level=VALUES(class_level), name=VALUES(name),
        admission_date=VALUES(admission_date), gender=VALUES(gender), dob=VALUES(dob),
        age=VALUES(age), school_name=VALUES(school_name), parent_name=VALUES(parent_name),
        parent_occupation=VALUES(parent_occupation), aadhaar=VALUES(aadhaar),
        contact=VALUES(contact), registration_number=VALUES(registration_number)
    """
)

# Lost races against concurrent admissions before giving up.
_MAX_ID_COLLISIONS = 5


def _to_student(r: dict) -> Student:
    return Student(
        student_id=r["student_id"],
        center_id=r["center_id"],
        class_level=r["class_level"],
        name=r["name"],
        admission_date=r["admission_date"],
        gender=Gender(r["gender"]),
        dob=r.get("dob") or "",
        age=int(r.get("age") or 0),
        school_name=r.get("school_name") or "",
        parent_name=r.get("parent_name") or "",
        parent_occupation=r.get("parent_occupation") or "",
        aadhaar=r.get("aadhaar") or "",
        contact=r.get("contact") or "",
        registration_number=r.get("registration_number") or "",
    )


def _to_params(student: Student) -> tuple:
    return (
        student.student_id,
        student.center_id,
        student.class_level,
        student.name,
        student.admission_date,
        student.gender.value,
        student.dob,
        int(student.age),
        student.school_name,
        student.parent_name,
        student.parent_occupation,
        student.aadhaar,
        student.contact,
        student.registration_number,
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: MySQLConnectionFactory):
        self._conn_factory = conn_factory

    def upsert(self, student: Student) -> Student:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_UPSERT, _to_params(student))
        return student

    def insert_with_generated_id(self, center_id: str, build: Callable[[str], Student]) -> Student:
        # Plain INSERT: if another writer took the id in between, the unique key
        # rejects ours and the next free id is picked.
        for _ in range(_MAX_ID_COLLISIONS):
            student = build(self._free_student_id(center_id))
            try:
                with db_cursor(self._conn_factory) as (_, cur):
                    cur.execute(_INSERT, _to_params(student))
                return student
            except DuplicateRecordError:
                logger.info("Student id %s taken concurrently, allocating another", student.student_id)
        raise DuplicateRecordError(f"Could not allocate a student id for center {center_id}")

    def _free_student_id(self, center_id: str) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM students WHERE center_id=%s", (center_id,))
            seq = int(fetchone(cur)["n"]) + 1
            while True:
                candidate = format_student_id(center_id, seq)
                cur.execute("SELECT 1 AS taken FROM students WHERE student_id=%s", (candidate,))
                if not fetchone(cur):
                    return candidate
                seq += 1

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id=%s", (student_id,))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def list_by_center(self, center_id: str, *, class_level: Optional[str] = None) -> Sequence[Student]:
        clauses = ["center_id=%s"]
        params: list[object] = [center_id]
        if class_level is not None:
            clauses.append("class_level=%s")
            params.append(class_level)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM students WHERE {' AND '.join(clauses)} ORDER BY seq ASC",
                tuple(params),
            )
            return [_to_student(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students ORDER BY seq ASC")
            return [_to_student(r) for r in fetchall(cur)]

    def delete_by_id(self, student_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (student_id,))
            return cur.rowcount > 0
