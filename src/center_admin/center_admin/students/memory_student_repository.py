from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..common.ids import format_student_id
from ..database.memory_base import LockedCollection
from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self):
        self._students: LockedCollection[Student] = LockedCollection(key=lambda s: s.student_id)

    def upsert(self, student: Student) -> Student:
        return self._students.put(student)

    def insert_with_generated_id(self, center_id: str, build: Callable[[str], Student]) -> Student:
        def _build(current: list[Student]) -> Student:
            taken = {s.student_id for s in current}
            seq = sum(1 for s in current if s.center_id == center_id) + 1
            while format_student_id(center_id, seq) in taken:
                seq += 1
            return build(format_student_id(center_id, seq))

        return self._students.add_built(_build)

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return self._students.get(student_id)

    def list_by_center(self, center_id: str, *, class_level: Optional[str] = None) -> Sequence[Student]:
        return [
            s
            for s in self._students.snapshot()
            if s.center_id == center_id and (class_level is None or s.class_level == class_level)
        ]

    def list_all(self) -> Sequence[Student]:
        return self._students.snapshot()

    def delete_by_id(self, student_id: str) -> bool:
        return self._students.remove(student_id)
