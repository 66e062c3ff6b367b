from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Record store interface for students.

    Listings come back in insertion order; an upsert of an existing id keeps
    the record's original position.
    """

    def upsert(self, student: Student) -> Student:
        raise NotImplementedError

    def insert_with_generated_id(self, center_id: str, build: Callable[[str], Student]) -> Student:
        """Allocate the next free ``<CENTER>-<NNN>`` id and insert ``build(id)``.

        Allocation and insert are one step: two concurrent admissions never
        receive the same id, and a generated id never overwrites a record.
        """

        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def list_by_center(self, center_id: str, *, class_level: Optional[str] = None) -> Sequence[Student]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def delete_by_id(self, student_id: str) -> bool:
        raise NotImplementedError
