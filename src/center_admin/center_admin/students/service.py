from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import coerce_day, today_local
from ..common.ids import normalize_student_id
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import Gender
from ..core.exceptions import NotFoundError, ValidationError
from ..users.model import Volunteer
from .model import STUDENT_FIELDS, Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = tuple(f for f in STUDENT_FIELDS if f != "student_id")


def _clean_field(name: str, value: Any) -> Any:
    if name == "name":
        return require_non_empty(value, "Student name")
    if name == "admission_date":
        return coerce_day(value)
    if name == "age":
        return require_non_negative(value or 0, "Age")
    if name == "gender":
        try:
            return Gender(value)
        except ValueError:
            raise ValidationError(f"Unknown gender: {value!r}") from None
    return str(value).strip()


class StudentService:
    """Use case: admission intake and the manual QR-card save/update path."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def add_student(
        self,
        fields: Mapping[str, Any],
        acting_user: Volunteer,
        *,
        scope_center: Optional[str] = None,
    ) -> Student:
        """Upsert a student by id.

        Without an id the store assigns the next ``<CENTER>-<NNN>``. With an id
        (typed on the QR card screen) the record is created or its supplied
        fields overwrite the stored ones; omitted fields are kept.

        ``scope_center`` pins the write to one center: any ``center_id`` in
        ``fields`` is ignored and a student of another center is not found.
        """

        raw_id = fields.get("student_id") or fields.get("id") or ""
        student_id = normalize_student_id(str(raw_id)) if str(raw_id).strip() else ""

        updates = {
            name: _clean_field(name, fields[name])
            for name in _EDITABLE_FIELDS
            if fields.get(name) is not None
        }
        if scope_center is not None:
            updates["center_id"] = scope_center
        if not updates.get("center_id"):
            updates.pop("center_id", None)

        existing = self._students.get_by_id(student_id) if student_id else None
        if existing and scope_center is not None and existing.center_id != scope_center:
            raise NotFoundError(f"Student {student_id} not found")

        if existing:
            saved = self._students.upsert(replace(existing, **updates))
        else:
            center_id = require_non_empty(updates.pop("center_id", "") or acting_user.center_id, "Center")
            name = updates.pop("name", None)
            if not name:
                raise ValidationError("Student name is required")
            admission_date = updates.pop("admission_date", None) or today_local()
            class_level = updates.pop("class_level", "")

            def build(new_id: str) -> Student:
                return Student(
                    student_id=new_id,
                    center_id=center_id,
                    class_level=class_level,
                    name=name,
                    admission_date=admission_date,
                    **updates,
                )

            if student_id:
                saved = self._students.upsert(build(student_id))
            else:
                saved = self._students.insert_with_generated_id(center_id, build)

        logger.info(
            "%s student %s (center=%s) by volunteer %s",
            "Updated" if existing else "Admitted",
            saved.student_id,
            saved.center_id,
            acting_user.volunteer_id,
        )
        return saved

    def get_student(self, student_id: str, *, center_id: Optional[str] = None) -> Student:
        student = self._students.get_by_id(normalize_student_id(student_id))
        if not student or (center_id is not None and student.center_id != center_id):
            raise NotFoundError(f"Student {student_id} not found")
        return student

    def list_for_center(self, center_id: str, *, class_level: Optional[str] = None) -> Sequence[Student]:
        return self._students.list_by_center(center_id, class_level=class_level)

    def list_classes(self, center_id: str) -> list[str]:
        """Distinct class levels at a center, for the report class picker."""

        return sorted({s.class_level for s in self._students.list_by_center(center_id) if s.class_level})
