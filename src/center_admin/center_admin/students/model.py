from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date

from ..core.enums import Gender


@dataclass(frozen=True)
class Student:
    """Domain entity: a child admitted to a center.

    ``student_id`` is the business key printed on the QR card.
    """

    student_id: str
    center_id: str
    class_level: str
    name: str
    admission_date: date
    gender: Gender = Gender.OTHER
    dob: str = ""
    age: int = 0
    school_name: str = ""
    parent_name: str = ""
    parent_occupation: str = ""
    aadhaar: str = ""
    contact: str = ""
    registration_number: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "centerId": self.center_id,
            "classLevel": self.class_level,
            "name": self.name,
            "admissionDate": self.admission_date.isoformat(),
            "gender": self.gender.value,
            "dob": self.dob,
            "age": self.age,
            "schoolName": self.school_name,
            "parentName": self.parent_name,
            "parentOccupation": self.parent_occupation,
            "aadhaar": self.aadhaar,
            "contact": self.contact,
            "registrationNumber": self.registration_number,
        }


STUDENT_FIELDS = tuple(f.name for f in fields(Student))
