from __future__ import annotations

import uuid

from ..core.constants import STUDENT_ID_DIGITS


def new_record_id() -> str:
    """Id for append-only records (attendance sheets, diary entries, feedback)."""
    return uuid.uuid4().hex


def normalize_student_id(value: str) -> str:
    """Student ids are typed by hand on the QR card screen; compare them upper-cased."""
    return value.strip().upper()


def format_student_id(center_id: str, seq: int) -> str:
    return f"{center_id.upper()}-{seq:0{STUDENT_ID_DIGITS}d}"
