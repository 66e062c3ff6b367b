from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceMode
from ..database.connection import MySQLConnectionFactory
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: MySQLConnectionFactory):
        self._conn_factory = conn_factory

    def insert(self, record: AttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(record_id, center_id, work_date, mode, total_students)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (record.record_id, record.center_id, record.date, record.mode.value, int(record.total_students)),
            )
            if record.present_student_ids:
                cur.executemany(
                    "INSERT INTO attendance_present(record_id, position, student_id) VALUES(%s,%s,%s)",
                    [(record.record_id, i, sid) for i, sid in enumerate(record.present_student_ids)],
                )
        return record

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        rows = self._select("record_id=%s", (record_id,))
        return rows[0] if rows else None

    def list_by_center(
        self,
        center_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["center_id=%s"]
        params: list[object] = [center_id]
        if start_date is not None:
            clauses.append("work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("work_date <= %s")
            params.append(end_date)
        return self._select(" AND ".join(clauses), tuple(params))

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._select("1=1", ())

    def delete_by_id(self, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE record_id=%s", (record_id,))
            return cur.rowcount > 0

    def _select(self, where: str, params: tuple) -> list[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT record_id, center_id, work_date, mode, total_students
                FROM attendance_records
                WHERE {where}
                ORDER BY seq ASC
                """,
                params,
            )
            rows = fetchall(cur)
            if not rows:
                return []

            ids = [r["record_id"] for r in rows]
            placeholders = ",".join(["%s"] * len(ids))
            cur.execute(
                f"""
                SELECT record_id, student_id
                FROM attendance_present
                WHERE record_id IN ({placeholders})
                ORDER BY record_id, position ASC
                """,
                tuple(ids),
            )
            present: dict[str, list[str]] = {}
            for p in fetchall(cur):
                present.setdefault(p["record_id"], []).append(p["student_id"])

            return [
                AttendanceRecord(
                    record_id=r["record_id"],
                    date=r["work_date"],
                    center_id=r["center_id"],
                    present_student_ids=tuple(present.get(r["record_id"], ())),
                    mode=AttendanceMode(r["mode"]),
                    total_students=int(r["total_students"]),
                )
                for r in rows
            ]
