from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import VolunteerStatus
from ..database.connection import MySQLConnectionFactory
from ..database.mysql_base import db_cursor, fetchall
from .model import DiaryEntry, DiaryVolunteerEntry
from .repository import DiaryRepository


class MySQLDiaryRepository(DiaryRepository):
    def __init__(self, conn_factory: MySQLConnectionFactory):
        self._conn_factory = conn_factory

    def insert(self, entry: DiaryEntry) -> DiaryEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO diary_entries(entry_id, center_id, entry_date, student_count, in_time, out_time, thought)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.entry_id,
                    entry.center_id,
                    entry.date,
                    int(entry.student_count),
                    entry.in_time,
                    entry.out_time,
                    entry.thought,
                ),
            )
            if entry.volunteers:
                cur.executemany(
                    """
                    INSERT INTO diary_volunteers(
                        entry_id, position, volunteer_id, name, in_time, out_time,
                        status, class_handled, subject, topic
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    [
                        (
                            entry.entry_id,
                            i,
                            v.volunteer_id,
                            v.name,
                            v.in_time,
                            v.out_time,
                            v.status.value,
                            v.class_handled,
                            v.subject,
                            v.topic,
                        )
                        for i, v in enumerate(entry.volunteers)
                    ],
                )
        return entry

    def get_by_id(self, entry_id: str) -> Optional[DiaryEntry]:
        rows = self._select("entry_id=%s", (entry_id,))
        return rows[0] if rows else None

    def list_by_center(
        self,
        center_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[DiaryEntry]:
        clauses = ["center_id=%s"]
        params: list[object] = [center_id]
        if start_date is not None:
            clauses.append("entry_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("entry_date <= %s")
            params.append(end_date)
        return self._select(" AND ".join(clauses), tuple(params))

    def list_all(self) -> Sequence[DiaryEntry]:
        return self._select("1=1", ())

    def delete_by_id(self, entry_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM diary_entries WHERE entry_id=%s", (entry_id,))
            return cur.rowcount > 0

    def _select(self, where: str, params: tuple) -> list[DiaryEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT entry_id, center_id, entry_date, student_count, in_time, out_time, thought
                FROM diary_entries
                WHERE {where}
                ORDER BY seq ASC
                """,
                params,
            )
            rows = fetchall(cur)
            if not rows:
                return []

            ids = [r["entry_id"] for r in rows]
            placeholders = ",".join(["%s"] * len(ids))
            cur.execute(
                f"""
                SELECT entry_id, volunteer_id, name, in_time, out_time, status, class_handled, subject, topic
                FROM diary_volunteers
                WHERE entry_id IN ({placeholders})
                ORDER BY entry_id, position ASC
                """,
                tuple(ids),
            )
            volunteers: dict[str, list[DiaryVolunteerEntry]] = {}
            for v in fetchall(cur):
                volunteers.setdefault(v["entry_id"], []).append(
                    DiaryVolunteerEntry(
                        volunteer_id=v["volunteer_id"],
                        name=v["name"],
                        in_time=v["in_time"],
                        out_time=v["out_time"],
                        status=VolunteerStatus(v["status"]),
                        class_handled=v["class_handled"],
                        subject=v["subject"],
                        topic=v["topic"],
                    )
                )

            return [
                DiaryEntry(
                    entry_id=r["entry_id"],
                    date=r["entry_date"],
                    center_id=r["center_id"],
                    student_count=int(r["student_count"]),
                    thought=r.get("thought") or "",
                    in_time=r.get("in_time") or "",
                    out_time=r.get("out_time") or "",
                    volunteers=tuple(volunteers.get(r["entry_id"], ())),
                )
                for r in rows
            ]
