from __future__ import annotations

from typing import Sequence

from ..database.connection import MySQLConnectionFactory
from ..database.mysql_base import db_cursor, fetchall
from .model import FeedbackEntry
from .repository import FeedbackRepository


class MySQLFeedbackRepository(FeedbackRepository):
    def __init__(self, conn_factory: MySQLConnectionFactory):
        self._conn_factory = conn_factory

    def insert(self, entry: FeedbackEntry) -> FeedbackEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO feedback_entries(
                    feedback_id, volunteer_id, volunteer_name, center_id, subject, message, submitted_on
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.feedback_id,
                    entry.volunteer_id,
                    entry.volunteer_name,
                    entry.center_id,
                    entry.subject,
                    entry.message,
                    entry.date,
                ),
            )
        return entry

    def list_by_center(self, center_id: str) -> Sequence[FeedbackEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT feedback_id, volunteer_id, volunteer_name, center_id, subject, message, submitted_on
                FROM feedback_entries
                WHERE center_id=%s
                ORDER BY seq ASC
                """,
                (center_id,),
            )
            return [
                FeedbackEntry(
                    feedback_id=r["feedback_id"],
                    volunteer_id=r["volunteer_id"],
                    volunteer_name=r["volunteer_name"],
                    center_id=r["center_id"],
                    subject=r["subject"],
                    message=r["message"],
                    date=r["submitted_on"],
                )
                for r in fetchall(cur)
            ]
